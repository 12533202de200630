"""Domain models for the affiliation workflow.

Contains value objects and domain models that represent core business
concepts. These models are immutable and contain no infrastructure
dependencies.
"""

from src.domain.models.affiliation_record import (
    CANDIDACY_FIELDS,
    IDENTITY_FIELDS,
    AffiliationRecord,
)
from src.domain.models.form_step import STEP_FIELDS, FormStep
from src.domain.models.moderation import ModerationQueueEntry, ModerationStatus
from src.domain.models.political_office import OfficeCategory, PoliticalOffice
from src.domain.models.validation import (
    StepFailureReason,
    StepValidationResult,
    ValidationErrors,
)
from src.domain.models.workflow_state import (
    AdminSubState,
    AdminView,
    FormView,
    HomeView,
    MemberPanelView,
    SuccessView,
    UpdateAuthView,
    ViewKind,
    WorkflowState,
    WorkflowView,
)

__all__: list[str] = [
    "CANDIDACY_FIELDS",
    "IDENTITY_FIELDS",
    "STEP_FIELDS",
    "AdminSubState",
    "AdminView",
    "AffiliationRecord",
    "FormStep",
    "FormView",
    "HomeView",
    "MemberPanelView",
    "ModerationQueueEntry",
    "ModerationStatus",
    "OfficeCategory",
    "PoliticalOffice",
    "StepFailureReason",
    "StepValidationResult",
    "SuccessView",
    "UpdateAuthView",
    "ValidationErrors",
    "ViewKind",
    "WorkflowState",
    "WorkflowView",
]
