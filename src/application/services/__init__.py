"""Application services - Use case orchestration.

This module contains application services that orchestrate domain
operations and coordinate with infrastructure adapters.

Available services:
- AffiliationWorkflowService: enrollment session state machine
- ModerationService: reviewer session over the pending queue
"""

from src.application.services.affiliation_workflow_service import (
    DEFAULT_SUCCESS_MESSAGE,
    AdvanceOutcome,
    AdvanceResult,
    AffiliationWorkflowService,
    AuthenticationOutcome,
    AuthenticationResult,
    ReviewSubmissionOutcome,
    ReviewSubmissionResult,
    build_step_validation_rules,
)
from src.application.services.base import LoggingMixin
from src.application.services.moderation_service import (
    DecisionOutcome,
    DecisionResult,
    ModerationService,
    QueueRefreshOutcome,
)

__all__: list[str] = [
    "DEFAULT_SUCCESS_MESSAGE",
    "AdvanceOutcome",
    "AdvanceResult",
    "AffiliationWorkflowService",
    "AuthenticationOutcome",
    "AuthenticationResult",
    "DecisionOutcome",
    "DecisionResult",
    "LoggingMixin",
    "ModerationService",
    "QueueRefreshOutcome",
    "ReviewSubmissionOutcome",
    "ReviewSubmissionResult",
    "build_step_validation_rules",
]
