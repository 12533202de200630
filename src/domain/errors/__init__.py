"""Domain errors for the affiliation workflow.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from AffiliationError.
"""

from src.domain.errors.collaborator import CollaboratorUnavailableError
from src.domain.errors.state_transition import (
    InvalidModerationTransitionError,
    RecordAlreadyDecidedError,
)
from src.domain.errors.workflow import (
    IdentityFieldLockedError,
    InvalidWorkflowTransitionError,
)

__all__: list[str] = [
    "CollaboratorUnavailableError",
    "IdentityFieldLockedError",
    "InvalidModerationTransitionError",
    "InvalidWorkflowTransitionError",
    "RecordAlreadyDecidedError",
]
