"""Collaborator failure errors.

Raised by adapters when an external collaborator (record store,
biometric check, notifier) is unreachable or errors. Application
services convert this into an explicit failure outcome and leave the
state machines in their pre-call state.
"""

from __future__ import annotations

from src.domain.exceptions import AffiliationError


class CollaboratorUnavailableError(AffiliationError):
    """Raised when an external collaborator cannot complete a call.

    Attributes:
        collaborator: Name of the collaborator that failed.
        operation: The collaborator operation that was attempted.
    """

    def __init__(self, collaborator: str, operation: str, detail: str = "") -> None:
        self.collaborator = collaborator
        self.operation = operation
        suffix = f": {detail}" if detail else ""
        super().__init__(f"{collaborator} unavailable during {operation}{suffix}")
