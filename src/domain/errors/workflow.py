"""Workflow state machine errors.

These represent programmer errors (invariant violations), not ordinary
user-facing conditions: calling an operation from a view that does not
allow it, or editing an identity field of an authenticated member.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.domain.exceptions import AffiliationError

if TYPE_CHECKING:
    from src.domain.models.workflow_state import ViewKind


class InvalidWorkflowTransitionError(AffiliationError):
    """Raised when a workflow operation is invoked from a disallowed view.

    Attributes:
        operation: Name of the operation that was attempted.
        from_view: Current view kind.
        to_view: Target view kind (None when the operation itself is disallowed).
    """

    def __init__(
        self,
        operation: str,
        from_view: ViewKind,
        to_view: ViewKind | None = None,
    ) -> None:
        self.operation = operation
        self.from_view = from_view
        self.to_view = to_view
        target = f" -> {to_view.value}" if to_view is not None else ""
        super().__init__(
            f"Operation '{operation}' not allowed from view {from_view.value}{target}"
        )


class IdentityFieldLockedError(AffiliationError):
    """Raised when an identity field is changed during an update session.

    Once a member record is fetched through the update path, name, birth
    date, document number, voter registration number and parents' names
    are immutable for the rest of the session.

    Attributes:
        fields: The locked fields the caller attempted to change.
    """

    def __init__(self, fields: list[str]) -> None:
        self.fields = sorted(fields)
        super().__init__(
            f"Identity fields are locked in update mode: {', '.join(self.fields)}"
        )
