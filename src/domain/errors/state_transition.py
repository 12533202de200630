"""State transition errors for the moderation state machine.

This module defines errors for invalid moderation status transitions.
Both are invariant violations: callers are expected to consult the
transition matrix (or the pending queue) before deciding on a record.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.domain.exceptions import AffiliationError

if TYPE_CHECKING:
    from src.domain.models.moderation import ModerationStatus


class InvalidModerationTransitionError(AffiliationError):
    """Raised when a moderation status transition is not in the matrix.

    Attributes:
        from_status: Current moderation status of the record.
        to_status: Attempted target status.
        allowed_transitions: List of valid target statuses from current status.
    """

    def __init__(
        self,
        from_status: ModerationStatus | None,
        to_status: ModerationStatus,
        allowed_transitions: list[ModerationStatus] | None = None,
    ) -> None:
        """Initialize invalid moderation transition error.

        Args:
            from_status: Current status (None when the record was never submitted).
            to_status: Attempted invalid target status.
            allowed_transitions: Valid statuses from current status (optional).
        """
        self.from_status = from_status
        self.to_status = to_status
        self.allowed_transitions = allowed_transitions or []

        from_str = from_status.value if from_status is not None else "unsubmitted"
        allowed_str = (
            f" Valid transitions: {sorted(s.value for s in self.allowed_transitions)}"
            if self.allowed_transitions
            else ""
        )
        super().__init__(
            f"Invalid moderation transition: {from_str} -> {to_status.value}.{allowed_str}"
        )


class RecordAlreadyDecidedError(AffiliationError):
    """Raised when attempting to moderate a record in a terminal status.

    APPROVED and REJECTED are terminal: no further transition is defined
    once a reviewer has decided on a record.

    Attributes:
        record_id: Identifier of the record.
        terminal_status: The terminal status the record is in.
    """

    def __init__(self, record_id: str, terminal_status: ModerationStatus) -> None:
        """Initialize record already decided error.

        Args:
            record_id: Identifier of the record.
            terminal_status: The terminal status (APPROVED/REJECTED).
        """
        self.record_id = record_id
        self.terminal_status = terminal_status
        super().__init__(
            f"Record {record_id} already decided: {terminal_status.value}. "
            "Terminal statuses cannot be modified."
        )
