"""Moderation lifecycle of submitted affiliation records.

State Machine:
    PENDING -> APPROVED (reviewer approves)
    PENDING -> REJECTED (reviewer rejects)

Terminal States:
    APPROVED and REJECTED are terminal. Once a record is decided, no
    further transition is permitted. Only PENDING records appear in the
    reviewer's queue.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.models.affiliation_record import AffiliationRecord


class ModerationStatus(Enum):
    """Moderation status of a submitted record.

    Values match the wire format used by the record store.
    """

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"

    def is_terminal(self) -> bool:
        """Check if this status is a terminal decision."""
        return self in TERMINAL_STATUSES

    def valid_transitions(self) -> frozenset[ModerationStatus]:
        """Get valid transitions from this status.

        Returns:
            Frozenset of statuses this status can transition to.
            Empty set for terminal statuses.
        """
        return MODERATION_TRANSITION_MATRIX.get(self, frozenset())


TERMINAL_STATUSES: frozenset[ModerationStatus] = frozenset(
    {ModerationStatus.APPROVED, ModerationStatus.REJECTED}
)

MODERATION_TRANSITION_MATRIX: dict[ModerationStatus, frozenset[ModerationStatus]] = {
    ModerationStatus.PENDING: frozenset(
        {ModerationStatus.APPROVED, ModerationStatus.REJECTED}
    ),
    ModerationStatus.APPROVED: frozenset(),
    ModerationStatus.REJECTED: frozenset(),
}

# Outcomes a reviewer may issue.
DECISION_OUTCOMES: frozenset[ModerationStatus] = MODERATION_TRANSITION_MATRIX[
    ModerationStatus.PENDING
]


@dataclass(frozen=True)
class ModerationQueueEntry:
    """A submitted record awaiting a reviewer's decision.

    Attributes:
        record: The pending affiliation record (record_id is always set).
    """

    record: AffiliationRecord

    def __post_init__(self) -> None:
        if self.record.record_id is None:
            raise ValueError("Queue entries require a submitted record with an id")
        if self.record.moderation_status is not ModerationStatus.PENDING:
            raise ValueError("Only pending records belong in the moderation queue")

    @property
    def entry_id(self) -> str:
        # __post_init__ guarantees presence
        return self.record.record_id  # type: ignore[return-value]
