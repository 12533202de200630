"""Affiliation record store port.

This module defines the abstract interface for the backing store that
holds affiliation records: member lookup for the update path, submission
of new and edited records, and the reviewer's pending queue.

Implementations signal an unreachable or failing backend by raising
CollaboratorUnavailableError. A lookup miss is not an error: it returns
None.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from src.domain.models.affiliation_record import AffiliationRecord
from src.domain.models.moderation import ModerationStatus


@dataclass(frozen=True)
class SubmissionReceipt:
    """Acknowledgement returned by the store for a submitted record.

    Attributes:
        record_id: Identifier assigned (or kept) by the store.
        message: Human-readable confirmation, shown on the success view.
    """

    record_id: str
    message: str = ""


class AffiliationRecordStoreProtocol(Protocol):
    """Protocol for affiliation record storage operations.

    Methods:
        lookup_by_document_number: Find a member by national document number
        submit_new_record: Store a new enrollment (create mode)
        submit_updated_record: Queue an edited member record for review
        list_pending_records: Records awaiting a moderation decision
        decide_record: Persist a reviewer's decision
    """

    async def lookup_by_document_number(
        self, document_number: str
    ) -> AffiliationRecord | None:
        """Retrieve a member record by document number.

        Args:
            document_number: Normalized 11-digit document number.

        Returns:
            The stored record if found, None otherwise.

        Raises:
            CollaboratorUnavailableError: If the store cannot be reached.
        """
        ...

    async def submit_new_record(self, record: AffiliationRecord) -> SubmissionReceipt:
        """Store a new enrollment with PENDING moderation status.

        Raises:
            CollaboratorUnavailableError: If the store cannot be reached.
        """
        ...

    async def submit_updated_record(self, record: AffiliationRecord) -> SubmissionReceipt:
        """Post an edited member record to the review queue.

        Returns:
            Receipt whose message is shown to the member.

        Raises:
            CollaboratorUnavailableError: If the store cannot be reached.
        """
        ...

    async def list_pending_records(self) -> list[AffiliationRecord]:
        """List records awaiting a decision, oldest first.

        Raises:
            CollaboratorUnavailableError: If the store cannot be reached.
        """
        ...

    async def decide_record(
        self,
        record_id: str,
        outcome: ModerationStatus,
        reason: str | None = None,
    ) -> bool:
        """Persist a moderation decision.

        Args:
            record_id: The pending record to decide on.
            outcome: APPROVED or REJECTED.
            reason: Optional reviewer note.

        Returns:
            True if the decision was stored, False if no pending record
            with that id exists.

        Raises:
            CollaboratorUnavailableError: If the store cannot be reached.
            RecordAlreadyDecidedError: If the record was already decided.
        """
        ...
