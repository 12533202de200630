"""Unit tests for AffiliationRecord and the moderation lifecycle."""

from __future__ import annotations

import pytest

from src.domain.errors import InvalidModerationTransitionError, RecordAlreadyDecidedError
from src.domain.models.affiliation_record import (
    CANDIDACY_FIELDS,
    IDENTITY_FIELDS,
    AffiliationRecord,
)
from src.domain.models.moderation import (
    DECISION_OUTCOMES,
    ModerationQueueEntry,
    ModerationStatus,
)


def _pending(record_id: str = "rec-1") -> AffiliationRecord:
    return AffiliationRecord(
        full_name="Maria Oliveira Santos",
        record_id=record_id,
        moderation_status=ModerationStatus.PENDING,
    )


class TestAffiliationRecord:
    """Tests for the record value object."""

    def test_defaults_are_blank(self) -> None:
        record = AffiliationRecord()
        assert record.full_name == ""
        assert record.is_candidate is False
        assert record.interests == ()
        assert record.record_id is None
        assert record.is_submitted is False

    def test_interests_are_stored_as_tuple(self) -> None:
        record = AffiliationRecord(interests=["educacao", "saude"])  # type: ignore[arg-type]
        assert record.interests == ("educacao", "saude")

    def test_with_changes_returns_new_record(self) -> None:
        record = AffiliationRecord(city="Brasília")
        updated = record.with_changes(city="Goiânia")
        assert updated.city == "Goiânia"
        assert record.city == "Brasília"

    def test_with_changes_rejects_unknown_fields(self) -> None:
        with pytest.raises(TypeError, match="nickname"):
            AffiliationRecord().with_changes(nickname="Mari")

    def test_changed_fields(self) -> None:
        record = AffiliationRecord(city="Brasília", street="Rua A")
        assert record.changed_fields({"city": "Brasília", "street": "Rua B"}) == {"street"}

    def test_field_groups_are_record_attributes(self) -> None:
        names = AffiliationRecord.field_names()
        assert IDENTITY_FIELDS <= names
        assert CANDIDACY_FIELDS <= names

    def test_records_compare_by_value(self) -> None:
        assert AffiliationRecord(email="a@b.co") == AffiliationRecord(email="a@b.co")


class TestModerationStatus:
    """Tests for the moderation matrix."""

    def test_pending_can_be_decided(self) -> None:
        assert ModerationStatus.PENDING.valid_transitions() == DECISION_OUTCOMES
        assert DECISION_OUTCOMES == {ModerationStatus.APPROVED, ModerationStatus.REJECTED}

    @pytest.mark.parametrize("status", [ModerationStatus.APPROVED, ModerationStatus.REJECTED])
    def test_decisions_are_terminal(self, status: ModerationStatus) -> None:
        assert status.is_terminal() is True
        assert status.valid_transitions() == frozenset()

    def test_pending_is_not_terminal(self) -> None:
        assert ModerationStatus.PENDING.is_terminal() is False


class TestWithModerationStatus:
    """Tests for AffiliationRecord.with_moderation_status."""

    @pytest.mark.parametrize("outcome", [ModerationStatus.APPROVED, ModerationStatus.REJECTED])
    def test_pending_record_is_decided(self, outcome: ModerationStatus) -> None:
        decided = _pending().with_moderation_status(outcome)
        assert decided.moderation_status is outcome
        assert decided.record_id == "rec-1"

    def test_terminal_record_cannot_change(self) -> None:
        approved = _pending().with_moderation_status(ModerationStatus.APPROVED)

        with pytest.raises(RecordAlreadyDecidedError) as exc_info:
            approved.with_moderation_status(ModerationStatus.REJECTED)

        assert exc_info.value.record_id == "rec-1"
        assert exc_info.value.terminal_status is ModerationStatus.APPROVED

    def test_pending_to_pending_is_invalid(self) -> None:
        with pytest.raises(InvalidModerationTransitionError) as exc_info:
            _pending().with_moderation_status(ModerationStatus.PENDING)
        assert exc_info.value.from_status is ModerationStatus.PENDING

    def test_unsubmitted_record_cannot_be_decided(self) -> None:
        with pytest.raises(InvalidModerationTransitionError, match="unsubmitted"):
            AffiliationRecord().with_moderation_status(ModerationStatus.APPROVED)


class TestModerationQueueEntry:
    """Tests for ModerationQueueEntry."""

    def test_entry_id_is_record_id(self) -> None:
        assert ModerationQueueEntry(record=_pending("pend_9")).entry_id == "pend_9"

    def test_requires_record_id(self) -> None:
        with pytest.raises(ValueError):
            ModerationQueueEntry(
                record=AffiliationRecord(moderation_status=ModerationStatus.PENDING)
            )

    def test_requires_pending_status(self) -> None:
        approved = _pending().with_moderation_status(ModerationStatus.APPROVED)
        with pytest.raises(ValueError):
            ModerationQueueEntry(record=approved)
