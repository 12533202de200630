"""Affiliation record domain model.

This module defines the subject of the whole workflow: the record a
citizen fills in across the six form steps and that a reviewer later
approves or rejects.

Invariants:
- record_id and moderation_status are absent until the record is
  submitted for review (the record store assigns them)
- Identity fields are immutable for the rest of an update session
  (enforced by the workflow service, see IDENTITY_FIELDS)
- Candidacy fields are blank whenever is_candidate is False
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import Any, Union

from src.domain.errors.state_transition import (
    InvalidModerationTransitionError,
    RecordAlreadyDecidedError,
)
from src.domain.models.moderation import ModerationStatus

# Captured evidence is opaque to the engine: raw bytes, a base64 data URL
# or a storage URL handed over by the capture widgets.
Evidence = Union[bytes, str]

# Locked once a member is fetched through the update path.
IDENTITY_FIELDS: frozenset[str] = frozenset(
    {
        "full_name",
        "birth_date",
        "document_number",
        "voter_registration_number",
        "mother_name",
        "father_name",
    }
)

# Meaningful only while is_candidate is True.
CANDIDACY_FIELDS: frozenset[str] = frozenset(
    {"political_alias", "elective_office", "election_year"}
)


@dataclass(frozen=True, eq=True)
class AffiliationRecord:
    """A (possibly partially filled) affiliation record.

    Attributes are grouped by the form step they originate from. String
    fields hold raw form values; an empty string means "not provided".
    """

    # Step 1: identity
    full_name: str = ""
    birth_date: str = ""
    document_number: str = ""
    phone: str = ""
    email: str = ""
    terms_accepted: bool = False
    statute_accepted: bool = False

    # Step 2: address
    postal_code: str = ""
    address_state: str = ""
    city: str = ""
    street: str = ""
    district: str = ""
    house_number: str = ""
    complement: str = ""

    # Step 3: electoral / candidacy
    voter_registration_number: str = ""
    electoral_state: str = ""
    electoral_city: str = ""
    gender: str = ""
    mother_name: str = ""
    father_name: str = ""
    is_candidate: bool = False
    political_alias: str = ""
    elective_office: str = ""
    election_year: str = ""
    is_poll_watcher: bool = False
    is_volunteer: bool = False

    # Step 4: socioeconomic
    profession: str = ""
    education_level: str = ""
    religion: str = ""
    interests: tuple[str, ...] = field(default_factory=tuple)

    # Steps 5 and 6: evidence
    doc_front: Evidence | None = None
    doc_back: Evidence | None = None
    signature: Evidence | None = None
    selfie: Evidence | None = None

    # Metadata, set by the record store on submission
    record_id: str | None = None
    moderation_status: ModerationStatus | None = None

    def __post_init__(self) -> None:
        # Accept any iterable of tags but always store a tuple.
        if not isinstance(self.interests, tuple):
            object.__setattr__(self, "interests", tuple(self.interests))

    @classmethod
    def field_names(cls) -> frozenset[str]:
        return frozenset(f.name for f in fields(cls))

    @property
    def is_submitted(self) -> bool:
        return self.record_id is not None

    def with_changes(self, **changes: Any) -> AffiliationRecord:
        """Return a copy with the given attributes replaced.

        Raises:
            TypeError: If a key is not an AffiliationRecord attribute.
        """
        unknown = set(changes) - self.field_names()
        if unknown:
            raise TypeError(f"Unknown record fields: {', '.join(sorted(unknown))}")
        return replace(self, **changes)

    def changed_fields(self, changes: dict[str, Any]) -> set[str]:
        """Names of the keys in changes whose value differs from this record."""
        return {name for name, value in changes.items() if getattr(self, name) != value}

    def with_moderation_status(self, new_status: ModerationStatus) -> AffiliationRecord:
        """Create a copy with an updated moderation status.

        Enforces the moderation transition matrix.

        Raises:
            RecordAlreadyDecidedError: If the record is already APPROVED/REJECTED.
            InvalidModerationTransitionError: If the record was never submitted
                or the transition is not in the matrix.
        """
        current = self.moderation_status
        if current is None or self.record_id is None:
            raise InvalidModerationTransitionError(from_status=None, to_status=new_status)

        if current.is_terminal():
            raise RecordAlreadyDecidedError(
                record_id=self.record_id,
                terminal_status=current,
            )

        allowed = current.valid_transitions()
        if new_status not in allowed:
            raise InvalidModerationTransitionError(
                from_status=current,
                to_status=new_status,
                allowed_transitions=list(allowed),
            )

        return replace(self, moderation_status=new_status)
