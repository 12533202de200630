"""Affiliation record wire DTO.

Collaborators (the record store, the review queue) exchange records as
camelCase payloads inherited from the enrollment form: "cpf" for the
document number, "voterTitle" for the voter registration number,
"politicalName"/"politicalOffice" for the candidacy alias and office,
"isFiscal" for the poll-watcher flag, "status"/"id" for the metadata.

AffiliationRecordDTO owns that mapping so the domain model keeps its own
attribute names. Unknown keys are ignored and absent keys take defaults.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from src.domain.models.affiliation_record import AffiliationRecord
from src.domain.models.moderation import ModerationStatus

_TEXT_FIELDS = (
    "full_name",
    "birth_date",
    "document_number",
    "phone",
    "email",
    "postal_code",
    "address_state",
    "city",
    "street",
    "district",
    "house_number",
    "complement",
    "voter_registration_number",
    "electoral_state",
    "electoral_city",
    "gender",
    "mother_name",
    "father_name",
    "political_alias",
    "elective_office",
    "election_year",
    "profession",
    "education_level",
    "religion",
)


class AffiliationRecordDTO(BaseModel):
    """Wire representation of an AffiliationRecord.

    Accepts either the camelCase wire names or the Python attribute names
    on input; model_dump(by_alias=True) produces the wire payload.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    # Step 1
    full_name: str = Field(default="", alias="fullName")
    birth_date: str = Field(default="", alias="birthDate")
    document_number: str = Field(default="", alias="cpf")
    phone: str = Field(default="", alias="phone")
    email: str = Field(default="", alias="email")
    terms_accepted: bool = Field(default=False, alias="termsAccepted")
    statute_accepted: bool = Field(default=False, alias="statuteAccepted")

    # Step 2
    postal_code: str = Field(default="", alias="cep")
    address_state: str = Field(default="", alias="addressState")
    city: str = Field(default="", alias="city")
    street: str = Field(default="", alias="street")
    district: str = Field(default="", alias="district")
    house_number: str = Field(default="", alias="number")
    complement: str = Field(default="", alias="complement")

    # Step 3
    voter_registration_number: str = Field(default="", alias="voterTitle")
    electoral_state: str = Field(default="", alias="electoralState")
    electoral_city: str = Field(default="", alias="electoralCity")
    gender: str = Field(default="", alias="gender")
    mother_name: str = Field(default="", alias="motherName")
    father_name: str = Field(default="", alias="fatherName")
    is_candidate: bool = Field(default=False, alias="isCandidate")
    political_alias: str = Field(default="", alias="politicalName")
    elective_office: str = Field(default="", alias="politicalOffice")
    election_year: str = Field(default="", alias="electionYear")
    is_poll_watcher: bool = Field(default=False, alias="isFiscal")
    is_volunteer: bool = Field(default=False, alias="isVolunteer")

    # Step 4
    profession: str = Field(default="", alias="profession")
    education_level: str = Field(default="", alias="educationLevel")
    religion: str = Field(default="", alias="religion")
    interests: list[str] = Field(default_factory=list, alias="interests")

    # Steps 5 and 6
    doc_front: Union[bytes, str, None] = Field(default=None, alias="docFront")
    doc_back: Union[bytes, str, None] = Field(default=None, alias="docBack")
    signature: Union[bytes, str, None] = Field(default=None, alias="signature")
    selfie: Union[bytes, str, None] = Field(default=None, alias="selfie")

    # Metadata
    record_id: str | None = Field(default=None, alias="id")
    moderation_status: ModerationStatus | None = Field(default=None, alias="status")

    @field_validator(*_TEXT_FIELDS, mode="before")
    @classmethod
    def _null_text_is_blank(cls, value: Any) -> Any:
        """Stores send null for untouched text inputs."""
        if value is None:
            return ""
        return value

    @field_validator("election_year", mode="before")
    @classmethod
    def _year_as_text(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_serializer("moderation_status")
    def _status_as_value(self, status: ModerationStatus | None) -> str | None:
        return status.value if status is not None else None

    @classmethod
    def from_record(cls, record: AffiliationRecord) -> AffiliationRecordDTO:
        """Build the DTO from a domain record."""
        values = {name: getattr(record, name) for name in AffiliationRecord.field_names()}
        values["interests"] = list(record.interests)
        return cls.model_validate(values)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> AffiliationRecordDTO:
        """Parse a camelCase wire payload."""
        return cls.model_validate(payload)

    def to_record(self) -> AffiliationRecord:
        """Convert to the immutable domain record."""
        values = {name: getattr(self, name) for name in AffiliationRecord.field_names()}
        values["interests"] = tuple(self.interests)
        return AffiliationRecord(**values)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to a camelCase wire payload."""
        return self.model_dump(by_alias=True)
