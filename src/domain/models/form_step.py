"""Enrollment form steps.

The form is a fixed six-step sequence. STEP_FIELDS names the record
attributes each step owns, which is how the workflow scopes error
clean-up and how the member panel groups editable sections.
"""

from __future__ import annotations

from enum import IntEnum


class FormStep(IntEnum):
    """Step of the enrollment form, in linear order."""

    PERSONAL = 1
    ADDRESS = 2
    COMPLEMENTARY = 3
    INTERESTS = 4
    DOCUMENTS = 5
    SELFIE = 6

    @property
    def is_first(self) -> bool:
        return self is FormStep.PERSONAL

    @property
    def is_last(self) -> bool:
        return self is FormStep.SELFIE

    def next(self) -> FormStep:
        """Return the following step.

        Raises:
            ValueError: If called on the last step.
        """
        if self.is_last:
            raise ValueError("SELFIE is the last form step")
        return FormStep(self.value + 1)

    def previous(self) -> FormStep:
        """Return the preceding step.

        Raises:
            ValueError: If called on the first step.
        """
        if self.is_first:
            raise ValueError("PERSONAL is the first form step")
        return FormStep(self.value - 1)


STEP_FIELDS: dict[FormStep, frozenset[str]] = {
    FormStep.PERSONAL: frozenset(
        {
            "full_name",
            "birth_date",
            "document_number",
            "phone",
            "email",
            "terms_accepted",
            "statute_accepted",
        }
    ),
    FormStep.ADDRESS: frozenset(
        {
            "postal_code",
            "address_state",
            "city",
            "street",
            "district",
            "house_number",
            "complement",
        }
    ),
    FormStep.COMPLEMENTARY: frozenset(
        {
            "voter_registration_number",
            "electoral_state",
            "electoral_city",
            "gender",
            "mother_name",
            "father_name",
            "is_candidate",
            "political_alias",
            "elective_office",
            "election_year",
            "is_poll_watcher",
            "is_volunteer",
        }
    ),
    FormStep.INTERESTS: frozenset(
        {"profession", "education_level", "religion", "interests"}
    ),
    FormStep.DOCUMENTS: frozenset({"doc_front", "doc_back", "signature"}),
    FormStep.SELFIE: frozenset({"selfie"}),
}
