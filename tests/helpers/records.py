"""Record builders for workflow tests.

complete_record() returns a record that passes every step as of the
default FakeTimeAuthority date (2025-03-10).
"""

from __future__ import annotations

from typing import Any

from src.domain.models.affiliation_record import AffiliationRecord
from src.domain.models.form_step import STEP_FIELDS, FormStep

VALID_DOCUMENT_NUMBER = "529.982.247-25"
OTHER_VALID_DOCUMENT_NUMBER = "111.444.777-35"

COMPLETE_VALUES: dict[str, Any] = {
    # Step 1
    "full_name": "Maria Oliveira Santos",
    "birth_date": "1990-05-20",
    "document_number": VALID_DOCUMENT_NUMBER,
    "phone": "(61) 99999-0000",
    "email": "maria.santos@example.com",
    "terms_accepted": True,
    "statute_accepted": True,
    # Step 2
    "postal_code": "70000-000",
    "address_state": "DF",
    "city": "Brasília",
    "street": "Rua das Acácias",
    "district": "Asa Norte",
    "house_number": "42",
    "complement": "Apto 101",
    # Step 3
    "voter_registration_number": "123456789012",
    "electoral_state": "DF",
    "electoral_city": "Brasília",
    "gender": "F",
    "mother_name": "Ana Oliveira Santos",
    "father_name": "José Santos",
    # Step 4
    "profession": "Professor(a)",
    "education_level": "sup_comp",
    "religion": "catolica",
    "interests": ("educacao", "saude"),
    # Steps 5 and 6
    "doc_front": b"front-image",
    "doc_back": b"back-image",
    "signature": b"signature-image",
    "selfie": "data:image/png;base64,iVBORw0KGgo=",
}


def complete_record(**overrides: Any) -> AffiliationRecord:
    """Build a record valid for all six steps, with overrides applied."""
    values = dict(COMPLETE_VALUES)
    values.update(overrides)
    return AffiliationRecord(**values)


def step_values(step: FormStep) -> dict[str, Any]:
    """The COMPLETE_VALUES entries owned by one step."""
    return {
        name: value for name, value in COMPLETE_VALUES.items() if name in STEP_FIELDS[step]
    }
