"""Domain services for the affiliation workflow.

Domain services contain business logic that doesn't naturally fit in
models. They are pure: the reference date is always a parameter.

Available services:
- field_validators: document number, age, full name and email predicates
- candidacy_eligibility: election years a candidacy may be declared for
- step_validation: per-step validation engine and error-map merging
"""

from src.domain.services.candidacy_eligibility import (
    DEFAULT_ELECTION_CYCLE_RULES,
    ElectionCycleRules,
    classify_office,
    eligible_election_years,
    reconcile_election_year,
)
from src.domain.services.field_validators import (
    format_document_number,
    is_valid_age,
    is_valid_document_number,
    is_valid_email,
    is_valid_full_name,
    normalize_document_number,
)
from src.domain.services.step_validation import (
    DEFAULT_STEP_VALIDATION_RULES,
    StepValidationRules,
    merge_step_errors,
    validate_step,
)

__all__: list[str] = [
    "DEFAULT_ELECTION_CYCLE_RULES",
    "DEFAULT_STEP_VALIDATION_RULES",
    "ElectionCycleRules",
    "StepValidationRules",
    "classify_office",
    "eligible_election_years",
    "format_document_number",
    "is_valid_age",
    "is_valid_document_number",
    "is_valid_email",
    "is_valid_full_name",
    "merge_step_errors",
    "normalize_document_number",
    "reconcile_election_year",
    "validate_step",
]
