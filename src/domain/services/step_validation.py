"""Step validation engine.

validate_step(record, step, is_update_mode, reference_date) applies the
field validators and step-specific structural rules for one form step
and returns a fresh StepValidationResult. It never raises and never
mutates its inputs; calling it twice with the same inputs yields equal
results.

Per-step rules:
- PERSONAL: name, birth date (age bounds), document number, phone,
  email and both consent flags.
- ADDRESS: postal code, street, house number, district, city and state
  required.
- COMPLEMENTARY: voter registration number, electoral state/city and
  mother's name required; with a candidacy, political alias and office
  are required and the declared year must be eligible for the office.
- INTERESTS: nothing required, never blocks.
- DOCUMENTS / SELFIE: evidence required outside update mode only. These
  steps fail coarsely via failure_reason rather than field errors.

merge_step_errors() folds a step's result into a session's persistent
error map without touching other steps' entries.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from src.domain.models.affiliation_record import AffiliationRecord, Evidence
from src.domain.models.form_step import STEP_FIELDS, FormStep
from src.domain.models.validation import (
    StepFailureReason,
    StepValidationResult,
    ValidationErrors,
)
from src.domain.services.candidacy_eligibility import (
    DEFAULT_ELECTION_CYCLE_RULES,
    ElectionCycleRules,
    classify_office,
    eligible_election_years,
)
from src.domain.services.field_validators import (
    DEFAULT_MAX_AGE,
    DEFAULT_MIN_AGE,
    DEFAULT_NAME_MAX_LENGTH,
    DEFAULT_NAME_MIN_LENGTH,
    is_valid_age,
    is_valid_document_number,
    is_valid_email,
    is_valid_full_name,
)

# User-facing messages, keyed by the rule that produced them.
MESSAGES: dict[str, str] = {
    "full_name_required": "Nome é obrigatório",
    "full_name_invalid": "O nome deve ser completo, sem números ou caracteres especiais.",
    "birth_date_required": "Data de nascimento obrigatória",
    "birth_date_age": "Idade deve ser entre {min_age} e {max_age} anos.",
    "document_number_invalid": "CPF inválido",
    "phone_required": "Telefone obrigatório",
    "email_invalid": "E-mail inválido",
    "terms_required": "Você precisa aceitar os termos",
    "statute_required": "Você precisa aceitar o estatuto",
    "postal_code_required": "CEP obrigatório",
    "street_required": "Endereço obrigatório",
    "house_number_required": "Número obrigatório",
    "district_required": "Bairro obrigatório",
    "city_required": "Cidade obrigatória",
    "address_state_required": "Estado obrigatório",
    "voter_registration_required": "Título de eleitor obrigatório",
    "electoral_state_required": "Estado eleitoral obrigatório",
    "electoral_city_required": "Município eleitoral obrigatório",
    "mother_name_required": "Nome da mãe obrigatório",
    "mother_name_invalid": "Nome da mãe deve ser completo, sem números ou caracteres especiais.",
    "political_alias_required": "Nome político obrigatório",
    "elective_office_required": "Cargo obrigatório",
    "elective_office_invalid": "Cargo inválido",
    "election_year_invalid": "Ano da eleição indisponível para o cargo selecionado",
}


@dataclass(frozen=True)
class StepValidationRules:
    """Policy parameters the engine validates against."""

    min_age: int = DEFAULT_MIN_AGE
    max_age: int = DEFAULT_MAX_AGE
    name_min_length: int = DEFAULT_NAME_MIN_LENGTH
    name_max_length: int = DEFAULT_NAME_MAX_LENGTH
    require_signature: bool = True
    election_cycles: ElectionCycleRules = DEFAULT_ELECTION_CYCLE_RULES


DEFAULT_STEP_VALIDATION_RULES = StepValidationRules()


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _has_evidence(value: Evidence | None) -> bool:
    return value is not None and len(value) > 0


def _validate_personal(
    record: AffiliationRecord,
    reference_date: date,
    rules: StepValidationRules,
) -> ValidationErrors:
    errors: ValidationErrors = {}

    if _is_blank(record.full_name):
        errors["full_name"] = MESSAGES["full_name_required"]
    elif not is_valid_full_name(
        record.full_name, rules.name_min_length, rules.name_max_length
    ):
        errors["full_name"] = MESSAGES["full_name_invalid"]

    if _is_blank(record.birth_date):
        errors["birth_date"] = MESSAGES["birth_date_required"]
    elif not is_valid_age(record.birth_date, reference_date, rules.min_age, rules.max_age):
        errors["birth_date"] = MESSAGES["birth_date_age"].format(
            min_age=rules.min_age, max_age=rules.max_age
        )

    if not is_valid_document_number(record.document_number):
        errors["document_number"] = MESSAGES["document_number_invalid"]
    if _is_blank(record.phone):
        errors["phone"] = MESSAGES["phone_required"]
    if not is_valid_email(record.email):
        errors["email"] = MESSAGES["email_invalid"]
    if not record.terms_accepted:
        errors["terms_accepted"] = MESSAGES["terms_required"]
    if not record.statute_accepted:
        errors["statute_accepted"] = MESSAGES["statute_required"]
    return errors


def _validate_address(record: AffiliationRecord) -> ValidationErrors:
    required = (
        ("postal_code", "postal_code_required"),
        ("street", "street_required"),
        ("house_number", "house_number_required"),
        ("district", "district_required"),
        ("city", "city_required"),
        ("address_state", "address_state_required"),
    )
    return {
        name: MESSAGES[message]
        for name, message in required
        if _is_blank(getattr(record, name))
    }


def _validate_complementary(
    record: AffiliationRecord,
    reference_date: date,
    rules: StepValidationRules,
) -> ValidationErrors:
    errors: ValidationErrors = {}

    if _is_blank(record.voter_registration_number):
        errors["voter_registration_number"] = MESSAGES["voter_registration_required"]
    if _is_blank(record.electoral_state):
        errors["electoral_state"] = MESSAGES["electoral_state_required"]
    if _is_blank(record.electoral_city):
        errors["electoral_city"] = MESSAGES["electoral_city_required"]

    if _is_blank(record.mother_name):
        errors["mother_name"] = MESSAGES["mother_name_required"]
    elif not is_valid_full_name(
        record.mother_name, rules.name_min_length, rules.name_max_length
    ):
        errors["mother_name"] = MESSAGES["mother_name_invalid"]

    if not record.is_candidate:
        return errors

    if _is_blank(record.political_alias):
        errors["political_alias"] = MESSAGES["political_alias_required"]

    if _is_blank(record.elective_office):
        errors["elective_office"] = MESSAGES["elective_office_required"]
    elif classify_office(record.elective_office) is None:
        errors["elective_office"] = MESSAGES["elective_office_invalid"]
    else:
        years = eligible_election_years(
            record.elective_office, reference_date, rules.election_cycles
        )
        if record.election_year not in years:
            errors["election_year"] = MESSAGES["election_year_invalid"]
    return errors


def _validate_documents(
    record: AffiliationRecord,
    is_update_mode: bool,
    rules: StepValidationRules,
) -> StepValidationResult:
    if is_update_mode:
        return StepValidationResult.ok()
    if not (_has_evidence(record.doc_front) and _has_evidence(record.doc_back)):
        return StepValidationResult.failed(StepFailureReason.DOCUMENT_IMAGES_MISSING)
    if rules.require_signature and not _has_evidence(record.signature):
        return StepValidationResult.failed(StepFailureReason.SIGNATURE_MISSING)
    return StepValidationResult.ok()


def _validate_selfie(record: AffiliationRecord, is_update_mode: bool) -> StepValidationResult:
    if is_update_mode or _has_evidence(record.selfie):
        return StepValidationResult.ok()
    return StepValidationResult.failed(StepFailureReason.SELFIE_MISSING)


def validate_step(
    record: AffiliationRecord,
    step: FormStep,
    is_update_mode: bool,
    reference_date: date,
    rules: StepValidationRules = DEFAULT_STEP_VALIDATION_RULES,
) -> StepValidationResult:
    """Validate one form step of a record.

    Args:
        record: The record under edit.
        step: The step to validate.
        is_update_mode: True when editing an authenticated member; exempts
            already-on-file evidence from re-submission.
        reference_date: The "today" for age and eligibility checks.
        rules: Policy parameters.

    Returns:
        A fresh StepValidationResult. Empty errors and passed=True mean
        the step may be left.
    """
    if step is FormStep.PERSONAL:
        return StepValidationResult.from_errors(
            _validate_personal(record, reference_date, rules)
        )
    if step is FormStep.ADDRESS:
        return StepValidationResult.from_errors(_validate_address(record))
    if step is FormStep.COMPLEMENTARY:
        return StepValidationResult.from_errors(
            _validate_complementary(record, reference_date, rules)
        )
    if step is FormStep.INTERESTS:
        return StepValidationResult.ok()
    if step is FormStep.DOCUMENTS:
        return _validate_documents(record, is_update_mode, rules)
    return _validate_selfie(record, is_update_mode)


def merge_step_errors(
    existing: ValidationErrors,
    step: FormStep,
    result: StepValidationResult,
) -> ValidationErrors:
    """Fold a step's validation result into a persistent error map.

    Entries for the step's own fields are replaced by the fresh result;
    entries belonging to other steps are kept as they are.

    Returns:
        A new error map; existing is not modified.
    """
    own_fields = STEP_FIELDS[step]
    merged = {name: message for name, message in existing.items() if name not in own_fields}
    merged.update(result.errors)
    return merged
