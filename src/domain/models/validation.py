"""Step validation result types.

ValidationErrors maps a record attribute name to a human-readable
message. Absence of a key means the field currently passes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

ValidationErrors = dict[str, str]


class StepFailureReason(Enum):
    """Why a step failed to validate.

    The evidence steps (documents, selfie) fail coarsely: their evidence
    is not a plain string, so they report a reason instead of field errors.
    """

    FIELD_ERRORS = "field_errors"
    DOCUMENT_IMAGES_MISSING = "document_images_missing"
    SIGNATURE_MISSING = "signature_missing"
    SELFIE_MISSING = "selfie_missing"


@dataclass(frozen=True)
class StepValidationResult:
    """Outcome of validating one form step.

    Attributes:
        errors: Field-keyed messages (fresh dict per validation pass).
        passed: Overall pass flag. For the evidence steps this can be False
            while errors is empty.
        failure_reason: Why the step failed, None when it passed.
    """

    errors: ValidationErrors = field(default_factory=dict)
    passed: bool = True
    failure_reason: StepFailureReason | None = None

    @classmethod
    def ok(cls) -> StepValidationResult:
        return cls()

    @classmethod
    def from_errors(cls, errors: ValidationErrors) -> StepValidationResult:
        if errors:
            return cls(
                errors=errors,
                passed=False,
                failure_reason=StepFailureReason.FIELD_ERRORS,
            )
        return cls()

    @classmethod
    def failed(cls, reason: StepFailureReason) -> StepValidationResult:
        return cls(errors={}, passed=False, failure_reason=reason)
