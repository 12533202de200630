"""Field validators for affiliation records.

Pure predicates over primitive values. Each validator returns a bool and
never raises: messages are assigned by the caller (the step validation
engine), so message text stays a presentation concern.

Rules:
- Document number: the 11-digit national taxpayer identifier (CPF).
  Masked input ("529.982.247-25") is accepted; sequences of one repeated
  digit are rejected; both modulo-11 check digits must match.
- Age: whole years elapsed as of the reference date, within [16, 100].
- Full name: at least two tokens, letters only (accents allowed), total
  length within policy bounds.
- Email: one "@", non-empty local part, a dotted domain, no whitespace.
"""

from __future__ import annotations

import re
from datetime import date, datetime

DOCUMENT_NUMBER_LENGTH: int = 11
DEFAULT_MIN_AGE: int = 16
DEFAULT_MAX_AGE: int = 100
DEFAULT_NAME_MIN_LENGTH: int = 5
DEFAULT_NAME_MAX_LENGTH: int = 120

_NON_DIGITS = re.compile(r"\D")
_WHITESPACE = re.compile(r"\s")


def normalize_document_number(value: str | None) -> str:
    """Strip every non-digit character from a document number."""
    if not value:
        return ""
    return _NON_DIGITS.sub("", value)


def format_document_number(value: str | None) -> str:
    """Apply the 000.000.000-00 mask to a (possibly partial) document number.

    Digits beyond the eleventh are dropped. Partial input is masked as far
    as it goes, which mirrors how the form formats while typing.
    """
    digits = normalize_document_number(value)[:DOCUMENT_NUMBER_LENGTH]
    parts = [digits[0:3], digits[3:6], digits[6:9]]
    masked = ".".join(part for part in parts if part)
    if len(digits) > 9:
        masked += "-" + digits[9:]
    return masked


def _check_digit(digits: str) -> int:
    # Weights run from len+1 down to 2.
    weight = len(digits) + 1
    total = sum(int(d) * (weight - i) for i, d in enumerate(digits))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def is_valid_document_number(value: str | None) -> bool:
    """Check a national taxpayer identifier (CPF).

    Args:
        value: Raw or masked document number.

    Returns:
        True if the value has 11 digits, is not a single repeated digit,
        and both check digits match.
    """
    digits = normalize_document_number(value)
    if len(digits) != DOCUMENT_NUMBER_LENGTH:
        return False
    if digits == digits[0] * DOCUMENT_NUMBER_LENGTH:
        return False

    first = _check_digit(digits[:9])
    if first != int(digits[9]):
        return False
    second = _check_digit(digits[:10])
    return second == int(digits[10])


def parse_birth_date(value: str | date | None) -> date | None:
    """Parse an ISO (YYYY-MM-DD) birth date.

    Returns:
        The parsed date, or None when the value is blank or malformed.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip())
    except (AttributeError, ValueError):
        return None


def age_on(birth_date: date, reference_date: date) -> int:
    """Whole years elapsed between birth_date and reference_date."""
    years = reference_date.year - birth_date.year
    if (reference_date.month, reference_date.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


def is_valid_age(
    birth_date: str | date | None,
    reference_date: date,
    min_age: int = DEFAULT_MIN_AGE,
    max_age: int = DEFAULT_MAX_AGE,
) -> bool:
    """Check the applicant's age lies within [min_age, max_age] inclusive.

    Args:
        birth_date: ISO string or date. Unparseable values fail.
        reference_date: The "today" the age is computed against.
        min_age: Inclusive lower bound.
        max_age: Inclusive upper bound.
    """
    parsed = parse_birth_date(birth_date)
    if parsed is None:
        return False
    return min_age <= age_on(parsed, reference_date) <= max_age


def is_valid_full_name(
    value: str | None,
    min_length: int = DEFAULT_NAME_MIN_LENGTH,
    max_length: int = DEFAULT_NAME_MAX_LENGTH,
) -> bool:
    """Check a full name has at least two letter-only tokens.

    Accented letters count as letters. Digits, punctuation and symbols
    anywhere in the name fail the check.
    """
    if not value:
        return False
    name = value.strip()
    if not min_length <= len(name) <= max_length:
        return False
    tokens = name.split()
    if len(tokens) < 2:
        return False
    return all(token.isalpha() for token in tokens)


def is_valid_email(value: str | None) -> bool:
    """Check the basic shape of an email address."""
    if not value or _WHITESPACE.search(value):
        return False
    if value.count("@") != 1:
        return False
    local, domain = value.split("@")
    if not local:
        return False
    dot = domain.find(".")
    return 0 < dot and not domain.endswith(".")
