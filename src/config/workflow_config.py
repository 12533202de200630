"""Affiliation workflow configuration.

This module defines the business-rule parameters of the enrollment
workflow, with environment variable overrides for deployment tuning.

Environment Variables (Identity rules):
- AFFILIATION_MIN_AGE: Minimum applicant age in whole years (default: 16)
- AFFILIATION_MAX_AGE: Maximum applicant age in whole years (default: 100)
- AFFILIATION_NAME_MIN_LENGTH: Minimum full-name length (default: 5)
- AFFILIATION_NAME_MAX_LENGTH: Maximum full-name length (default: 120)

Environment Variables (Documents):
- AFFILIATION_REQUIRE_SIGNATURE: Whether step 5 requires a signature (default: true)

Environment Variables (Election cycles):
- AFFILIATION_MUNICIPAL_BASE_YEAR: First municipal election year (default: 2024)
- AFFILIATION_GENERAL_BASE_YEAR: First general election year (default: 2026)
- AFFILIATION_CYCLE_YEARS: Years between elections of a category (default: 4)
- AFFILIATION_CUTOFF_MONTH: Month of the declaration cutoff (default: 8)
- AFFILIATION_CUTOFF_DAY: Day of the declaration cutoff, inclusive (default: 15)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Accepts 1/0, true/false, yes/no, on/off (case-insensitive).
    """
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


@dataclass(frozen=True)
class AffiliationWorkflowConfig:
    """Business-rule parameters for the enrollment workflow.

    Attributes:
        min_age: Minimum applicant age, inclusive.
        max_age: Maximum applicant age, inclusive.
        name_min_length: Minimum stripped length of a full name.
        name_max_length: Maximum stripped length of a full name.
        require_signature: Whether the documents step requires a signature
            in addition to the front/back document images.
        municipal_base_year: Reference municipal election year.
        general_base_year: Reference general election year.
        cycle_years: Years between two elections of the same category.
        cutoff_month: Month of the candidacy declaration cutoff.
        cutoff_day: Day of the cutoff; declarations on this day still count
            for the current election year.
    """

    min_age: int = 16
    max_age: int = 100
    name_min_length: int = 5
    name_max_length: int = 120
    require_signature: bool = True
    municipal_base_year: int = 2024
    general_base_year: int = 2026
    cycle_years: int = 4
    cutoff_month: int = 8
    cutoff_day: int = 15

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.min_age < 0:
            raise ValueError(f"min_age must be non-negative, got {self.min_age}")
        if self.max_age < self.min_age:
            raise ValueError(
                f"max_age ({self.max_age}) must be >= min_age ({self.min_age})"
            )
        if self.name_min_length < 1:
            raise ValueError(
                f"name_min_length must be positive, got {self.name_min_length}"
            )
        if self.name_max_length < self.name_min_length:
            raise ValueError(
                f"name_max_length ({self.name_max_length}) must be >= "
                f"name_min_length ({self.name_min_length})"
            )
        if self.cycle_years < 1:
            raise ValueError(f"cycle_years must be positive, got {self.cycle_years}")
        try:
            # 2024 is a leap year, so it accepts every valid month/day pair.
            date(2024, self.cutoff_month, self.cutoff_day)
        except ValueError as e:
            raise ValueError(
                f"invalid cutoff date {self.cutoff_month}/{self.cutoff_day}: {e}"
            ) from e

    @classmethod
    def from_environment(cls) -> AffiliationWorkflowConfig:
        """Create config from environment variables with defaults.

        Returns:
            AffiliationWorkflowConfig with values from environment or defaults.

        Raises:
            ValueError: If the combined values are inconsistent
                (e.g. AFFILIATION_MAX_AGE below AFFILIATION_MIN_AGE).
        """
        return cls(
            min_age=_get_int_env("AFFILIATION_MIN_AGE", 16),
            max_age=_get_int_env("AFFILIATION_MAX_AGE", 100),
            name_min_length=_get_int_env("AFFILIATION_NAME_MIN_LENGTH", 5),
            name_max_length=_get_int_env("AFFILIATION_NAME_MAX_LENGTH", 120),
            require_signature=_get_bool_env("AFFILIATION_REQUIRE_SIGNATURE", True),
            municipal_base_year=_get_int_env("AFFILIATION_MUNICIPAL_BASE_YEAR", 2024),
            general_base_year=_get_int_env("AFFILIATION_GENERAL_BASE_YEAR", 2026),
            cycle_years=_get_int_env("AFFILIATION_CYCLE_YEARS", 4),
            cutoff_month=_get_int_env("AFFILIATION_CUTOFF_MONTH", 8),
            cutoff_day=_get_int_env("AFFILIATION_CUTOFF_DAY", 15),
        )


# Pre-defined configurations

# Default production rules
DEFAULT_AFFILIATION_WORKFLOW_CONFIG = AffiliationWorkflowConfig()

# Variant of the form that only collects document images on step 5
DOCUMENTS_ONLY_AFFILIATION_WORKFLOW_CONFIG = AffiliationWorkflowConfig(
    require_signature=False,
)
