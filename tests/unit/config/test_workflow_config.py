"""Unit tests for AffiliationWorkflowConfig.

Tests default business rules, bounds validation and environment overrides.
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from src.application.services.affiliation_workflow_service import (
    build_step_validation_rules,
)
from src.config.workflow_config import (
    DEFAULT_AFFILIATION_WORKFLOW_CONFIG,
    DOCUMENTS_ONLY_AFFILIATION_WORKFLOW_CONFIG,
    AffiliationWorkflowConfig,
)


class TestAffiliationWorkflowConfig:
    """Tests for AffiliationWorkflowConfig dataclass."""

    def test_defaults(self) -> None:
        """Defaults match the enrollment form's published rules."""
        config = AffiliationWorkflowConfig()
        assert config.min_age == 16
        assert config.max_age == 100
        assert config.name_min_length == 5
        assert config.name_max_length == 120
        assert config.require_signature is True
        assert (config.cutoff_month, config.cutoff_day) == (8, 15)
        assert config == DEFAULT_AFFILIATION_WORKFLOW_CONFIG

    def test_documents_only_variant(self) -> None:
        assert DOCUMENTS_ONLY_AFFILIATION_WORKFLOW_CONFIG.require_signature is False

    def test_max_age_below_min_age_raises(self) -> None:
        with pytest.raises(ValueError) as exc_info:
            AffiliationWorkflowConfig(min_age=30, max_age=20)
        assert "max_age" in str(exc_info.value)

    def test_negative_min_age_raises(self) -> None:
        with pytest.raises(ValueError):
            AffiliationWorkflowConfig(min_age=-1)

    def test_name_bounds_validated(self) -> None:
        with pytest.raises(ValueError):
            AffiliationWorkflowConfig(name_min_length=0)
        with pytest.raises(ValueError):
            AffiliationWorkflowConfig(name_min_length=10, name_max_length=5)

    def test_cycle_years_must_be_positive(self) -> None:
        with pytest.raises(ValueError):
            AffiliationWorkflowConfig(cycle_years=0)

    def test_impossible_cutoff_raises(self) -> None:
        with pytest.raises(ValueError) as exc_info:
            AffiliationWorkflowConfig(cutoff_month=2, cutoff_day=30)
        assert "cutoff" in str(exc_info.value)

    def test_leap_day_cutoff_accepted(self) -> None:
        assert AffiliationWorkflowConfig(cutoff_month=2, cutoff_day=29).cutoff_day == 29

    def test_config_is_frozen(self) -> None:
        config = AffiliationWorkflowConfig()
        with pytest.raises(AttributeError):
            config.min_age = 18  # type: ignore[misc]


class TestFromEnvironment:
    """Tests for AffiliationWorkflowConfig.from_environment."""

    def test_defaults_without_env(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert AffiliationWorkflowConfig.from_environment() == (
                DEFAULT_AFFILIATION_WORKFLOW_CONFIG
            )

    def test_overrides_from_env(self) -> None:
        env = {
            "AFFILIATION_MIN_AGE": "18",
            "AFFILIATION_REQUIRE_SIGNATURE": "false",
            "AFFILIATION_CUTOFF_MONTH": "6",
            "AFFILIATION_CUTOFF_DAY": "30",
        }
        with patch.dict(os.environ, env, clear=True):
            config = AffiliationWorkflowConfig.from_environment()

        assert config.min_age == 18
        assert config.require_signature is False
        assert (config.cutoff_month, config.cutoff_day) == (6, 30)

    def test_unparseable_values_fall_back_to_defaults(self) -> None:
        env = {"AFFILIATION_MAX_AGE": "old", "AFFILIATION_REQUIRE_SIGNATURE": "maybe"}
        with patch.dict(os.environ, env, clear=True):
            config = AffiliationWorkflowConfig.from_environment()

        assert config.max_age == 100
        assert config.require_signature is True

    def test_inconsistent_env_raises(self) -> None:
        env = {"AFFILIATION_MIN_AGE": "50", "AFFILIATION_MAX_AGE": "40"}
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ValueError):
                AffiliationWorkflowConfig.from_environment()


class TestBuildStepValidationRules:
    def test_rules_mirror_config(self) -> None:
        config = AffiliationWorkflowConfig(
            min_age=18, require_signature=False, municipal_base_year=2028
        )

        rules = build_step_validation_rules(config)

        assert rules.min_age == 18
        assert rules.require_signature is False
        assert rules.election_cycles.municipal_base_year == 2028
        assert rules.election_cycles.general_base_year == 2026
