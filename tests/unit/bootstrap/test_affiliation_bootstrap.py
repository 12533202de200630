"""Unit tests for affiliation bootstrap wiring."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date

import pytest
import structlog

from src.application.services.affiliation_workflow_service import AuthenticationOutcome
from src.bootstrap import affiliation
from src.bootstrap.logging import configure_structlog
from src.config.workflow_config import AffiliationWorkflowConfig
from src.domain.models.workflow_state import AdminSubState, ViewKind
from src.infrastructure.stubs.affiliation_record_store_stub import (
    AffiliationRecordStoreStub,
)
from tests.helpers import FakeTimeAuthority


@pytest.fixture(autouse=True)
def _reset_singletons() -> Iterator[None]:
    affiliation.reset_affiliation_services()
    yield
    affiliation.reset_affiliation_services()


class TestSingletons:
    """Collaborators are created once per process."""

    def test_record_store_is_cached(self) -> None:
        assert affiliation.get_record_store() is affiliation.get_record_store()

    def test_record_store_is_seeded(self) -> None:
        store = affiliation.get_record_store()

        assert isinstance(store, AffiliationRecordStoreStub)
        assert store.get("usr_123") is not None

    def test_collaborators_are_cached(self) -> None:
        assert affiliation.get_biometric_verifier() is affiliation.get_biometric_verifier()
        assert affiliation.get_welcome_notifier() is affiliation.get_welcome_notifier()
        assert affiliation.get_admin_authorizer() is affiliation.get_admin_authorizer()
        assert affiliation.get_time_authority() is affiliation.get_time_authority()
        assert affiliation.get_workflow_config() is affiliation.get_workflow_config()

    def test_reset_drops_instances(self) -> None:
        store = affiliation.get_record_store()

        affiliation.reset_affiliation_services()

        assert affiliation.get_record_store() is not store

    def test_config_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AFFILIATION_MIN_AGE", "18")

        assert affiliation.get_workflow_config().min_age == 18


class TestOverrides:
    def test_set_record_store(self) -> None:
        store = AffiliationRecordStoreStub()

        affiliation.set_record_store(store)

        assert affiliation.get_record_store() is store

    def test_set_time_authority(self) -> None:
        clock = FakeTimeAuthority(frozen_at=date(2024, 8, 16))

        affiliation.set_time_authority(clock)

        assert affiliation.get_time_authority() is clock

    def test_set_workflow_config(self) -> None:
        config = AffiliationWorkflowConfig(min_age=18)

        affiliation.set_workflow_config(config)

        assert affiliation.get_workflow_config() is config


class TestSessionFactories:
    """Sessions are fresh per call and share the collaborators."""

    def test_workflow_sessions_are_independent(self) -> None:
        first = affiliation.create_workflow_service()
        second = affiliation.create_workflow_service()

        first.start_enrollment()

        assert first is not second
        assert first.state.kind is ViewKind.FORM
        assert second.state.kind is ViewKind.HOME

    def test_workflow_session_gets_its_own_moderation(self) -> None:
        first = affiliation.create_workflow_service()
        second = affiliation.create_workflow_service()

        assert first.moderation is not None
        assert first.moderation is not second.moderation

    def test_given_moderation_is_used(self) -> None:
        moderation = affiliation.create_moderation_service()

        service = affiliation.create_workflow_service(moderation=moderation)

        assert service.moderation is moderation

    def test_moderation_starts_at_login(self) -> None:
        moderation = affiliation.create_moderation_service()

        assert moderation.sub_state is AdminSubState.LOGIN

    @pytest.mark.asyncio
    async def test_sessions_share_the_record_store(self) -> None:
        affiliation.set_time_authority(FakeTimeAuthority())
        moderation = affiliation.create_moderation_service()
        assert moderation.login("admin@intelis.org.br", "admin123")

        await moderation.refresh()
        affiliation.get_record_store().set_available(False)
        service = affiliation.create_workflow_service()
        service.start_update()
        result = await service.authenticate("123.456.789-09")

        assert [entry.entry_id for entry in moderation.queue] == ["pend_1", "pend_2"]
        assert result.outcome is AuthenticationOutcome.UNAVAILABLE


class TestLoggingBootstrap:
    @pytest.fixture(autouse=True)
    def _reset_structlog(self) -> Iterator[None]:
        yield
        structlog.reset_defaults()

    def test_explicit_environment(self) -> None:
        assert configure_structlog("development") == "development"

    def test_environment_variable(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "development")

        assert configure_structlog() == "development"

    def test_defaults_to_production(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ENVIRONMENT", raising=False)

        assert configure_structlog() == "production"
