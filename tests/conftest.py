"""
Pytest configuration and shared fixtures for affiliation workflow tests.

Testing Standards:
- Async tests run under pytest-asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async collaborator mocking when a stub is not enough
- Date-dependent tests use FakeTimeAuthority, never the wall clock
- Unit tests go in tests/unit/
"""

from __future__ import annotations

import pytest

from src.application.services.affiliation_workflow_service import (
    AffiliationWorkflowService,
)
from src.application.services.moderation_service import ModerationService
from src.infrastructure.stubs.admin_authorizer_stub import AdminAuthorizerStub
from src.infrastructure.stubs.affiliation_record_store_stub import (
    AffiliationRecordStoreStub,
)
from src.infrastructure.stubs.biometric_verifier_stub import BiometricVerifierStub
from src.infrastructure.stubs.welcome_notifier_stub import WelcomeNotifierStub
from tests.helpers.fake_time_authority import FakeTimeAuthority


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from src import __version__

    return __version__


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Reference clock frozen at 2025-03-10."""
    return FakeTimeAuthority()


@pytest.fixture
def record_store() -> AffiliationRecordStoreStub:
    """Record store seeded with the demo member and two pending entries."""
    return AffiliationRecordStoreStub(seed_demo_data=True)


@pytest.fixture
def biometric_verifier() -> BiometricVerifierStub:
    return BiometricVerifierStub()


@pytest.fixture
def welcome_notifier() -> WelcomeNotifierStub:
    return WelcomeNotifierStub()


@pytest.fixture
def admin_authorizer() -> AdminAuthorizerStub:
    return AdminAuthorizerStub()


@pytest.fixture
def moderation_service(
    record_store: AffiliationRecordStoreStub,
    admin_authorizer: AdminAuthorizerStub,
) -> ModerationService:
    return ModerationService(record_store=record_store, authorizer=admin_authorizer)


@pytest.fixture
def workflow_service(
    record_store: AffiliationRecordStoreStub,
    fake_time_authority: FakeTimeAuthority,
    biometric_verifier: BiometricVerifierStub,
    welcome_notifier: WelcomeNotifierStub,
    moderation_service: ModerationService,
) -> AffiliationWorkflowService:
    """A fresh session at Home wired to in-memory collaborators."""
    return AffiliationWorkflowService(
        record_store=record_store,
        time_authority=fake_time_authority,
        biometric_verifier=biometric_verifier,
        welcome_notifier=welcome_notifier,
        moderation=moderation_service,
    )
