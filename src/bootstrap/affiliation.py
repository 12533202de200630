"""Bootstrap wiring for affiliation workflow dependencies.

Collaborators (record store, biometric gate, notifier, reviewer gate,
clock, config) are process-wide singletons. Workflow and moderation
services are per session: each factory call returns a fresh session
sharing those collaborators.
"""

from __future__ import annotations

from structlog import get_logger

from src.application.ports.admin_authorizer import AdminAuthorizerProtocol
from src.application.ports.affiliation_record_store import (
    AffiliationRecordStoreProtocol,
)
from src.application.ports.biometric_verifier import BiometricVerifierProtocol
from src.application.ports.time_authority import TimeAuthorityProtocol
from src.application.ports.welcome_notifier import WelcomeNotifierProtocol
from src.application.services.affiliation_workflow_service import (
    AffiliationWorkflowService,
)
from src.application.services.moderation_service import ModerationService
from src.config.workflow_config import AffiliationWorkflowConfig
from src.infrastructure.adapters.system_time_authority import SystemTimeAuthority
from src.infrastructure.stubs.admin_authorizer_stub import AdminAuthorizerStub
from src.infrastructure.stubs.affiliation_record_store_stub import (
    AffiliationRecordStoreStub,
)
from src.infrastructure.stubs.biometric_verifier_stub import BiometricVerifierStub
from src.infrastructure.stubs.welcome_notifier_stub import WelcomeNotifierStub

logger = get_logger()

_record_store: AffiliationRecordStoreProtocol | None = None
_biometric_verifier: BiometricVerifierProtocol | None = None
_welcome_notifier: WelcomeNotifierProtocol | None = None
_admin_authorizer: AdminAuthorizerProtocol | None = None
_time_authority: TimeAuthorityProtocol | None = None
_workflow_config: AffiliationWorkflowConfig | None = None


def get_record_store() -> AffiliationRecordStoreProtocol:
    """Get record store instance.

    Only the in-memory stub exists; it is seeded with the demo member
    and two pending enrollments.
    """
    global _record_store
    if _record_store is None:
        logger.warning(
            "record_store_initialized",
            store_type="InMemoryStub",
            message="using in-memory stub (data will not persist)",
        )
        _record_store = AffiliationRecordStoreStub(seed_demo_data=True)
    return _record_store


def get_biometric_verifier() -> BiometricVerifierProtocol:
    """Get biometric verifier instance."""
    global _biometric_verifier
    if _biometric_verifier is None:
        _biometric_verifier = BiometricVerifierStub()
    return _biometric_verifier


def get_welcome_notifier() -> WelcomeNotifierProtocol:
    """Get welcome notifier instance."""
    global _welcome_notifier
    if _welcome_notifier is None:
        _welcome_notifier = WelcomeNotifierStub()
    return _welcome_notifier


def get_admin_authorizer() -> AdminAuthorizerProtocol:
    """Get reviewer authorization gate instance."""
    global _admin_authorizer
    if _admin_authorizer is None:
        _admin_authorizer = AdminAuthorizerStub()
    return _admin_authorizer


def get_time_authority() -> TimeAuthorityProtocol:
    """Get reference clock instance."""
    global _time_authority
    if _time_authority is None:
        _time_authority = SystemTimeAuthority()
    return _time_authority


def get_workflow_config() -> AffiliationWorkflowConfig:
    """Get workflow configuration from the environment."""
    global _workflow_config
    if _workflow_config is None:
        _workflow_config = AffiliationWorkflowConfig.from_environment()
    return _workflow_config


def create_moderation_service() -> ModerationService:
    """Create a reviewer session."""
    return ModerationService(
        record_store=get_record_store(),
        authorizer=get_admin_authorizer(),
    )


def create_workflow_service(
    moderation: ModerationService | None = None,
) -> AffiliationWorkflowService:
    """Create an enrollment session.

    Args:
        moderation: Reviewer session backing the Admin view. A new one is
            created when not given.
    """
    return AffiliationWorkflowService(
        record_store=get_record_store(),
        time_authority=get_time_authority(),
        biometric_verifier=get_biometric_verifier(),
        welcome_notifier=get_welcome_notifier(),
        moderation=moderation if moderation is not None else create_moderation_service(),
        config=get_workflow_config(),
    )


def reset_affiliation_services() -> None:
    """Reset all singletons (for testing)."""
    global _record_store
    global _biometric_verifier
    global _welcome_notifier
    global _admin_authorizer
    global _time_authority
    global _workflow_config

    _record_store = None
    _biometric_verifier = None
    _welcome_notifier = None
    _admin_authorizer = None
    _time_authority = None
    _workflow_config = None


def set_record_store(store: AffiliationRecordStoreProtocol) -> None:
    """Set custom record store for testing."""
    global _record_store
    _record_store = store


def set_time_authority(time_authority: TimeAuthorityProtocol) -> None:
    """Set custom reference clock for testing."""
    global _time_authority
    _time_authority = time_authority


def set_workflow_config(config: AffiliationWorkflowConfig) -> None:
    """Set custom workflow config for testing."""
    global _workflow_config
    _workflow_config = config
