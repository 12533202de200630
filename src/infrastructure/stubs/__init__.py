"""Infrastructure stubs for development and testing.

This module provides stub implementations of infrastructure ports
for use in development and testing environments.

Available stubs:
- AffiliationRecordStoreStub: In-memory record store keeping wire payloads,
  with an availability toggle and optional demo data
- BiometricVerifierStub: Configurable pass/fail biometric gate
- WelcomeNotifierStub: Records (and logs) welcome messages, can be set to fail
- AdminAuthorizerStub: Single in-memory reviewer account

WARNING: These stubs are NOT for production use.
"""

from src.infrastructure.stubs.admin_authorizer_stub import AdminAuthorizerStub
from src.infrastructure.stubs.affiliation_record_store_stub import (
    DEMO_MEMBER_DOCUMENT_NUMBER,
    AffiliationRecordStoreStub,
)
from src.infrastructure.stubs.biometric_verifier_stub import BiometricVerifierStub
from src.infrastructure.stubs.welcome_notifier_stub import WelcomeNotifierStub

__all__: list[str] = [
    "DEMO_MEMBER_DOCUMENT_NUMBER",
    "AdminAuthorizerStub",
    "AffiliationRecordStoreStub",
    "BiometricVerifierStub",
    "WelcomeNotifierStub",
]
