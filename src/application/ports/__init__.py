"""Application ports - Abstract interfaces for infrastructure adapters.

This module defines the contracts that infrastructure adapters must implement.
Ports enable dependency inversion and make the application layer testable.

Available ports:
- AffiliationRecordStoreProtocol: member lookup, submission and review queue
- BiometricVerifierProtocol: opaque biometric pass/fail gate
- WelcomeNotifierProtocol: welcome message after enrollment
- AdminAuthorizerProtocol: reviewer authorization gate
- TimeAuthorityProtocol: reference clock
"""

from src.application.ports.admin_authorizer import AdminAuthorizerProtocol
from src.application.ports.affiliation_record_store import (
    AffiliationRecordStoreProtocol,
    SubmissionReceipt,
)
from src.application.ports.biometric_verifier import BiometricVerifierProtocol
from src.application.ports.time_authority import TimeAuthorityProtocol
from src.application.ports.welcome_notifier import WelcomeNotifierProtocol

__all__: list[str] = [
    "AdminAuthorizerProtocol",
    "AffiliationRecordStoreProtocol",
    "BiometricVerifierProtocol",
    "SubmissionReceipt",
    "TimeAuthorityProtocol",
    "WelcomeNotifierProtocol",
]
