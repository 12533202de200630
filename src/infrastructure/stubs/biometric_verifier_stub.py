"""Biometric verifier stub for testing.

Provides an in-memory implementation of BiometricVerifierProtocol with
switches for a refused check and for an unreachable verifier.
"""

from __future__ import annotations

from src.application.ports.biometric_verifier import BiometricVerifierProtocol
from src.domain.errors import CollaboratorUnavailableError


class BiometricVerifierStub(BiometricVerifierProtocol):
    """Configurable biometric gate.

    Usage:
        verifier = BiometricVerifierStub()          # always passes
        verifier.set_result(False)                   # refuse the next checks
        verifier.set_available(False)                # raise on every call

    Attributes:
        _result: Value returned by verify().
        _available: Availability toggle for failure injection.
        _verified: Document numbers verify() was called with.
    """

    def __init__(self, result: bool = True) -> None:
        self._result = result
        self._available = True
        self._verified: list[str] = []

    async def verify(self, document_number: str) -> bool:
        self._verified.append(document_number)
        if not self._available:
            raise CollaboratorUnavailableError(
                collaborator="biometric_verifier",
                operation="verify",
            )
        return self._result

    def set_result(self, result: bool) -> None:
        self._result = result

    def set_available(self, available: bool) -> None:
        self._available = available

    @property
    def verified_document_numbers(self) -> list[str]:
        return list(self._verified)
