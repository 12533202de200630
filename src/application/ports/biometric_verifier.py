"""Biometric verifier port.

An opaque pass/fail gate used on the member update path in addition to
the document lookup.
"""

from __future__ import annotations

from typing import Protocol


class BiometricVerifierProtocol(Protocol):
    """Protocol for biometric identity checks."""

    async def verify(self, document_number: str) -> bool:
        """Run the biometric check for the member being authenticated.

        Args:
            document_number: Normalized document number of the member.

        Returns:
            True if the check passed, False if it was refused.

        Raises:
            CollaboratorUnavailableError: If the verifier cannot be reached.
        """
        ...
