"""Welcome notifier port.

Sends the welcome message (with the affiliation form attached) after a
new enrollment is stored. Delivery is fire-and-forget from the workflow's
point of view: a failure never undoes the submission.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.models.affiliation_record import AffiliationRecord


class WelcomeNotifierProtocol(Protocol):
    """Protocol for welcome notification delivery."""

    async def send_welcome(self, record: AffiliationRecord) -> None:
        """Send the welcome message to the record's email address.

        Raises:
            CollaboratorUnavailableError: If delivery fails.
        """
        ...
