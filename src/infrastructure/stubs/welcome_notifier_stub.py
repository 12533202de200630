"""Welcome notifier stub for testing.

Records the welcome messages it was asked to send and logs them instead
of delivering anything.
"""

from __future__ import annotations

from structlog import get_logger

from src.application.ports.welcome_notifier import WelcomeNotifierProtocol
from src.domain.errors import CollaboratorUnavailableError
from src.domain.models.affiliation_record import AffiliationRecord

logger = get_logger()

WELCOME_SUBJECT = "Bem-vindo ao INTELIGENTES - Sua Ficha de Filiação"


class WelcomeNotifierStub(WelcomeNotifierProtocol):
    """In-memory welcome notifier.

    Attributes:
        _sent: Records a welcome message was "sent" for.
        _fail: When True, send_welcome raises CollaboratorUnavailableError.
    """

    def __init__(self) -> None:
        self._sent: list[AffiliationRecord] = []
        self._fail = False

    async def send_welcome(self, record: AffiliationRecord) -> None:
        if self._fail:
            raise CollaboratorUnavailableError(
                collaborator="welcome_notifier",
                operation="send_welcome",
                detail="delivery failed",
            )
        self._sent.append(record)
        logger.info(
            "welcome_notification_simulated",
            recipient=record.email,
            subject=WELCOME_SUBJECT,
            record_id=record.record_id,
        )

    def set_fail(self, fail: bool) -> None:
        self._fail = fail

    @property
    def sent(self) -> list[AffiliationRecord]:
        return list(self._sent)

    def clear(self) -> None:
        self._sent.clear()
        self._fail = False
