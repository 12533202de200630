"""Admin authorizer stub for development and testing.

A single reviewer account checked in memory. The authorized flag plays
the part of the reviewer's session storage.
"""

from __future__ import annotations

import hmac

from src.application.ports.admin_authorizer import AdminAuthorizerProtocol

DEFAULT_ADMIN_EMAIL = "admin@intelis.org.br"
DEFAULT_ADMIN_PASSWORD = "admin123"


class AdminAuthorizerStub(AdminAuthorizerProtocol):
    """In-memory reviewer authorization gate.

    Usage:
        gate = AdminAuthorizerStub()
        gate.authenticate("admin@intelis.org.br", "admin123")  # True
        gate.is_authorized()                                     # True
        gate.revoke()

    Attributes:
        _email: Accepted reviewer email (case-insensitive).
        _password: Accepted reviewer password.
        _authorized: Whether a reviewer session is open.
    """

    def __init__(
        self,
        email: str = DEFAULT_ADMIN_EMAIL,
        password: str = DEFAULT_ADMIN_PASSWORD,
        authorized: bool = False,
    ) -> None:
        self._email = email
        self._password = password
        self._authorized = authorized

    def authenticate(self, email: str, password: str) -> bool:
        granted = email.strip().lower() == self._email.lower() and hmac.compare_digest(
            password.encode(), self._password.encode()
        )
        if granted:
            self._authorized = True
        return granted

    def is_authorized(self) -> bool:
        return self._authorized

    def revoke(self) -> None:
        self._authorized = False
