"""Admin authorizer port.

Authentication of reviewers is an external capability. The moderation
session only consumes a boolean "is authorized" gate plus login and
logout hooks.
"""

from __future__ import annotations

from typing import Protocol


class AdminAuthorizerProtocol(Protocol):
    """Protocol for the reviewer authorization gate."""

    def authenticate(self, email: str, password: str) -> bool:
        """Check reviewer credentials and open an authorized session.

        Returns:
            True if access was granted.
        """
        ...

    def is_authorized(self) -> bool:
        """Check whether an authorized reviewer session is open."""
        ...

    def revoke(self) -> None:
        """Close the reviewer session."""
        ...
