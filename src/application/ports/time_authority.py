"""Time Authority Protocol - interface for the reference clock.

Age checks and candidacy eligibility depend on "today". Services that
need the current date MUST inject a TimeAuthorityProtocol implementation
instead of calling datetime.now() or date.today() directly, so tests can
pin the clock to a cutoff boundary.

For production:
    Use SystemTimeAuthority from src/infrastructure/adapters/

For testing:
    Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
"""

from abc import ABC, abstractmethod
from datetime import date, datetime


class TimeAuthorityProtocol(ABC):
    """Abstract interface for the reference clock.

    Example usage:
        class MyService:
            def __init__(self, time_authority: TimeAuthorityProtocol) -> None:
                self._time = time_authority

            def process(self) -> None:
                today = self._time.today()  # NOT date.today()
                ...
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time with timezone awareness."""
        ...

    def today(self) -> date:
        """Return the current calendar date.

        Derived from now() so implementations only need to control one
        value.
        """
        return self.now().date()
