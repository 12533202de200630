"""FakeTimeAuthority - Controllable time authority for deterministic tests.

Age limits and candidacy cutoffs are calendar-day rules, so tests pin
"today" to exact boundary dates (e.g. August 15 vs August 16 of an
election year).

Usage Patterns:
--------------

1. Frozen Date Pattern:

    >>> fake_time = FakeTimeAuthority(frozen_at=date(2024, 8, 15))
    >>> service = AffiliationWorkflowService(store, time_authority=fake_time)
    >>> assert fake_time.today() == date(2024, 8, 15)

2. Time Advancement Pattern:

    >>> fake_time = FakeTimeAuthority(frozen_at=date(2024, 8, 15))
    >>> fake_time.advance(days=1)
    >>> assert fake_time.today() == date(2024, 8, 16)

3. Pytest Fixture Pattern:
    Use the `fake_time_authority` fixture from conftest.py.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from src.application.ports.time_authority import TimeAuthorityProtocol

DEFAULT_FROZEN_AT = datetime(2025, 3, 10, 12, 0, 0, tzinfo=timezone.utc)


def _as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)
    # Noon keeps the calendar day stable under any small offset
    return datetime(value.year, value.month, value.day, 12, 0, 0, tzinfo=timezone.utc)


class FakeTimeAuthority(TimeAuthorityProtocol):
    """Controllable time authority for deterministic tests.

    Attributes:
        _current_time: The controlled current time.
    """

    def __init__(self, frozen_at: date | datetime | None = None) -> None:
        """Initialize the fake time authority.

        Args:
            frozen_at: Date or datetime to freeze time at. Defaults to
                2025-03-10 12:00 UTC. Naive datetimes are taken as UTC;
                plain dates are frozen at noon UTC.
        """
        self._current_time = _as_datetime(frozen_at or DEFAULT_FROZEN_AT)

    def now(self) -> datetime:
        """Return the controlled current time."""
        return self._current_time

    def advance(self, days: int = 0, seconds: float = 0) -> None:
        """Advance time by the specified amount.

        Raises:
            ValueError: If attempting to advance by negative time.
        """
        delta = timedelta(days=days, seconds=seconds)
        if delta < timedelta(0):
            raise ValueError(
                f"Cannot advance time backwards. Got {delta}. "
                "Use set_time() for explicit time changes."
            )
        self._current_time += delta

    def set_time(self, value: date | datetime) -> None:
        """Set the current time to an explicit value."""
        self._current_time = _as_datetime(value)

    def __repr__(self) -> str:
        return f"FakeTimeAuthority(current_time={self._current_time.isoformat()})"
