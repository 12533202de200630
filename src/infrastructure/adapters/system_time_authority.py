"""System clock adapter for TimeAuthorityProtocol.

The only place in the code base allowed to read the wall clock. Tests
use FakeTimeAuthority instead.
"""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo

from src.application.ports.time_authority import TimeAuthorityProtocol


class SystemTimeAuthority(TimeAuthorityProtocol):
    """Wall-clock time authority.

    Attributes:
        _tz: Timezone "today" is evaluated in. Age and candidacy cutoffs
            are calendar-day rules, so deployments should pass the
            applicants' local zone.
    """

    def __init__(self, tz: tzinfo = timezone.utc) -> None:
        self._tz = tz

    def now(self) -> datetime:
        return datetime.now(self._tz)
