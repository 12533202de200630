"""Test helpers for affiliation workflow tests.

This package contains reusable test utilities and fake implementations
for dependency injection in unit tests.

Helpers:
    FakeTimeAuthority: Controllable time authority for deterministic tests
    complete_record: Record that passes every form step

Usage:
    from tests.helpers import FakeTimeAuthority
"""

from tests.helpers.fake_time_authority import FakeTimeAuthority
from tests.helpers.records import complete_record, step_values

__all__ = ["FakeTimeAuthority", "complete_record", "step_values"]
