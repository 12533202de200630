"""Unit tests for structured logging and correlation IDs.

Tests the structlog configuration, the service logger helpers and the
contextvar-based correlation ID.
"""

from __future__ import annotations

import asyncio
import json
import os
import re
from collections.abc import Iterator
from unittest.mock import patch

import pytest
import structlog

from src.application.services.affiliation_workflow_service import (
    AffiliationWorkflowService,
)
from src.application.services.base import LoggingMixin
from src.application.services.moderation_service import ModerationService
from src.infrastructure.observability import (
    configure_structlog,
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    get_logger_for_service,
    redact_sensitive_fields,
    set_correlation_id,
)
from src.infrastructure.stubs.admin_authorizer_stub import AdminAuthorizerStub
from src.infrastructure.stubs.affiliation_record_store_stub import (
    AffiliationRecordStoreStub,
)
from tests.helpers.fake_time_authority import FakeTimeAuthority


@pytest.fixture(autouse=True)
def clean_logging_state() -> Iterator[None]:
    set_correlation_id("")
    yield
    set_correlation_id("")
    structlog.reset_defaults()


def last_json_line(output: str) -> dict[str, object]:
    lines = [line for line in output.strip().splitlines() if line]
    return json.loads(lines[-1])


class _ReviewSession(LoggingMixin):
    def __init__(self) -> None:
        self._init_logger(component="moderation")

    def run(self) -> None:
        self._log_operation("run", entry_id="pend_1").info("session_ran")


class _DetailSession(_ReviewSession):
    def _session_log_context(self) -> dict[str, object]:
        return {"sub_state": "detail", "entry_id": "pend_2"}


class TestConfigureStructlog:
    """Tests for configure_structlog."""

    def test_production_renders_json(self) -> None:
        configure_structlog(environment="production")
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_development_renders_console(self) -> None:
        configure_structlog(environment="development")
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_correlation_processor_installed(self) -> None:
        configure_structlog()
        assert correlation_id_processor in structlog.get_config()["processors"]

    def test_log_level_from_environment(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Entries below LOG_LEVEL are dropped."""
        with patch.dict(os.environ, {"LOG_LEVEL": "WARNING"}):
            configure_structlog(environment="production")
        logger = get_logger_for_service("FilteredService")

        logger.info("filtered_out")

        assert capsys.readouterr().out.strip() == ""


class TestLogOutput:
    """Tests for the JSON entry layout."""

    def test_service_logger_entry(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_structlog(environment="production")
        set_correlation_id("session-42")

        get_logger_for_service("AffiliationRecordStoreStub").info(
            "record_stored", record_id="rec-1"
        )

        entry = last_json_line(capsys.readouterr().out)
        assert entry["event"] == "record_stored"
        assert entry["level"] == "info"
        assert entry["service"] == "AffiliationRecordStoreStub"
        assert entry["component"] == "affiliation"
        assert entry["correlation_id"] == "session-42"
        assert entry["record_id"] == "rec-1"
        assert "T" in str(entry["timestamp"])

    def test_logging_mixin_binds_operation(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_structlog(environment="production")
        set_correlation_id("session-7")

        _ReviewSession().run()

        entry = last_json_line(capsys.readouterr().out)
        assert entry["service"] == "_ReviewSession"
        assert entry["component"] == "moderation"
        assert entry["operation"] == "run"
        assert entry["entry_id"] == "pend_1"
        assert entry["correlation_id"] == "session-7"


class TestSessionContext:
    """Operation entries carry a snapshot of the session."""

    def test_session_fields_are_bound(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_structlog(environment="production")

        _DetailSession().run()

        entry = last_json_line(capsys.readouterr().out)
        assert entry["sub_state"] == "detail"

    def test_explicit_context_wins(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_structlog(environment="production")

        _DetailSession().run()

        entry = last_json_line(capsys.readouterr().out)
        assert entry["entry_id"] == "pend_1"

    def test_workflow_entries_report_view_and_step(
        self,
        capsys: pytest.CaptureFixture[str],
        record_store: AffiliationRecordStoreStub,
        fake_time_authority: FakeTimeAuthority,
    ) -> None:
        configure_structlog(environment="production")
        service = AffiliationWorkflowService(
            record_store=record_store, time_authority=fake_time_authority
        )

        service.start_enrollment()

        entry = last_json_line(capsys.readouterr().out)
        assert entry["event"] == "enrollment_started"
        assert entry["view"] == "form"
        assert entry["step"] == 1
        assert entry["is_update_mode"] is False

    def test_moderation_entries_report_sub_state(
        self,
        capsys: pytest.CaptureFixture[str],
        record_store: AffiliationRecordStoreStub,
        admin_authorizer: AdminAuthorizerStub,
    ) -> None:
        configure_structlog(environment="production")
        service = ModerationService(record_store=record_store, authorizer=admin_authorizer)

        service.logout()

        entry = last_json_line(capsys.readouterr().out)
        assert entry["event"] == "admin_logged_out"
        assert entry["sub_state"] == "login"
        assert entry["queue_size"] == 0


class TestRedaction:
    """Applicant personal data is masked in log entries."""

    def test_sensitive_keys_are_redacted(self) -> None:
        event = redact_sensitive_fields(
            None,
            "info",
            {"event": "lookup", "cpf": "12345678909", "email": "a@b.com", "record_id": "r1"},
        )

        assert event == {
            "event": "lookup",
            "cpf": "[REDACTED]",
            "email": "[REDACTED]",
            "record_id": "r1",
        }

    def test_redaction_applies_to_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_structlog(environment="production")

        get_logger_for_service("RedactedService").info(
            "member_lookup", document_number="123.456.789-09"
        )

        output = capsys.readouterr().out
        assert "123.456.789-09" not in output
        assert last_json_line(output)["document_number"] == "[REDACTED]"


class TestCorrelationId:
    """Tests for correlation ID management."""

    def test_generated_ids_are_unique_uuid4(self) -> None:
        pattern = re.compile(
            r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
        )
        ids = {generate_correlation_id() for _ in range(50)}
        assert len(ids) == 50
        assert all(pattern.match(value) for value in ids)

    def test_empty_by_default(self) -> None:
        assert get_correlation_id() == ""

    @pytest.mark.asyncio
    async def test_isolated_between_sessions(self) -> None:
        """Concurrent sessions each keep their own ID across awaits."""
        seen: dict[str, str] = {}

        async def session(name: str) -> None:
            set_correlation_id(f"id-{name}")
            await asyncio.sleep(0.01)
            seen[name] = get_correlation_id()

        await asyncio.gather(session("a"), session("b"), session("c"))

        assert seen == {"a": "id-a", "b": "id-b", "c": "id-c"}

    def test_processor_adds_id_when_set(self) -> None:
        set_correlation_id("proc-id")
        result = correlation_id_processor(None, "info", {"event": "x"})
        assert result == {"event": "x", "correlation_id": "proc-id"}

    def test_processor_skips_empty_id(self) -> None:
        result = correlation_id_processor(None, "info", {"event": "x"})
        assert "correlation_id" not in result
