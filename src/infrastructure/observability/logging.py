"""Structured logging configuration with structlog.

Production renders one JSON object per line; development renders colored
console output. Every entry carries the correlation id of the current
user interaction, and applicant personal data never reaches the output.

Log Entry Format:
    {
        "timestamp": "2024-08-15T12:00:00.000000Z",
        "level": "info",
        "event": "step_validation_failed",
        "correlation_id": "uuid",
        "service": "AffiliationWorkflowService",
        "component": "affiliation",
        ...additional context
    }

Usage:
    from src.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")  # JSON output
    configure_structlog(environment="development")  # Console output
"""

import logging
import os
from typing import Any, cast

import structlog
from structlog.typing import Processor

from src.infrastructure.observability.correlation import correlation_id_processor

# Environment variable for log level (default: INFO)
LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

REDACTED = "[REDACTED]"

# Applicant personal data, in both attribute and wire spelling
SENSITIVE_LOG_KEYS = frozenset(
    {
        "document_number",
        "cpf",
        "email",
        "phone",
        "birth_date",
        "birthDate",
        "mother_name",
        "motherName",
        "voter_registration_number",
        "voterTitle",
        "password",
        "recipient",
    }
)


def _get_log_level() -> int:
    """Get the configured log level from environment.

    Unknown level names fall back to INFO.
    """
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = getattr(logging, level_name, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


def redact_sensitive_fields(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Replace applicant personal data in the event with a placeholder."""
    for key in SENSITIVE_LOG_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


def configure_structlog(environment: str = "production") -> None:
    """Configure structlog for the application.

    Should be called once at application startup.

    Args:
        environment: 'production' for JSON output, anything else for
                    colored console output. Defaults to 'production'.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, correlation_id_processor),
        cast(Processor, redact_sensitive_fields),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    final_processor: Processor
    if environment == "production":
        final_processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[*shared_processors, final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger_for_service(
    service_name: str, component: str = "affiliation"
) -> structlog.BoundLogger:
    """Get a logger with service name and component already bound.

    For code that cannot use LoggingMixin (module-level helpers, stubs).
    """
    return structlog.get_logger().bind(
        service=service_name,
        component=component,
    )
