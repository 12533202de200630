"""Observability infrastructure for structured logging and correlation.

This module provides cross-cutting observability concerns:
- Structured JSON logging with structlog
- Correlation ID management via contextvars

Usage:
    from src.infrastructure.observability import (
        configure_structlog,
        set_correlation_id,
    )

    # At startup
    configure_structlog(environment="production")

    # Per user interaction
    set_correlation_id(generate_correlation_id())
"""

from src.infrastructure.observability.correlation import (
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from src.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_service,
    redact_sensitive_fields,
)

__all__: list[str] = [
    "configure_structlog",
    "correlation_id_processor",
    "generate_correlation_id",
    "get_correlation_id",
    "get_logger_for_service",
    "redact_sensitive_fields",
    "set_correlation_id",
]
