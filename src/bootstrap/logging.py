"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

import os

from src.infrastructure.observability import configure_structlog as _configure_structlog

ENVIRONMENT_ENV = "ENVIRONMENT"
DEFAULT_ENVIRONMENT = "production"


def configure_structlog(environment: str | None = None) -> str:
    """Configure structlog for the given environment.

    Args:
        environment: 'production' or 'development'. Read from the
            ENVIRONMENT variable when not given.

    Returns:
        The environment logging was configured for.
    """
    resolved = environment or os.environ.get(ENVIRONMENT_ENV, DEFAULT_ENVIRONMENT)
    _configure_structlog(environment=resolved)
    return resolved


__all__ = ["configure_structlog"]
