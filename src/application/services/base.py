"""Session logging mixin for the workflow and moderation services.

Every operation log entry carries the service name, the correlation id
of the current user interaction and a snapshot of the session it ran in
(current view, form step, create/update mode, or the reviewer
sub-state), so a single session can be followed through the log.

Usage:
    class ReviewSession(LoggingMixin):
        def __init__(self) -> None:
            self._init_logger(component="moderation")

        def _session_log_context(self) -> dict[str, object]:
            return {"sub_state": self._sub_state.value}

        async def refresh(self) -> None:
            log = self._log_operation("refresh")
            log.info("pending_queue_loaded", entry_count=2)
"""

import structlog

from src.infrastructure.observability.correlation import get_correlation_id


class LoggingMixin:
    """Mixin providing session-aware structured logging for services.

    Attributes:
        _log: Logger bound with service and component.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "affiliation") -> None:
        """Bind the service name and component. Call from __init__."""
        self._log = structlog.get_logger().bind(
            service=self.__class__.__name__,
            component=component,
        )

    def _session_log_context(self) -> dict[str, object]:
        """Session fields bound to every operation entry.

        Services override this to report where the session currently is.
        The snapshot is taken when the operation logger is created.
        """
        return {}

    def _log_operation(
        self,
        operation: str,
        **context: object,
    ) -> structlog.BoundLogger:
        """Create an operation-scoped logger.

        Binds the operation name, the correlation id and the session
        snapshot; explicit context wins over session fields of the same name.

        Example:
            log = self._log_operation("advance", step=2)
            log.info("step_validation_failed", error_count=3)
        """
        bound = {**self._session_log_context(), **context}
        return self._log.bind(
            operation=operation,
            correlation_id=get_correlation_id(),
            **bound,
        )
