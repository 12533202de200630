"""Moderation Service - the reviewer's side of the affiliation workflow.

This service owns an administrative review session: the authorization
gate, the pending queue fetched from the record store, the currently
selected entry and the admin sub-state (LOGIN, LIST, DETAIL).

Moderation lifecycle per record:
    PENDING -> APPROVED | REJECTED (both terminal)

Rules:
1. AUTHORIZE FIRST - Every queue operation requires an authorized session
2. DECIDE ONCE - Only PENDING entries can be decided; the matrix is enforced
   on the domain record before the store is called
3. NO PARTIAL COMMIT - A store failure leaves queue, selection and sub-state
   exactly as they were
4. REMOVE, DON'T REFETCH - A decided entry leaves the local queue; other
   entries are never touched
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from src.application.ports.admin_authorizer import AdminAuthorizerProtocol
from src.application.ports.affiliation_record_store import (
    AffiliationRecordStoreProtocol,
)
from src.application.services.base import LoggingMixin
from src.domain.errors import (
    CollaboratorUnavailableError,
    InvalidModerationTransitionError,
    InvalidWorkflowTransitionError,
    RecordAlreadyDecidedError,
)
from src.domain.models.moderation import (
    DECISION_OUTCOMES,
    ModerationQueueEntry,
    ModerationStatus,
)
from src.domain.models.workflow_state import AdminSubState, ViewKind


class QueueRefreshOutcome(Enum):
    """Result of re-fetching the pending queue."""

    LOADED = "loaded"
    FAILED = "failed"
    BUSY = "busy"


class DecisionOutcome(Enum):
    """Result of a moderation decision."""

    DECIDED = "decided"
    ALREADY_DECIDED = "already_decided"
    NOT_FOUND = "not_found"
    FAILED = "failed"
    BUSY = "busy"


@dataclass(frozen=True)
class DecisionResult:
    """Outcome of decide().

    Attributes:
        outcome: What happened.
        entry_id: The entry the decision was issued for.
        status: The status the record now has (DECIDED), or the status
            another reviewer already gave it (ALREADY_DECIDED).
    """

    outcome: DecisionOutcome
    entry_id: str
    status: ModerationStatus | None = None

    @property
    def succeeded(self) -> bool:
        return self.outcome is DecisionOutcome.DECIDED


class ModerationService(LoggingMixin):
    """Administrative review session over the pending queue.

    Attributes:
        _record_store: Store holding submitted records.
        _authorizer: Reviewer authorization gate.
        _queue: Pending entries, in store order.
        _selected_id: Entry shown in DETAIL, if any.
        _sub_state: Current admin sub-state.
        _busy: Advisory flag set while a store call is outstanding.
    """

    def __init__(
        self,
        record_store: AffiliationRecordStoreProtocol,
        authorizer: AdminAuthorizerProtocol,
    ) -> None:
        """Initialize the moderation session.

        An already authorized reviewer starts in LIST; everyone else
        starts at LOGIN.

        Args:
            record_store: Store providing the pending queue and decisions.
            authorizer: External gate deciding who may review.
        """
        self._record_store = record_store
        self._authorizer = authorizer
        self._queue: list[ModerationQueueEntry] = []
        self._selected_id: str | None = None
        self._busy = False
        self._sub_state = (
            AdminSubState.LIST if authorizer.is_authorized() else AdminSubState.LOGIN
        )
        self._init_logger(component="moderation")

    @property
    def sub_state(self) -> AdminSubState:
        return self._sub_state

    @property
    def queue(self) -> tuple[ModerationQueueEntry, ...]:
        return tuple(self._queue)

    @property
    def selected(self) -> ModerationQueueEntry | None:
        if self._selected_id is None:
            return None
        return self._find(self._selected_id)

    @property
    def is_busy(self) -> bool:
        return self._busy

    @property
    def is_authorized(self) -> bool:
        return self._authorizer.is_authorized()

    def login(self, email: str, password: str) -> bool:
        """Open a reviewer session.

        The queue is not fetched here; call refresh() afterwards.

        Returns:
            True if the gate granted access (sub-state becomes LIST).
        """
        log = self._log_operation("login")
        if not self._authorizer.authenticate(email, password):
            log.info("admin_login_refused")
            return False

        self._sub_state = AdminSubState.LIST
        log.info("admin_login_granted")
        return True

    def logout(self) -> None:
        """Revoke authorization, drop the queue and return to LOGIN."""
        self._authorizer.revoke()
        self._queue = []
        self._selected_id = None
        self._sub_state = AdminSubState.LOGIN
        self._log_operation("logout").info("admin_logged_out")

    async def refresh(self) -> QueueRefreshOutcome:
        """Re-fetch the pending queue from the store.

        On success the selection is cleared and the sub-state becomes LIST.
        On a store failure the previous queue is kept.

        Raises:
            InvalidWorkflowTransitionError: If no reviewer is authorized.
        """
        self._require_authorized("refresh")
        log = self._log_operation("refresh")

        if self._busy:
            log.debug("refresh_rejected_busy")
            return QueueRefreshOutcome.BUSY

        self._busy = True
        try:
            records = await self._record_store.list_pending_records()
        except CollaboratorUnavailableError as e:
            log.warning("pending_queue_fetch_failed", error=str(e))
            return QueueRefreshOutcome.FAILED
        finally:
            self._busy = False

        self._queue = [
            ModerationQueueEntry(record=record)
            for record in records
            if record.record_id is not None
            and record.moderation_status is ModerationStatus.PENDING
        ]
        self._selected_id = None
        self._sub_state = AdminSubState.LIST
        log.info("pending_queue_loaded", entry_count=len(self._queue))
        return QueueRefreshOutcome.LOADED

    def select(self, entry_id: str) -> ModerationQueueEntry | None:
        """Open an entry in DETAIL.

        Returns:
            The selected entry, or None (state unchanged) if it is not queued.

        Raises:
            InvalidWorkflowTransitionError: If no reviewer is authorized.
        """
        self._require_authorized("select")
        entry = self._find(entry_id)
        if entry is None:
            self._log_operation("select", entry_id=entry_id).debug("entry_not_queued")
            return None

        self._selected_id = entry_id
        self._sub_state = AdminSubState.DETAIL
        return entry

    def clear_selection(self) -> None:
        """Leave DETAIL and go back to LIST."""
        self._require_authorized("clear_selection")
        self._selected_id = None
        self._sub_state = AdminSubState.LIST

    async def decide(
        self,
        entry_id: str,
        outcome: ModerationStatus,
        reason: str | None = None,
    ) -> DecisionResult:
        """Approve or reject a pending entry.

        Reviewer confirmation is the caller's responsibility. On success
        exactly the matching entry leaves the queue, the selection is
        cleared and the sub-state returns to LIST. An entry another reviewer
        decided in the meantime leaves the queue the same way and is
        reported as ALREADY_DECIDED.

        Args:
            entry_id: Identifier of the queued record.
            outcome: APPROVED or REJECTED.
            reason: Optional reviewer note passed to the store.

        Returns:
            DecisionResult describing the outcome.

        Raises:
            InvalidWorkflowTransitionError: If no reviewer is authorized.
            InvalidModerationTransitionError: If outcome is not a decision.
        """
        self._require_authorized("decide")
        log = self._log_operation("decide", entry_id=entry_id, outcome=outcome.value)

        if outcome not in DECISION_OUTCOMES:
            raise InvalidModerationTransitionError(
                from_status=ModerationStatus.PENDING,
                to_status=outcome,
                allowed_transitions=list(DECISION_OUTCOMES),
            )

        if self._busy:
            log.debug("decision_rejected_busy")
            return DecisionResult(outcome=DecisionOutcome.BUSY, entry_id=entry_id)

        entry = self._find(entry_id)
        if entry is None:
            log.info("decision_entry_not_queued")
            return DecisionResult(outcome=DecisionOutcome.NOT_FOUND, entry_id=entry_id)

        decided = entry.record.with_moderation_status(outcome)

        self._busy = True
        try:
            stored = await self._record_store.decide_record(entry_id, outcome, reason)
        except CollaboratorUnavailableError as e:
            log.warning("decision_persist_failed", error=str(e))
            return DecisionResult(outcome=DecisionOutcome.FAILED, entry_id=entry_id)
        except RecordAlreadyDecidedError as e:
            log.info("decision_superseded", decided_status=e.terminal_status.value)
            self._drop(entry_id)
            return DecisionResult(
                outcome=DecisionOutcome.ALREADY_DECIDED,
                entry_id=entry_id,
                status=e.terminal_status,
            )
        finally:
            self._busy = False

        if not stored:
            log.warning("decision_record_missing_in_store")
            return DecisionResult(outcome=DecisionOutcome.NOT_FOUND, entry_id=entry_id)

        self._drop(entry_id)
        log.info("decision_recorded", remaining=len(self._queue))
        return DecisionResult(
            outcome=DecisionOutcome.DECIDED,
            entry_id=entry_id,
            status=decided.moderation_status,
        )

    def _session_log_context(self) -> dict[str, object]:
        return {"sub_state": self._sub_state.value, "queue_size": len(self._queue)}

    def _drop(self, entry_id: str) -> None:
        self._queue = [e for e in self._queue if e.entry_id != entry_id]
        self._selected_id = None
        self._sub_state = AdminSubState.LIST

    def _find(self, entry_id: str) -> ModerationQueueEntry | None:
        for entry in self._queue:
            if entry.entry_id == entry_id:
                return entry
        return None

    def _require_authorized(self, operation: str) -> None:
        if self._sub_state is AdminSubState.LOGIN or not self._authorizer.is_authorized():
            raise InvalidWorkflowTransitionError(operation, ViewKind.ADMIN)
