"""Affiliation Workflow Service - the enrollment session state machine.

This service owns one enrollment session: the current view, the current
form step, the create/update mode flag, the record under edit and the
persistent validation error map.

Views (tagged union, see src.domain.models.workflow_state):
    Home | UpdateAuth | MemberPanel | Form(step) | Success | Admin(sub_state)

Transitions:
- start_enrollment: Home -> Form(1), empty record, create mode
- start_update: Home -> UpdateAuth
- authenticate / authenticate_with_biometrics: UpdateAuth -> MemberPanel
  (update mode) when the member exists (and the biometric gate passes)
- edit_section(step): MemberPanel -> Form(step)
- advance: validates the current step, then Form(n) -> Form(n+1), or
  Form -> MemberPanel in update mode, or Form(6) -> Success after storing
  a new enrollment
- retreat: Form -> MemberPanel (update mode), Form(n-1) or Home
- submit_for_review: MemberPanel -> Success (update mode only)
- enter_admin: Home -> Admin
- exit_to_home: anything -> Home, record kept

Rules:
1. MATRIX FIRST - Every view change goes through VIEW_TRANSITION_MATRIX;
   calling an operation from the wrong view raises
   InvalidWorkflowTransitionError
2. VALIDATION IS DATA - Step failures come back as outcomes plus the error
   map, never as exceptions
3. NO PARTIAL COMMIT - Collaborator failures leave state, record and errors
   exactly as they were before the call
4. ONE CALL IN FLIGHT - While a collaborator call is outstanding, is_busy is
   True and async operations return BUSY
5. NOTIFY AFTER COMMIT - The welcome message goes out after the enrollment is
   stored; its failure is logged and never undoes the submission
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from src.application.ports.affiliation_record_store import (
    AffiliationRecordStoreProtocol,
)
from src.application.ports.biometric_verifier import BiometricVerifierProtocol
from src.application.ports.time_authority import TimeAuthorityProtocol
from src.application.ports.welcome_notifier import WelcomeNotifierProtocol
from src.application.services.base import LoggingMixin
from src.application.services.moderation_service import ModerationService
from src.config.workflow_config import (
    DEFAULT_AFFILIATION_WORKFLOW_CONFIG,
    AffiliationWorkflowConfig,
)
from src.domain.errors import (
    CollaboratorUnavailableError,
    IdentityFieldLockedError,
    InvalidWorkflowTransitionError,
)
from src.domain.models.affiliation_record import (
    CANDIDACY_FIELDS,
    IDENTITY_FIELDS,
    AffiliationRecord,
)
from src.domain.models.form_step import FormStep
from src.domain.models.moderation import ModerationStatus
from src.domain.models.validation import StepFailureReason, ValidationErrors
from src.domain.models.workflow_state import (
    AdminView,
    FormView,
    HomeView,
    MemberPanelView,
    SuccessView,
    UpdateAuthView,
    ViewKind,
    WorkflowState,
    WorkflowView,
    can_transition,
)
from src.domain.services.candidacy_eligibility import (
    ElectionCycleRules,
    eligible_election_years,
    reconcile_election_year,
)
from src.domain.services.field_validators import (
    is_valid_document_number,
    normalize_document_number,
)
from src.domain.services.step_validation import (
    StepValidationRules,
    merge_step_errors,
    validate_step,
)

DEFAULT_SUCCESS_MESSAGE = (
    "Seus dados foram processados com sucesso. "
    "Enviamos a ficha de filiação para o seu e-mail."
)


class AuthenticationOutcome(Enum):
    """Result of a member authentication attempt."""

    AUTHENTICATED = "authenticated"
    INVALID_DOCUMENT = "invalid_document"
    NOT_FOUND = "not_found"
    BIOMETRIC_FAILED = "biometric_failed"
    UNAVAILABLE = "unavailable"
    BUSY = "busy"


class AdvanceOutcome(Enum):
    """Result of advance()."""

    ADVANCED = "advanced"
    RETURNED_TO_PANEL = "returned_to_panel"
    SUBMITTED = "submitted"
    VALIDATION_FAILED = "validation_failed"
    SUBMISSION_FAILED = "submission_failed"
    BUSY = "busy"


class ReviewSubmissionOutcome(Enum):
    """Result of submit_for_review()."""

    SUBMITTED = "submitted"
    FAILED = "failed"
    BUSY = "busy"


@dataclass(frozen=True)
class AuthenticationResult:
    """Outcome of authenticate() / authenticate_with_biometrics().

    Attributes:
        outcome: What happened.
        state: Session state after the call.
    """

    outcome: AuthenticationOutcome
    state: WorkflowState

    @property
    def succeeded(self) -> bool:
        return self.outcome is AuthenticationOutcome.AUTHENTICATED


@dataclass(frozen=True)
class AdvanceResult:
    """Outcome of advance().

    Attributes:
        outcome: What happened.
        state: Session state after the call.
        errors: Snapshot of the persistent error map after the call.
        failure_reason: Why the step failed (VALIDATION_FAILED only).
    """

    outcome: AdvanceOutcome
    state: WorkflowState
    errors: ValidationErrors
    failure_reason: StepFailureReason | None = None

    @property
    def succeeded(self) -> bool:
        return self.outcome in (
            AdvanceOutcome.ADVANCED,
            AdvanceOutcome.RETURNED_TO_PANEL,
            AdvanceOutcome.SUBMITTED,
        )


@dataclass(frozen=True)
class ReviewSubmissionResult:
    """Outcome of submit_for_review().

    Attributes:
        outcome: What happened.
        message: Confirmation text from the store (SUBMITTED only).
    """

    outcome: ReviewSubmissionOutcome
    message: str = ""


def build_step_validation_rules(config: AffiliationWorkflowConfig) -> StepValidationRules:
    """Translate workflow configuration into domain validation rules."""
    return StepValidationRules(
        min_age=config.min_age,
        max_age=config.max_age,
        name_min_length=config.name_min_length,
        name_max_length=config.name_max_length,
        require_signature=config.require_signature,
        election_cycles=ElectionCycleRules(
            municipal_base_year=config.municipal_base_year,
            general_base_year=config.general_base_year,
            cycle_years=config.cycle_years,
            cutoff_month=config.cutoff_month,
            cutoff_day=config.cutoff_day,
        ),
    )


class AffiliationWorkflowService(LoggingMixin):
    """State machine for one enrollment session.

    Attributes:
        _record_store: Store for lookups and submissions.
        _time: Reference clock for age and eligibility checks.
        _biometric_verifier: Optional biometric gate for the update path.
        _welcome_notifier: Optional notifier for new enrollments.
        _moderation: Optional moderation session backing the Admin view.
        _rules: Validation rules derived from configuration.
        _state: Current navigation state.
        _record: Record under edit.
        _errors: Persistent validation error map.
        _busy: Advisory flag set while a collaborator call is outstanding.
    """

    def __init__(
        self,
        record_store: AffiliationRecordStoreProtocol,
        time_authority: TimeAuthorityProtocol,
        biometric_verifier: BiometricVerifierProtocol | None = None,
        welcome_notifier: WelcomeNotifierProtocol | None = None,
        moderation: ModerationService | None = None,
        config: AffiliationWorkflowConfig = DEFAULT_AFFILIATION_WORKFLOW_CONFIG,
    ) -> None:
        """Initialize a session in {Home, step 1, create mode}.

        Args:
            record_store: Store for member lookup and record submission.
            time_authority: Reference clock (inject a fake in tests).
            biometric_verifier: Biometric gate. If None, biometric
                authentication reports UNAVAILABLE.
            welcome_notifier: Notifier for new enrollments. If None, the
                welcome message is skipped.
            moderation: Moderation session reported as the Admin sub-state.
            config: Business-rule parameters.
        """
        self._record_store = record_store
        self._time = time_authority
        self._biometric_verifier = biometric_verifier
        self._welcome_notifier = welcome_notifier
        self._moderation = moderation
        self._rules = build_step_validation_rules(config)
        self._state = WorkflowState()
        self._record = AffiliationRecord()
        self._errors: ValidationErrors = {}
        self._busy = False
        self._init_logger(component="affiliation")

    # =========================================================================
    # Read-only session view
    # =========================================================================

    @property
    def state(self) -> WorkflowState:
        """Current session state.

        While in Admin, the sub-state is read from the moderation session.
        """
        if self._state.kind is ViewKind.ADMIN and self._moderation is not None:
            return replace(
                self._state, view=AdminView(sub_state=self._moderation.sub_state)
            )
        return self._state

    @property
    def record(self) -> AffiliationRecord:
        return self._record

    @property
    def errors(self) -> ValidationErrors:
        return dict(self._errors)

    @property
    def is_busy(self) -> bool:
        return self._busy

    @property
    def moderation(self) -> ModerationService | None:
        return self._moderation

    @property
    def available_election_years(self) -> list[str]:
        """Eligible election years for the current office, as of today."""
        if not self._record.is_candidate:
            return []
        return self._eligible_years(self._record)

    # =========================================================================
    # Synchronous transitions
    # =========================================================================

    def start_enrollment(self) -> WorkflowState:
        """Begin a new enrollment: empty record, create mode, step 1."""
        self._require_view("start_enrollment", ViewKind.HOME)
        self._move(
            "start_enrollment",
            FormView(step=FormStep.PERSONAL),
            current_step=FormStep.PERSONAL,
            is_update_mode=False,
        )
        self._record = AffiliationRecord()
        self._errors = {}
        self._log_operation("start_enrollment").info("enrollment_started")
        return self._state

    def start_update(self) -> WorkflowState:
        """Go to the member identification screen."""
        self._require_view("start_update", ViewKind.HOME)
        self._move("start_update", UpdateAuthView())
        return self._state

    def enter_admin(self) -> WorkflowState:
        """Open the administrative area."""
        self._require_view("enter_admin", ViewKind.HOME)
        self._move("enter_admin", AdminView())
        return self.state

    def edit_section(self, step: FormStep | int) -> WorkflowState:
        """Open one form step from the member panel (update mode kept)."""
        self._require_view("edit_section", ViewKind.MEMBER_PANEL)
        target = FormStep(step)
        self._move("edit_section", FormView(step=target), current_step=target)
        return self._state

    def retreat(self) -> WorkflowState:
        """Go back one step, to the member panel, or home."""
        self._require_view("retreat", ViewKind.FORM)
        step = self._state.current_step
        if self._state.is_update_mode:
            self._move("retreat", MemberPanelView())
        elif not step.is_first:
            previous = step.previous()
            self._move("retreat", FormView(step=previous), current_step=previous)
        else:
            self._move("retreat", HomeView())
        return self._state

    def exit_to_home(self) -> WorkflowState:
        """Return home from any view. The record is kept."""
        self._move("exit_to_home", HomeView())
        return self._state

    def update_data(self, **changes: Any) -> AffiliationRecord:
        """Merge a partial change into the record under edit.

        Every key in changes is cleared from the error map. Candidacy
        fields stay blank while the candidacy flag is off; changing the flag
        or the office reconciles the declared election year. Changing the
        electoral state clears the electoral city unless the same change
        sets it.

        Returns:
            The updated record.

        Raises:
            InvalidWorkflowTransitionError: If no form step is open.
            IdentityFieldLockedError: If an identity field would change in
                update mode. Nothing is applied.
            TypeError: If a key is not a record attribute.
        """
        self._require_view("update_data", ViewKind.FORM)
        current = self._record

        unknown = set(changes) - AffiliationRecord.field_names()
        if unknown:
            raise TypeError(f"Unknown record fields: {', '.join(sorted(unknown))}")

        if self._state.is_update_mode:
            locked = current.changed_fields(changes) & IDENTITY_FIELDS
            if locked:
                raise IdentityFieldLockedError(sorted(locked))

        effective = dict(changes)
        if (
            "electoral_state" in effective
            and effective["electoral_state"] != current.electoral_state
            and "electoral_city" not in effective
        ):
            effective["electoral_city"] = ""

        updated = current.with_changes(**effective)
        if not updated.is_candidate:
            updated = updated.with_changes(**dict.fromkeys(CANDIDACY_FIELDS, ""))
        if {"is_candidate", "elective_office"} & set(effective) and updated.is_candidate:
            years = self._eligible_years(updated)
            updated = updated.with_changes(
                election_year=reconcile_election_year(updated, years)
            )

        cleared = set(changes) | current.changed_fields(
            {name: getattr(updated, name) for name in AffiliationRecord.field_names()}
        )
        self._errors = {
            name: message for name, message in self._errors.items() if name not in cleared
        }
        self._record = updated
        return updated

    # =========================================================================
    # Collaborator-backed transitions
    # =========================================================================

    async def authenticate(self, document_number: str) -> AuthenticationResult:
        """Look a member up by document number and open the member panel.

        Returns:
            AuthenticationResult. Only AUTHENTICATED changes state.

        Raises:
            InvalidWorkflowTransitionError: If not on the identification screen.
        """
        return await self._authenticate("authenticate", document_number, biometric=False)

    async def authenticate_with_biometrics(self, document_number: str) -> AuthenticationResult:
        """Look a member up, then require the biometric gate to pass.

        Returns:
            AuthenticationResult. Only AUTHENTICATED changes state.

        Raises:
            InvalidWorkflowTransitionError: If not on the identification screen.
        """
        return await self._authenticate(
            "authenticate_with_biometrics", document_number, biometric=True
        )

    async def advance(self) -> AdvanceResult:
        """Validate the current step and move forward.

        Returns:
            AdvanceResult with the outcome, new state and error map.

        Raises:
            InvalidWorkflowTransitionError: If no form step is open.
        """
        self._require_view("advance", ViewKind.FORM)
        step = self._state.current_step
        log = self._log_operation("advance")

        if self._busy:
            log.debug("advance_rejected_busy")
            return self._advance_result(AdvanceOutcome.BUSY)

        result = validate_step(
            self._record,
            step,
            self._state.is_update_mode,
            self._time.today(),
            self._rules,
        )
        merged = merge_step_errors(self._errors, step, result)

        if not result.passed:
            self._errors = merged
            log.info(
                "step_validation_failed",
                failure_reason=result.failure_reason.value if result.failure_reason else None,
                error_fields=sorted(result.errors),
            )
            return self._advance_result(
                AdvanceOutcome.VALIDATION_FAILED, failure_reason=result.failure_reason
            )

        if self._state.is_update_mode:
            self._move("advance", MemberPanelView())
            self._errors = merged
            log.info("step_saved_returned_to_panel")
            return self._advance_result(AdvanceOutcome.RETURNED_TO_PANEL)

        if not step.is_last:
            next_step = step.next()
            self._move("advance", FormView(step=next_step), current_step=next_step)
            self._errors = merged
            log.debug("step_advanced", next_step=int(next_step))
            return self._advance_result(AdvanceOutcome.ADVANCED)

        return await self._submit_enrollment(merged)

    async def submit_for_review(self) -> ReviewSubmissionResult:
        """Post the edited member record for review and show the confirmation.

        Raises:
            InvalidWorkflowTransitionError: If not on the member panel in
                update mode.
        """
        self._require_view("submit_for_review", ViewKind.MEMBER_PANEL)
        if not self._state.is_update_mode:
            raise InvalidWorkflowTransitionError("submit_for_review", self._state.kind)
        log = self._log_operation("submit_for_review", record_id=self._record.record_id)

        if self._busy:
            log.debug("review_submission_rejected_busy")
            return ReviewSubmissionResult(outcome=ReviewSubmissionOutcome.BUSY)

        self._busy = True
        try:
            receipt = await self._record_store.submit_updated_record(self._record)
        except CollaboratorUnavailableError as e:
            log.warning("review_submission_failed", error=str(e))
            return ReviewSubmissionResult(outcome=ReviewSubmissionOutcome.FAILED)
        finally:
            self._busy = False

        message = receipt.message or DEFAULT_SUCCESS_MESSAGE
        self._move("submit_for_review", SuccessView(message=message))
        log.info("review_submission_completed", record_id=receipt.record_id)
        return ReviewSubmissionResult(
            outcome=ReviewSubmissionOutcome.SUBMITTED, message=message
        )

    # =========================================================================
    # Internals
    # =========================================================================

    async def _authenticate(
        self, operation: str, document_number: str, biometric: bool
    ) -> AuthenticationResult:
        self._require_view(operation, ViewKind.UPDATE_AUTH)
        log = self._log_operation(operation)

        if self._busy:
            log.debug("authentication_rejected_busy")
            return self._auth_result(AuthenticationOutcome.BUSY)

        if not is_valid_document_number(document_number):
            log.info("authentication_invalid_document")
            return self._auth_result(AuthenticationOutcome.INVALID_DOCUMENT)

        verifier = self._biometric_verifier if biometric else None
        if biometric and verifier is None:
            log.warning("biometric_verifier_not_configured")
            return self._auth_result(AuthenticationOutcome.UNAVAILABLE)

        normalized = normalize_document_number(document_number)
        self._busy = True
        try:
            found = await self._record_store.lookup_by_document_number(normalized)
            if found is None:
                log.info("authentication_member_not_found")
                return self._auth_result(AuthenticationOutcome.NOT_FOUND)
            if verifier is not None and not await verifier.verify(normalized):
                log.info("authentication_biometric_refused")
                return self._auth_result(AuthenticationOutcome.BIOMETRIC_FAILED)
        except CollaboratorUnavailableError as e:
            log.warning("authentication_collaborator_failed", error=str(e))
            return self._auth_result(AuthenticationOutcome.UNAVAILABLE)
        finally:
            self._busy = False

        self._move(
            operation,
            MemberPanelView(),
            current_step=FormStep.PERSONAL,
            is_update_mode=True,
        )
        self._record = found
        self._errors = {}
        log.info("member_authenticated", record_id=found.record_id)
        return self._auth_result(AuthenticationOutcome.AUTHENTICATED)

    async def _submit_enrollment(self, merged: ValidationErrors) -> AdvanceResult:
        log = self._log_operation("submit_enrollment")
        record = self._record

        self._busy = True
        try:
            try:
                receipt = await self._record_store.submit_new_record(record)
            except CollaboratorUnavailableError as e:
                log.warning("enrollment_submission_failed", error=str(e))
                return self._advance_result(AdvanceOutcome.SUBMISSION_FAILED)

            self._move("advance", SuccessView(message=DEFAULT_SUCCESS_MESSAGE))
            self._errors = merged
            self._record = record.with_changes(
                record_id=receipt.record_id,
                moderation_status=ModerationStatus.PENDING,
            )
            log.info("enrollment_submitted", record_id=receipt.record_id)

            # Welcome message errors are logged but don't fail the submission
            if self._welcome_notifier is not None:
                try:
                    await self._welcome_notifier.send_welcome(self._record)
                    log.debug("welcome_notification_sent")
                except Exception as e:
                    log.warning("welcome_notification_failed", error=str(e))
        finally:
            self._busy = False

        return self._advance_result(AdvanceOutcome.SUBMITTED)

    def _eligible_years(self, record: AffiliationRecord) -> list[str]:
        return eligible_election_years(
            record.elective_office, self._time.today(), self._rules.election_cycles
        )

    def _session_log_context(self) -> dict[str, object]:
        context: dict[str, object] = {
            "view": self._state.kind.value,
            "is_update_mode": self._state.is_update_mode,
        }
        if self._state.kind is ViewKind.FORM:
            context["step"] = int(self._state.current_step)
        return context

    def _require_view(self, operation: str, *allowed: ViewKind) -> None:
        if self._state.kind not in allowed:
            raise InvalidWorkflowTransitionError(operation, self._state.kind)

    def _move(
        self,
        operation: str,
        view: WorkflowView,
        current_step: FormStep | None = None,
        is_update_mode: bool | None = None,
    ) -> None:
        from_kind = self._state.kind
        if not can_transition(from_kind, view.kind):
            raise InvalidWorkflowTransitionError(operation, from_kind, view.kind)
        self._state = WorkflowState(
            view=view,
            current_step=(
                current_step if current_step is not None else self._state.current_step
            ),
            is_update_mode=(
                is_update_mode
                if is_update_mode is not None
                else self._state.is_update_mode
            ),
        )

    def _auth_result(self, outcome: AuthenticationOutcome) -> AuthenticationResult:
        return AuthenticationResult(outcome=outcome, state=self._state)

    def _advance_result(
        self,
        outcome: AdvanceOutcome,
        failure_reason: StepFailureReason | None = None,
    ) -> AdvanceResult:
        return AdvanceResult(
            outcome=outcome,
            state=self._state,
            errors=dict(self._errors),
            failure_reason=failure_reason,
        )
