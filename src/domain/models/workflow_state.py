"""Workflow view state for an enrollment session.

The session view is a tagged union of frozen dataclasses, one per view:

    HomeView | UpdateAuthView | MemberPanelView | FormView(step)
    | SuccessView(message) | AdminView(sub_state)

Each variant carries a ViewKind tag. VIEW_TRANSITION_MATRIX lists the
view kinds reachable from each kind; the workflow service routes every
transition through it. HOME is reachable from everywhere (exit to home).

WorkflowState bundles the current view with the current step index and
the create/update mode flag. It is never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union

from src.domain.models.form_step import FormStep


class ViewKind(Enum):
    """Tag of a workflow view."""

    HOME = "home"
    UPDATE_AUTH = "update_auth"
    MEMBER_PANEL = "member_panel"
    FORM = "form"
    SUCCESS = "success"
    ADMIN = "admin"


class AdminSubState(Enum):
    """Sub-state of the administrative area."""

    LOGIN = "login"
    LIST = "list"
    DETAIL = "detail"


@dataclass(frozen=True)
class HomeView:
    kind: ClassVar[ViewKind] = ViewKind.HOME


@dataclass(frozen=True)
class UpdateAuthView:
    """Member identification screen.

    A failed lookup leaves the session here unchanged; the miss is
    reported through the authentication outcome.
    """

    kind: ClassVar[ViewKind] = ViewKind.UPDATE_AUTH


@dataclass(frozen=True)
class MemberPanelView:
    kind: ClassVar[ViewKind] = ViewKind.MEMBER_PANEL


@dataclass(frozen=True)
class FormView:
    kind: ClassVar[ViewKind] = ViewKind.FORM
    step: FormStep = FormStep.PERSONAL


@dataclass(frozen=True)
class SuccessView:
    kind: ClassVar[ViewKind] = ViewKind.SUCCESS
    message: str = ""


@dataclass(frozen=True)
class AdminView:
    kind: ClassVar[ViewKind] = ViewKind.ADMIN
    sub_state: AdminSubState = AdminSubState.LOGIN


WorkflowView = Union[
    HomeView, UpdateAuthView, MemberPanelView, FormView, SuccessView, AdminView
]


VIEW_TRANSITION_MATRIX: dict[ViewKind, frozenset[ViewKind]] = {
    ViewKind.HOME: frozenset(
        {ViewKind.HOME, ViewKind.FORM, ViewKind.UPDATE_AUTH, ViewKind.ADMIN}
    ),
    # Authentication either succeeds into the panel or stays put
    ViewKind.UPDATE_AUTH: frozenset(
        {ViewKind.HOME, ViewKind.UPDATE_AUTH, ViewKind.MEMBER_PANEL}
    ),
    ViewKind.MEMBER_PANEL: frozenset(
        {ViewKind.HOME, ViewKind.FORM, ViewKind.SUCCESS}
    ),
    # FORM -> FORM is a step change; MEMBER_PANEL is the update-mode round trip
    ViewKind.FORM: frozenset(
        {ViewKind.HOME, ViewKind.FORM, ViewKind.MEMBER_PANEL, ViewKind.SUCCESS}
    ),
    # Success is terminal for the session pass
    ViewKind.SUCCESS: frozenset({ViewKind.HOME}),
    ViewKind.ADMIN: frozenset({ViewKind.HOME, ViewKind.ADMIN}),
}


def can_transition(from_kind: ViewKind, to_kind: ViewKind) -> bool:
    """Check whether the matrix allows a view change."""
    return to_kind in VIEW_TRANSITION_MATRIX.get(from_kind, frozenset())


@dataclass(frozen=True)
class WorkflowState:
    """Snapshot of a session's navigation state.

    Attributes:
        view: Current view variant.
        current_step: Current form step (meaningful while in a FormView).
        is_update_mode: True while editing an authenticated member's record.
    """

    view: WorkflowView = field(default_factory=HomeView)
    current_step: FormStep = FormStep.PERSONAL
    is_update_mode: bool = False

    @property
    def kind(self) -> ViewKind:
        return self.view.kind
