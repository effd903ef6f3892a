"""Data models for the interactive flow.

Contains:
- FlowStep: Ordered steps of the flow, including terminal steps
- Flow events: SubmitField, ToggleConfirmation, NavigateBack, Cancel,
  ConfirmFinal, CommitFinished
- CreateCommit: The effect asking the runtime to create the commit
- FlowState: One immutable snapshot of the flow
"""

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Any, Optional, Union

from easycommit.commit import CommitRecord


class FlowStep(IntEnum):
    """Steps of the interactive flow, in order."""

    TYPE_SELECT = 0
    DESCRIPTION = 1
    SCOPE = 2
    BODY = 3
    BREAKING = 4
    PREVIEW = 5
    CONFIRM = 6
    CREATING = 7
    DONE = 8
    CANCELLED = 9
    FAILED = 10

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STEPS


TERMINAL_STEPS = frozenset({FlowStep.DONE, FlowStep.CANCELLED, FlowStep.FAILED})

# Steps the user fills in, shown as "[n/5]" in prompts
INPUT_STEPS = [
    FlowStep.TYPE_SELECT,
    FlowStep.DESCRIPTION,
    FlowStep.SCOPE,
    FlowStep.BODY,
    FlowStep.BREAKING,
]


@dataclass(frozen=True)
class SubmitField:
    """Submit the current step's value.

    The value is a type name or CommitType on TYPE_SELECT, a string on
    DESCRIPTION, SCOPE and BODY, and an optional bool on BREAKING and
    CONFIRM (None keeps the current selection). It is ignored on PREVIEW.
    """

    value: Any = None


@dataclass(frozen=True)
class ToggleConfirmation:
    """Flip the yes/no selection on BREAKING or CONFIRM."""


@dataclass(frozen=True)
class NavigateBack:
    """Go back exactly one step."""


@dataclass(frozen=True)
class Cancel:
    """Abandon the flow without committing."""


@dataclass(frozen=True)
class ConfirmFinal:
    """Answer the final confirmation. None keeps the current selection."""

    confirmed: Optional[bool] = None


@dataclass(frozen=True)
class CommitFinished:
    """Report the outcome of the commit effect back to the flow."""

    error: Optional[Exception] = None


FlowEvent = Union[SubmitField, ToggleConfirmation, NavigateBack, Cancel, ConfirmFinal, CommitFinished]


@dataclass(frozen=True)
class CreateCommit:
    """Effect: create a commit from the given validated record."""

    record: CommitRecord


@dataclass(frozen=True)
class FlowState:
    """Immutable snapshot of the interactive flow.

    Attributes:
        step: The current step.
        record: The commit record built so far.
        breaking_selected: Current selection on the breaking-change question.
        confirm_selected: Current selection on the final confirmation.
        error: Error to display for the current step, if any.
    """

    step: FlowStep = FlowStep.TYPE_SELECT
    record: CommitRecord = field(default_factory=CommitRecord)
    breaking_selected: bool = False
    confirm_selected: bool = True
    error: Optional[Exception] = None

    @property
    def is_terminal(self) -> bool:
        return self.step.is_terminal

    def evolve(self, **changes: Any) -> "FlowState":
        """Return a copy of this state with the given fields replaced."""
        return replace(self, **changes)
