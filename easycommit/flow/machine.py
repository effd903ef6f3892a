"""Interactive flow state machine.

The machine is a pure transition function over FlowState values: it never
prompts, prints or commits. The only side effect it can request is
CreateCommit, which the runtime executes and answers with CommitFinished.

Happy path:
    TYPE_SELECT -> DESCRIPTION -> SCOPE -> BODY -> BREAKING -> PREVIEW
    -> CONFIRM -> CREATING -> DONE | FAILED
"""

import logging
from typing import Any, Optional

from easycommit.commit import (
    CommitRecord,
    CommitType,
    CommitTypeRegistry,
    CommitValidationError,
    ValidationConfig,
    validate_description,
)
from easycommit.flow.models import (
    Cancel,
    CommitFinished,
    ConfirmFinal,
    CreateCommit,
    FlowEvent,
    FlowState,
    FlowStep,
    NavigateBack,
    SubmitField,
    ToggleConfirmation,
)

logger = logging.getLogger(__name__)

Transition = tuple[FlowState, Optional[CreateCommit]]


class FlowMachine:
    """Transition rules for building a commit record step by step.

    Cancel is accepted on every input step but ignored once CREATING is
    reached; from there only CommitFinished moves the flow on.

    Args:
        registry: Commit types the user may choose from.
        config: Limits used by the description guard and final validation.
    """

    def __init__(self, registry: CommitTypeRegistry, config: Optional[ValidationConfig] = None):
        self.registry = registry
        self.config = config or ValidationConfig()

    def start(self, record: Optional[CommitRecord] = None) -> FlowState:
        """Create the initial state."""
        return FlowState(step=FlowStep.TYPE_SELECT, record=record or CommitRecord())

    def transition(self, state: FlowState, event: FlowEvent) -> Transition:
        """Apply one event to a state.

        Args:
            state: The current state.
            event: The event to apply.

        Returns:
            Tuple of (next state, effect or None).
        """
        if state.is_terminal:
            return state, None

        if state.step == FlowStep.CREATING:
            # The commit is already under way; only its outcome matters
            if isinstance(event, CommitFinished):
                return self._finish(state, event.error), None
            return state, None

        if isinstance(event, Cancel):
            logger.debug("Flow cancelled at %s", state.step.name)
            return state.evolve(step=FlowStep.CANCELLED, error=None), None

        if isinstance(event, NavigateBack):
            return self._back(state), None

        if isinstance(event, ToggleConfirmation):
            return self._toggle(state), None

        if isinstance(event, ConfirmFinal):
            if state.step != FlowStep.CONFIRM:
                return state, None
            return self._confirm(state, event.confirmed)

        if isinstance(event, SubmitField):
            return self._submit(state, event.value)

        return state, None

    def _submit(self, state: FlowState, value: Any) -> Transition:
        step = state.step
        record = state.record

        if step == FlowStep.TYPE_SELECT:
            name = value.name if isinstance(value, CommitType) else str(value or "")
            try:
                commit_type = self.registry.get_by_name(name)
            except CommitValidationError as e:
                return state.evolve(error=e), None
            return self._advance(state, record.with_changes(type=commit_type)), None

        if step == FlowStep.DESCRIPTION:
            candidate = record.with_changes(description=str(value or ""))
            try:
                validate_description(candidate, self.config)
            except CommitValidationError as e:
                return state.evolve(error=e), None
            return self._advance(state, candidate), None

        if step == FlowStep.SCOPE:
            return self._advance(state, record.with_changes(scope=str(value or ""))), None

        if step == FlowStep.BODY:
            return self._advance(state, record.with_changes(body=str(value or ""))), None

        if step == FlowStep.BREAKING:
            selected = state.breaking_selected if value is None else bool(value)
            candidate = record.with_changes(breaking=selected)
            try:
                candidate.validate(self.config)
            except CommitValidationError as e:
                return state.evolve(record=candidate, breaking_selected=selected, error=e), None
            return self._advance(state.evolve(breaking_selected=selected), candidate), None

        if step == FlowStep.PREVIEW:
            return self._advance(state, record), None

        if step == FlowStep.CONFIRM:
            return self._confirm(state, None if value is None else bool(value))

        return state, None

    def _advance(self, state: FlowState, record: CommitRecord) -> FlowState:
        return state.evolve(step=FlowStep(state.step + 1), record=record, error=None)

    def _back(self, state: FlowState) -> FlowState:
        if state.step == FlowStep.TYPE_SELECT:
            return state
        return state.evolve(step=FlowStep(state.step - 1), error=None)

    def _toggle(self, state: FlowState) -> FlowState:
        if state.step == FlowStep.BREAKING:
            return state.evolve(breaking_selected=not state.breaking_selected)
        if state.step == FlowStep.CONFIRM:
            return state.evolve(confirm_selected=not state.confirm_selected)
        return state

    def _confirm(self, state: FlowState, confirmed: Optional[bool]) -> Transition:
        if confirmed is None:
            confirmed = state.confirm_selected

        if not confirmed:
            return state.evolve(step=FlowStep.CANCELLED, confirm_selected=False, error=None), None

        creating = state.evolve(step=FlowStep.CREATING, confirm_selected=True, error=None)
        return creating, CreateCommit(state.record)

    def _finish(self, state: FlowState, error: Optional[Exception]) -> FlowState:
        if error is None:
            return state.evolve(step=FlowStep.DONE, error=None)
        return state.evolve(step=FlowStep.FAILED, error=error)
