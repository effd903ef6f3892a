"""Runtime loop for the interactive flow.

Holds exactly one current FlowState, applies events one at a time and
executes the CreateCommit effect through the orchestrator.
"""

import logging
from typing import Callable, Optional

from easycommit.exceptions import EasyCommitError
from easycommit.flow.machine import FlowMachine
from easycommit.flow.models import CommitFinished, CreateCommit, FlowEvent, FlowState
from easycommit.orchestrator import CommitOrchestrator

logger = logging.getLogger(__name__)


def run_flow(
    machine: FlowMachine,
    orchestrator: CommitOrchestrator,
    next_event: Callable[[FlowState], FlowEvent],
    on_state: Optional[Callable[[FlowState], None]] = None,
    state: Optional[FlowState] = None,
) -> FlowState:
    """Drive the flow until it reaches a terminal step.

    Args:
        machine: The transition rules.
        orchestrator: Creates the commit when the flow asks for it.
        next_event: Called with the current state; returns the next event.
        on_state: Called after every state change, e.g. to render output.
        state: Starting state. Defaults to machine.start().

    Returns:
        The terminal state (DONE, CANCELLED or FAILED).
    """
    state = state or machine.start()

    while not state.is_terminal:
        event = next_event(state)
        state, effect = machine.transition(state, event)
        if on_state:
            on_state(state)

        if isinstance(effect, CreateCommit):
            error = None
            try:
                orchestrator.create_commit(effect.record)
            except EasyCommitError as e:
                logger.debug("Commit failed: %s", e)
                error = e
            state, _ = machine.transition(state, CommitFinished(error))
            if on_state:
                on_state(state)

    return state
