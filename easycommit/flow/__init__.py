"""Interactive commit-building flow for easycommit.

This package provides:
- models: FlowStep, FlowState, flow events and the CreateCommit effect
- machine: FlowMachine, the pure transition function
- runner: run_flow, the loop that applies events and executes effects
"""

# Models
from easycommit.flow.models import (
    INPUT_STEPS,
    TERMINAL_STEPS,
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

# State machine
from easycommit.flow.machine import FlowMachine

# Runtime
from easycommit.flow.runner import run_flow


__all__ = [
    # Models
    "FlowStep",
    "FlowState",
    "FlowEvent",
    "TERMINAL_STEPS",
    "INPUT_STEPS",
    "SubmitField",
    "ToggleConfirmation",
    "NavigateBack",
    "Cancel",
    "ConfirmFinal",
    "CommitFinished",
    "CreateCommit",
    # Machine
    "FlowMachine",
    # Runtime
    "run_flow",
]
