"""Prompt-driven interactive mode.

Turns typer prompts into flow events and renders each new state. The flow
itself lives in easycommit.flow; nothing here decides what a step accepts.

At any prompt, ':b' goes back one step and ':q' (or Ctrl+C) cancels. The
optional scope and body keep their current value on Enter; '-' clears them.
"""

import logging

import typer

from easycommit.commit import CommitTypeRegistry, ValidationConfig
from easycommit.flow import (
    INPUT_STEPS,
    Cancel,
    ConfirmFinal,
    FlowEvent,
    FlowMachine,
    FlowState,
    FlowStep,
    NavigateBack,
    SubmitField,
    run_flow,
)
from easycommit.git import NoStagedChangesError
from easycommit.orchestrator import CommitOrchestrator
from easycommit.cli.utils import echo_message, echo_no_staged_changes

logger = logging.getLogger(__name__)

BACK_COMMAND = ":b"
CANCEL_COMMAND = ":q"
CLEAR_COMMAND = "-"

_YES = ("y", "yes")
_NO = ("n", "no")


def _step_label(step: FlowStep) -> str:
    return f"[{INPUT_STEPS.index(step) + 1}/{len(INPUT_STEPS)}]"


class PromptEventSource:
    """Ask the user for the input of the current step and return an event."""

    def __init__(self, registry: CommitTypeRegistry, orchestrator: CommitOrchestrator):
        self.registry = registry
        self.orchestrator = orchestrator

    def __call__(self, state: FlowState) -> FlowEvent:
        if state.error is not None:
            typer.echo(f"Error: {state.error}", err=True)

        handlers = {
            FlowStep.TYPE_SELECT: self._ask_type,
            FlowStep.DESCRIPTION: self._ask_description,
            FlowStep.SCOPE: self._ask_scope,
            FlowStep.BODY: self._ask_body,
            FlowStep.BREAKING: self._ask_breaking,
            FlowStep.PREVIEW: self._show_preview,
            FlowStep.CONFIRM: self._ask_confirm,
        }
        try:
            return handlers[state.step](state)
        except typer.Abort:
            return Cancel()

    def _read(self, text: str, default: str = "") -> str:
        return typer.prompt(text, default=default, show_default=bool(default))

    def _command(self, value: str):
        command = value.strip().lower()
        if command == BACK_COMMAND:
            return NavigateBack()
        if command == CANCEL_COMMAND:
            return Cancel()
        return None

    def _ask_type(self, state: FlowState) -> FlowEvent:
        typer.echo(f"\n{_step_label(FlowStep.TYPE_SELECT)} Select commit type:")
        for number, commit_type in enumerate(self.registry, start=1):
            typer.echo(f"  {number:>2}) {commit_type.name:<10} {commit_type.description}")

        value = self._read(f"Enter your choice (1-{len(self.registry)})", state.record.type.name)
        command = self._command(value)
        if command is not None:
            return command

        choice = value.strip()
        if choice.isdigit() and 1 <= int(choice) <= len(self.registry):
            return SubmitField(self.registry[int(choice) - 1])
        return SubmitField(choice)

    def _ask_description(self, state: FlowState) -> FlowEvent:
        value = self._read(f"{_step_label(FlowStep.DESCRIPTION)} Enter commit description", state.record.description)
        return self._command(value) or SubmitField(value)

    def _ask_scope(self, state: FlowState) -> FlowEvent:
        typer.echo(f"Scope is optional. Press Enter to skip, or '{CLEAR_COMMAND}' to clear it.")
        value = self._read(f"{_step_label(FlowStep.SCOPE)} Enter scope (optional)", state.record.scope)
        command = self._command(value)
        if command is not None:
            return command
        if value.strip() == CLEAR_COMMAND:
            return SubmitField("")
        return SubmitField(value)

    def _ask_body(self, state: FlowState) -> FlowEvent:
        """Read the body one line at a time until an empty line."""
        typer.echo("Body is optional. Enter one line at a time and an empty line to finish.")
        if state.record.body:
            typer.echo(f"Current body (press Enter to keep it, '{CLEAR_COMMAND}' to clear it):")
            typer.echo(state.record.body)

        lines: list[str] = []
        while True:
            label = f"{_step_label(FlowStep.BODY)} Enter body (optional)" if not lines else "..."
            value = self._read(label)
            command = self._command(value)
            if command is not None:
                return command
            if not lines and value.strip() == CLEAR_COMMAND:
                return SubmitField("")
            if value == "":
                break
            lines.append(value)

        if not lines:
            return SubmitField(state.record.body)
        return SubmitField("\n".join(lines))

    def _ask_breaking(self, state: FlowState) -> FlowEvent:
        default = "y" if state.breaking_selected else "n"
        while True:
            value = self._read(f"{_step_label(FlowStep.BREAKING)} Is this a breaking change? (y/N)", default)
            command = self._command(value)
            if command is not None:
                return command
            answer = value.strip().lower()
            if answer in _YES:
                return SubmitField(True)
            if answer in _NO:
                return SubmitField(False)
            typer.echo("Please answer y or n.", err=True)

    def _show_preview(self, state: FlowState) -> FlowEvent:
        typer.echo("\nPreview:")
        echo_message(self.orchestrator.preview_commit(state.record))
        value = self._read("Press Enter to continue")
        return self._command(value) or SubmitField()

    def _ask_confirm(self, state: FlowState) -> FlowEvent:
        default = "y" if state.confirm_selected else "n"
        while True:
            value = self._read("Create this commit? (Y/n)", default)
            command = self._command(value)
            if command is not None:
                return command
            answer = value.strip().lower()
            if answer in _YES:
                return ConfirmFinal(True)
            if answer in _NO:
                return ConfirmFinal(False)
            typer.echo("Please answer y or n.", err=True)


def render_state(state: FlowState) -> None:
    """Report progress once the flow leaves the input steps."""
    if state.step == FlowStep.CREATING:
        typer.echo("\nCommitting...", err=True)
    elif state.step == FlowStep.DONE:
        typer.echo("✓ Commit created successfully!")
    elif state.step == FlowStep.CANCELLED:
        typer.echo("Commit cancelled.", err=True)
    elif state.step == FlowStep.FAILED:
        if isinstance(state.error, NoStagedChangesError):
            echo_no_staged_changes()
        else:
            typer.echo(f"Error: {state.error}", err=True)


def run_interactive(
    registry: CommitTypeRegistry,
    orchestrator: CommitOrchestrator,
    config: ValidationConfig,
) -> FlowState:
    """Run the interactive flow on the terminal.

    Returns:
        The terminal flow state.
    """
    logger.info("Running in interactive mode")
    typer.echo("Easy Commit - Interactive Conventional Commits")
    typer.echo(f"(type '{BACK_COMMAND}' to go back, '{CANCEL_COMMAND}' to quit)")

    machine = FlowMachine(registry, config)
    return run_flow(
        machine,
        orchestrator,
        next_event=PromptEventSource(registry, orchestrator),
        on_state=render_state,
    )
