"""Main CLI command for building and creating a commit."""

import logging
from pathlib import Path
from typing import Optional

import typer

from easycommit import __version__
from easycommit.commit import (
    CommitRecord,
    CommitTypeRegistry,
    EmptyDescriptionError,
    InvalidCommitTypeError,
)
from easycommit.exceptions import EasyCommitError
from easycommit.flow import FlowStep
from easycommit.git import NoStagedChangesError
from easycommit.cli.interactive import run_interactive
from easycommit.cli.utils import (
    build_orchestrator,
    echo_no_staged_changes,
    load_app_config,
)

logger = logging.getLogger(__name__)


def is_interactive(interactive: bool, type_name: Optional[str], message: Optional[str]) -> bool:
    """Decide between interactive and direct mode.

    Interactive mode runs when requested explicitly or when neither a type
    nor a message was given. Partial flags run direct mode, where the missing
    field is reported as an error.
    """
    if interactive:
        return True
    return not type_name and not message


def build_record(
    registry: CommitTypeRegistry,
    type_name: Optional[str],
    message: Optional[str],
    scope: Optional[str] = None,
    body: Optional[str] = None,
    breaking: bool = False,
    breaking_note: Optional[str] = None,
) -> CommitRecord:
    """Build a commit record from command-line flags.

    Raises:
        InvalidCommitTypeError: If the type is missing or unknown.
        EmptyDescriptionError: If the message is missing or blank.
    """
    if not type_name:
        raise InvalidCommitTypeError("commit type is required (use --type)")
    if not (message or "").strip():
        raise EmptyDescriptionError("commit description is required (use --message)", length=len(message or ""))

    return CommitRecord(
        type=registry.get_by_name(type_name),
        scope=scope or "",
        description=message,
        body=body or "",
        breaking=breaking,
        breaking_note=breaking_note or "",
    )


def main_command(
    ctx: typer.Context,
    type_name: Optional[str] = typer.Option(
        None,
        "--type",
        "-t",
        help="Commit type (feat, fix, docs, style, refactor, test, chore, build, ci, perf)",
    ),
    message: Optional[str] = typer.Option(
        None,
        "--message",
        "-m",
        help="Commit description",
    ),
    scope: Optional[str] = typer.Option(
        None,
        "--scope",
        "-s",
        help="Commit scope (optional)",
    ),
    body: Optional[str] = typer.Option(
        None,
        "--body",
        help="Commit body (optional)",
    ),
    breaking: bool = typer.Option(
        False,
        "--breaking",
        "-b",
        help="Mark as breaking change",
    ),
    breaking_note: Optional[str] = typer.Option(
        None,
        "--breaking-note",
        help="Text for the BREAKING CHANGE footer (used with --breaking)",
    ),
    interactive: bool = typer.Option(
        False,
        "--interactive",
        "-i",
        help="Force interactive mode",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        help="Show preview without committing",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to a YAML configuration file",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version information",
    ),
) -> None:
    """Create Conventional Commits interactively or from flags."""
    if version:
        typer.echo(f"easy-commit version {__version__}")
        raise typer.Exit(0)

    app_config = load_app_config(config_path, debug)
    ctx.obj = app_config

    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    logger.info("Starting easy-commit v%s", __version__)
    registry = CommitTypeRegistry.default()
    orchestrator = build_orchestrator(app_config)

    if is_interactive(interactive, type_name, message):
        final_state = run_interactive(registry, orchestrator, app_config.commit)
        if final_state.step != FlowStep.DONE:
            raise typer.Exit(1)
        return

    logger.info("Running in direct mode")
    try:
        record = build_record(registry, type_name, message, scope, body, breaking, breaking_note)
        record.validate(app_config.commit)

        if dry_run:
            typer.echo("Preview (dry-run):")
            typer.echo(orchestrator.preview_commit(record))
            return

        orchestrator.create_commit(record)
    except NoStagedChangesError:
        echo_no_staged_changes()
        raise typer.Exit(1)
    except EasyCommitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("✓ Commit created successfully!")
