"""CLI commands that show information without creating a commit."""

import typer

from easycommit.commit import CommitTypeRegistry
from easycommit.config import AppConfig
from easycommit.git import GitError
from easycommit.cli.utils import build_orchestrator, echo_message


def types_command() -> None:
    """List the available commit types."""
    registry = CommitTypeRegistry.default()

    typer.echo("Commit types:")
    for commit_type in registry:
        typer.echo(f"  {commit_type.name:<10} {commit_type.description}")


def last_command(ctx: typer.Context) -> None:
    """Show the message of the most recent commit."""
    app_config = ctx.obj if isinstance(ctx.obj, AppConfig) else AppConfig()
    orchestrator = build_orchestrator(app_config)

    try:
        message = orchestrator.last_commit_message()
    except GitError as e:
        typer.echo(f"Git error: {e}", err=True)
        raise typer.Exit(1)

    echo_message(message)
