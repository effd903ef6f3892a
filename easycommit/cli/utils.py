"""Shared utility functions for CLI commands."""

from pathlib import Path
from typing import Optional

import typer

from easycommit.config import AppConfig, ConfigError, load_config
from easycommit.git import GitBackend
from easycommit.log import configure_logging
from easycommit.orchestrator import CommitOrchestrator
from easycommit.validator import RuleValidator

SEPARATOR = "=" * 60


def load_app_config(config_path: Optional[Path] = None, debug: bool = False) -> AppConfig:
    """Load configuration and set up logging.

    Args:
        config_path: Explicit configuration file from --config.
        debug: Force DEBUG logging regardless of the configured level.

    Returns:
        The loaded AppConfig.

    Raises:
        typer.Exit: If the configuration cannot be loaded.
    """
    try:
        app_config = load_config(config_path)
    except ConfigError as e:
        configure_logging("DEBUG" if debug else "INFO")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    configure_logging("DEBUG" if debug else app_config.logger.level)
    return app_config


def build_orchestrator(app_config: AppConfig) -> CommitOrchestrator:
    """Wire the git backend, validator and orchestrator from configuration."""
    timeouts = app_config.timeouts
    backend = GitBackend(
        command_timeout=timeouts.git_command,
        commit_timeout=timeouts.context,
    )
    validator = RuleValidator(
        config=app_config.commit,
        worker_count=app_config.validator.worker_count,
    )
    return CommitOrchestrator(
        backend=backend,
        validator=validator,
        config=app_config.commit,
        validation_timeout=timeouts.validation,
    )


def echo_message(message: str) -> None:
    """Print a commit message between separator lines."""
    typer.echo("")
    typer.echo(SEPARATOR)
    typer.echo(message)
    typer.echo(SEPARATOR)


def echo_no_staged_changes() -> None:
    """Explain how to stage changes."""
    typer.echo("nothing to commit (no changes staged for commit)", err=True)
    typer.echo("", err=True)
    typer.echo("Stage your changes first with:", err=True)
    typer.echo("  git add <file>...", err=True)
    typer.echo("", err=True)
    typer.echo("Then run easy-commit again.", err=True)
