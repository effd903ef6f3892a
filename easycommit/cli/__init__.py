"""CLI entry point for easy-commit.

This module provides the main CLI application that combines the default
commit command and the informational subcommands into a single interface.
"""

import typer

from easycommit.cli.info import last_command, types_command
from easycommit.cli.main import build_record, is_interactive, main_command

# Main application
app = typer.Typer(
    name="easy-commit",
    help="easy-commit: Interactive Conventional Commits",
    add_completion=False,
)

# Add individual commands
app.command("types")(types_command)
app.command("last")(last_command)

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "main_command",
    "types_command",
    "last_command",
    "build_record",
    "is_interactive",
]
