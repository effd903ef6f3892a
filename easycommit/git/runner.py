"""Git command runner.

Contains:
- _run_git_command: Run a git command and return its output
- _git_exit_code: Run a git command and return only its exit code
- _run_git_interactive: Run a git command attached to the terminal
"""

import logging
import subprocess
from typing import Optional

from easycommit.git.exceptions import GitCommandError

logger = logging.getLogger(__name__)


def _run_git_command(args: list[str], timeout: Optional[float] = None) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        timeout: Seconds to wait before giving up.

    Returns:
        The stdout of the git command.

    Raises:
        GitCommandError: If the command fails.
    """
    logger.debug("Running: git %s", " ".join(args))
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
            timeout=timeout,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        raise GitCommandError(f"Git command failed: git {' '.join(args)}\n{e.stderr.strip()}")
    except subprocess.TimeoutExpired:
        raise GitCommandError(f"Git command timed out after {timeout}s: git {' '.join(args)}")
    except FileNotFoundError:
        raise GitCommandError("Git is not installed or not in PATH.")


def _git_exit_code(args: list[str], timeout: Optional[float] = None) -> int:
    """Run a git command quietly and return its exit code.

    Args:
        args: List of arguments to pass to git.
        timeout: Seconds to wait before giving up.

    Returns:
        The process exit code.

    Raises:
        GitCommandError: If git cannot be run or times out.
    """
    logger.debug("Running: git %s", " ".join(args))
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=False,
            timeout=timeout,
        )
        return result.returncode
    except subprocess.TimeoutExpired:
        raise GitCommandError(f"Git command timed out after {timeout}s: git {' '.join(args)}")
    except FileNotFoundError:
        raise GitCommandError("Git is not installed or not in PATH.")


def _run_git_interactive(args: list[str], timeout: Optional[float] = None) -> None:
    """Run a git command with its output shown directly on the terminal.

    Args:
        args: List of arguments to pass to git.
        timeout: Seconds to wait before giving up.

    Raises:
        GitCommandError: If the command fails, cannot run, or times out.
    """
    logger.debug("Running: git %s", args[0] if args else "")
    try:
        result = subprocess.run(["git"] + args, check=False, timeout=timeout)
    except subprocess.TimeoutExpired:
        raise GitCommandError(f"Git command timed out after {timeout}s: git {args[0]}")
    except FileNotFoundError:
        raise GitCommandError("Git is not installed or not in PATH.")

    if result.returncode != 0:
        raise GitCommandError(f"Git command failed: git {args[0]} exited with code {result.returncode}")
