"""
Git integration for committing rewrites.

The command-line layer checks that the working tree is clean before touching
the file and commits the rewritten file afterwards, so every rewrite lands as
its own commit. A failure at any step raises before the next step runs.
"""

import subprocess
from pathlib import Path
from typing import Callable, Optional, Sequence

from loguru import logger

from md_styler.exceptions import DirtyWorkingTreeError, GitCommandError

OutputCheck = Callable[[Sequence[str], subprocess.CompletedProcess], None]


def check_status(command: Sequence[str], result: subprocess.CompletedProcess) -> None:
    """Raise if the command exited non-zero."""
    if result.returncode != 0:
        raise GitCommandError(
            f"Command exited with status {result.returncode}: {' '.join(command)}\n"
            f"stdout:\n{result.stdout}\nstderr:\n{result.stderr}",
            command=command,
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )


def check_empty_stdout(command: Sequence[str], result: subprocess.CompletedProcess) -> None:
    """Raise if the command printed anything to stdout."""
    if result.stdout:
        raise GitCommandError(
            f"Expected empty stdout from {' '.join(command)}: {result.stdout}",
            command=command,
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )


def quote_argument(argument: str) -> str:
    """Wrap an argument containing spaces in single quotes, escaping inner quotes."""
    if " " in argument:
        escaped = argument.replace("'", "\\'")
        return f"'{escaped}'"
    return argument


def commit_message(argv: Sequence[str]) -> str:
    """
    Build the commit message for a rewrite from the invoking command line.

    Args:
        argv: The command line, program name first

    Returns:
        str: A message of the form ``run `<command line>```
    """
    command = " ".join(quote_argument(argument) for argument in argv)
    return f"run `{command}`"


class GitRepository:
    """Runs git commands in a working tree.

    Attributes:
        cwd: Directory to run git in; the current directory if None
    """

    def __init__(self, cwd: Optional[Path] = None):
        self.cwd = cwd

    def run(self, *args: str, checks: Sequence[OutputCheck] = (check_status,)) -> subprocess.CompletedProcess:
        """
        Run a git command and apply output checks to the finished process.

        Args:
            *args: Arguments to pass to git
            checks: Checks run in order on the completed process

        Returns:
            subprocess.CompletedProcess: The completed process

        Raises:
            GitCommandError: If git cannot be started or a check fails
        """
        command = ["git", *args]
        logger.info(f"> {' '.join(command)}")
        try:
            result = subprocess.run(command, cwd=self.cwd, capture_output=True, text=True)
        except OSError as e:
            raise GitCommandError(f"Error running {' '.join(command)}: {e}", command=command) from e

        for check in checks:
            check(command, result)
        return result

    def ensure_clean(self) -> None:
        """
        Check that there are no uncommitted changes.

        Raises:
            DirtyWorkingTreeError: If ``git status --porcelain`` lists any change
            GitCommandError: If ``git status`` fails
        """
        try:
            self.run("status", "--porcelain", checks=(check_status, check_empty_stdout))
        except GitCommandError as e:
            if e.returncode == 0 and e.stdout:
                raise DirtyWorkingTreeError(e.stdout) from e
            raise

    def commit_file(self, path: Path, message: str) -> None:
        """Stage a single file and commit it.

        If the commit fails the file is unstaged again, so the index is left
        as it was before the call.

        Args:
            path: The file to commit
            message: The commit message

        Raises:
            GitCommandError: If staging or committing fails
        """
        self.run("add", str(path))
        try:
            self.run("commit", "-m", message)
        except GitCommandError:
            logger.error(f"Commit failed, unstaging {path}")
            self.run("reset", "--quiet", "--", str(path))
            raise
        logger.info(f"Committed {path}: {message}")
