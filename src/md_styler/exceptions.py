"""Custom exceptions for md-styler."""

from typing import Optional, Sequence


class MdStylerError(Exception):
    """Base exception for md-styler errors."""

    pass


class UnknownRuleError(MdStylerError):
    """Exception raised when a rule name does not match any known rule.

    Attributes:
        name: The rule name that could not be resolved
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown rule: '{name}'")


class GitError(MdStylerError):
    """Base exception for failures of the git integration."""

    pass


class GitCommandError(GitError):
    """Exception raised when a git command exits non-zero or fails an output check.

    Attributes:
        message: Description of the failure
        command: The full command line that was run
        returncode: Exit status of the process, if it ran
        stdout: Captured standard output
        stderr: Captured standard error
    """

    def __init__(
        self,
        message: str,
        command: Sequence[str],
        returncode: Optional[int] = None,
        stdout: str = "",
        stderr: str = "",
    ):
        self.message = message
        self.command = list(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(self.message)


class DirtyWorkingTreeError(GitError):
    """Exception raised when the working tree has uncommitted changes.

    Attributes:
        status: The `git status --porcelain` output listing the changes
    """

    def __init__(self, status: str):
        self.status = status
        super().__init__(f"Working tree is not clean:\n{status}")
