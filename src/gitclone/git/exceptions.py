"""Git command exceptions."""

from typing import List, Optional


class GitError(Exception):
    """Base exception for git wrapper errors."""

    pass


class CommandError(GitError):
    """A git subprocess exited with a non-zero code."""

    def __init__(
        self,
        code: int,
        command: Optional[List[str]] = None,
        stderr: Optional[str] = None,
    ):
        """Initialize command error.

        Args:
            code: Exit code returned by the subprocess
            command: Full argument vector that was run
            stderr: Captured standard error output
        """
        super().__init__(f'Command `git` returned with error code {code}.')
        self.code = code
        self.command = command or []
        self.stderr = stderr
