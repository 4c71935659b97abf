"""Errors raised by branchsweep."""

from typing import Optional, Sequence


class BranchSweepError(Exception):
    """Base error for all branchsweep failures."""

    def __init__(self, message: str, output: str = "") -> None:
        """Initialize error.

        Args:
            message: Error message
            output: Captured output of the process that failed, if any
        """
        super().__init__(message)
        self.output = output


class ExternalToolError(BranchSweepError):
    """An external command exited non-zero or printed something unusable."""

    def __init__(
        self,
        message: str,
        command: Optional[Sequence[str]] = None,
        status: Optional[int] = None,
        output: str = "",
    ) -> None:
        super().__init__(message, output)
        self.command = list(command) if command else []
        self.status = status


class MissingDependencyError(BranchSweepError):
    """A required program could not be found on PATH."""

    def __init__(self, program: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Required program not found in PATH: {program}")
        self.program = program


class MalformedInputError(BranchSweepError):
    """A branch line could not be split into remote and name."""

    def __init__(self, line: str) -> None:
        super().__init__(f"Invalid branch format: {line!r}")
        self.line = line


class RepositoryNotFoundError(ExternalToolError):
    """The given path is not inside a git work tree."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Not a git repository: {path}")
        self.path = path
