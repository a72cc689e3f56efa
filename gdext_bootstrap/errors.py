from __future__ import annotations

from enum import Enum
from typing import Optional, Sequence


class ErrorKind(str, Enum):
    MISSING_DEPENDENCY = "missing_dependency"
    PROJECT_NOT_FOUND = "project_not_found"
    INVALID_PROJECT = "invalid_project"
    INVALID_REQUEST = "invalid_request"
    COMMAND_FAILED = "command_failed"
    FILESYSTEM = "filesystem"
    UNSUPPORTED_PLATFORM = "unsupported_platform"


class BootstrapError(Exception):
    """Failure of a single bootstrap step.

    Every step raises this instead of terminating the process; the CLI is the
    only place that turns it into an exit status.
    """

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class CommandFailedError(BootstrapError):
    def __init__(self, command: Sequence[str], returncode: int, cwd: Optional[str] = None):
        self.command = list(command)
        self.returncode = returncode
        self.cwd = cwd
        where = f" (in {cwd})" if cwd else ""
        super().__init__(
            ErrorKind.COMMAND_FAILED,
            f"'{' '.join(self.command)}' exited with code {returncode}{where}",
        )
