from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

from ..errors import BootstrapError, ErrorKind


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedTools:
    git: str
    python: str
    git_path: str
    python_path: str

    def paths(self) -> Dict[str, str]:
        return {self.git: self.git_path, self.python: self.python_path}


def find_executable(candidates: Sequence[str]) -> Optional[Tuple[str, str]]:
    """Return ``(name, path)`` for the first candidate found on PATH."""
    for name in candidates:
        path = shutil.which(name)
        if path:
            logger.debug("Found %s at %s", name, path)
            return name, path
    return None


def check_dependencies(git: str = "git", python: Sequence[str] = ("python", "python3")) -> ResolvedTools:
    """Confirm git and a Python interpreter are on PATH. Presence only, no version checks."""

    found_git = find_executable([git])
    if found_git is None:
        raise BootstrapError(ErrorKind.MISSING_DEPENDENCY, f"'{git}' is not installed or not on PATH")

    found_python = find_executable(python)
    if found_python is None:
        raise BootstrapError(
            ErrorKind.MISSING_DEPENDENCY,
            f"no Python interpreter found on PATH (tried: {', '.join(python)})",
        )

    return ResolvedTools(
        git=found_git[0],
        python=found_python[0],
        git_path=found_git[1],
        python_path=found_python[1],
    )
