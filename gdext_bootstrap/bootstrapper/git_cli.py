from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..errors import BootstrapError, ErrorKind
from .process import CommandRunner, run_command, working_directory


logger = logging.getLogger(__name__)


def submodule_name_from_url(repo_url: str) -> str:
    """Derive the directory git creates for ``git submodule add <repo_url>``.

    ``https://github.com/godotengine/godot-cpp`` -> ``godot-cpp``. Trailing
    slashes and a ``.git`` suffix are dropped the way git does.
    """

    url = (repo_url or "").strip().rstrip("/")
    if "/" not in url:
        raise BootstrapError(ErrorKind.INVALID_REQUEST, f"repository URL has no path segment: {repo_url!r}")
    name = url[url.rfind("/") + 1:]
    if name.endswith(".git"):
        name = name[: -len(".git")]
    if not name:
        raise BootstrapError(ErrorKind.INVALID_REQUEST, f"cannot derive submodule name from URL: {repo_url!r}")
    return name


class GitCLI:
    """
    Minimal wrapper around the git executable. Commands run in the current
    working directory with output passed straight to the terminal.
    """

    def __init__(self, git: str = "git", runner: Optional[CommandRunner] = None):
        self.git = git
        self._run = runner or run_command

    def init(self) -> None:
        self._run([self.git, "init"])

    def add_submodule(self, repo_url: str, branch: str) -> Path:
        """Add ``repo_url`` as a submodule tracking ``branch`` and fetch its own submodules.

        Returns:
            Path: Directory of the submodule relative to the current directory.
        """

        name = submodule_name_from_url(repo_url)
        self._run([self.git, "submodule", "add", "-b", branch, repo_url])

        with working_directory(name):
            self.update_submodules()
        return Path(name)

    def update_submodules(self) -> None:
        self._run([self.git, "submodule", "update", "--init"])
