import os
from pathlib import Path
from typing import Callable, List, Optional, Sequence

import pytest

from gdext_bootstrap.errors import CommandFailedError


class FakeRunner:
    """Records commands instead of running them.

    ``git submodule add`` creates the submodule directory so the nested update
    can change into it, the way a real clone would.
    """

    def __init__(self, fail_when: Optional[Callable[[List[str]], bool]] = None):
        self.calls: List[List[str]] = []
        self.cwds: List[str] = []
        self.fail_when = fail_when

    def __call__(self, command: Sequence[str]) -> None:
        cmd = list(command)
        self.calls.append(cmd)
        self.cwds.append(os.getcwd())
        if self.fail_when and self.fail_when(cmd):
            raise CommandFailedError(cmd, 1, cwd=os.getcwd())
        if cmd[1:3] == ["submodule", "add"]:
            name = cmd[-1].rstrip("/").rsplit("/", 1)[-1]
            if name.endswith(".git"):
                name = name[: -len(".git")]
            Path(name).mkdir(exist_ok=True)


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch):
    # monkeypatch.chdir restores the previous directory at teardown
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GDEXT_CONFIG_FILE", str(tmp_path / "no-settings.yaml"))
    for name in ("GDEXT_REPO_URL", "GDEXT_GIT", "GDEXT_PYTHON", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def godot_project(tmp_path: Path) -> Path:
    """An empty but recognizable Godot project."""
    project = tmp_path / "demo"
    project.mkdir()
    (project / "project.godot").write_text("config_version=5\n", encoding="utf-8")
    (project / ".godot").mkdir()
    return project


@pytest.fixture
def tools_on_path(monkeypatch):
    """Pretend git and python are installed."""
    available = {"git", "python"}

    def which(name, *args, **kwargs):
        return f"/usr/bin/{name}" if name in available else None

    monkeypatch.setattr("gdext_bootstrap.bootstrapper.dependencies.shutil.which", which)
    return available
