import os
import subprocess
from pathlib import Path

import pytest

from gdext_bootstrap.bootstrapper import process
from gdext_bootstrap.bootstrapper.process import run_command, working_directory
from gdext_bootstrap.errors import BootstrapError, CommandFailedError, ErrorKind


@pytest.fixture
def fake_subprocess(monkeypatch):
    calls = []
    result = {"returncode": 0}

    def run(args, check=False, **kwargs):
        calls.append(args)
        return subprocess.CompletedProcess(args, result["returncode"])

    monkeypatch.setattr(process.shutil, "which", lambda name: f"/opt/bin/{name}")
    monkeypatch.setattr(process.subprocess, "run", run)
    return calls, result


def test_run_command_resolves_program(fake_subprocess):
    calls, _ = fake_subprocess
    run_command(["git", "init"])
    assert calls == [["/opt/bin/git", "init"]]


def test_run_command_nonzero_exit(fake_subprocess):
    _, result = fake_subprocess
    result["returncode"] = 128
    with pytest.raises(CommandFailedError) as exc:
        run_command(["git", "submodule", "add", "-b", "4.2", "https://example.com/x"])
    assert exc.value.kind is ErrorKind.COMMAND_FAILED
    assert exc.value.returncode == 128
    assert exc.value.command[:3] == ["git", "submodule", "add"]


def test_run_command_missing_program(monkeypatch):
    monkeypatch.setattr(process.shutil, "which", lambda name: None)
    with pytest.raises(BootstrapError) as exc:
        run_command(["pip", "install", "SCons"])
    assert exc.value.kind is ErrorKind.MISSING_DEPENDENCY


def test_working_directory_restores_on_success(tmp_path):
    target = tmp_path / "inner"
    target.mkdir()
    before = os.getcwd()
    with working_directory(target) as cwd:
        assert cwd == target.resolve()
        assert Path(os.getcwd()) == target.resolve()
    assert os.getcwd() == before


def test_working_directory_restores_on_error(tmp_path):
    target = tmp_path / "inner"
    target.mkdir()
    before = os.getcwd()
    with pytest.raises(RuntimeError):
        with working_directory(target):
            raise RuntimeError("boom")
    assert os.getcwd() == before


def test_working_directory_missing_target(tmp_path):
    before = os.getcwd()
    with pytest.raises(BootstrapError) as exc:
        with working_directory(tmp_path / "missing"):
            pass
    assert exc.value.kind is ErrorKind.FILESYSTEM
    assert os.getcwd() == before
