import pytest

from gdext_bootstrap.bootstrapper import check_dependencies
from gdext_bootstrap.errors import BootstrapError, ErrorKind


def test_all_tools_present(tools_on_path):
    tools = check_dependencies()
    assert tools.git == "git"
    assert tools.python == "python"


def test_missing_git(tools_on_path):
    tools_on_path.discard("git")
    with pytest.raises(BootstrapError) as exc:
        check_dependencies()
    assert exc.value.kind is ErrorKind.MISSING_DEPENDENCY
    assert "git" in exc.value.message


def test_missing_python(tools_on_path):
    tools_on_path.discard("python")
    with pytest.raises(BootstrapError) as exc:
        check_dependencies(python=["python"])
    assert exc.value.kind is ErrorKind.MISSING_DEPENDENCY
    assert "python" in exc.value.message


def test_python_falls_back_to_next_candidate(tools_on_path):
    tools_on_path.discard("python")
    tools_on_path.add("python3")
    tools = check_dependencies(python=["python", "python3"])
    assert tools.python == "python3"


def test_custom_git_name(tools_on_path):
    tools_on_path.add("git2")
    assert check_dependencies(git="git2").git == "git2"


def test_resolved_paths_are_reported(tools_on_path):
    tools_on_path.discard("python")
    tools_on_path.add("python3")
    tools = check_dependencies(python=["python", "python3"])
    assert tools.git_path == "/usr/bin/git"
    assert tools.python_path == "/usr/bin/python3"
    assert tools.paths() == {"git": "/usr/bin/git", "python3": "/usr/bin/python3"}
