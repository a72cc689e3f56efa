from __future__ import annotations

from pathlib import Path

from ..errors import BootstrapError, ErrorKind


PROJECT_FILE = "project.godot"
ENGINE_STATE_DIR = ".godot"


def verify_godot_project(project_path: str | Path) -> bool:
    """Check that ``project_path`` looks like a Godot project.

    Only presence of ``project.godot`` and the ``.godot/`` directory is
    checked; the contents of ``project.godot`` are not parsed.

    Raises:
        BootstrapError: PROJECT_NOT_FOUND if the path does not exist,
            INVALID_PROJECT if either marker is missing.
    """

    root = Path(project_path)
    if not root.is_dir():
        raise BootstrapError(ErrorKind.PROJECT_NOT_FOUND, f"project path does not exist: {root}")

    missing = []
    if not (root / PROJECT_FILE).is_file():
        missing.append(PROJECT_FILE)
    if not (root / ENGINE_STATE_DIR).is_dir():
        missing.append(ENGINE_STATE_DIR + "/")
    if missing:
        raise BootstrapError(
            ErrorKind.INVALID_PROJECT,
            f"invalid Godot project path: {root} (missing {', '.join(missing)})",
        )
    return True


def is_godot_project(project_path: str | Path) -> bool:
    try:
        return verify_godot_project(project_path)
    except BootstrapError:
        return False
