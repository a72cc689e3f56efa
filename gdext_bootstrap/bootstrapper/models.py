from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..config_manager import DEFAULT_REPO_URL
from ..errors import BootstrapError, ErrorKind


@dataclass(frozen=True)
class BootstrapRequest:
    project_path: Path
    godot_version: str
    repo_url: str = DEFAULT_REPO_URL

    def __post_init__(self) -> None:
        # Path("") collapses to Path("."), so an empty Path is caught by its parts.
        raw = self.project_path
        if raw is None or (isinstance(raw, Path) and not raw.parts) or not str(raw).strip():
            raise BootstrapError(ErrorKind.INVALID_REQUEST, "Godot project directory is required")
        if not (self.godot_version or "").strip():
            raise BootstrapError(ErrorKind.INVALID_REQUEST, "Godot version is required")
        object.__setattr__(self, "project_path", Path(raw).expanduser())
        if not self.repo_url:
            object.__setattr__(self, "repo_url", DEFAULT_REPO_URL)


@dataclass(frozen=True)
class HostPlatform:
    label: str
    script_extension: str


@dataclass
class BootstrapResult:
    project_path: Path
    submodule_dir: Path
    written_files: list[Path] = field(default_factory=list)


class ProgressTracker:
    """Simple callback-based progress tracker interface with safe no-ops."""

    def on_start(self, total_steps: int) -> None:  # pragma: no cover - interface
        pass

    def on_step_start(self, step_name: str) -> None:  # pragma: no cover - interface
        pass

    def on_step_complete(self, step_name: str, progress: float) -> None:  # pragma: no cover - interface
        pass

    def on_error(self, step_name: str, error: Exception) -> None:  # pragma: no cover - interface
        pass

    def on_complete(self, project_path: str) -> None:  # pragma: no cover - interface
        pass
