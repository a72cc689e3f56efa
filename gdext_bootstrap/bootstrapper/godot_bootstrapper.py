from __future__ import annotations

import contextlib
import logging
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from ..config_manager import Settings
from ..errors import BootstrapError
from ..templates import AssetStore, default_assets
from .build_scripts import BuildScriptGenerator
from .dependencies import ResolvedTools, check_dependencies
from .git_cli import GitCLI, submodule_name_from_url
from .models import BootstrapRequest, BootstrapResult, ProgressTracker
from .process import CommandRunner, run_command, working_directory
from .project_validator import verify_godot_project
from .scaffold import ScaffoldWriter


logger = logging.getLogger(__name__)


class GDExtensionBootstrapper:
    """Turns an existing Godot project into a GDExtension workspace.

    Steps run in a fixed order and the first failure aborts the run. Nothing
    already written is rolled back.
    """

    STEPS = (
        "validate-request",
        "check-dependencies",
        "validate-project",
        "enter-project",
        "init-git",
        "add-submodule",
        "scaffold",
        "build-scripts",
    )

    def __init__(
        self,
        settings: Optional[Settings] = None,
        assets: Optional[AssetStore] = None,
        progress: Optional[ProgressTracker] = None,
        runner: Optional[CommandRunner] = None,
        system: Optional[str] = None,
    ):
        self.settings = settings or Settings()
        self.assets = assets or default_assets()
        self.progress = progress or ProgressTracker()
        self.runner = runner or run_command
        self.system = system

    def bootstrap(self, request: BootstrapRequest) -> BootstrapResult:
        project_path = request.project_path.resolve()
        result = BootstrapResult(project_path=project_path, submodule_dir=Path())
        tools: List[ResolvedTools] = []

        with contextlib.ExitStack() as stack:

            def validate_request() -> None:
                # An unusable URL is rejected before touching the filesystem.
                submodule_name_from_url(request.repo_url)

            def check() -> None:
                cfg = self.settings.tools
                tools.append(check_dependencies(git=cfg.git, python=cfg.python))
                for name, path in tools[0].paths().items():
                    logger.info("Using %s at %s", name, path)

            def validate() -> None:
                verify_godot_project(project_path)

            def enter() -> None:
                stack.enter_context(working_directory(project_path))

            def init_git() -> None:
                GitCLI(tools[0].git, runner=self.runner).init()

            def add_submodule() -> None:
                git = GitCLI(tools[0].git, runner=self.runner)
                result.submodule_dir = project_path / git.add_submodule(request.repo_url, request.godot_version)

            def scaffold() -> None:
                writer = ScaffoldWriter(self.assets)
                result.written_files.extend(writer.scaffold(Path("."), request.godot_version))

            def build_scripts() -> None:
                generator = BuildScriptGenerator(
                    python=tools[0].python,
                    build_package=self.settings.binding.build_package,
                    runner=self.runner,
                    system=self.system,
                )
                result.written_files.extend(generator.generate(Path(".")))

            plan: List[Tuple[str, Callable[[], None]]] = list(
                zip(
                    self.STEPS,
                    (validate_request, check, validate, enter, init_git, add_submodule, scaffold, build_scripts),
                )
            )
            self._run_steps(plan)

        result.written_files = [project_path / p for p in result.written_files]
        self.progress.on_complete(str(project_path))
        logger.info("Godot C++ extension bootstrapped successfully in %s", project_path)
        return result

    def _run_steps(self, plan: List[Tuple[str, Callable[[], None]]]) -> None:
        self.progress.on_start(len(plan))
        for completed, (name, step) in enumerate(plan, start=1):
            self.progress.on_step_start(name)
            try:
                step()
            except BootstrapError as e:
                logger.error("Bootstrap failed at step '%s': %s", name, e)
                self.progress.on_error(name, e)
                raise
            self.progress.on_step_complete(name, completed / len(plan))
