from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from . import __version__
from .bootstrapper import BootstrapRequest, GDExtensionBootstrapper, ProgressTracker
from .config_manager import ConfigManager
from .errors import BootstrapError
from .logging_config import setup_logging


logger = logging.getLogger("gdext_bootstrap")


class LoggingProgress(ProgressTracker):
    def on_start(self, total_steps: int) -> None:
        logger.debug("Running %d bootstrap steps", total_steps)

    def on_step_start(self, step_name: str) -> None:
        logger.info("==> %s", step_name)

    def on_step_complete(self, step_name: str, progress: float) -> None:
        logger.debug("%s done (%.0f%%)", step_name, progress * 100)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="gdext-bootstrap",
        description="Bootstrap a Godot C++ (GDExtension) skeleton inside an existing Godot project",
    )
    ap.add_argument("--project", required=True, help="The Godot project directory")
    ap.add_argument("--godot-version", required=True, help="Godot version (godot-cpp branch, e.g. 4.2)")
    ap.add_argument(
        "--godot-repo-url",
        default=None,
        help="godot-cpp repository URL (default: https://github.com/godotengine/godot-cpp)",
    )
    ap.add_argument("--config", type=Path, default=None, help="Path to a YAML settings file")
    ap.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        default=None,
        help="Override the configured log level",
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if not args.project.strip():
        ap.error("Godot project directory is required")
    if not args.godot_version.strip():
        ap.error("Godot version is required")

    # Console logging first so config warnings use the same format.
    setup_logging(args.log_level or "INFO")
    settings = ConfigManager(args.config).get()
    setup_logging(args.log_level or settings.logging.level, settings.logging.file)

    request = BootstrapRequest(
        project_path=args.project,
        godot_version=args.godot_version,
        repo_url=args.godot_repo_url or settings.binding.repo_url,
    )

    bootstrapper = GDExtensionBootstrapper(settings=settings, progress=LoggingProgress())
    try:
        bootstrapper.bootstrap(request)
    except BootstrapError:
        # Already logged with the failing step.
        return 1
    return 0
