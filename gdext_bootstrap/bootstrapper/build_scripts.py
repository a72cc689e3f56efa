from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from ..errors import BootstrapError, ErrorKind
from .models import HostPlatform
from .process import CommandRunner, run_command


logger = logging.getLogger(__name__)

PLATFORMS: Dict[str, HostPlatform] = {
    "darwin": HostPlatform(label="macos", script_extension=".sh"),
    "linux": HostPlatform(label="linux", script_extension=".sh"),
    "win32": HostPlatform(label="windows", script_extension=".bat"),
}

BUILD_TARGETS = {
    "debug": "template_debug",
    "release": "template_release",
}


def resolve_host_platform(system: Optional[str] = None) -> HostPlatform:
    system = system or sys.platform
    key = "linux" if system.startswith("linux") else system
    try:
        return PLATFORMS[key]
    except KeyError:
        raise BootstrapError(ErrorKind.UNSUPPORTED_PLATFORM, f"unsupported platform: {system}") from None


def build_command(python: str, platform: HostPlatform, target: str) -> str:
    return f"{python} -m SCons platform={platform.label} target={target}"


class BuildScriptGenerator:
    def __init__(
        self,
        python: str = "python",
        build_package: str = "SCons",
        runner: Optional[CommandRunner] = None,
        system: Optional[str] = None,
    ):
        self.python = python
        self.build_package = build_package
        self.system = system
        self._run = runner or run_command

    def install_build_tool(self) -> None:
        self._run([self.python, "-m", "pip", "install", self.build_package])

    def write_scripts(self, base_path: str | Path) -> List[Path]:
        platform = resolve_host_platform(self.system)
        base = Path(base_path)
        written: List[Path] = []
        for variant, target in BUILD_TARGETS.items():
            path = base / f"{variant}-build{platform.script_extension}"
            try:
                path.write_text(build_command(self.python, platform, target), encoding="utf-8")
            except OSError as e:
                raise BootstrapError(ErrorKind.FILESYSTEM, f"cannot write {path}: {e}") from e
            logger.info("Wrote %s", path)
            written.append(path)
        return written

    def generate(self, base_path: str | Path) -> List[Path]:
        self.install_build_tool()
        return self.write_scripts(base_path)
