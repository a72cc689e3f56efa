"""Bootstrapper package for turning Godot projects into GDExtension workspaces."""

from .models import BootstrapRequest, BootstrapResult, HostPlatform, ProgressTracker
from .godot_bootstrapper import GDExtensionBootstrapper
from .dependencies import check_dependencies
from .project_validator import is_godot_project, verify_godot_project
from .git_cli import GitCLI, submodule_name_from_url
from .scaffold import ScaffoldWriter
from .build_scripts import BuildScriptGenerator, resolve_host_platform
from .process import run_command, working_directory

__all__ = [
    "BootstrapRequest",
    "BootstrapResult",
    "HostPlatform",
    "ProgressTracker",
    "GDExtensionBootstrapper",
    "check_dependencies",
    "is_godot_project",
    "verify_godot_project",
    "GitCLI",
    "submodule_name_from_url",
    "ScaffoldWriter",
    "BuildScriptGenerator",
    "resolve_host_platform",
    "run_command",
    "working_directory",
]
