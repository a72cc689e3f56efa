from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from ..errors import BootstrapError, ErrorKind
from ..templates import AssetStore, default_assets


logger = logging.getLogger(__name__)

SENTINEL = "COMPATIBILITY_MINIMUM"
EXT_DIR = "ext"
BIN_DIR = "bin"
MANIFEST_ASSET = "gd.gdextension"
MANIFEST_TARGET = f"{BIN_DIR}/gd.gdextension"

# (asset name, destination relative to the project root)
TEMPLATE_FILES: Tuple[Tuple[str, str], ...] = (
    ("register_types.h", f"{EXT_DIR}/register_types.h"),
    ("register_types.cpp", f"{EXT_DIR}/register_types.cpp"),
    ("gdexample.h", f"{EXT_DIR}/example/gdexample.h"),
    ("gdexample.cpp", f"{EXT_DIR}/example/gdexample.cpp"),
    ("SConstruct", "SConstruct"),
)


def substitute_version(template: str, godot_version: str) -> str:
    return template.replace(SENTINEL, godot_version)


class ScaffoldWriter:
    """Writes the extension skeleton into a project directory.

    Existing directories are reused and existing files overwritten. Writes are
    not transactional: a failure leaves whatever was already written in place.
    """

    def __init__(self, assets: Optional[AssetStore] = None):
        self.assets = assets or default_assets()

    def create_directory_structure(self, base_path: str | Path) -> None:
        base = Path(base_path)
        for name in (EXT_DIR, BIN_DIR):
            target = base / name
            if target.is_dir():
                logger.debug("%s already exists, skipping", target)
                continue
            self._mkdir(target)

    def write_templates(self, base_path: str | Path, godot_version: str) -> List[Path]:
        base = Path(base_path)
        written: List[Path] = []
        for asset, rel in TEMPLATE_FILES:
            written.append(self._write(base / rel, self.assets.read(asset)))

        manifest = substitute_version(self.assets.read_text(MANIFEST_ASSET), godot_version)
        written.append(self._write(base / MANIFEST_TARGET, manifest.encode("utf-8")))
        return written

    def scaffold(self, base_path: str | Path, godot_version: str) -> List[Path]:
        self.create_directory_structure(base_path)
        return self.write_templates(base_path, godot_version)

    def _mkdir(self, path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise BootstrapError(ErrorKind.FILESYSTEM, f"cannot create directory {path}: {e}") from e

    def _write(self, path: Path, data: bytes) -> Path:
        self._mkdir(path.parent)
        try:
            path.write_bytes(data)
        except OSError as e:
            raise BootstrapError(ErrorKind.FILESYSTEM, f"cannot write {path}: {e}") from e
        logger.info("Wrote %s", path)
        return path
