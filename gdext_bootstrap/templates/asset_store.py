from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from ..errors import BootstrapError, ErrorKind


ASSETS_DIR = Path(__file__).resolve().parent / "assets"


class AssetStore(Mapping[str, bytes]):
    """Read-only set of template payloads keyed by relative asset name."""

    def __init__(self, assets: Mapping[str, bytes]):
        self._assets = MappingProxyType(dict(assets))

    @classmethod
    def from_directory(cls, root: str | Path) -> "AssetStore":
        base = Path(root)
        data: Dict[str, bytes] = {}
        for p in sorted(base.rglob("*")):
            if p.is_file():
                data[p.relative_to(base).as_posix()] = p.read_bytes()
        return cls(data)

    def __getitem__(self, name: str) -> bytes:
        return self._assets[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._assets)

    def __len__(self) -> int:
        return len(self._assets)

    def read(self, name: str) -> bytes:
        try:
            return self._assets[name]
        except KeyError:
            raise BootstrapError(ErrorKind.FILESYSTEM, f"bundled template not found: {name}") from None

    def read_text(self, name: str, encoding: str = "utf-8") -> str:
        return self.read(name).decode(encoding)


_default_store: Optional[AssetStore] = None


def default_assets() -> AssetStore:
    """Templates shipped with the package, loaded once per process."""
    global _default_store
    if _default_store is None:
        _default_store = AssetStore.from_directory(ASSETS_DIR)
    return _default_store
