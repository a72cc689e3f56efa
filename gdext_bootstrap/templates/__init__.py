"""Bundled GDExtension template files."""

from .asset_store import AssetStore, default_assets

__all__ = ["AssetStore", "default_assets"]
