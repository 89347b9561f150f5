"""Locating asset files on disk."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

ASSET_PATH_ENV = "HANDMADE_ASSET_PATH"


def _default_asset_root() -> Path:
    configured = os.environ.get(ASSET_PATH_ENV)
    if configured:
        return Path(configured)
    return Path(__file__).resolve().parent / "assets"


def locate_asset(subpath: str | os.PathLike[str], asset_root: str | os.PathLike[str] | None = None) -> Path:
    """Return the absolute path of an asset, raising if it does not exist."""
    root = Path(asset_root) if asset_root is not None else _default_asset_root()
    full_path = (root / subpath).absolute()
    if not full_path.exists():
        raise FileNotFoundError(f"Asset not found: {full_path}")
    logger.debug("Located: %s", full_path)
    return full_path