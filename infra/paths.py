from __future__ import annotations

from pathlib import Path

# Resolved project root (parent directory of this infra package).
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Common storage locations.
STORAGE_DIR = PROJECT_ROOT / "storage"
LOG_DIR = STORAGE_DIR / "logs"
TILE_LIBRARY_DIR = STORAGE_DIR / "tiles"
DEFAULT_TILE_LIBRARY = TILE_LIBRARY_DIR / "default_library.json"
