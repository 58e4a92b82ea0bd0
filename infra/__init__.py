from .paths import PROJECT_ROOT, STORAGE_DIR, LOG_DIR, TILE_LIBRARY_DIR, DEFAULT_TILE_LIBRARY
from .logger import configure_logging, get_logger, DEFAULT_LOGFILE

__all__ = [
    "PROJECT_ROOT",
    "STORAGE_DIR",
    "LOG_DIR",
    "TILE_LIBRARY_DIR",
    "DEFAULT_TILE_LIBRARY",
    "DEFAULT_LOGFILE",
    "configure_logging",
    "get_logger",
]
