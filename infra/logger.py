from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Union

from infra.paths import LOG_DIR

# Centralized logging setup shared by the engine, the session runtime and the API.
DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s:%(lineno)d] %(message)s"
JSON_FORMAT = (
    '{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","line":%(lineno)d,"msg":"%(message)s"}'
)
DEFAULT_LOGFILE = LOG_DIR / "engine.log"


def configure_logging(
    level: Union[str, int] = "INFO",
    *,
    json: bool = False,
    logfile: str | Path | None = None,
) -> None:
    """
    Configure the root logger with stdout + optional file handler.

    The engine itself never calls this; applications (the API, demo
    scripts) call it once on startup.

    Args:
        level: Logging level name or int (e.g., "DEBUG", logging.INFO).
        json: Emit JSON lines when True; otherwise a human-friendly format.
        logfile: File path to append logs, e.g. DEFAULT_LOGFILE; None disables file output.
    """
    formatter = logging.Formatter(JSON_FORMAT if json else DEFAULT_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if logfile is not None:
        log_path = Path(logfile)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    logging.captureWarnings(True)


def get_logger(name: str) -> logging.Logger:
    """Return a namespaced logger; configure_logging() should be called once on startup."""
    return logging.getLogger(name)


# Usage: from infra.logger import configure_logging, get_logger; configure_logging("DEBUG"); log = get_logger(__name__); log.info("ready")
