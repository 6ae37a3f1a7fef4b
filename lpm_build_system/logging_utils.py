from __future__ import annotations

import logging
from pathlib import Path

from .lib.env import PATHS

PACKAGE_LOGGER = "lpm_build_system"
DEFAULT_LOG_PATH = PATHS.log_default
FALLBACK_LOG_NAME = "lpm-entrypoint.log"


def _file_handler(path: Path) -> logging.FileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    )
    return handler


def configure_logging(log_path: str = DEFAULT_LOG_PATH, level: int = logging.INFO) -> str:
    """Record the entrypoint's decisions (env files, installer command) to a file.

    Only the package logger is touched; stdout/stderr belong to the installer
    and the prompt utilities. The log usually sits under the build-system dir,
    which can be a read-only bind mount in the container, so an unwritable
    location falls back to the working directory.

    Returns the log file in use. Calling again keeps the first file.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    for h in logger.handlers:
        if isinstance(h, logging.FileHandler):
            return h.baseFilename

    requested = Path(log_path).absolute()
    try:
        handler = _file_handler(requested)
    except OSError:
        handler = _file_handler(Path.cwd() / FALLBACK_LOG_NAME)

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.info("Logging to %s (requested %s)", handler.baseFilename, requested)
    return handler.baseFilename
