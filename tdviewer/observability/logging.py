"""
Logging setup for the viewer.

Modules get their logger from get_logger(__name__). The first call attaches
one stream handler to the ``tdviewer`` package logger at config.LOG_LEVEL;
module loggers are its children and inherit both. Loggers outside the
package (uvicorn, FastAPI) are left alone.
"""

from __future__ import annotations

import logging

from tdviewer.config import LOG_LEVEL

PACKAGE_LOGGER = "tdviewer"

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def _level_from_config() -> int:
    # Unknown names fall back to INFO rather than failing at import
    level = logging.getLevelName(LOG_LEVEL)
    return level if isinstance(level, int) else logging.INFO


def _configure_package_logger() -> None:
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if package_logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    package_logger.addHandler(handler)
    package_logger.setLevel(_level_from_config())


def get_logger(name: str) -> logging.Logger:
    _configure_package_logger()
    return logging.getLogger(name)
