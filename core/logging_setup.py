"""
Logging setup for applications embedding the forecast engine.

Library modules only call logging.getLogger(__name__); handlers are attached
here, once, by whoever owns the process.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ROOT_LOGGER_NAMES = ("core", "data_prep", "history", "scenarios", "engine", "insights")


def setup_logging(
    level: int = logging.INFO,
    *,
    log_file: Optional[Union[str, Path]] = None,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> logging.Logger:
    """
    Attach a console handler (and optionally a rotating file handler) to the
    forecast packages' loggers. Calling it twice does not duplicate handlers.
    """
    formatter = logging.Formatter(LOG_FORMAT)

    handlers: list[logging.Handler] = []
    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    handlers.append(console)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for name in ROOT_LOGGER_NAMES:
        lg = logging.getLogger(name)
        lg.setLevel(level)
        if lg.handlers:
            continue
        for h in handlers:
            lg.addHandler(h)
        lg.propagate = False

    return logging.getLogger("engine")
