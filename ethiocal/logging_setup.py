"""
Ethiocal - Logging Setup Module.

Configures root logging once from the command-line entry point. Library
modules never call this; they only use ``logging.getLogger(__name__)``.
"""

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional, Union
from pathlib import Path


DEFAULT_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s - %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"

_configured = False  # guard against double-initialisation


def setup_logging(
    *,
    level: int = logging.WARNING,
    console: bool = True,
    log_file: Optional[Union[str, Path]] = None,
    file_level: Optional[int] = None,
    file_max_bytes: int = 1_000_000,
    file_backup_count: int = 3,
    fmt: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
) -> None:
    """
    Configure root logging once.

    Log records go to stderr so they never mix with the calendar grids
    printed on stdout. A rotating file handler is added when ``log_file``
    is given.

    Args:
        level: Root and console level.
        console: Attach a stderr handler.
        log_file: Optional path of a rotating log file.
        file_level: Level of the file handler. Defaults to ``level``.
        file_max_bytes: Rotation size of the log file.
        file_backup_count: Number of rotated files kept.
        fmt: Record format.
        datefmt: Timestamp format.
    """
    global _configured
    if _configured:
        return

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler_levels = [level]
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    if console:
        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(formatter)
        root.addHandler(ch)

    if log_file:
        fh = RotatingFileHandler(
            log_file, maxBytes=file_max_bytes, backupCount=file_backup_count
        )
        fh.setLevel(file_level if file_level is not None else level)
        fh.setFormatter(formatter)
        root.addHandler(fh)
        handler_levels.append(fh.level)

    root.setLevel(min(handler_levels))

    _configured = True
    logging.getLogger(__name__).debug(
        "Logging initialised (level=%s)", logging.getLevelName(level)
    )

