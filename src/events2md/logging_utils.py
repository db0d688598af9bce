#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/events2md/logging_utils.py
"""Logging setup for the events2md command line.

The console handler always writes to stderr so that rendered markdown on
stdout is never mixed with log records. A log file, when requested, gets a
copy of the same records in the same format.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
TRACE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(log_level: int | str) -> int:
    """Turn a level name such as ``"debug"`` into its numeric value.

    Raises
    ------
    ValueError
        If the name is not a standard logging level

    """
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    return level


def _build_formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    return logging.Formatter(LOG_FORMAT)


def _attach(root: logging.Logger, handler: logging.Handler, level: int, formatter: logging.Formatter) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    root.addHandler(handler)


def _open_log_file(log_file: str) -> Optional[logging.FileHandler]:
    try:
        return logging.FileHandler(log_file, mode="a", encoding="utf-8")
    except OSError as exc:
        # Rendering goes on with console logging only
        logging.getLogger(__name__).warning("Could not create log file %s: %s", log_file, exc)
        return None


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
) -> logging.Logger:
    """Replace the root logger's handlers with the events2md ones.

    Parameters
    ----------
    log_level : int | str
        Numeric level or level name, case-insensitive
    log_file : str, optional
        File that receives a copy of the log records
    trace_mode : bool, default False
        Prefix records with a timestamp and the logger name

    Returns
    -------
    logging.Logger
        The root logger

    """
    level = resolve_level(log_level)
    formatter = _build_formatter(trace_mode)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    _attach(root, logging.StreamHandler(sys.stderr), level, formatter)

    file_handler = _open_log_file(log_file) if log_file else None
    if file_handler is not None:
        _attach(root, file_handler, level, formatter)
        logging.getLogger(__name__).info("Logging to file: %s", log_file)

    return root
