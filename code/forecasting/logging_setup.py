"""
Logging configuration for the ``forecasting`` package.

- ``configure_logging(level)``: attach one ``StreamHandler`` to the package
  logger. Called once by entry points (run_forecast.py).
- ``get_logger(name)``: used by library modules; makes sure the package logger
  has a ``NullHandler`` so nothing is printed until an entry point configures
  output.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Optional, Union

_PKG_LOGGER_NAME = "forecasting"
_CONFIGURED = False


def _parse_level(level: Optional[Union[int, str]]) -> int:
    # Explicit level wins; otherwise FORECAST_LOG_LEVEL, otherwise INFO.
    if level is None or (isinstance(level, str) and not level.strip()):
        level = os.getenv("FORECAST_LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level
    name = str(level).strip().upper()
    if name.isdigit():
        return int(name)
    numeric = getattr(logging, name, None)
    return numeric if isinstance(numeric, int) else logging.INFO


def configure_logging(
    level: Optional[Union[int, str]] = None,
    fmt: Optional[str] = None,
    stream: IO[str] = sys.stderr,
) -> None:
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    resolved = _parse_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s"))

    logger.setLevel(resolved)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
