# -*- coding: utf-8 -*-
"""
Logging setup (ISO-8601 UTC timestamps, color output via Rich).

Library modules only ask for ``logging.getLogger(__name__)``; handlers are
installed by ``setup_logging``, which the command line calls once.
"""

from __future__ import annotations

import logging
import os
import time
from typing import Union

from rich.logging import RichHandler

LOGLEVEL_ENV = "FASTB_ALIGN_LOGLEVEL"


class UTCFormatter(logging.Formatter):
    """Logging formatter with ISO-8601 UTC timestamps."""
    converter = time.gmtime  # UTC

    def formatTime(self, record, datefmt=None):
        return time.strftime("%Y-%m-%dT%H:%M:%SZ", self.converter(record.created))


def _resolve_level(level: Union[str, int, None]) -> int:
    if level is None:
        level = os.getenv(LOGLEVEL_ENV, "INFO")
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)


def setup_logging(level: Union[str, int, None] = None) -> logging.Logger:
    """
    Route the root logger through a RichHandler.

    Parameters
    ----------
    level : str | int | None
        Explicit level. When None, ``FASTB_ALIGN_LOGLEVEL`` decides
        (default INFO).

    Returns
    -------
    logging.Logger
        The ``fastb_align`` package logger.
    """
    handler = RichHandler(rich_tracebacks=True, markup=False, show_level=False, show_time=False, show_path=False)
    handler.setFormatter(UTCFormatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"))
    logging.basicConfig(level=_resolve_level(level), handlers=[handler], force=True)
    return logging.getLogger("fastb_align")
