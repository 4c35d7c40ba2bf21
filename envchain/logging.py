"""
Logging setup for the envchain command line.
The library modules only create loggers; configuring handlers is left to callers.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import TextIO


LOG_LEVEL_VAR = "ENVCHAIN_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | None = None, stream: TextIO | None = None) -> None:
    """
    Configure root logging once, writing to stderr so stdout stays usable for data.
    Precedence: explicit level, then ENVCHAIN_LOG_LEVEL, then WARNING.
    """
    requested = (level or os.getenv(LOG_LEVEL_VAR) or DEFAULT_LOG_LEVEL).upper()
    log_level = getattr(logging, requested, None)
    logging.basicConfig(
        level=log_level if isinstance(log_level, int) else logging.WARNING,
        format=LOG_FORMAT,
        stream=stream or sys.stderr,
    )
    if not isinstance(log_level, int):
        logging.getLogger(__name__).warning("Unknown log level %r; using WARNING", requested)
