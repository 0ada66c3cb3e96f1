"""Logging setup for command line use."""

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
HANDLER_NAME = "i3wm-delegate"


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """Log to stderr at the given level.

    Library code only creates loggers; call this from entry points. Calling
    it again replaces the handler installed by the previous call.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for existing in list(root_logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            root_logger.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)

    logging.getLogger(__name__).debug(f"Logging configured: level={level}")
