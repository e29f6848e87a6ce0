"""Logging setup for sha1py.

Library modules log through stdlib loggers under the 'sha1py' name, so
events are dropped until an application attaches a handler. The CLI
does that with configure_logging().
"""

import logging
import sys
from typing import Optional, TextIO

import structlog

PACKAGE_LOGGER = 'sha1py'


def get_logger(name: str):
    """Return a structlog logger backed by the stdlib logger `name`."""
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(verbose: bool = False, stream: Optional[TextIO] = None) -> None:
    """
    Render sha1py events to a stream (stderr by default).

    Args:
        verbose: Include debug events; otherwise warnings and above only
        stream: Where to write rendered events
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter('%(message)s'))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for old in list(package_logger.handlers):
        package_logger.removeHandler(old)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
    )
