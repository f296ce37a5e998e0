"""Package logger.

All modules log through the ``esdata`` logger. Nothing is emitted until the
application configures a handler, either its own or via
``configure_logging``.
"""

from __future__ import annotations

import logging

LOGGER_NAME = "esdata"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def warn(message: str) -> None:
    logger.warning(message)


def debug(message: str, *args) -> None:
    logger.debug(message, *args)


def configure_logging(level: str | None = "INFO") -> None:
    """Attach a stream handler to the package logger.

    Args:
        level:
            Logging level name, e.g. DEBUG or INFO.
            Unknown names fall back to INFO.
    """
    resolved_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%m-%d %H:%M:%S",
        )
    )
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(resolved_level)
    logger.propagate = False
