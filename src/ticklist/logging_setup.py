"""Logging configuration for the CLI."""

from __future__ import annotations

import logging
import sys

_HANDLER_NAME = "ticklist-console"


def configure_logging(level: str | int = logging.WARNING) -> None:
    """Attach a stderr handler to the ``ticklist`` logger.

    Safe to call more than once: an existing handler is replaced rather than
    duplicated.
    """
    logger = logging.getLogger("ticklist")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
