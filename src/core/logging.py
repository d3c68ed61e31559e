"""Logging helpers for the randomization framework.

Library modules obtain loggers through :func:`get_logger`; nothing is printed
unless the application calls :func:`configure_logging` (or configures the
``netrandomize`` logger itself).
"""

from __future__ import annotations

import logging

__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]

ROOT_LOGGER_NAME = "netrandomize"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger named ``netrandomize.<name>``.
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling this more than once does not add duplicate handlers.

    Args:
        level: Logging level name or number.

    Returns:
        The package root logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    # FileHandler subclasses StreamHandler but does not reach the console
    if not any(type(h) is logging.StreamHandler for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(handler)
    return logger
