"""Logging configuration for component-forge.

All modules obtain loggers through :func:`get_logger` so that they live
under the ``component_forge`` hierarchy and share one handler.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "component_forge"


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> logging.Logger:
    """Set up logging for the package.

    Args:
        verbose: Enable DEBUG output (INFO otherwise)
        console: Rich console to log to (defaults to stderr)

    Returns:
        The package root logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_time=False,
            show_path=verbose,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger inside the package hierarchy.

    Args:
        name: Module name, usually ``__name__``

    Returns:
        Logger instance
    """
    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
