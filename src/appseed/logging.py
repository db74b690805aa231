"""Logging setup for appseed commands."""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from appseed.console import err_console

_LOGGER_NAME = "appseed"


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Attach a rich handler to the appseed logger hierarchy.

    Warnings and errors are always shown; ``verbose`` lowers the level to
    DEBUG so file operations and git calls are traced.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers so repeated invocations (tests, CliRunner) don't duplicate.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=err_console,
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger


__all__ = ["configure_logging"]
