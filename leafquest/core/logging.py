"""
Logging configuration module for the game.

Two channels share a single rich handler: the ``leafquest`` logger for engine
events (saves, stage changes, catalog problems) and its ``leafquest.combat``
child, which echoes every combat log entry. Their levels are set separately,
so a host can follow the fight without the engine chatter or the other way
around.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "leafquest"
COMBAT_LOGGER_NAME = f"{LOGGER_NAME}.combat"


def get_logger(name: str) -> logging.Logger:
    """
    Gets a logger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        logging.Logger: The logger instance.

    """
    return logging.getLogger(name)


logger = get_logger(LOGGER_NAME)
combat_logger = get_logger(COMBAT_LOGGER_NAME)


def setup_logging(
    level: int | str = logging.INFO,
    combat_level: int | str | None = None,
    console: Console | None = None,
) -> RichHandler:
    """
    Attaches a rich handler to the game loggers.

    Only the ``leafquest`` hierarchy is touched: the root logger of the host
    application is left alone and records stop at the game's handler. Calling
    it again replaces the handler rather than stacking a second one.

    Args:
        level (int | str):
            Level of the engine channel. Defaults to logging.INFO.
        combat_level (int | str | None):
            Level of the combat channel. None follows the engine channel.
        console (Console | None):
            Where records are printed. Defaults to a 120 column stderr console.

    Returns:
        RichHandler: The installed handler.

    """
    console = console or Console(width=120, stderr=True, force_jupyter=False)
    handler = RichHandler(
        console=console,
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s - %(message)s", datefmt="[%X]"))

    for previous in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(previous)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    combat_logger.setLevel(logging.NOTSET if combat_level is None else combat_level)
    return handler


def _with_context(message: str, context: dict[str, Any] | None) -> str:
    if context:
        context_str = " ".join(f"{k}={v}" for k, v in context.items())
        message = f"{message} [{context_str}]"
    return message


def log_combat(message: str, context: dict[str, Any] | None = None) -> None:
    """Echoes a combat log entry on the combat channel."""
    combat_logger.info(_with_context(message, context))


def log_error(message: str, context: dict[str, Any] | None = None) -> None:
    """
    Logs an error message with optional context.

    Args:
        message (str): The error message.
        context (dict[str, Any] | None): Optional context dictionary.

    """
    logger.error(_with_context(message, context))


def log_info(message: str, context: dict[str, Any] | None = None) -> None:
    logger.info(_with_context(message, context))


def log_debug(message: str, context: dict[str, Any] | None = None) -> None:
    logger.debug(_with_context(message, context))
