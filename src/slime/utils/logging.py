"""
Logging configuration for the slime bot.

Logging is set up once, explicitly, at process start and never torn down.
Output is line-based text on stderr with level filtering.
"""

import logging
import sys
from typing import Any, Optional, TextIO

import colorlog

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LOG_COLORS = {
    "TRACE": "white",
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}

_FORMAT = "%(asctime)s %(levelname)-8s %(name)-28s %(message)s"
_COLORED_FORMAT = (
    "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s "
    "%(blue)s%(name)-28s%(reset)s %(message)s"
)
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str) -> int:
    """Map a level name (including TRACE) to its numeric value."""
    name = level.upper()
    if name == "TRACE":
        return TRACE
    return getattr(logging, name, logging.INFO)


def setup_logging(
    level: str = "INFO",
    colored: Optional[bool] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Set up logging configuration for the bot.

    Args:
        level: Log level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)
        colored: Force colored output on or off; defaults to whether the
            stream is a TTY
        stream: Output stream, stderr by default
    """
    numeric_level = resolve_level(level)
    stream = stream or sys.stderr

    if colored is None:
        colored = hasattr(stream, "isatty") and stream.isatty()

    if colored:
        formatter: logging.Formatter = colorlog.ColoredFormatter(
            _COLORED_FORMAT,
            datefmt=_DATEFMT,
            reset=True,
            log_colors=LOG_COLORS,
        )
    else:
        formatter = logging.Formatter(_FORMAT, datefmt=_DATEFMT)

    handler: logging.StreamHandler[Any] = logging.StreamHandler(stream)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove any existing handlers to avoid duplicates
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)

    _configure_external_loggers(numeric_level)

    logging.getLogger(__name__).debug(
        f"🔧 Logging configured - Level: {logging.getLevelName(numeric_level)}"
    )


def _configure_external_loggers(level: int) -> None:
    """Configure log levels for external libraries."""
    # Gateway chatter is only wanted when tracing
    discord_level = level if level <= TRACE else max(level, logging.WARNING)
    logging.getLogger("discord").setLevel(discord_level)
    logging.getLogger("discord.http").setLevel(discord_level)
    logging.getLogger("discord.gateway").setLevel(discord_level)

    logging.getLogger("asyncio").setLevel(logging.WARNING)
