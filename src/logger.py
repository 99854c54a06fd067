"""Console logging for the SQL fragment generators."""

import logging
from enum import StrEnum

from src import settings


class ConsoleFormat(StrEnum):
    """ANSI escape sequences used to colour console output."""

    RESET = "\033[0m"
    BLACK = "\033[30m"
    RED = "\033[31m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    LIGHT_GREY = "\033[37m"
    HIGHLIGHT_RED = "\033[41m"
    BOLD = "\033[1m"


class PlainFormatter(logging.Formatter):
    """Brace-style formatter shared by every console handler."""

    FMT = "{asctime} - {name} - {levelname} - {message}"

    def __init__(self) -> None:
        super().__init__(self.FMT, style="{", validate=True)


class ColourFormatter(PlainFormatter):
    """Wraps each formatted record in the colour for its level."""

    LEVEL_COLOURS = {
        logging.DEBUG: ConsoleFormat.LIGHT_GREY,
        logging.INFO: ConsoleFormat.BLUE,
        logging.WARNING: ConsoleFormat.YELLOW,
        logging.ERROR: ConsoleFormat.RED,
        logging.CRITICAL: ConsoleFormat.BOLD + ConsoleFormat.HIGHLIGHT_RED + ConsoleFormat.BLACK,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format the record, then colour it by level."""
        colour = self.LEVEL_COLOURS.get(record.levelno, ConsoleFormat.RESET)
        return f"{colour}{super().format(record)}{ConsoleFormat.RESET}"


def build_handler(colour: bool) -> logging.Handler:
    """Stream handler with the plain or coloured formatter."""
    handler = logging.StreamHandler()
    handler.setLevel(settings.LOG_LEVEL)
    handler.setFormatter(ColourFormatter() if colour else PlainFormatter())
    return handler


LOGGER = logging.getLogger(settings.LOGGER_NAME)
LOGGER.setLevel(settings.LOG_LEVEL)
LOGGER.addHandler(build_handler(settings.LOG_COLOUR_ENABLED))
