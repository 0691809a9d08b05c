"""
Logging configuration for the application.
"""
import logging
import sys
from typing import TextIO

from config import Config

LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """Formatter that colours the level name when writing to a terminal."""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def __init__(self, fmt: str = LOG_FORMAT, datefmt: str = DATE_FORMAT, use_color: bool = True):
        super().__init__(fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        """Format the record, leaving the original untouched for other handlers."""
        if not self.use_color:
            return super().format(record)

        color = self.COLORS.get(record.levelname, self.RESET)
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(record)


def setup_logger(name: str, level: int | str = logging.INFO, stream: TextIO | None = None) -> logging.Logger:
    """
    Set up a logger.

    Colours are only used when the stream is a terminal, so redirected
    output and log collectors get plain text.

    Args:
        name: Logger name
        level: Logging level, as a number or a level name
        stream: Output stream, stdout by default

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    stream = stream or sys.stdout
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)

    is_tty = hasattr(stream, "isatty") and stream.isatty()
    handler.setFormatter(ColoredFormatter(use_color=is_tty))

    logger.addHandler(handler)
    return logger


app_logger = setup_logger("companion_chat.relay", Config.LOG_LEVEL)
