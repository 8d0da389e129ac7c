"""
Configure logging for the Lavalink client.

The client never configures logging on its own: callers hand a logger to
``LavalinkClient`` and the dispatch loop reports everything through it. This
module builds such a logger with console and rotating file output.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from lavalink_client.config.constants import LOGGER_NAME

# Log levels
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Log file rotation
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5

# ANSI colours per level
LEVEL_COLORS = {
    logging.DEBUG: "\033[34m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[31m",
}
COLOR_RESET = "\033[0m"


class ColorFormatter(logging.Formatter):
    """Formatter that wraps each record in the colour of its level."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{COLOR_RESET}"


def configure_logging(
    name: str = LOGGER_NAME,
    file_path: Optional[str] = "logs/",
    log_filename: str = "lavalink_client.log",
    level: Optional[str] = None,
    colorized: bool = False,
) -> logging.Logger:
    """
    Configure a logger with console and file handlers.

    Args:
        name: Logger name
        file_path: Directory for the rotating log file, None to disable it
        log_filename: Log file name inside file_path
        level: Level name, defaults to the LOG_LEVEL environment variable read
            when this is called
        colorized: Colour console output by level

    Returns:
        logging.Logger: The configured logger instance
    """
    logger = logging.getLogger(name)
    level = level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove existing handlers if any
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(ColorFormatter(LOG_FORMAT) if colorized else formatter)
    logger.addHandler(console_handler)

    if file_path is not None:
        log_file = Path(file_path) / log_filename
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=MAX_LOG_SIZE,
                backupCount=BACKUP_COUNT,
                encoding="utf-8",
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Could not set up file logging: {e}")

    # Prevent log propagation to root logger
    logger.propagate = False

    logger.debug("Logging configured")
    return logger
