"""Logging configuration for the geometry toolkit.

The geometry kernel itself only emits DEBUG traces through module loggers
(``logging.getLogger(__name__)``). Applications that want to see them call
:func:`setup_logger` once, which attaches:
- Console output with colored formatting (INFO+)
- File output with detailed formatting (DEBUG+)
"""

import logging
from pathlib import Path
from typing import Optional

import colorlog

CONSOLE_FORMAT = (
    "%(log_color)s%(levelname)-8s%(reset)s %(cyan)s%(name)s%(reset)s: %(message)s"
)
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG_COLORS = {
    'DEBUG': 'blue',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'red,bg_white',
}


def setup_logger(
    name: str = "nav_geometry",
    level: str = "INFO",
    log_file: Optional[str] = None,
    log_to_console: bool = True
) -> logging.Logger:
    """Set up logger with console and file handlers.

    Args:
        name: Logger name. Child module loggers (``nav_geometry.line_2d``)
            propagate into it.
        level: Log level - DEBUG, INFO, WARNING, ERROR
        log_file: Path to log file (None = no file logging)
        log_to_console: Whether to output to console

    Returns:
        Configured logger instance

    Raises:
        ValueError: If level is not a known logging level name

    Example:
        >>> logger = setup_logger("nav_geometry", "DEBUG", "logs/geometry.log")
        >>> logger.info("Scene loaded")
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # Clear existing handlers to avoid duplicates on repeated setup
    logger.handlers.clear()

    if log_to_console:
        console_handler = logging.StreamHandler()
        # Console follows the requested level so -v shows geometry traces
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(
            colorlog.ColoredFormatter(CONSOLE_FORMAT, log_colors=LOG_COLORS)
        )
        logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get logger by name.

    Args:
        name: Logger name (usually module name)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
