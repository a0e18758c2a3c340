"""
Logging Configuration
=====================
Routes every `bouncingball.*` module logger to stdout and, on request, to a
log file. Called once from `main()` with the level chosen on the command line.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "bouncingball"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach console (and optional file) handlers to the package logger.

    Calling it again replaces the handlers installed by the previous call,
    so a restarted window does not print every record twice.

    Args:
        level: Threshold for the logger and all of its handlers.
        log_file: Path of a log file to (over)write next to the console output.

    Returns:
        The package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
