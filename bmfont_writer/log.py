"""
Logging setup for BMFont Writer.

Library modules only log through the 'BMFont' logger; applications call
setup_logging() to get console (and optionally file) output.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = 'BMFont'


def setup_logging(log_file: Optional[str] = None, level: int = logging.DEBUG) -> logging.Logger:
    """
    Attach console and optional file handlers to the 'BMFont' logger.

    Existing handlers are removed first, so calling this twice does not
    duplicate output.

    Args:
        log_file: Path of a detailed log file, overwritten on each run
        level: Level for the logger and its handlers

    Returns:
        The configured logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Clear existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter('[%(levelname)s] %(message)s'))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] %(funcName)s: %(message)s'))
        logger.addHandler(file_handler)

    return logger
