"""
Logging setup for the game host and scripts.

Console gets INFO and above, ``debug.log`` gets everything from DEBUG up with
timestamps and source locations. Library modules only ever call
``loguru.logger``; nothing is configured until init_logger() runs.
"""

import sys

from loguru import logger

CONSOLE_FORMAT = "[{time:HH:mm:ss}][{level}] {message}"
FILE_FORMAT = "[{time:YYYY-MM-DD HH:mm:ss}][{level}][{name}:{line}] {message}"


def init_logger(log_file: str = "debug.log", console_level: str = "INFO",
                file_level: str = "DEBUG"):
    logger.remove()
    logger.add(sys.stdout, level=console_level, format=CONSOLE_FORMAT, catch=True)
    if log_file:
        logger.add(log_file, level=file_level, format=FILE_FORMAT, catch=True)

    logger.info("Logging system initialized")
    logger.debug("Debug logging enabled to {}", log_file)
