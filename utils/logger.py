# -*- coding: utf-8 -*-
"""
Logging configuration.

All modules log under the "eventform" logger: a rotating file in
Config.LOGS_DIR plus the console. Submission phases are logged at INFO,
request bodies at DEBUG (file only).
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, Union

ROOT_LOGGER_NAME = "eventform"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(threadName)s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"

# Will be set by setup_logger
_logger: Optional[logging.Logger] = None


def _file_handler(config) -> Optional[logging.Handler]:
    try:
        config.LOGS_DIR.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            config.LOG_PATH,
            maxBytes=config.LOG_MAX_BYTES,
            backupCount=config.LOG_BACKUP_COUNT,
            encoding="utf-8"
        )
    except OSError as e:
        print(f"[WARNING] File logging disabled ({config.LOG_PATH}): {e}", file=sys.stderr)
        return None
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_logger(console_level: Union[int, str, None] = None, log_to_file: bool = True) -> logging.Logger:
    """
    Configure the application logger.

    Args:
        console_level: Console threshold (defaults to Config.LOG_LEVEL)
        log_to_file: Add the rotating file handler

    Returns:
        The "eventform" logger
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_to_file:
        handler = _file_handler(Config)
        if handler is not None:
            logger.addHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level or Config.LOG_LEVEL)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a module, configuring logging on first use.
    """
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)
