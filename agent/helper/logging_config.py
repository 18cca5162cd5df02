"""
Logging setup shared by the agent modules.
"""

import logging
import os
import sys

LOGGER_NAME = "voice-agent"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging() -> logging.Logger:
    """
    Configure the application logger with a console handler.

    Returns:
        logging.Logger: The configured logger instance
    """
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    # the worker installs its own root handlers
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child of the application logger"""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
