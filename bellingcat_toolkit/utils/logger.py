"""Logging setup for the command line"""

import logging
import sys

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s - %(message)s'


def setup_logger(name: str = "bellingcat_toolkit", level: str = "INFO") -> logging.Logger:
    """Attach a stdout handler to the package logger once.

    Module loggers (``logging.getLogger(__name__)``) propagate to it.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(handler)

    return logger


def quiet_third_party_loggers():
    """Raise HTTP client loggers to WARNING"""
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('requests').setLevel(logging.WARNING)
