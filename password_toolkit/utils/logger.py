"""
Logging utilities for the Password Security Toolkit.
"""

import logging
import os
import sys
from typing import Optional

LOGGER_NAME = "password_toolkit"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class Logger:
    """Configures the toolkit's named logger"""

    # Log levels
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    def __init__(self, name: str = LOGGER_NAME, log_file: Optional[str] = None,
                 level: int = logging.INFO, console: bool = True):
        """Initialize the logger

        Calling this again with the same name replaces the handlers, so the
        CLI can reconfigure the default logger after parsing its arguments.

        Args:
            name: Logger name
            log_file: Optional file to log to
            level: Logging level
            console: Whether to log to stdout
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)
        self.logger.propagate = False

        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

        if console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)

            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        # Otherwise logging.lastResort prints warnings to stderr
        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def get_logger(self):
        """Get the logger instance"""
        return self.logger


def get_logger(suffix: str) -> logging.Logger:
    """Child of the toolkit logger, e.g. ``password_toolkit.cracker``"""
    return logging.getLogger(f"{LOGGER_NAME}.{suffix}")


# Default logger for the module-level helpers below
default_logger = Logger().get_logger()


def debug(msg: str, *args, **kwargs):
    """Log a debug message"""
    default_logger.debug(msg, *args, **kwargs)


def info(msg: str, *args, **kwargs):
    """Log an info message"""
    default_logger.info(msg, *args, **kwargs)


def warning(msg: str, *args, **kwargs):
    """Log a warning message"""
    default_logger.warning(msg, *args, **kwargs)


def error(msg: str, *args, **kwargs):
    """Log an error message"""
    default_logger.error(msg, *args, **kwargs)


def critical(msg: str, *args, **kwargs):
    """Log a critical message"""
    default_logger.critical(msg, *args, **kwargs)
