"""
Centralized logging configuration for the Kitchen Scaler application.

Module loggers carry their own stdout handler and take their level from the
``kitchen_scaler`` package logger. It defaults to KITCHEN_SCALER_LOG_LEVEL and
is reset by ``setup_logging`` from the settings file, so DEBUG shows which
recipe lines the parser dropped.
"""
import logging
import os
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
LOG_LEVEL_ENV = "KITCHEN_SCALER_LOG_LEVEL"
PACKAGE_LOGGER = "kitchen_scaler"

FORMATTER = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)


def resolve_level(level: str) -> int:
    """Map a level name like "debug" to its numeric value, INFO if unknown."""
    numeric_level = logging.getLevelName(str(level).strip().upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: The name of the logger (typically __name__)

    Returns:
        A Logger writing to stdout; its level is inherited from the package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if package_logger.level == logging.NOTSET:
        package_logger.setLevel(resolve_level(os.getenv(LOG_LEVEL_ENV, "INFO")))

    logger = logging.getLogger(name)

    # Only add handler if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(FORMATTER)
        logger.addHandler(handler)

    return logger


def setup_logging(level: str = "INFO") -> None:
    """Set the level of every kitchen_scaler logger.

    The root logger is left alone; module loggers already write to stdout.
    """
    logging.getLogger(PACKAGE_LOGGER).setLevel(resolve_level(level))
