"""Structured logging configuration for the kinship engine.

This module provides colored console logging, opt-in rotating file logging,
package-wide level control and a timing helper.
"""

import logging
import os
import time
from contextlib import contextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

import colorlog


CONSOLE_FORMAT_COLOR = "%(log_color)s%(levelname)-8s%(reset)s %(blue)s%(name)s%(reset)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _setup_console_handler(level: int) -> logging.Handler:
    """Create and configure a colored console handler.

    Args:
        level: Logging level

    Returns:
        Configured console handler
    """
    console_handler = colorlog.StreamHandler()
    console_handler.setLevel(level)

    formatter = colorlog.ColoredFormatter(
        CONSOLE_FORMAT_COLOR,
        datefmt=DATE_FORMAT,
        log_colors={
            'DEBUG': 'cyan',
            'INFO': 'green',
            'WARNING': 'yellow',
            'ERROR': 'red',
            'CRITICAL': 'red,bg_white',
        }
    )

    console_handler.setFormatter(formatter)
    return console_handler


def _setup_file_handler(level: int, log_dir: Path) -> logging.Handler:
    """Create and configure rotating file handler.

    Args:
        level: Logging level
        log_dir: Directory for log files

    Returns:
        Configured rotating file handler
    """
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / "kinship.log"

    # max 10MB, keep 5 backups
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))

    return file_handler


def get_logger(name: str, log_dir: Optional[Path] = None, level: Optional[str] = None) -> logging.Logger:
    """Get or create a logger with a console handler and optional file handler.

    Args:
        name: Logger name (typically __name__ from calling module)
        log_dir: Directory for log files. If None, uses the KINSHIP_LOG_DIR
              environment variable; without either, logs go to the console only.
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
              If None, uses LOG_LEVEL environment variable, defaulting to INFO.

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure once per logger name
    if not logger.handlers:
        if level is not None:
            log_level_str = level.upper()
        else:
            log_level_str = os.environ.get('LOG_LEVEL', 'INFO').upper()
        log_level = getattr(logging, log_level_str, logging.INFO)

        logger.setLevel(log_level)
        logger.addHandler(_setup_console_handler(log_level))

        if log_dir is None and os.environ.get('KINSHIP_LOG_DIR'):
            log_dir = Path(os.environ['KINSHIP_LOG_DIR'])
        if log_dir is not None:
            logger.addHandler(_setup_file_handler(log_level, Path(log_dir)))

        logger.propagate = False

    return logger


@contextmanager
def log_execution_time(logger: logging.Logger, operation: str):
    """Context manager to automatically log operation execution time.

    Usage:
        with log_execution_time(logger, "kinship calculation"):
            builder.compute(source, pool)
    """
    logger.debug(f"Starting: {operation}")
    start_time = time.perf_counter()

    try:
        yield
    finally:
        duration = time.perf_counter() - start_time
        logger.debug(f"Completed: {operation} in {duration:.3f}s")


def configure_logging(level: str, package: str = "kinship") -> logging.Logger:
    """Apply one log level to a package logger and every logger below it.

    Module loggers created by ``get_logger`` carry their own handlers and
    levels, so each one is updated. Loggers created with a bare
    ``logging.getLogger`` have no handlers and reach the console through
    the package logger, which gets a console handler here if it has none.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        package: Root logger name of the package

    Returns:
        The package logger
    """
    level_upper = level.upper()
    log_level = getattr(logging, level_upper, logging.INFO)

    package_logger = logging.getLogger(package)
    if not package_logger.handlers:
        package_logger.addHandler(_setup_console_handler(log_level))

    prefix = f"{package}."
    loggers = [package_logger] + [
        candidate
        for name, candidate in list(logging.Logger.manager.loggerDict.items())
        if name.startswith(prefix) and isinstance(candidate, logging.Logger)
    ]
    for logger in loggers:
        logger.setLevel(log_level)
        for handler in logger.handlers:
            handler.setLevel(log_level)

    package_logger.debug(f"Log level for {package} set to {level_upper}")
    return package_logger
