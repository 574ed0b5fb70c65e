"""Utility modules for configuration, logging and errors."""

from .config import AppConfig, get_config, load_config, reset_config
from .logger import (
    configure_logging,
    get_logger,
    log_execution_time,
)

__all__ = [
    # Configuration
    "AppConfig",
    "get_config",
    "load_config",
    "reset_config",
    # Logging
    "configure_logging",
    "get_logger",
    "log_execution_time",
]
