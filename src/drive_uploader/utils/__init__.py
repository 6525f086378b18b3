"""Utility modules."""
from .logger import get_logger, configure_logging, set_target_context
from .exceptions import (
    DriveUploaderError,
    ConfigError,
    MissingInputError,
    AmbiguousEntryError
)

__all__ = [
    "get_logger",
    "configure_logging",
    "set_target_context",
    "DriveUploaderError",
    "ConfigError",
    "MissingInputError",
    "AmbiguousEntryError"
]
