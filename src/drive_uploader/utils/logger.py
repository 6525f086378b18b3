"""Logging infrastructure with upload target context."""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


class TargetContextFilter(logging.Filter):
    """Add the current upload target to log records."""

    def __init__(self):
        super().__init__()
        self.target: Optional[str] = None

    def filter(self, record):
        """Add target to record."""
        record.target = self.target or "-"
        return True


class DriveUploaderLogger:
    """Centralized logging manager."""

    def __init__(self, log_level: str = "INFO"):
        self.target_filter = TargetContextFilter()
        self.formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [target:%(target)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

        self.logger = logging.getLogger("drive_uploader")
        self.logger.setLevel(getattr(logging, log_level.upper()))
        self.logger.propagate = False

        # Remove existing handlers
        self.logger.handlers.clear()

        # Console goes to stdout so the runner shows it inline with workflow commands
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(self.formatter)
        console_handler.addFilter(self.target_filter)
        self.logger.addHandler(console_handler)

    def set_level(self, log_level: str):
        """Change the logger level."""
        self.logger.setLevel(getattr(logging, log_level.upper()))

    def add_file_handler(self, log_file: str, max_bytes: int, backup_count: int):
        """Mirror log output to a rotating file."""
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(self.formatter)
        file_handler.addFilter(self.target_filter)
        self.logger.addHandler(file_handler)

    def set_target_context(self, target: Optional[str]):
        """Set current upload target for logging."""
        self.target_filter.target = target

    def get_logger(self) -> logging.Logger:
        """Get the configured logger."""
        return self.logger


# Global logger instance
_logger_instance: Optional[DriveUploaderLogger] = None


def _get_instance(log_level: str = "INFO") -> DriveUploaderLogger:
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = DriveUploaderLogger(log_level)
    return _logger_instance


def get_logger(log_level: str = "INFO") -> logging.Logger:
    """Get or create global logger instance."""
    return _get_instance(log_level).get_logger()


def configure_logging(
    log_level: str,
    log_file: Optional[str] = None,
    max_file_size_mb: int = 10,
    backup_count: int = 5
) -> logging.Logger:
    """Apply level and optional file output to the global logger."""
    instance = _get_instance(log_level)
    instance.set_level(log_level)
    if log_file:
        instance.add_file_handler(log_file, max_file_size_mb * 1024 * 1024, backup_count)
    return instance.get_logger()


def set_target_context(target: Optional[str]):
    """Set upload target context for logging."""
    global _logger_instance
    if _logger_instance:
        _logger_instance.set_target_context(target)
