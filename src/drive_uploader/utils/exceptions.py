"""Custom exception classes for drive-uploader."""


class DriveUploaderError(Exception):
    """Base exception for drive-uploader."""
    pass


class ConfigError(DriveUploaderError):
    """Configuration-related errors."""
    pass


class MissingInputError(ConfigError):
    """A required action input was not supplied."""

    def __init__(self, name: str):
        super().__init__(f"Input required and not supplied: {name}")
        self.name = name


class AmbiguousEntryError(DriveUploaderError):
    """More than one Drive entry matches a (name, parent) pair."""
    pass
