"""Configuration manager reading GitHub Actions inputs."""
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

from drive_uploader.utils.actions import get_boolean_input, get_input
from drive_uploader.utils.exceptions import ConfigError, MissingInputError


@dataclass(frozen=True)
class Config:
    """Run configuration."""
    credentials: str
    parent_folder_id: str
    target: str
    owner: Optional[str] = None
    child_folder: Optional[str] = None
    overwrite: bool = False
    convert: bool = False
    name: Optional[str] = None


REQUIRED_INPUTS = ("credentials", "parent_folder_id", "target")
OPTIONAL_INPUTS = ("owner", "child_folder", "name")
FLAG_INPUTS = ("overwrite", "convert")


class ConfigManager:
    """Builds the run configuration from action inputs."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ

    def load_config(self, overrides: Optional[dict] = None) -> Config:
        """
        Load configuration from inputs, then apply overrides.

        Missing values are kept empty here so that ensure_valid can report them.

        Args:
            overrides: Values from the command line; None entries are ignored
        """
        values = {}
        for name in REQUIRED_INPUTS:
            values[name] = get_input(name, environ=self.environ)
        for name in OPTIONAL_INPUTS:
            values[name] = get_input(name, environ=self.environ) or None
        for name in FLAG_INPUTS:
            values[name] = get_boolean_input(name, environ=self.environ)

        config = Config(**values)
        if overrides:
            config = replace(config, **{k: v for k, v in overrides.items() if v is not None})
        return config

    def ensure_valid(self, config: Config) -> None:
        """
        Raise on the first invalid value.

        Raises:
            MissingInputError: If a required input is empty
            ConfigError: If the target is not an existing file
        """
        for name in REQUIRED_INPUTS:
            if not getattr(config, name):
                raise MissingInputError(name)

        if not Path(config.target).is_file():
            raise ConfigError(f"Target file not found: {config.target}")
