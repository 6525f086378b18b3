"""Application settings loader from YAML configuration."""
import yaml
from pathlib import Path
from typing import Optional
from dataclasses import dataclass


@dataclass
class AppSettings:
    """Application-wide settings loaded from config.yaml."""

    # App info
    app_name: str
    app_version: str

    # Logging
    log_level: str
    log_file: Optional[str]
    log_max_file_size_mb: int
    log_backup_count: int

    # Google API
    google_api_scopes: list
    google_api_version: str
    google_token_uri: str

    # Upload
    upload_resumable: bool

    @classmethod
    def load(cls, config_path: Path = None) -> "AppSettings":
        """Load settings from YAML file."""
        if config_path is None:
            # Default to the config.yaml shipped with the package
            config_path = Path(__file__).parent.parent / "config.yaml"

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)

        return cls(
            app_name=config["app"]["name"],
            app_version=config["app"]["version"],
            log_level=config["logging"]["level"],
            log_file=config["logging"].get("file"),
            log_max_file_size_mb=config["logging"]["max_file_size_mb"],
            log_backup_count=config["logging"]["backup_count"],
            google_api_scopes=config["google_api"]["scopes"],
            google_api_version=config["google_api"]["api_version"],
            google_token_uri=config["google_api"]["token_uri"],
            upload_resumable=config["upload"]["resumable"]
        )


# Global settings instance
_settings: AppSettings = None


def get_settings() -> AppSettings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings.load()
    return _settings
