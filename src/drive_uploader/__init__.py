"""Upload a single file to a Google Drive folder from a CI pipeline."""

__version__ = "1.0.0"
