"""Authentication utilities for Google APIs."""
import base64
import binascii
import json
from typing import List, Optional

from google.oauth2 import service_account
from googleapiclient.discovery import build

from drive_uploader.utils.exceptions import ConfigError
from drive_uploader.utils.logger import get_logger

logger = get_logger()

DEFAULT_SCOPES = ["https://www.googleapis.com/auth/drive.file"]
DEFAULT_TOKEN_URI = "https://oauth2.googleapis.com/token"

REQUIRED_FIELDS = ("client_email", "private_key")


def decode_credentials(credentials_b64: str) -> dict:
    """
    Decode a base64-encoded service account JSON blob.

    Raises:
        ConfigError: If the blob is not base64 JSON or lacks required fields
    """
    # Secrets produced by `base64` are wrapped at 76 columns
    compact = "".join(credentials_b64.split())
    try:
        decoded = base64.b64decode(compact, validate=True).decode("utf-8")
        info = json.loads(decoded)
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise ConfigError(f"Credentials input is not valid base64-encoded JSON: {e}") from e

    if not isinstance(info, dict):
        raise ConfigError("Credentials input must decode to a JSON object")

    missing = [field for field in REQUIRED_FIELDS if not info.get(field)]
    if missing:
        raise ConfigError(f"Credentials input is missing: {', '.join(missing)}")

    return info


def get_credentials(
    credentials_b64: str,
    owner: Optional[str] = None,
    scopes: Optional[List[str]] = None,
    token_uri: str = DEFAULT_TOKEN_URI
) -> service_account.Credentials:
    """
    Build service account credentials from the action input.

    Args:
        credentials_b64: Base64-encoded service account JSON
        owner: Email to impersonate through domain-wide delegation (optional)
        scopes: OAuth scopes to request
        token_uri: Token endpoint used when the blob does not carry one

    Returns:
        Credentials object for Google APIs
    """
    info = decode_credentials(credentials_b64)
    info.setdefault("token_uri", token_uri)

    logger.info(f"Using service account {info['client_email']}")
    credentials = service_account.Credentials.from_service_account_info(
        info,
        scopes=scopes or DEFAULT_SCOPES
    )

    if owner:
        logger.info(f"Impersonating {owner}")
        credentials = credentials.with_subject(owner)

    return credentials


def build_drive_service(credentials, api_version: str = "v3"):
    """Create the Drive API client."""
    return build("drive", api_version, credentials=credentials, cache_discovery=False)
