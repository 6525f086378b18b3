"""Extension-based conversion to native Drive formats."""
from typing import Optional

from .models import ConversionRule, MimetypePair
from drive_uploader.utils.logger import get_logger

logger = get_logger()

FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"
SPREADSHEET_MIME_TYPE = "application/vnd.google-apps.spreadsheet"
XLSX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# Checked in order; suffix match is case-sensitive
CONVERSION_RULES = (
    ConversionRule(".xlsx", XLSX_MIME_TYPE, SPREADSHEET_MIME_TYPE),
    ConversionRule(".csv", "text/csv", SPREADSHEET_MIME_TYPE),
)


def find_conversion_rule(path: str) -> Optional[ConversionRule]:
    """Return the rule whose extension ends the path, if any."""
    for rule in CONVERSION_RULES:
        if path.endswith(rule.extension):
            return rule
    return None


def resolve_mimetypes(target: str, convert: bool) -> Optional[MimetypePair]:
    """
    Determine the (local, remote) mimetypes for the upload.

    Returns None when conversion is disabled or the extension has no rule.
    In both cases the file is uploaded as-is without a type override.
    """
    if not convert:
        return None

    rule = find_conversion_rule(target)
    if rule is None:
        logger.warning(f"No conversion rule for {target}, uploading without conversion")
        return None

    return rule.mimetypes


def resolve_filename(target: str, name: Optional[str], convert: bool) -> str:
    """
    Determine the remote filename.

    An explicit name is used verbatim. Otherwise the last path segment of the
    target is used, minus the extension when it is converted.
    """
    if name:
        return name

    filename = target.rsplit("/", 1)[-1]
    if convert:
        # The extension cannot contain "/", so matching the target matches the segment
        rule = find_conversion_rule(target)
        if rule is not None:
            filename = filename[:-rule.strip_length]

    return filename
