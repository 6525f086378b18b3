"""Google Drive integration module."""
from .models import ConversionRule, MimetypePair, UploadResult
from .conversions import resolve_filename, resolve_mimetypes
from .uploader import DriveUploader

__all__ = [
    "ConversionRule",
    "MimetypePair",
    "UploadResult",
    "resolve_filename",
    "resolve_mimetypes",
    "DriveUploader"
]
