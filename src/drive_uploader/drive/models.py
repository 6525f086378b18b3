"""Data models for Drive operations."""
from dataclasses import dataclass


@dataclass(frozen=True)
class MimetypePair:
    """Content type of the local file and the Drive type to import it as."""
    local: str
    remote: str


@dataclass(frozen=True)
class ConversionRule:
    """Maps a file extension to a conversion."""
    extension: str  # Including the leading dot
    local_mime_type: str
    remote_mime_type: str

    @property
    def strip_length(self) -> int:
        return len(self.extension)

    @property
    def mimetypes(self) -> MimetypePair:
        return MimetypePair(local=self.local_mime_type, remote=self.remote_mime_type)


@dataclass
class UploadResult:
    """Outcome of the single remote write."""
    file_id: str
    name: str
    folder_id: str
    created: bool  # False when an existing file was updated
