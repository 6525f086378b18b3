"""Google Drive uploader for a single target file."""
from typing import Optional

from googleapiclient.http import MediaFileUpload

from .conversions import FOLDER_MIME_TYPE
from .models import MimetypePair, UploadResult
from drive_uploader.utils.exceptions import AmbiguousEntryError
from drive_uploader.utils.logger import get_logger

logger = get_logger()


def escape_query_value(value: str) -> str:
    """Escape a string literal for a Drive search query."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


class DriveUploader:
    """Resolves the destination and writes one file to Drive."""

    def __init__(self, service, resumable: bool = False):
        """
        Initialize the uploader.

        Args:
            service: Drive v3 API client (googleapiclient resource)
            resumable: Use a resumable upload instead of a multipart request
        """
        self.service = service
        self.resumable = resumable

    def _find_unique_entry(self, name: str, parent_id: str, kind: str) -> Optional[str]:
        """Return the id of the only entry named `name` under `parent_id`, or None."""
        query = (
            f"name='{escape_query_value(name)}' "
            f"and '{escape_query_value(parent_id)}' in parents"
        )

        results = self.service.files().list(
            q=query,
            fields="files(id)"
        ).execute()

        files = results.get("files", [])
        if len(files) > 1:
            raise AmbiguousEntryError(f"More than one entry matches the {kind} name")
        if len(files) == 1:
            return files[0]["id"]
        return None

    def resolve_upload_folder(self, parent_folder_id: str, child_folder: Optional[str] = None) -> str:
        """
        Determine the folder to upload into.

        Without a child folder the parent is used. Otherwise the single child
        with that name is reused, or created when none exists.

        Raises:
            AmbiguousEntryError: If several entries carry the child folder name
        """
        if not child_folder:
            return parent_folder_id

        folder_id = self._find_unique_entry(child_folder, parent_folder_id, "child folder")
        if folder_id is not None:
            logger.debug(f"Using existing folder {child_folder} ({folder_id})")
            return folder_id

        metadata = {
            "name": child_folder,
            "mimeType": FOLDER_MIME_TYPE,
            "parents": [parent_folder_id]
        }
        folder = self.service.files().create(body=metadata, fields="id").execute()
        logger.info(f"Created folder {child_folder} ({folder['id']})")
        return folder["id"]

    def find_file_id(self, filename: str, folder_id: str) -> Optional[str]:
        """Look up an existing file by name in a folder."""
        return self._find_unique_entry(filename, folder_id, "file")

    def upload_file(
        self,
        target: str,
        filename: str,
        folder_id: str,
        mimetypes: Optional[MimetypePair] = None,
        overwrite: bool = False
    ) -> UploadResult:
        """
        Create the file, or update it in place when overwrite finds a match.

        Args:
            target: Local path of the content to upload
            filename: Remote filename
            folder_id: Destination folder ID
            mimetypes: Conversion types, None for a plain copy
            overwrite: Look for an existing file to update

        Returns:
            UploadResult for the written file
        """
        file_id = None
        if overwrite:
            file_id = self.find_file_id(filename, folder_id)

        media = MediaFileUpload(
            target,
            mimetype=mimetypes.local if mimetypes else None,
            resumable=self.resumable
        )

        if file_id is None:
            if overwrite:
                logger.info(f"File {filename} does not exist yet. Creating it.")
            else:
                logger.info(f"Creating file {filename}.")

            metadata = {
                "name": filename,
                "parents": [folder_id]
            }
            if mimetypes:
                metadata["mimeType"] = mimetypes.remote

            created = self.service.files().create(
                body=metadata,
                media_body=media,
                fields="id"
            ).execute()
            return UploadResult(file_id=created["id"], name=filename, folder_id=folder_id, created=True)

        logger.info(f"File {filename} already exists. Updating it.")
        updated = self.service.files().update(
            fileId=file_id,
            media_body=media,
            fields="id"
        ).execute()
        return UploadResult(file_id=updated["id"], name=filename, folder_id=folder_id, created=False)
