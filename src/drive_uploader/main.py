"""Main entry point."""
import sys
import argparse
from typing import List, Optional

from drive_uploader.config.manager import Config, ConfigManager
from drive_uploader.config.settings import AppSettings, get_settings
from drive_uploader.drive.conversions import resolve_filename, resolve_mimetypes
from drive_uploader.drive.models import UploadResult
from drive_uploader.drive.uploader import DriveUploader
from drive_uploader.utils import actions
from drive_uploader.utils.auth import build_drive_service, get_credentials
from drive_uploader.utils.logger import configure_logging, get_logger, set_target_context

logger = get_logger()


def run(config: Config, service, settings: AppSettings) -> UploadResult:
    """Resolve folder, types and name, then write the target to Drive."""
    uploader = DriveUploader(service, resumable=settings.upload_resumable)

    folder_id = uploader.resolve_upload_folder(config.parent_folder_id, config.child_folder)
    mimetypes = resolve_mimetypes(config.target, config.convert)
    filename = resolve_filename(config.target, config.name, config.convert)
    logger.debug(f"Resolved folder={folder_id} filename={filename} mimetypes={mimetypes}")

    return uploader.upload_file(
        config.target,
        filename,
        folder_id,
        mimetypes=mimetypes,
        overwrite=config.overwrite
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Upload a file to a Google Drive folder. "
                    "Options default to the INPUT_* variables set by GitHub Actions."
    )
    parser.add_argument("--credentials", help="Base64-encoded service account JSON")
    parser.add_argument("--parent-folder-id", help="Destination parent folder ID")
    parser.add_argument("--target", help="Local file to upload")
    parser.add_argument("--owner", help="Email to impersonate")
    parser.add_argument("--child-folder", help="Subfolder to use or create under the parent")
    parser.add_argument("--name", help="Remote filename")
    parser.add_argument(
        "--overwrite",
        action="store_true",
        default=None,
        help="Update a file with the same name instead of adding another"
    )
    parser.add_argument(
        "--convert",
        action="store_true",
        default=None,
        help="Import .xlsx and .csv files as Google Sheets"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for drive-uploader."""
    args = _build_parser().parse_args(argv)

    try:
        settings = get_settings()
        configure_logging(
            args.log_level or settings.log_level,
            log_file=settings.log_file,
            max_file_size_mb=settings.log_max_file_size_mb,
            backup_count=settings.log_backup_count
        )

        config_manager = ConfigManager()
        config = config_manager.load_config({
            "credentials": args.credentials,
            "parent_folder_id": args.parent_folder_id,
            "target": args.target,
            "owner": args.owner,
            "child_folder": args.child_folder,
            "name": args.name,
            "overwrite": args.overwrite,
            "convert": args.convert
        })
        config_manager.ensure_valid(config)
        set_target_context(config.target)

        credentials = get_credentials(
            config.credentials,
            owner=config.owner,
            scopes=settings.google_api_scopes,
            token_uri=settings.google_token_uri
        )
        service = build_drive_service(credentials, settings.google_api_version)

        result = run(config, service, settings)
    except Exception as e:
        logger.error(f"Upload failed: {e}")
        return actions.set_failed(str(e))

    action = "Created" if result.created else "Updated"
    actions.info(f"{action} {result.name} ({result.file_id}) in folder {result.folder_id}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
