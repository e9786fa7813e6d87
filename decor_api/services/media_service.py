# decor_api/services/media_service.py
import logging
from pathlib import Path
from typing import Sequence

from decor_api.core.errors import FileTooLarge, StorageWriteFailed, TooManyFiles
from decor_api.core.storage_utils import (
    delete_public_url,
    generate_filename,
    write_to_storage,
)

logger = logging.getLogger(__name__)


class MediaService:
    """
    Writes uploaded product images to the uploads directory.

    Responsibilities:
      - bound the number and size of files per request
      - give every file a collision-resistant, sanitized name
      - return public paths in upload order
      - remove files again when the product they belong to goes away
    """

    def __init__(self, upload_dir: str | Path, max_files: int, max_bytes: int):
        self.upload_dir = Path(upload_dir)
        self.max_files = max_files
        self.max_bytes = max_bytes

    def validate(self, files: Sequence[tuple[str | None, bytes]]) -> None:
        """
        Check count and per-file size before anything touches the disk.

        Raises:
            TooManyFiles: more than `max_files` files.
            FileTooLarge: any file above `max_bytes`.
        """
        if len(files) > self.max_files:
            raise TooManyFiles(f"At most {self.max_files} images per product")

        for filename, file_bytes in files:
            if len(file_bytes) > self.max_bytes:
                raise FileTooLarge(f"{filename or 'file'} exceeds {self.max_bytes} bytes")

    def ingest(self, files: Sequence[tuple[str | None, bytes]]) -> list[str]:
        """
        Store files and return their public paths.

        Args:
            files: (original filename, content) pairs, in upload order.

        Returns:
            Public paths in the same order; [] for no files.

        Raises:
            StorageWriteFailed: a write failed. Files already written by
            this call are removed before raising.
        """
        self.validate(files)

        stored: list[str] = []
        for filename, file_bytes in files:
            try:
                stored.append(
                    write_to_storage(
                        self.upload_dir,
                        generate_filename(filename),
                        file_bytes,
                    )
                )
            except OSError:
                logger.exception("Failed to store upload %r", filename)
                self.discard(stored)
                raise StorageWriteFailed()

        return stored

    def discard(self, paths: Sequence[str]) -> None:
        """
        Best-effort removal of stored files.

        Failures are logged and skipped; the caller is already on its
        way out (failed insert or finished delete).
        """
        for path in paths:
            try:
                delete_public_url(self.upload_dir, path)
            except OSError:
                logger.warning("Could not remove stored file %s", path, exc_info=True)
