# decor_api/core/storage_utils.py
import re
import time
import uuid
from pathlib import Path

from decor_api.core.config import get_settings

settings = get_settings()

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def sanitize_filename(original: str | None) -> str:
    """
    Keep only alphanumerics, dot, dash and underscore.

    Example:
        "a b.png"  -> "ab.png"
        "c#d.png"  -> "cd.png"
        "###"      -> "file"
    """
    cleaned = _UNSAFE_CHARS.sub("", original or "")
    return cleaned or "file"


def generate_filename(original: str | None) -> str:
    """
    Build a collision-resistant storage name.

    Pattern:
        <epoch millis>-<8 hex>-<sanitized original>
    """
    stamp = int(time.time() * 1000)
    return f"{stamp}-{uuid.uuid4().hex[:8]}-{sanitize_filename(original)}"


def write_to_storage(upload_dir: Path, filename: str, file_bytes: bytes) -> str:
    """
    Write raw bytes under `upload_dir` and return the public relative path.

    Args:
        upload_dir: directory served at UPLOADS_URL_PREFIX
        filename: a name produced by generate_filename
        file_bytes: file content

    Returns:
        Public path, e.g. "/uploads/1718000000000-1a2b3c4d-chair.png"

    Raises:
        OSError: if the directory cannot be created or the write fails.
    """
    upload_dir.mkdir(parents=True, exist_ok=True)
    (upload_dir / filename).write_bytes(file_bytes)
    return f"{settings.UPLOADS_URL_PREFIX.rstrip('/')}/{filename}"


def path_from_public_url(upload_dir: Path, url: str) -> Path | None:
    """
    Map a public path back to the file on disk.

    Returns None if the path does not belong to the uploads prefix.
    """
    prefix = settings.UPLOADS_URL_PREFIX.rstrip("/") + "/"
    if not url.startswith(prefix):
        return None
    name = url[len(prefix):]
    if not name or "/" in name or name in {".", ".."}:
        return None
    return upload_dir / name


def delete_public_url(upload_dir: Path, url: str) -> None:
    """
    Delete a stored file by its public path.
    No-op if the path is foreign or the file is already gone.
    """
    path = path_from_public_url(upload_dir, url)
    if path is not None:
        path.unlink(missing_ok=True)
