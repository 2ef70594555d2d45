"""Avatar upload validation and storage."""

from __future__ import annotations

import logging
import re
import time
from pathlib import Path

from fastapi import UploadFile, status
from starlette.concurrency import run_in_threadpool

from ...common.errors import ApplicationError

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = frozenset({"png", "jpg", "jpeg", "gif"})
_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


class AvatarUploadError(ApplicationError):
    """Raised when an uploaded avatar is rejected."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="invalid_upload", status_code=status.HTTP_400_BAD_REQUEST)


def allowed_file(filename: str) -> bool:
    """Return ``True`` if ``filename`` has one of the allowed image extensions."""

    _, dot, extension = filename.rpartition(".")
    return bool(dot) and extension.lower() in ALLOWED_EXTENSIONS


def secure_filename(filename: str) -> str:
    name = Path(filename.replace("\\", "/")).name
    cleaned = _UNSAFE_FILENAME_CHARS.sub("_", name).strip("._")
    return cleaned or "avatar"


async def save_avatar(upload: UploadFile | None, upload_dir: Path, max_bytes: int) -> str:
    """Validate and persist an avatar upload, returning the stored filename."""

    if upload is None or not upload.filename:
        raise AvatarUploadError("No file selected.")
    if not allowed_file(upload.filename):
        raise AvatarUploadError("Invalid file type. Allowed: png, jpg, jpeg, gif.")

    data = await upload.read(max_bytes + 1)
    if len(data) > max_bytes:
        limit_mb = max_bytes // (1024 * 1024)
        raise AvatarUploadError(f"File too large. Maximum size is {limit_mb} MB.")

    filename = f"{int(time.time() * 1000)}_{secure_filename(upload.filename)}"
    upload_dir.mkdir(parents=True, exist_ok=True)
    await run_in_threadpool((upload_dir / filename).write_bytes, data)
    logger.info("Avatar stored", extra={"avatar_filename": filename, "size": len(data)})
    return filename
