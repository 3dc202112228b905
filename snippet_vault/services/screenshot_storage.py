"""Filesystem storage for snippet screenshots."""

import logging
import uuid
from pathlib import Path

logger = logging.getLogger(__name__)

UPLOADS_URL_PREFIX = "/uploads/"

ALLOWED_IMAGE_TYPES = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
}


class InvalidImageError(ValueError):
    """Uploaded file is not an accepted image."""


class ScreenshotStorage:
    """Writes screenshots under ``upload_dir`` with random file names."""

    def __init__(self, upload_dir: str | Path, max_bytes: int):
        self.upload_dir = Path(upload_dir)
        self.max_bytes = max_bytes

    def save(self, data: bytes, content_type: str | None) -> str:
        """Store image bytes and return the public URL path."""
        extension = ALLOWED_IMAGE_TYPES.get(content_type or "")
        if extension is None:
            raise InvalidImageError(
                f"Invalid file type. Allowed types: {', '.join(sorted(ALLOWED_IMAGE_TYPES))}"
            )
        if not data:
            raise InvalidImageError("File is empty.")
        if len(data) > self.max_bytes:
            raise InvalidImageError(f"File too large. Maximum size is {self.max_bytes} bytes.")

        self.upload_dir.mkdir(parents=True, exist_ok=True)
        filename = f"{uuid.uuid4().hex}{extension}"
        (self.upload_dir / filename).write_bytes(data)
        logger.info(f"Stored screenshot {filename} ({len(data)} bytes)")
        return f"{UPLOADS_URL_PREFIX}{filename}"

    def delete(self, url: str) -> None:
        """Remove a stored screenshot; URLs outside the upload dir are ignored."""
        if not url.startswith(UPLOADS_URL_PREFIX):
            return
        # Only the final path component is trusted
        path = self.upload_dir / Path(url[len(UPLOADS_URL_PREFIX) :]).name
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove screenshot {path.name}: {e}")
