"""
Filesystem storage for object photos.
"""
import os
import uuid

from fastapi import UploadFile

from comparison_center.core.errors import ValidationError
from comparison_center.utils import get_logger

log = get_logger(__name__)

# Magic bytes -> (content type, extensions accepted for it, default extension)
_IMAGE_SIGNATURES = (
    (b"\xff\xd8\xff", "image/jpeg", (".jpg", ".jpeg"), ".jpg"),
    (b"\x89PNG\r\n\x1a\n", "image/png", (".png",), ".png"),
)


def sniff_image_type(head: bytes) -> tuple[str, tuple[str, ...], str] | None:
    """Return (content type, extensions, default extension) for JPEG or PNG data, else None."""
    for signature, content_type, extensions, default in _IMAGE_SIGNATURES:
        if head.startswith(signature):
            return content_type, extensions, default
    return None


class PhotoStorage:
    """
    Saves uploaded photos under `photos_dir` with fresh UUID file names.

    The content type is taken from the file's first bytes; the client's
    Content-Type header and file name are not trusted.
    """

    def __init__(self, photos_dir: str, max_upload_size: int):
        self.photos_dir = photos_dir
        self.max_upload_size = max_upload_size

    async def save(self, upload: UploadFile) -> str:
        """
        Write the upload to disk and return its path.

        Raises:
            ValidationError: If the body is empty, too large, or not a JPEG/PNG image.
        """
        content = await upload.read(self.max_upload_size + 1)
        if not content:
            raise ValidationError("photo is empty", details={"field": "photo"})
        if len(content) > self.max_upload_size:
            raise ValidationError(
                f"photo exceeds {self.max_upload_size // 1024 // 1024}MB",
                details={"field": "photo"},
            )

        image_type = sniff_image_type(content[:8])
        if image_type is None:
            raise ValidationError("photo must be a JPEG or PNG image", details={"field": "photo"})
        _, extensions, default_extension = image_type

        extension = os.path.splitext(upload.filename or "")[1].lower()
        if extension not in extensions:
            extension = default_extension

        os.makedirs(self.photos_dir, exist_ok=True)
        path = os.path.join(self.photos_dir, f"{uuid.uuid4()}{extension}")
        with open(path, "wb") as f:
            f.write(content)

        log.debug("Stored photo %s (%d bytes)", path, len(content))
        return path

    def remove(self, path: str) -> None:
        """Delete a stored photo. A file that is already gone is ignored."""
        try:
            os.remove(path)
        except FileNotFoundError:
            log.warning("Photo %s was already removed", path)
