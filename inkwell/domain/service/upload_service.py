"""Image upload domain service."""

import re
from abc import ABC, abstractmethod
from uuid import uuid4

import logfire

from inkwell.config import UploadSettings
from inkwell.domain.error import ValidationError
from inkwell.domain.value import UploadKind

from .base import Service

EXTENSION_PATTERN = re.compile(r"\.([A-Za-z0-9]{1,8})$")


class ObjectStorage(ABC):
    """Port for the backend's public object storage."""

    @abstractmethod
    async def upload(self, path: str, data: bytes, content_type: str) -> str:
        """Store an object and return its public URL.

        Raises:
            StorageError: If the upload is rejected
        """
        pass


class UploadService(Service):
    """Validates and stores images for post thumbnails and branding."""

    def __init__(self, storage: ObjectStorage, settings: UploadSettings) -> None:
        """Initialize upload service.

        Args:
            storage: Object storage port
            settings: Size ceilings per upload kind
        """
        self.storage = storage
        self.settings = settings

    def max_bytes(self, kind: UploadKind) -> int:
        if kind == UploadKind.THUMBNAIL:
            return self.settings.thumbnail_max_bytes
        return self.settings.branding_max_bytes

    def validate(self, kind: UploadKind, content_type: str | None, size: int) -> None:
        """Reject non-images and oversized files before uploading.

        Raises:
            ValidationError: If the type is not ``image/*`` or the file is too big
        """
        if not content_type or not content_type.startswith("image/"):
            raise ValidationError("Please upload an image file", field="file")
        limit = self.max_bytes(kind)
        if size > limit:
            raise ValidationError(
                f"Image must be smaller than {limit // (1024 * 1024)}MB", field="file"
            )

    async def upload_image(
        self, kind: UploadKind, filename: str, content_type: str | None, data: bytes
    ) -> str:
        """Validate and store an image.

        Args:
            kind: Thumbnail or branding, decides the size ceiling and folder
            filename: Client file name, only its extension is kept
            content_type: Declared MIME type
            data: File contents

        Returns:
            Public URL of the stored image
        """
        self.validate(kind, content_type, len(data))

        match = EXTENSION_PATTERN.search(filename or "")
        extension = match.group(1).lower() if match else "bin"
        folder = "thumbnails" if kind == UploadKind.THUMBNAIL else "branding"
        path = f"{folder}/{uuid4()}.{extension}"

        with logfire.span("upload_service.upload_image", kind=kind.value, size=len(data)):
            url = await self.storage.upload(path, data, content_type or "")
            logfire.info("Image uploaded", kind=kind.value, path=path)
            return url
