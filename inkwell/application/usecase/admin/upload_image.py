"""Upload image use case."""

from pydantic import BaseModel

from inkwell.application.usecase.base import BaseUseCase
from inkwell.domain.service import UploadService
from inkwell.domain.value import UploadKind


class UploadImageRequest(BaseModel):
    kind: UploadKind
    filename: str
    content_type: str | None
    data: bytes


class UploadImageResponse(BaseModel):
    url: str


class UploadImageUseCase(BaseUseCase):
    """Store a thumbnail or branding image and return its public URL."""

    def __init__(self, upload_service: UploadService) -> None:
        self.upload_service = upload_service

    async def execute(self, request: UploadImageRequest) -> UploadImageResponse:
        url = await self.upload_service.upload_image(
            request.kind, request.filename, request.content_type, request.data
        )
        return UploadImageResponse(url=url)
