"""Object storage clients."""

import httpx
import logfire

from inkwell.adapter.backend.client import raise_for_response
from inkwell.adapter.error import BackendError, StorageError
from inkwell.domain.service.upload_service import ObjectStorage


class RealObjectStorage(ObjectStorage):
    """Uploads to a public bucket of the hosted storage API."""

    def __init__(
        self, http: httpx.AsyncClient, storage_url: str, bucket: str, api_key: str
    ) -> None:
        self.http = http
        self.storage_url = storage_url.rstrip("/")
        self.bucket = bucket
        self.api_key = api_key

    def public_url(self, path: str) -> str:
        return f"{self.storage_url}/object/public/{self.bucket}/{path}"

    async def upload(self, path: str, data: bytes, content_type: str) -> str:
        with logfire.span("object_storage.upload", bucket=self.bucket, path=path):
            try:
                response = await self.http.post(
                    f"{self.storage_url}/object/{self.bucket}/{path}",
                    content=data,
                    headers={
                        "apikey": self.api_key,
                        "Authorization": f"Bearer {self.api_key}",
                        "Content-Type": content_type,
                        "x-upsert": "true",
                    },
                )
            except httpx.HTTPError as e:
                raise StorageError(f"Storage unreachable: {e}") from e
            try:
                raise_for_response(response)
            except BackendError as e:
                raise StorageError(str(e), status_code=e.status_code) from e
            return self.public_url(path)


class MockObjectStorage(ObjectStorage):
    """Keeps uploaded objects in memory."""

    def __init__(self, base_url: str = "http://storage.local/public") -> None:
        self.base_url = base_url
        self.objects: dict[str, tuple[bytes, str]] = {}

    async def upload(self, path: str, data: bytes, content_type: str) -> str:
        self.objects[path] = (data, content_type)
        return f"{self.base_url}/{path}"
