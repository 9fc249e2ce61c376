"""Unit tests for UploadService."""

import pytest

from inkwell.domain.error import ValidationError
from inkwell.domain.service import ObjectStorage, UploadService
from inkwell.domain.value import UploadKind
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

MB = 1024 * 1024


class TestUploadImage:
    @pytest.mark.asyncio
    async def test_thumbnail_stored_under_folder(self, unit_env):
        service = await unit_env.get(UploadService)
        storage = await unit_env.get(ObjectStorage)

        url = await service.upload_image(
            UploadKind.THUMBNAIL, "Cover.PNG", "image/png", b"\x89PNG"
        )

        [path] = storage.objects
        assert path.startswith("thumbnails/")
        assert path.endswith(".png")
        assert url == f"http://storage.local/public/{path}"

    @pytest.mark.asyncio
    async def test_non_image_rejected_before_upload(self, unit_env):
        service = await unit_env.get(UploadService)
        storage = await unit_env.get(ObjectStorage)

        with pytest.raises(ValidationError):
            await service.upload_image(UploadKind.THUMBNAIL, "a.pdf", "application/pdf", b"%PDF")

        assert storage.objects == {}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "kind,size,ok",
        [
            (UploadKind.THUMBNAIL, 5 * MB, True),
            (UploadKind.THUMBNAIL, 5 * MB + 1, False),
            (UploadKind.BRANDING, 2 * MB, True),
            (UploadKind.BRANDING, 2 * MB + 1, False),
        ],
    )
    async def test_size_ceilings(self, unit_env, kind, size, ok):
        service = await unit_env.get(UploadService)

        if ok:
            service.validate(kind, "image/jpeg", size)
        else:
            with pytest.raises(ValidationError):
                service.validate(kind, "image/jpeg", size)
