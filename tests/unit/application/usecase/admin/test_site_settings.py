"""Unit tests for the site settings use cases."""

import pytest

from inkwell.application.usecase.admin import (
    GetSiteSettingsUseCase,
    UpdateSiteSettingsRequest,
    UpdateSiteSettingsUseCase,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSiteSettings:
    @pytest.mark.asyncio
    async def test_defaults(self, unit_env):
        use_case = await unit_env.get(GetSiteSettingsUseCase)

        settings = await use_case.execute()

        assert settings.site_title == "Inkwell"
        assert settings.site_description == "A modern blog platform"
        assert not hasattr(settings, "id")

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, unit_env):
        update = await unit_env.get(UpdateSiteSettingsUseCase)
        get = await unit_env.get(GetSiteSettingsUseCase)
        await update.execute(UpdateSiteSettingsRequest(site_title="Notes"))

        await update.execute(UpdateSiteSettingsRequest(social_twitter="@notes"))
        settings = await get.execute()

        assert settings.site_title == "Notes"
        assert settings.social_twitter == "@notes"
