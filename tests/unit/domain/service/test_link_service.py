"""Unit tests for LinkService."""

from uuid import uuid4

import pytest

from inkwell.adapter.error import BackendError
from inkwell.domain.error import BusinessRuleViolationError, NotFoundError, ValidationError
from inkwell.domain.repository import LinkRepository, PostRepository
from inkwell.domain.service import FunctionInvoker, LinkService
from inkwell.domain.value import GatePhase, LinkId, PostStatus
from tests.conftest import make_link, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestResolve:
    """Tests for token resolution."""

    @pytest.mark.asyncio
    async def test_alias_or_token_resolves(self, unit_env):
        service = await unit_env.get(LinkService)
        repo = await unit_env.get(LinkRepository)
        link = await repo.save(make_link(alias="promo", token="abc123"))

        assert (await service.resolve("promo")).id == link.id
        assert (await service.resolve("abc123")).id == link.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, "", "   ", "nope"])
    async def test_unknown_or_missing_token(self, unit_env, token):
        service = await unit_env.get(LinkService)

        assert await service.resolve(token) is None

    @pytest.mark.asyncio
    async def test_open_gate_without_link_is_absent(self, unit_env):
        service = await unit_env.get(LinkService)

        gate = await service.open_gate("nope", countdown=15)

        assert gate.phase == GatePhase.ABSENT


class TestClickCounting:
    @pytest.mark.asyncio
    async def test_continue_counts_click_in_background(self, unit_env):
        service = await unit_env.get(LinkService)
        repo = await unit_env.get(LinkRepository)
        invoker = await unit_env.get(FunctionInvoker)
        link = await repo.save(make_link())

        gate = await service.open_gate("promo", countdown=0)
        gate.proceed()
        await service.drain()

        assert invoker.calls == [("increment-link-click", {"link_id": str(link.id)})]
        assert (await repo.find_by_id(link.id)).clicks == 1

    @pytest.mark.asyncio
    async def test_failed_increment_does_not_block_access(self, unit_env):
        service = await unit_env.get(LinkService)
        repo = await unit_env.get(LinkRepository)
        invoker = await unit_env.get(FunctionInvoker)
        invoker.fail_with = BackendError("function crashed", 500)
        link = await repo.save(make_link())

        gate = await service.open_gate("promo", countdown=0)

        assert gate.proceed() == GatePhase.ACCESS
        await service.drain()
        assert (await repo.find_by_id(link.id)).clicks == 0


class TestManageLinks:
    @pytest.mark.asyncio
    async def test_create_link_hosted_on_published_post(self, unit_env):
        service = await unit_env.get(LinkService)
        posts = await unit_env.get(PostRepository)
        await posts.save(make_post(title="Hosted"))
        await posts.save(make_post(title="Hidden", status=PostStatus.DRAFT))

        link = await service.create_link(
            link_name=" Promo ", original_url="https://example.com", alias="  "
        )

        assert link.link_name == "Promo"
        assert link.post_slug == "hosted"
        assert link.alias is None
        # Backend default fills the token
        assert link.token

    @pytest.mark.asyncio
    async def test_password_is_trimmed_and_blank_means_none(self, unit_env):
        service = await unit_env.get(LinkService)
        posts = await unit_env.get(PostRepository)
        await posts.save(make_post(title="Hosted"))

        open_link = await service.create_link(
            link_name="Open", original_url="https://example.com", password="   "
        )
        locked = await service.create_link(
            link_name="Locked", original_url="https://example.com", password=" s3cret "
        )

        assert open_link.password is None
        assert not open_link.is_protected
        assert locked.password == "s3cret"

    @pytest.mark.asyncio
    async def test_create_without_published_posts_fails(self, unit_env):
        service = await unit_env.get(LinkService)

        with pytest.raises(BusinessRuleViolationError):
            await service.create_link(link_name="Promo", original_url="https://example.com")

    @pytest.mark.asyncio
    async def test_blank_url_rejected(self, unit_env):
        service = await unit_env.get(LinkService)

        with pytest.raises(ValidationError) as exc_info:
            await service.create_link(link_name="Promo", original_url=" ")

        assert exc_info.value.field == "original_url"

    @pytest.mark.asyncio
    async def test_update_and_delete(self, unit_env):
        service = await unit_env.get(LinkService)
        repo = await unit_env.get(LinkRepository)
        link = await repo.save(make_link())

        updated = await service.update_link(link.id, "Renamed", "https://new.example.com")
        assert updated.link_name == "Renamed"
        assert updated.original_url == "https://new.example.com"

        await service.delete_link(link.id)
        with pytest.raises(NotFoundError):
            await service.get_link(link.id)

    @pytest.mark.asyncio
    async def test_update_missing_link_fails(self, unit_env):
        service = await unit_env.get(LinkService)

        with pytest.raises(NotFoundError):
            await service.update_link(LinkId(uuid4()), "Name", "https://example.com")

    def test_short_url_prefers_alias(self):
        link = make_link(alias="promo", token="abc123", post_slug="hello")

        url = LinkService.short_url(link, "https://blog.example/")

        assert url == "https://blog.example/posts/hello.html?token=promo"
