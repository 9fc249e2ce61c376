"""Unit tests for the record store client and remote repositories."""

import json
from uuid import uuid4

import httpx
import pytest

from inkwell.adapter.backend import RecordStoreClient
from inkwell.adapter.backend.client import parse_total, quote_value
from inkwell.adapter.error import BackendError
from inkwell.domain.value import CommentId, PostId, VisitorId
from inkwell.persistence.repository.like import RemoteLikeRepository
from inkwell.persistence.repository.post import RemotePostRepository
from tests.conftest import make_post

REST_URL = "http://backend.test/rest/v1"


def client_with(handler) -> tuple[RecordStoreClient, list[httpx.Request]]:
    """Record store client whose requests go to ``handler``."""
    seen: list[httpx.Request] = []

    def recording(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    http = httpx.AsyncClient(transport=httpx.MockTransport(recording))
    return RecordStoreClient(http, rest_url=REST_URL, api_key="anon", service_key="svc"), seen


class TestHelpers:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (True, "true"),
            (None, "null"),
            ("plain", "plain"),
            ("a,b", '"a,b"'),
            ('say "hi"', '"say \\"hi\\""'),
        ],
    )
    def test_quote_value(self, value, expected):
        assert quote_value(value) == expected

    @pytest.mark.parametrize(
        "header,expected",
        [("0-8/42", 42), ("*/0", 0), (None, 5), ("0-4/*", 5)],
    )
    def test_parse_total(self, header, expected):
        assert parse_total(header, 5) == expected


class TestRecordStoreClient:
    """Tests for request shaping and error mapping."""

    @pytest.mark.asyncio
    async def test_filters_and_headers(self):
        client, seen = client_with(lambda request: httpx.Response(200, json=[]))

        await client.table("posts").select("slug").eq("status", "published").order(
            "published_at", ascending=False
        ).range(9, 17).fetch()

        [request] = seen
        assert request.url.path == "/rest/v1/posts"
        assert request.url.params.multi_items() == [
            ("select", "slug"),
            ("status", "eq.published"),
            ("order", "published_at.desc"),
            ("limit", "9"),
            ("offset", "9"),
        ]
        assert request.headers["apikey"] == "anon"
        assert request.headers["Authorization"] == "Bearer svc"

    @pytest.mark.asyncio
    async def test_error_response_raises_backend_error(self):
        client, _ = client_with(
            lambda request: httpx.Response(409, json={"message": "duplicate key"})
        )

        with pytest.raises(BackendError) as exc_info:
            await client.table("comment_likes").insert({"id": "x"})

        assert exc_info.value.is_conflict
        assert str(exc_info.value) == "duplicate key"

    @pytest.mark.asyncio
    async def test_transport_error_raises_backend_error(self):
        def unreachable(request):
            raise httpx.ConnectError("refused", request=request)

        client, _ = client_with(unreachable)

        with pytest.raises(BackendError) as exc_info:
            await client.table("posts").fetch()

        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_maybe_single_returns_none_on_406(self):
        client, seen = client_with(lambda request: httpx.Response(406, json={}))

        assert await client.table("posts").eq("id", "x").maybe_single() is None
        assert seen[0].headers["Accept"] == "application/vnd.pgrst.object+json"


class TestRemotePostRepository:
    @pytest.mark.asyncio
    async def test_list_published_reads_total_from_content_range(self):
        post = make_post()
        client, seen = client_with(
            lambda request: httpx.Response(
                200,
                json=[post.to_record()],
                headers={"Content-Range": "0-0/12"},
            )
        )
        repo = RemotePostRepository(client)

        posts, total = await repo.list_published(search="py(thon)", limit=9, offset=0)

        assert [p.id for p in posts] == [post.id]
        assert total == 12
        params = dict(seen[0].url.params.multi_items())
        assert params["or"] == "(title.ilike.*py thon*,excerpt.ilike.*py thon*)"
        assert seen[0].headers["Prefer"] == "count=exact"

    @pytest.mark.asyncio
    async def test_empty_id_filter_skips_request(self):
        client, seen = client_with(lambda request: httpx.Response(200, json=[]))
        repo = RemotePostRepository(client)

        assert await repo.list_published(post_ids=[]) == ([], 0)
        assert seen == []

    @pytest.mark.asyncio
    async def test_save_upserts_on_id(self):
        post = make_post()
        client, seen = client_with(
            lambda request: httpx.Response(201, json=[json.loads(request.content)])
        )
        repo = RemotePostRepository(client)

        saved = await repo.save(post)

        assert saved == post
        assert seen[0].method == "POST"
        assert seen[0].url.params["on_conflict"] == "id"


class TestRemoteLikeRepository:
    @pytest.mark.asyncio
    async def test_delete_reports_whether_a_row_went(self):
        client, seen = client_with(lambda request: httpx.Response(200, json=[]))
        repo = RemoteLikeRepository(client)

        removed = await repo.delete(CommentId(uuid4()), VisitorId(uuid4()))

        assert removed is False
        assert seen[0].method == "DELETE"
        assert "select" not in seen[0].url.params

    @pytest.mark.asyncio
    async def test_find_by_visitor_batches_ids(self):
        client, seen = client_with(lambda request: httpx.Response(200, json=[]))
        repo = RemoteLikeRepository(client)
        ids = [CommentId(uuid4()), CommentId(uuid4())]

        await repo.find_by_visitor(VisitorId(uuid4()), ids)

        assert seen[0].url.params["comment_id"] == f"in.({ids[0]},{ids[1]})"
