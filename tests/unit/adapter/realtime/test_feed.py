"""Unit tests for the in-process change feed and gate sessions."""

import asyncio

import pytest

from inkwell.adapter.realtime import GateSessionStore, InProcessChangeFeed
from inkwell.domain.service import ChangeEvent, LinkGate
from inkwell.domain.value import ChangeType, GatePhase
from tests.conftest import make_link


def event(table="comments", **record) -> ChangeEvent:
    return ChangeEvent(type=ChangeType.INSERT, table=table, record=record)


class TestInProcessChangeFeed:
    @pytest.mark.asyncio
    async def test_delivers_matching_events_only(self):
        feed = InProcessChangeFeed()
        received = []

        async def handler(e):
            received.append(e)

        feed.subscribe("comments", handler, {"post_id": "p1"})

        assert await feed.publish(event(post_id="p1")) == 1
        assert await feed.publish(event(post_id="p2")) == 0
        assert await feed.publish(event(table="posts", post_id="p1")) == 0
        assert len(received) == 1

    @pytest.mark.asyncio
    async def test_delete_matches_old_record(self):
        feed = InProcessChangeFeed()
        received = []

        async def handler(e):
            received.append(e)

        feed.subscribe("comments", handler, {"post_id": "p1"})
        deleted = ChangeEvent(
            type=ChangeType.DELETE, table="comments", old_record={"post_id": "p1"}
        )

        assert await feed.publish(deleted) == 1

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_stop_others(self):
        feed = InProcessChangeFeed()
        received = []

        async def broken(e):
            raise RuntimeError("boom")

        async def handler(e):
            received.append(e)

        feed.subscribe("comments", broken)
        feed.subscribe("comments", handler)

        assert await feed.publish(event()) == 1
        assert len(received) == 1

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self):
        feed = InProcessChangeFeed()

        async def handler(e):
            pass

        subscription = feed.subscribe("comments", handler)
        subscription.close()
        subscription.close()

        assert subscription.closed
        assert feed.subscriber_count == 0
        assert await feed.publish(event()) == 0


class TestGateSessionStore:
    @pytest.mark.asyncio
    async def test_open_runs_countdown(self):
        store = GateSessionStore()
        session = store.open(LinkGate(make_link(), countdown=2), tick_seconds=0.001)

        await asyncio.wait_for(session.countdown.wait(), timeout=2)

        assert store.get(session.id).gate.phase == GatePhase.READY

    @pytest.mark.asyncio
    async def test_close_cancels_and_forgets(self):
        store = GateSessionStore()
        session = store.open(LinkGate(make_link(), countdown=15), tick_seconds=10)

        assert store.close(session.id) is True
        assert store.close(session.id) is False
        assert store.get(session.id) is None
        await session.countdown.wait()
        assert session.gate.remaining == 15

    @pytest.mark.asyncio
    async def test_expired_sessions_are_dropped(self):
        store = GateSessionStore(ttl_minutes=0)
        session = store.open(LinkGate(make_link(), countdown=15), tick_seconds=10)
        await asyncio.sleep(0.01)

        assert store.get(session.id) is None
        assert len(store) == 0
