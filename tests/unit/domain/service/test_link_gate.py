"""Unit tests for the link gate state machine."""

import asyncio

import pytest

from inkwell.domain.error import BusinessRuleViolationError
from inkwell.domain.service import GateCountdown, LinkGate
from inkwell.domain.value import GatePhase
from tests.conftest import make_link


class TestLinkGate:
    """Tests for LinkGate transitions."""

    def test_absent_gate_is_terminal(self):
        gate = LinkGate.absent()

        assert gate.phase == GatePhase.ABSENT
        assert gate.is_terminal
        assert gate.tick() == GatePhase.ABSENT
        assert gate.target_url is None

    def test_ready_after_exactly_fifteen_ticks(self):
        gate = LinkGate(make_link(), countdown=15)

        phases = [gate.tick() for _ in range(15)]

        assert phases[:14] == [GatePhase.TIMER] * 14
        assert phases[14] == GatePhase.READY
        assert gate.remaining == 0

    def test_ready_is_entered_once(self):
        """Extra ticks after ready change nothing."""
        gate = LinkGate(make_link(), countdown=2)
        gate.tick()
        gate.tick()

        for _ in range(5):
            assert gate.tick() == GatePhase.READY
        assert gate.remaining == 0

    def test_zero_countdown_is_ready_immediately(self):
        gate = LinkGate(make_link(), countdown=0)
        assert gate.phase == GatePhase.READY

    def test_continue_without_password_grants_access(self):
        clicked = []
        link = make_link(password=None)
        gate = LinkGate(link, countdown=0, on_continue=clicked.append)

        assert gate.proceed() == GatePhase.ACCESS
        assert gate.target_url == link.original_url
        assert clicked == [link]

    def test_continue_before_ready_is_rejected(self):
        gate = LinkGate(make_link(), countdown=5)

        with pytest.raises(BusinessRuleViolationError):
            gate.proceed()

    def test_password_flow(self):
        gate = LinkGate(make_link(password="Secret"), countdown=0)
        assert gate.proceed() == GatePhase.PASSWORD
        assert gate.target_url is None

        # Comparison is case-sensitive
        assert gate.submit_password("secret") is False
        assert gate.password_error is True
        assert gate.phase == GatePhase.PASSWORD

        assert gate.submit_password("Secret") is True
        assert gate.password_error is False
        assert gate.phase == GatePhase.ACCESS
        assert gate.target_url == "https://example.com/target"

    def test_password_outside_password_phase_is_rejected(self):
        gate = LinkGate(make_link(password="x"), countdown=3)

        with pytest.raises(BusinessRuleViolationError):
            gate.submit_password("x")


class TestGateCountdown:
    """Tests for the event-loop countdown driver."""

    @pytest.mark.asyncio
    async def test_countdown_reaches_ready(self):
        gate = LinkGate(make_link(), countdown=3)
        countdown = GateCountdown(gate, tick_seconds=0.001)

        countdown.start()
        await asyncio.wait_for(countdown.wait(), timeout=2)

        assert gate.phase == GatePhase.READY
        assert not countdown.running

    @pytest.mark.asyncio
    async def test_cancel_stops_ticking(self):
        gate = LinkGate(make_link(), countdown=15)
        countdown = GateCountdown(gate, tick_seconds=10)

        countdown.start()
        assert countdown.running
        countdown.cancel()
        await countdown.wait()

        assert gate.phase == GatePhase.TIMER
        assert gate.remaining == 15
