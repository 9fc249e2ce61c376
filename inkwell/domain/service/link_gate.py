"""Link gate state machine.

A visitor who opens ``/posts/<slug>.html?token=T`` sees a countdown, then
a continue button, then an optional password prompt, and finally the
link's target. The countdown and password are friction, not access
control: the password is compared in plaintext against a value the
backend hands out.

    absent (terminal)
    timer --tick x N--> ready --continue--> password --match--> access
                                   \\--------------------------> access
"""

import asyncio
from collections.abc import Callable

import logfire

from inkwell.domain.error import BusinessRuleViolationError
from inkwell.domain.model.link import ShortenedLink
from inkwell.domain.value import GatePhase

ContinueHook = Callable[[ShortenedLink], None]


class LinkGate:
    """State of one visitor's gate.

    All transitions are synchronous. Time is fed in through ``tick()`` by
    a ``GateCountdown`` or by tests.
    """

    def __init__(
        self,
        link: ShortenedLink | None,
        countdown: int = 15,
        on_continue: ContinueHook | None = None,
    ) -> None:
        self.link = link
        self.remaining = countdown if link is not None else 0
        self.phase = GatePhase.TIMER if link is not None else GatePhase.ABSENT
        self.password_error = False
        self._on_continue = on_continue

        # Zero-length countdowns are ready immediately
        if self.phase == GatePhase.TIMER and self.remaining <= 0:
            self.remaining = 0
            self.phase = GatePhase.READY

    @classmethod
    def absent(cls) -> "LinkGate":
        return cls(link=None)

    @property
    def is_terminal(self) -> bool:
        return self.phase in (GatePhase.ABSENT, GatePhase.ACCESS)

    @property
    def target_url(self) -> str | None:
        """The redirect target, only once access is granted."""
        if self.phase == GatePhase.ACCESS and self.link is not None:
            return self.link.original_url
        return None

    def tick(self) -> GatePhase:
        """Advance the countdown by one unit.

        Entering ``ready`` happens exactly once; ticks outside ``timer``
        are ignored.
        """
        if self.phase != GatePhase.TIMER:
            return self.phase

        self.remaining -= 1
        if self.remaining <= 0:
            self.remaining = 0
            self.phase = GatePhase.READY
        return self.phase

    def proceed(self) -> GatePhase:
        """Handle the continue action.

        Runs the continue hook (click counting) first, then moves to
        ``password`` if the link carries one, else to ``access``.

        Raises:
            BusinessRuleViolationError: If the gate is not ``ready``
        """
        if self.phase != GatePhase.READY or self.link is None:
            raise BusinessRuleViolationError(
                f"Cannot continue from the {self.phase.value} phase"
            )

        if self._on_continue is not None:
            self._on_continue(self.link)

        self.phase = GatePhase.PASSWORD if self.link.is_protected else GatePhase.ACCESS
        return self.phase

    def submit_password(self, password: str) -> bool:
        """Check a password by exact, case-sensitive equality.

        Returns:
            True if access was granted

        Raises:
            BusinessRuleViolationError: If the gate is not asking for a password
        """
        if self.phase != GatePhase.PASSWORD or self.link is None:
            raise BusinessRuleViolationError(
                f"No password expected in the {self.phase.value} phase"
            )

        if password == self.link.password:
            self.password_error = False
            self.phase = GatePhase.ACCESS
            return True

        self.password_error = True
        return False


class GateCountdown:
    """Drives a gate's countdown on the running event loop.

    The task exits on its own once the gate leaves ``timer``; ``cancel()``
    stops it earlier, e.g. when the gate is closed.
    """

    def __init__(self, gate: LinkGate, tick_seconds: float = 1.0) -> None:
        self.gate = gate
        self.tick_seconds = tick_seconds
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running or self.gate.phase != GatePhase.TIMER:
            return
        self._task = asyncio.create_task(self._run())

    async def _run(self) -> None:
        while self.gate.phase == GatePhase.TIMER:
            await asyncio.sleep(self.tick_seconds)
            self.gate.tick()
        logfire.debug("Gate countdown finished", phase=self.gate.phase.value)

    def cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()

    async def wait(self) -> None:
        """Wait for the countdown to finish or be cancelled."""
        if self._task is None:
            return
        try:
            await self._task
        except asyncio.CancelledError:
            if not self._task.cancelled():
                raise
