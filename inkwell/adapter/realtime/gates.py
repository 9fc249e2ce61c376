"""Live link gate sessions.

A gate's countdown runs server-side for as long as the visitor keeps the
post page open. Sessions are temporary and do not survive a restart: the
visitor simply gets a fresh countdown.
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from inkwell.domain.service.link_gate import GateCountdown, LinkGate


class GateSession:
    """A gate, its countdown driver and its expiry."""

    def __init__(self, gate: LinkGate, countdown: GateCountdown, ttl: timedelta) -> None:
        self.id = str(uuid4())
        self.gate = gate
        self.countdown = countdown
        self.ttl = ttl
        self.expires_at = datetime.now(timezone.utc) + ttl

    def touch(self) -> None:
        self.expires_at = datetime.now(timezone.utc) + self.ttl

    @property
    def expired(self) -> bool:
        return self.expires_at < datetime.now(timezone.utc)

    def close(self) -> None:
        self.countdown.cancel()


class GateSessionStore:
    """In-memory gate session store with expiry."""

    def __init__(self, ttl_minutes: int = 30) -> None:
        self.ttl = timedelta(minutes=ttl_minutes)
        self._sessions: dict[str, GateSession] = {}

    def open(self, gate: LinkGate, tick_seconds: float) -> GateSession:
        """Register a gate and start its countdown."""
        self._purge_expired()
        session = GateSession(gate, GateCountdown(gate, tick_seconds), self.ttl)
        self._sessions[session.id] = session
        session.countdown.start()
        logfire.info(
            "Gate session opened",
            gate_id=session.id,
            phase=gate.phase.value,
            link_id=str(gate.link.id) if gate.link else None,
        )
        return session

    def get(self, session_id: str) -> GateSession | None:
        """Retrieve a live session, dropping it if expired."""
        session = self._sessions.get(session_id)
        if session and session.expired:
            self.close(session_id)
            return None
        if session:
            session.touch()
        return session

    def close(self, session_id: str) -> bool:
        """Cancel a session's countdown and forget it."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        session.close()
        return True

    def close_all(self) -> None:
        for session_id in list(self._sessions):
            self.close(session_id)

    def _purge_expired(self) -> None:
        for session_id, session in list(self._sessions.items()):
            if session.expired:
                self.close(session_id)

    def __len__(self) -> int:
        return len(self._sessions)
