"""Link gate use cases.

A gate lives in the gate session store from ``open`` until ``close`` or
expiry; the visitor polls its state while the countdown runs.
"""

from pydantic import BaseModel

from inkwell.adapter.realtime import GateSession, GateSessionStore
from inkwell.application.usecase.base import BaseUseCase
from inkwell.config import Settings
from inkwell.domain.error import NotFoundError
from inkwell.domain.service import LinkGate, LinkService
from inkwell.domain.value import GatePhase


class GateStateResponse(BaseModel):
    """What the visitor's page shows for a gate.

    ``target_url`` is only set in the ``access`` phase; the password is
    never sent.
    """

    gate_id: str | None
    phase: GatePhase
    remaining: int
    countdown: int
    link_name: str | None = None
    is_protected: bool = False
    password_error: bool = False
    target_url: str | None = None

    @classmethod
    def from_gate(
        cls, gate: LinkGate, countdown: int, gate_id: str | None = None
    ) -> "GateStateResponse":
        return cls(
            gate_id=gate_id,
            phase=gate.phase,
            remaining=gate.remaining,
            countdown=countdown,
            link_name=gate.link.link_name if gate.link else None,
            is_protected=gate.link.is_protected if gate.link else False,
            password_error=gate.password_error,
            target_url=gate.target_url,
        )


class OpenGateRequest(BaseModel):
    token: str | None = None


class OpenGateUseCase(BaseUseCase):
    """Resolve a URL token and start the gate's countdown.

    A token that resolves to nothing yields an ``absent`` gate that is not
    stored.
    """

    def __init__(
        self, link_service: LinkService, gate_store: GateSessionStore, settings: Settings
    ) -> None:
        self.link_service = link_service
        self.gate_store = gate_store
        self.settings = settings

    async def execute(self, request: OpenGateRequest) -> GateStateResponse:
        countdown = self.settings.link_gate.countdown
        gate = await self.link_service.open_gate(request.token, countdown)
        if gate.phase == GatePhase.ABSENT:
            return GateStateResponse.from_gate(gate, countdown)

        session = self.gate_store.open(gate, self.settings.link_gate.tick_seconds)
        return GateStateResponse.from_gate(gate, countdown, session.id)


class GateRequest(BaseModel):
    gate_id: str


class _GateUseCase(BaseUseCase):
    def __init__(self, gate_store: GateSessionStore, settings: Settings) -> None:
        self.gate_store = gate_store
        self.settings = settings

    def _session(self, gate_id: str) -> GateSession:
        session = self.gate_store.get(gate_id)
        if session is None:
            raise NotFoundError("Gate", gate_id)
        return session

    def _state(self, session: GateSession) -> GateStateResponse:
        return GateStateResponse.from_gate(
            session.gate, self.settings.link_gate.countdown, session.id
        )


class GetGateUseCase(_GateUseCase):
    async def execute(self, request: GateRequest) -> GateStateResponse:
        return self._state(self._session(request.gate_id))


class ContinueGateUseCase(_GateUseCase):
    """The continue action: counts a click and moves on to password or access.

    Raises:
        NotFoundError: If the gate is unknown or expired
        BusinessRuleViolationError: If the countdown has not finished
    """

    async def execute(self, request: GateRequest) -> GateStateResponse:
        session = self._session(request.gate_id)
        session.gate.proceed()
        return self._state(session)


class SubmitGatePasswordRequest(BaseModel):
    gate_id: str
    password: str


class SubmitGatePasswordUseCase(_GateUseCase):
    async def execute(self, request: SubmitGatePasswordRequest) -> GateStateResponse:
        session = self._session(request.gate_id)
        session.gate.submit_password(request.password)
        return self._state(session)


class CloseGateUseCase(_GateUseCase):
    """Stop a gate's countdown and forget it."""

    async def execute(self, request: GateRequest) -> bool:
        return self.gate_store.close(request.gate_id)
