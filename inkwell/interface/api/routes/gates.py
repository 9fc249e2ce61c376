"""Link gate routes.

The post page opens a gate with the ``token`` from its URL, polls it
while the countdown runs, then continues and, if asked, sends the
password.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from inkwell.application.usecase.link import (
    CloseGateUseCase,
    ContinueGateUseCase,
    GateRequest,
    GateStateResponse,
    GetGateUseCase,
    OpenGateRequest,
    OpenGateUseCase,
    SubmitGatePasswordRequest,
    SubmitGatePasswordUseCase,
)

router = APIRouter(prefix="/gates", tags=["gates"], route_class=DishkaRoute)


class PasswordAPIRequest(BaseModel):
    password: str


@router.post("", response_model=GateStateResponse)
async def open_gate(
    request: OpenGateRequest,
    open_gate_use_case: FromDishka[OpenGateUseCase],
) -> GateStateResponse:
    """Open a gate for a URL token and start its countdown.

    An unknown or missing token yields ``phase: absent`` and no gate ID;
    the page then shows nothing.
    """
    return await open_gate_use_case.execute(request)


@router.get("/{gate_id}", response_model=GateStateResponse)
async def get_gate(
    gate_id: str,
    get_gate_use_case: FromDishka[GetGateUseCase],
) -> GateStateResponse:
    return await get_gate_use_case.execute(GateRequest(gate_id=gate_id))


@router.post("/{gate_id}/continue", response_model=GateStateResponse)
async def continue_gate(
    gate_id: str,
    continue_gate_use_case: FromDishka[ContinueGateUseCase],
) -> GateStateResponse:
    """Continue past a finished countdown. 409 while it is still running."""
    return await continue_gate_use_case.execute(GateRequest(gate_id=gate_id))


@router.post("/{gate_id}/password", response_model=GateStateResponse)
async def submit_gate_password(
    gate_id: str,
    body: PasswordAPIRequest,
    submit_gate_password_use_case: FromDishka[SubmitGatePasswordUseCase],
) -> GateStateResponse:
    """Check the link password. A mismatch sets ``password_error``."""
    return await submit_gate_password_use_case.execute(
        SubmitGatePasswordRequest(gate_id=gate_id, password=body.password)
    )


@router.delete("/{gate_id}", status_code=status.HTTP_204_NO_CONTENT)
async def close_gate(
    gate_id: str,
    close_gate_use_case: FromDishka[CloseGateUseCase],
) -> None:
    """Stop the countdown; the page is going away."""
    await close_gate_use_case.execute(GateRequest(gate_id=gate_id))
