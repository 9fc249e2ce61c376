"""Link use cases."""

from .gate import (
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
from .manage_links import (
    CreateLinkRequest,
    CreateLinkUseCase,
    DeleteLinkRequest,
    DeleteLinkUseCase,
    LinkResponse,
    ListLinksResponse,
    ListLinksUseCase,
    UpdateLinkRequest,
    UpdateLinkUseCase,
)

__all__ = [
    "CloseGateUseCase",
    "ContinueGateUseCase",
    "CreateLinkRequest",
    "CreateLinkUseCase",
    "DeleteLinkRequest",
    "DeleteLinkUseCase",
    "GateRequest",
    "GateStateResponse",
    "GetGateUseCase",
    "LinkResponse",
    "ListLinksResponse",
    "ListLinksUseCase",
    "OpenGateRequest",
    "OpenGateUseCase",
    "SubmitGatePasswordRequest",
    "SubmitGatePasswordUseCase",
    "UpdateLinkRequest",
    "UpdateLinkUseCase",
]
