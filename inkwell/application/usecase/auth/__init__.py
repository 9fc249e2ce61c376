"""Auth use cases."""

from .get_session import GetSessionRequest, GetSessionUseCase
from .login import (
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    LogoutRequest,
    LogoutUseCase,
    SessionResponse,
)
from .update_credentials import (
    CredentialsResponse,
    UpdateEmailRequest,
    UpdateEmailUseCase,
    UpdatePasswordRequest,
    UpdatePasswordUseCase,
)

__all__ = [
    "CredentialsResponse",
    "GetSessionRequest",
    "GetSessionUseCase",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "LogoutRequest",
    "LogoutUseCase",
    "SessionResponse",
    "UpdateEmailRequest",
    "UpdateEmailUseCase",
    "UpdatePasswordRequest",
    "UpdatePasswordUseCase",
]
