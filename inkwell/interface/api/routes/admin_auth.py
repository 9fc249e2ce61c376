"""Admin authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Request, Response
from pydantic import BaseModel

from inkwell.application.usecase.auth import (
    CredentialsResponse,
    LoginRequest,
    LoginUseCase,
    LogoutRequest,
    LogoutUseCase,
    SessionResponse,
    UpdateEmailRequest,
    UpdateEmailUseCase,
    UpdatePasswordRequest,
    UpdatePasswordUseCase,
)
from inkwell.config import Settings
from inkwell.domain.model.session import AdminSession
from inkwell.interface.api.dependencies import require_admin

router = APIRouter(prefix="/admin/auth", tags=["admin"], route_class=DishkaRoute)


class LogoutResponse(BaseModel):
    success: bool


@router.post("/login", response_model=SessionResponse)
async def login(
    request: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> SessionResponse:
    """Sign in with email and password.

    Only admins get a session; anyone else is signed out again and gets a 403.

    Returns:
        The admin session, with the access token set as an HTTP-only cookie
    """
    result = await login_use_case.execute(request)

    is_production = settings.environment == "production"
    response.set_cookie(
        key=settings.auth.session_cookie,
        value=result.access_token,
        httponly=True,
        secure=is_production,
        samesite="lax",
        path="/",
    )
    logfire.info("Admin session cookie set", user_id=result.session.user_id)
    return result.session


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    request: Request,
    response: Response,
    logout_use_case: FromDishka[LogoutUseCase],
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Sign out and clear the session cookie, even if the backend call fails."""
    token = request.cookies.get(settings.auth.session_cookie)
    await logout_use_case.execute(LogoutRequest(access_token=token))
    response.delete_cookie(settings.auth.session_cookie, path="/")
    return LogoutResponse(success=True)


@router.get("/session", response_model=SessionResponse)
async def get_session(session: AdminSession = Depends(require_admin)) -> SessionResponse:
    """The signed-in admin. 401 without a valid admin session."""
    return SessionResponse.from_domain(session)


@router.put("/email", response_model=CredentialsResponse)
async def update_email(
    request: UpdateEmailRequest,
    update_email_use_case: FromDishka[UpdateEmailUseCase],
    session: AdminSession = Depends(require_admin),
) -> CredentialsResponse:
    return await update_email_use_case.execute(session, request)


@router.put("/password", response_model=CredentialsResponse)
async def update_password(
    request: UpdatePasswordRequest,
    update_password_use_case: FromDishka[UpdatePasswordUseCase],
    session: AdminSession = Depends(require_admin),
) -> CredentialsResponse:
    return await update_password_use_case.execute(session, request)
