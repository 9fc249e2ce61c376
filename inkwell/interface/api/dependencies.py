"""Shared route dependencies: visitor identity and admin sessions."""

from uuid import UUID, uuid4

from fastapi import HTTPException, Request, Response, status

from inkwell.application.usecase.auth import GetSessionRequest, GetSessionUseCase
from inkwell.config import Settings
from inkwell.domain.model.session import AdminSession

VISITOR_COOKIE = "inkwell_visitor_id"
COMMENT_NAME_COOKIE = "inkwell_comment_name"
COMMENT_EMAIL_COOKIE = "inkwell_comment_email"

ONE_YEAR = 365 * 24 * 60 * 60


def visitor_id(request: Request, response: Response) -> str:
    """Anonymous visitor identifier, minted and stored in a cookie on first visit."""
    value = request.cookies.get(VISITOR_COOKIE)
    try:
        value = str(UUID(value)) if value else None
    except ValueError:
        value = None
    if not value:
        value = str(uuid4())
        response.set_cookie(
            VISITOR_COOKIE, value, max_age=ONE_YEAR, httponly=True, samesite="lax"
        )
    return value


async def require_admin(request: Request) -> AdminSession:
    """Resolve the admin session cookie or reject the request.

    Raises:
        HTTPException: 401 when the cookie is missing, invalid or not an admin's
    """
    container = request.state.dishka_container
    settings = await container.get(Settings)
    use_case = await container.get(GetSessionUseCase)

    token = request.cookies.get(settings.auth.session_cookie)
    session = await use_case.execute(GetSessionRequest(access_token=token))
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Admin session required",
        )
    return session
