"""Access token utilities.

The hosted auth provider signs access tokens with the project's JWT
secret. Verifying them locally avoids a round trip for every admin
request and rejects forged or expired cookies before they reach the
backend.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from inkwell.config import AuthSettings


class AccessTokenClaims(BaseModel):
    """Claims Inkwell reads from an access token."""

    sub: str
    email: str | None = None
    role: str | None = None
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_access_token(
    user_id: str,
    email: str,
    settings: AuthSettings,
    expires_in: timedelta = timedelta(hours=1),
) -> str:
    """Mint an access token the way the auth provider does.

    Used by the in-memory auth provider.

    Args:
        user_id: Subject of the token
        email: User email
        settings: Authentication settings
        expires_in: Token lifetime

    Returns:
        Encoded JWT
    """
    payload = {
        "sub": user_id,
        "email": email,
        "role": "authenticated",
        "aud": settings.jwt_audience,
        "exp": datetime.now(timezone.utc) + expires_in,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_access_token(token: str, settings: AuthSettings) -> AccessTokenClaims:
    """Verify and decode an access token.

    Args:
        token: JWT from the session cookie
        settings: Authentication settings

    Returns:
        Token claims if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
        )
        return AccessTokenClaims(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
