"""Auth provider clients.

``RealAuthProvider`` talks to the hosted GoTrue-style auth API;
``MockAuthProvider`` keeps users in memory and mints tokens locally.
"""

from uuid import uuid4

import httpx
import logfire

from inkwell.adapter.backend.client import raise_for_response
from inkwell.adapter.error import AuthProviderError, BackendError
from inkwell.config import AuthSettings
from inkwell.domain.service.auth_service import AuthProvider, AuthTokens, AuthUser
from inkwell.util.jwt import JWTError, create_access_token, verify_access_token


class RealAuthProvider(AuthProvider):
    """Auth provider backed by the hosted auth API."""

    def __init__(self, http: httpx.AsyncClient, auth_url: str, api_key: str) -> None:
        """Initialize auth client.

        Args:
            http: Shared async HTTP client
            auth_url: Base URL of the auth API
            api_key: Project API key (anon)
        """
        self.http = http
        self.auth_url = auth_url.rstrip("/")
        self.api_key = api_key

    def _headers(self, access_token: str | None = None) -> dict[str, str]:
        headers = {"apikey": self.api_key}
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        return headers

    async def _send(
        self,
        method: str,
        path: str,
        access_token: str | None = None,
        json: dict | None = None,
        params: dict | None = None,
    ) -> httpx.Response:
        try:
            response = await self.http.request(
                method,
                f"{self.auth_url}{path}",
                headers=self._headers(access_token),
                json=json,
                params=params,
            )
        except httpx.HTTPError as e:
            raise AuthProviderError(f"Auth service unreachable: {e}") from e
        try:
            raise_for_response(response)
        except BackendError as e:
            raise AuthProviderError(str(e), status_code=e.status_code) from e
        return response

    async def sign_in_with_password(self, email: str, password: str) -> AuthTokens:
        with logfire.span("auth_provider.sign_in", email=email):
            response = await self._send(
                "POST",
                "/token",
                params={"grant_type": "password"},
                json={"email": email, "password": password},
            )
            body = response.json()
            return AuthTokens(
                access_token=body["access_token"],
                user=AuthUser(id=body["user"]["id"], email=body["user"]["email"]),
            )

    async def sign_out(self, access_token: str) -> None:
        await self._send("POST", "/logout", access_token=access_token)

    async def get_user(self, access_token: str) -> AuthUser | None:
        try:
            response = await self._send("GET", "/user", access_token=access_token)
        except AuthProviderError as e:
            if e.status_code in (401, 403):
                return None
            raise
        body = response.json()
        return AuthUser(id=body["id"], email=body["email"])

    async def update_email(self, access_token: str, email: str) -> AuthUser:
        response = await self._send(
            "PUT", "/user", access_token=access_token, json={"email": email}
        )
        body = response.json()
        return AuthUser(id=body["id"], email=body.get("email") or email)

    async def update_password(self, access_token: str, password: str) -> AuthUser:
        response = await self._send(
            "PUT", "/user", access_token=access_token, json={"password": password}
        )
        body = response.json()
        return AuthUser(id=body["id"], email=body["email"])


class MockAuthProvider(AuthProvider):
    """In-memory auth provider for tests and local development."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings
        # email -> (user id, password)
        self._users: dict[str, tuple[str, str]] = {}
        self._revoked: set[str] = set()

    def add_user(self, email: str, password: str, user_id: str | None = None) -> AuthUser:
        user_id = user_id or str(uuid4())
        self._users[email] = (user_id, password)
        return AuthUser(id=user_id, email=email)

    async def sign_in_with_password(self, email: str, password: str) -> AuthTokens:
        entry = self._users.get(email)
        if not entry or entry[1] != password:
            raise AuthProviderError("Invalid login credentials", status_code=400)
        user_id, _ = entry
        token = create_access_token(user_id, email, self.auth_settings)
        return AuthTokens(access_token=token, user=AuthUser(id=user_id, email=email))

    async def sign_out(self, access_token: str) -> None:
        self._revoked.add(access_token)

    def _user_for(self, access_token: str) -> tuple[str, str] | None:
        if access_token in self._revoked:
            return None
        try:
            claims = verify_access_token(access_token, self.auth_settings)
        except JWTError:
            return None
        for email, (user_id, _) in self._users.items():
            if user_id == claims.sub:
                return user_id, email
        return None

    async def get_user(self, access_token: str) -> AuthUser | None:
        found = self._user_for(access_token)
        if not found:
            return None
        return AuthUser(id=found[0], email=found[1])

    async def update_email(self, access_token: str, email: str) -> AuthUser:
        found = self._user_for(access_token)
        if not found:
            raise AuthProviderError("Not authenticated", status_code=401)
        user_id, old_email = found
        _, password = self._users.pop(old_email)
        self._users[email] = (user_id, password)
        return AuthUser(id=user_id, email=email)

    async def update_password(self, access_token: str, password: str) -> AuthUser:
        found = self._user_for(access_token)
        if not found:
            raise AuthProviderError("Not authenticated", status_code=401)
        user_id, email = found
        self._users[email] = (user_id, password)
        return AuthUser(id=user_id, email=email)
