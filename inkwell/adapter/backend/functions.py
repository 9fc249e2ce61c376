"""Serverless function clients."""

from typing import Any

import httpx

from inkwell.adapter.backend.client import raise_for_response
from inkwell.adapter.error import BackendError
from inkwell.domain.service.link_service import FunctionInvoker


class RealFunctionInvoker(FunctionInvoker):
    """Invokes functions deployed on the hosted backend."""

    def __init__(self, http: httpx.AsyncClient, functions_url: str, api_key: str) -> None:
        self.http = http
        self.functions_url = functions_url.rstrip("/")
        self.api_key = api_key

    async def invoke(self, name: str, payload: dict[str, Any]) -> Any:
        try:
            response = await self.http.post(
                f"{self.functions_url}/{name}",
                json=payload,
                headers={
                    "apikey": self.api_key,
                    "Authorization": f"Bearer {self.api_key}",
                },
            )
        except httpx.HTTPError as e:
            raise BackendError(f"Function {name} unreachable: {e}") from e
        raise_for_response(response)
        return response.json() if response.content else None


class MockFunctionInvoker(FunctionInvoker):
    """Records invocations; optionally fails them.

    ``increment-link-click`` is applied to an in-memory link repository
    when one is attached.
    """

    def __init__(self, link_repository=None) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.fail_with: Exception | None = None
        self.link_repository = link_repository

    async def invoke(self, name: str, payload: dict[str, Any]) -> Any:
        self.calls.append((name, payload))
        if self.fail_with is not None:
            raise self.fail_with
        if name == "increment-link-click" and self.link_repository is not None:
            await self.link_repository.increment_clicks(payload["link_id"])
        return None
