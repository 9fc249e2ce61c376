"""Record store client for the hosted backend's REST API.

Speaks the PostgREST dialect: filters are query parameters of the form
``column=op.value``, counts come back in ``Content-Range`` and a single
row is requested with the ``vnd.pgrst.object`` media type.
"""

import logging
from typing import Any

import httpx

from inkwell.adapter.error import BackendError

logger = logging.getLogger(__name__)

SINGLE_OBJECT = "application/vnd.pgrst.object+json"


def quote_value(value: Any) -> str:
    """Render a filter value, quoting it when it holds reserved characters."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    text = str(value)
    if any(ch in text for ch in ',()"\\'):
        escaped = text.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return text


def raise_for_response(response: httpx.Response) -> None:
    """Turn a non-2xx backend response into a BackendError."""
    if response.is_success:
        return
    try:
        body = response.json()
        message = body.get("message") or body.get("msg") or body.get("error_description")
    except ValueError:
        message = None
    raise BackendError(
        message or f"Backend request failed with status {response.status_code}",
        status_code=response.status_code,
    )


class TableQuery:
    """Query builder over one collection.

    Filter and modifier methods return ``self`` so calls chain; the
    ``fetch``/``insert``/``update``/``delete`` coroutines execute.
    """

    def __init__(self, client: "RecordStoreClient", table: str) -> None:
        self._client = client
        self._table = table
        self._columns = "*"
        self._filters: list[tuple[str, str]] = []
        self._order: list[str] = []
        self._limit: int | None = None
        self._offset: int | None = None

    def select(self, columns: str = "*") -> "TableQuery":
        self._columns = columns
        return self

    def eq(self, column: str, value: Any) -> "TableQuery":
        self._filters.append((column, f"eq.{quote_value(value)}"))
        return self

    def neq(self, column: str, value: Any) -> "TableQuery":
        self._filters.append((column, f"neq.{quote_value(value)}"))
        return self

    def in_(self, column: str, values: list[Any]) -> "TableQuery":
        rendered = ",".join(quote_value(v) for v in values)
        self._filters.append((column, f"in.({rendered})"))
        return self

    def ilike(self, column: str, pattern: str) -> "TableQuery":
        self._filters.append((column, f"ilike.{quote_value(pattern)}"))
        return self

    def or_(self, *conditions: str) -> "TableQuery":
        """Match any of ``column.op.value`` conditions."""
        self._filters.append(("or", f"({','.join(conditions)})"))
        return self

    def order(self, column: str, ascending: bool = True) -> "TableQuery":
        self._order.append(f"{column}.{'asc' if ascending else 'desc'}")
        return self

    def limit(self, count: int) -> "TableQuery":
        self._limit = count
        return self

    def range(self, start: int, end: int) -> "TableQuery":
        """Rows ``start`` to ``end`` inclusive."""
        self._offset = start
        self._limit = max(end - start + 1, 0)
        return self

    def _params(self, include_select: bool = True) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        if include_select:
            params.append(("select", self._columns))
        params.extend(self._filters)
        if self._order:
            params.append(("order", ",".join(self._order)))
        if self._limit is not None:
            params.append(("limit", str(self._limit)))
        if self._offset is not None:
            params.append(("offset", str(self._offset)))
        return params

    async def fetch(self) -> list[dict[str, Any]]:
        response = await self._client.request("GET", self._table, params=self._params())
        return response.json()

    async def fetch_with_count(self) -> tuple[list[dict[str, Any]], int]:
        """Fetch rows along with the exact total ignoring limit/offset."""
        response = await self._client.request(
            "GET",
            self._table,
            params=self._params(),
            headers={"Prefer": "count=exact"},
        )
        rows = response.json()
        return rows, parse_total(response.headers.get("content-range"), len(rows))

    async def single(self) -> dict[str, Any]:
        """Fetch exactly one row.

        Raises:
            BackendError: With status 406 when zero or several rows match
        """
        response = await self._client.request(
            "GET", self._table, params=self._params(), headers={"Accept": SINGLE_OBJECT}
        )
        return response.json()

    async def maybe_single(self) -> dict[str, Any] | None:
        """Fetch one row, None when nothing or more than one row matches."""
        try:
            return await self.single()
        except BackendError as e:
            if e.status_code == 406:
                return None
            raise

    async def insert(self, rows: dict[str, Any] | list[dict[str, Any]]) -> list[dict[str, Any]]:
        response = await self._client.request(
            "POST",
            self._table,
            json=rows,
            headers={"Prefer": "return=representation"},
        )
        return response.json()

    async def upsert(
        self, rows: dict[str, Any] | list[dict[str, Any]], on_conflict: str = "id"
    ) -> list[dict[str, Any]]:
        response = await self._client.request(
            "POST",
            self._table,
            params=[("on_conflict", on_conflict)],
            json=rows,
            headers={"Prefer": "return=representation,resolution=merge-duplicates"},
        )
        return response.json()

    async def update(self, values: dict[str, Any]) -> list[dict[str, Any]]:
        """Update every row matching the filters."""
        response = await self._client.request(
            "PATCH",
            self._table,
            params=self._params(include_select=False),
            json=values,
            headers={"Prefer": "return=representation"},
        )
        return response.json()

    async def delete(self) -> list[dict[str, Any]]:
        """Delete every row matching the filters."""
        response = await self._client.request(
            "DELETE",
            self._table,
            params=self._params(include_select=False),
            headers={"Prefer": "return=representation"},
        )
        if not response.content:
            return []
        return response.json()


def parse_total(content_range: str | None, fallback: int) -> int:
    """Total from a ``Content-Range: 0-8/42`` header (``*/0`` when empty)."""
    if not content_range or "/" not in content_range:
        return fallback
    total = content_range.rsplit("/", 1)[1]
    return int(total) if total.isdigit() else fallback


class RecordStoreClient:
    """Client for the record store collections.

    Uses the service key when configured so server-side writes are not
    limited by the anonymous role's row policies.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        rest_url: str,
        api_key: str,
        service_key: str | None = None,
    ) -> None:
        """Initialize record store client.

        Args:
            http: Shared async HTTP client
            rest_url: Base URL of the REST API
            api_key: Project API key (anon)
            service_key: Service role key, optional
        """
        self.http = http
        self.rest_url = rest_url.rstrip("/")
        self.api_key = api_key
        self.bearer = service_key or api_key

    def table(self, name: str) -> TableQuery:
        return TableQuery(self, name)

    async def request(
        self,
        method: str,
        table: str,
        params: list[tuple[str, str]] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send a request to a collection endpoint.

        Raises:
            BackendError: On transport failure or non-2xx status
        """
        request_headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.bearer}",
            **(headers or {}),
        }
        url = f"{self.rest_url}/{table}"
        try:
            response = await self.http.request(
                method, url, params=params, json=json, headers=request_headers
            )
        except httpx.HTTPError as e:
            logger.warning("Record store request failed: %s %s: %s", method, table, e)
            raise BackendError(f"Backend unreachable: {e}") from e

        logger.debug("%s %s -> %s", method, table, response.status_code)
        raise_for_response(response)
        return response
