"""Async HTTP client for the staff and position endpoints.

Wraps :class:`httpx.AsyncClient`. Every non-2xx response and every transport
failure is raised as :class:`StaffApiError`; callers decide how to surface it.
No retries are attempted.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, TypeVar

import httpx

from .records import PositionOption, StaffRecord

logger = logging.getLogger(__name__)

STAFF_PATH = "/api/staff"
POSITIONS_PATH = "/api/positions"

R = TypeVar("R")


class StaffApiError(Exception):
    """Failed call to the staff API.

    Attributes:
        status_code: HTTP status, or ``None`` when no response was received.
        detail: Error payload from the server (``error``/``errors``) or the
            transport error message.
    """

    def __init__(self, message: str, *, status_code: int | None = None, detail: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


def _error_detail(response: httpx.Response) -> Any:
    try:
        body = response.json()
    except ValueError:
        return response.text or None
    if isinstance(body, dict):
        return body.get("errors") or body.get("error") or body
    return body


class StaffApiClient:
    """Client for ``/api/staff`` and ``/api/positions``.

    Use as an async context manager, or call :meth:`aclose` when done.
    ``transport`` lets tests plug in :class:`httpx.MockTransport`.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> "StaffApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, payload: Mapping[str, Any] | None = None) -> Any:
        logger.debug("%s %s payload=%s", method, path, payload)
        try:
            response = await self._client.request(method, path, json=payload)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise StaffApiError(f"{method} {path} failed: {exc}", detail=str(exc)) from exc

        if not response.is_success:
            detail = _error_detail(response)
            logger.warning("%s %s returned %s: %s", method, path, response.status_code, detail)
            raise StaffApiError(
                f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
                detail=detail,
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise StaffApiError(
                f"{method} {path} returned invalid JSON",
                status_code=response.status_code,
                detail=response.text,
            ) from exc

    def _records(self, data: Any, path: str, factory: Callable[[Mapping[str, Any]], R]) -> list[R]:
        """Decode a JSON array of objects; any other shape is an API error."""
        if data is None:
            return []
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            logger.warning("GET %s returned an unexpected body: %r", path, data)
            raise StaffApiError(f"GET {path} returned an unexpected body", detail=data)
        try:
            return [factory(item) for item in data]
        except (TypeError, ValueError, AttributeError) as exc:
            logger.warning("GET %s returned malformed records: %s", path, exc)
            raise StaffApiError(f"GET {path} returned malformed records", detail=str(exc)) from exc

    async def list_staff(self) -> list[StaffRecord]:
        data = await self._request("GET", STAFF_PATH)
        return self._records(data, STAFF_PATH, StaffRecord.from_json)

    async def list_positions(self) -> list[PositionOption]:
        data = await self._request("GET", POSITIONS_PATH)
        return self._records(data, POSITIONS_PATH, PositionOption.from_json)

    async def create_staff(self, payload: Mapping[str, Any]) -> StaffRecord:
        """POST a new staff member; returns the record with its server id."""
        data = await self._request("POST", STAFF_PATH, dict(payload))
        if not isinstance(data, dict):
            raise StaffApiError("POST /api/staff returned no record", detail=data)
        try:
            return StaffRecord.from_json(data)
        except (TypeError, ValueError, AttributeError) as exc:
            raise StaffApiError("POST /api/staff returned a malformed record", detail=str(exc)) from exc

    async def update_staff(self, staff_id: str, payload: Mapping[str, Any]) -> None:
        """PUT a full replacement; the response body is not used."""
        await self._request("PUT", STAFF_PATH, {"id": staff_id, **payload})
