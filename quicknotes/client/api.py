"""Thin async HTTP client for the QuickNotes REST API.

Every method returns parsed JSON (dicts/lists) or raises TransportError.
Uses httpx.AsyncClient so the controller can await requests on the same
event loop that drives the UI. No timeout is applied: a request that never
answers keeps its caller waiting.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from quicknotes.config import settings
from quicknotes.exceptions import TransportError

logger = logging.getLogger(__name__)


class NotesApiClient:
    """Wraps the five endpoints of the notes API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            transport=transport,
            timeout=None,
        )

    async def __aenter__(self) -> "NotesApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            resp = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise TransportError(
                f"{method} {path} failed: {exc}",
                context={"method": method, "path": path},
            ) from exc

        if not resp.is_success:
            raise TransportError(
                f"{method} {path} returned {resp.status_code}",
                status_code=resp.status_code,
                server_message=_error_text(resp),
                context={"method": method, "path": path},
            )
        try:
            return resp.json()
        except ValueError as exc:
            raise TransportError(
                f"{method} {path} returned a body that is not JSON",
                status_code=resp.status_code,
                context={"method": method, "path": path},
            ) from exc

    async def list_notes(self) -> list[dict[str, Any]]:
        """GET /api/notes — every note on the server."""
        return await self._request("GET", "/api/notes")

    async def create_note(self, title: str, content: str) -> dict[str, Any]:
        """POST /api/notes — the created note, with its server-assigned id."""
        return await self._request("POST", "/api/notes", json={"title": title, "content": content})

    async def update_note(self, note_id: int, title: str, content: str) -> dict[str, Any]:
        """PUT /api/notes/{id} — the updated note."""
        return await self._request(
            "PUT", f"/api/notes/{note_id}", json={"title": title, "content": content}
        )

    async def delete_note(self, note_id: int) -> dict[str, Any]:
        """DELETE /api/notes/{id} — {message, note}."""
        return await self._request("DELETE", f"/api/notes/{note_id}")

    async def get_health(self) -> dict[str, Any]:
        """GET /health — liveness marker and server time."""
        return await self._request("GET", "/health")


def _error_text(resp: httpx.Response) -> Optional[str]:
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        return body.get("error")
    return None
