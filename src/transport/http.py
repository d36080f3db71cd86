"""HTTP implementation of RemoteCall using httpx."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from errors import TransportError
from transport.types import GET

log = logging.getLogger(__name__)

USER_AGENT = "chanpanel"


@dataclass
class Integration:
    """Connection details for one named integration."""

    base_url: str
    token: str = ""
    client_id: str = ""

    def headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        if self.client_id:
            headers["Client-Id"] = self.client_id
        return headers


@dataclass
class HttpRemote:
    """RemoteCall backed by one shared httpx.AsyncClient.

    GET payloads are sent as query parameters, everything else as a JSON body.
    """

    integrations: dict[str, Integration]
    timeout_seconds: float = 10.0
    transport: httpx.AsyncBaseTransport | None = None  # Injected in tests
    _client: httpx.AsyncClient | None = field(default=None, init=False, repr=False)

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout_seconds,
                follow_redirects=False,
                transport=self.transport,
            )
        return self._client

    async def aclose(self) -> None:
        """Close the underlying client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __call__(
        self,
        integration: str,
        method: str,
        path: str,
        payload: Mapping[str, Any] | None = None,
    ) -> Any:
        context = {"integration": integration, "method": method, "path": path}
        target = self.integrations.get(integration)
        if target is None:
            raise TransportError(f"Unknown integration '{integration}'", **context)

        url = f"{target.base_url.rstrip('/')}/{path.lstrip('/')}"
        kwargs: dict[str, Any] = {"headers": target.headers()}
        if payload is not None:
            if method == GET:
                kwargs["params"] = dict(payload)
            else:
                kwargs["json"] = dict(payload)

        log.debug(f"{method} {url}")
        try:
            response = await self._get_client().request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise TransportError(str(e) or type(e).__name__, **context) from e

        if not response.is_success:
            raise TransportError(
                _error_message(response),
                status=response.status_code,
                **context,
            )

        if not response.content:
            return None
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise TransportError(
                f"Malformed response body: {e}",
                status=response.status_code,
                **context,
            ) from e


def _error_message(response: httpx.Response) -> str:
    """Best-effort message from an error response."""
    try:
        body = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return response.reason_phrase or "Request failed"
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.reason_phrase or "Request failed"
