"""Resource-level client for the channel and catalog endpoints."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping

from errors import TransportError
from model import Page
from transport.types import GET, PUT, RemoteCall

log = logging.getLogger(__name__)

CHANNEL_PATH = "channel"
CATALOG_PATH = "catalog/top"


@dataclass
class ChannelApi:
    """Maps channel/catalog operations onto a RemoteCall.

    Channel bodies are returned as plain mappings; turning them into
    ChannelState is the field registry's job.
    """

    remote: RemoteCall
    integration: str = "twitch"

    async def get_channel(self) -> dict[str, Any]:
        return await self._call(GET, CHANNEL_PATH)

    async def put_channel(self, identity: str, payload: Mapping[str, str]) -> dict[str, Any]:
        """Push the channel payload; returns the server's echo."""
        return await self._call(PUT, f"{CHANNEL_PATH}/{identity}", dict(payload))

    async def get_catalog_page(self, after: str, first: int) -> Page:
        body = await self._call(GET, CATALOG_PATH, {"after": after, "first": first})
        try:
            return Page.from_remote(body)
        except (KeyError, TypeError, AttributeError) as e:
            raise self._malformed(GET, CATALOG_PATH, f"Malformed catalog page: {e}") from e

    async def _call(
        self, method: str, path: str, payload: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        body = await self.remote(self.integration, method, path, payload)
        if not isinstance(body, dict):
            raise self._malformed(method, path, f"Expected a JSON object, got {type(body).__name__}")
        return body

    def _malformed(self, method: str, path: str, message: str) -> TransportError:
        log.debug(f"Malformed response for {method} {path}: {message}")
        return TransportError(message, integration=self.integration, method=method, path=path)
