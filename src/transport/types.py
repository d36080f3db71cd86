"""Transport capability consumed by the panel."""

from __future__ import annotations

from typing import Any, Mapping, Protocol

GET = "GET"
PUT = "PUT"


class RemoteCall(Protocol):
    """Issue one request against a named integration.

    Returns the parsed response body. Any failure (network, non-2xx status,
    malformed body) raises TransportError.
    """

    async def __call__(
        self,
        integration: str,
        method: str,
        path: str,
        payload: Mapping[str, Any] | None = None,
    ) -> Any:
        ...
