"""Injected collaborators for the panel: remote transport, identity, notifier, host."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Protocol

from transport.types import RemoteCall


class IdentityProvider(Protocol):
    """Supplies the opaque operator identity used in the channel path."""

    @property
    def identity(self) -> str:
        ...


@dataclass(frozen=True)
class StaticIdentity:
    """Identity fixed by settings for the panel's lifetime."""

    identity: str


@dataclass(frozen=True)
class PanelContext:
    """Everything the panel core needs from the outside world."""

    remote: RemoteCall
    identity_provider: IdentityProvider
    notify: Callable[[str], None]
    integration: str = "twitch"


@dataclass(frozen=True)
class HostCapabilities:
    """What the hosting UI framework provides to the panel.

    create_element(kind, **attrs) builds a control ("header", "textfield",
    "select" or "button"). mounted_hook(callback) schedules an async callback
    to run once the controls are mounted.
    """

    create_element: Callable[..., Any]
    mounted_hook: Callable[[Callable[[], Awaitable[None]]], None]
