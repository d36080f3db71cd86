"""Shared fixtures for chanpanel tests."""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Callable

import pytest

from model import ChannelState, PanelSettings
from transport import CATALOG_PATH, CHANNEL_PATH, GET, PUT, ChannelApi

IDENTITY = "42"
PUT_PATH = f"{CHANNEL_PATH}/{IDENTITY}"


@dataclass
class Call:
    """One recorded remote call."""

    integration: str
    method: str
    path: str
    payload: dict[str, Any] | None


class FakeRemote:
    """Scripted RemoteCall.

    Responses are registered per (method, path). A list of responses is
    consumed in order, the last one repeating. A response may be a body, an
    exception instance (raised), or a callable taking the payload.
    hold() returns an asyncio.Event the call waits on before answering.
    """

    def __init__(self) -> None:
        self.calls: list[Call] = []
        self._routes: dict[tuple[str, str], list[Any]] = {}
        self._gates: dict[tuple[str, str], asyncio.Event] = {}

    def respond(self, method: str, path: str, *responses: Any) -> None:
        self._routes[(method, path)] = list(responses)

    def hold(self, method: str, path: str) -> asyncio.Event:
        gate = asyncio.Event()
        self._gates[(method, path)] = gate
        return gate

    def calls_to(self, method: str, path: str) -> list[Call]:
        return [c for c in self.calls if c.method == method and c.path == path]

    async def __call__(self, integration, method, path, payload=None):
        self.calls.append(Call(integration, method, path, dict(payload) if payload is not None else None))
        gate = self._gates.get((method, path))
        if gate is not None:
            await gate.wait()

        queue = self._routes.get((method, path))
        if not queue:
            raise AssertionError(f"No response scripted for {method} {path}")
        response = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(payload)
        return response


@dataclass
class FakeControl:
    """Stand-in for a host control: value, disabled flag, options."""

    kind: str
    attrs: dict[str, Any] = field(default_factory=dict)
    value: Any = ""
    disabled: bool = False
    options: list[tuple[str, str]] = field(default_factory=list)

    def set_options(self, options) -> None:
        self.options = list(options)


class FakeHost:
    """HostCapabilities backed by FakeControl objects."""

    def __init__(self) -> None:
        self.created: list[FakeControl] = []
        self.hooks: list[Callable] = []

    def create_element(self, kind: str, **attrs: Any) -> FakeControl:
        control = FakeControl(kind, attrs)
        self.created.append(control)
        return control

    def mounted_hook(self, callback: Callable) -> None:
        self.hooks.append(callback)

    async def mount(self) -> None:
        for hook in self.hooks:
            await hook()


def catalog_item(name: str) -> dict[str, str]:
    return {"name": name, "imageUrlTemplate": f"https://img.example/{name}-{{width}}x{{height}}.jpg"}


def catalog_page(names: list[str], cursor: str | None = None) -> dict[str, Any]:
    page: dict[str, Any] = {"items": [catalog_item(n) for n in names]}
    if cursor is not None:
        page["nextCursor"] = cursor
    return page


def paged_catalog(pages: list[dict[str, Any]]) -> Callable[[dict], dict]:
    """Serve pages by their ``after`` cursor: "" for the first, then c1, c2..."""
    by_after = {"": pages[0]}
    for prev, page in zip(pages, pages[1:]):
        by_after[prev["nextCursor"]] = page
    return lambda payload: by_after[payload["after"]]


@pytest.fixture
def remote():
    """A FakeRemote with nothing scripted."""
    return FakeRemote()


@pytest.fixture
def api(remote):
    """ChannelApi over the fake remote."""
    return ChannelApi(remote, "twitch")


@pytest.fixture
def state():
    return ChannelState()


@pytest.fixture
def notifications():
    """Collects notifier messages."""
    return []


@pytest.fixture
def controls():
    """The three form controls: title field, selector, submit button."""
    return [FakeControl("textfield"), FakeControl("select"), FakeControl("button")]


@pytest.fixture
def settings():
    """PanelSettings for the test identity."""
    return PanelSettings(identity=IDENTITY, token="secret-token")


@pytest.fixture
def three_page_catalog():
    """Pages of 100, 100 and 37 items with cursors c1, c2, then none."""
    return [
        catalog_page([f"game-{i}" for i in range(0, 100)], "c1"),
        catalog_page([f"game-{i}" for i in range(100, 200)], "c2"),
        catalog_page([f"game-{i}" for i in range(200, 237)]),
    ]

