"""Field mapping registry for UI ↔ ChannelState ↔ remote schema."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from textual.widgets import Select

from errors import TransportError
from model import ChannelState
import ui.ids as ids


@dataclass
class FieldMapping:
    """Maps a UI widget to a ChannelState field and its remote key."""

    widget_id: str
    state_attr: str  # e.g., "title"
    remote_key: str  # Key sent in the PUT payload and read from responses
    remote_aliases: tuple[str, ...] = ()  # Fallback response keys (Twitch v5 names)
    value_transform: Callable[[Any], Any] | None = None  # Transform UI value to state value
    inverse_transform: Callable[[Any], Any] | None = None  # Transform state value to UI value

    def read_remote(self, body: dict[str, Any]) -> str:
        """Read this field from a response body."""
        for key in (self.remote_key, *self.remote_aliases):
            if key in body:
                value = body[key]
                return "" if value is None else str(value)
        raise TransportError(f"Missing channel field {self.remote_key!r}")


def _select_to_state(value: Any) -> str:
    """Select.NULL means no category."""
    return "" if value is Select.NULL or value is None else str(value)


def _state_to_select(value: str) -> Any:
    return value if value else Select.NULL


# Registry of the editable channel fields, in form order
FIELD_MAPPINGS: list[FieldMapping] = [
    FieldMapping(ids.TITLE_INPUT, "title", "title", ("status",)),
    FieldMapping(
        ids.CATEGORY_SELECT,
        "category",
        "category",
        ("game",),
        value_transform=_select_to_state,
        inverse_transform=_state_to_select,
    ),
]


def to_remote_payload(state: ChannelState) -> dict[str, str]:
    """Build the PUT payload from local state."""
    return {m.remote_key: getattr(state, m.state_attr) for m in FIELD_MAPPINGS}


def from_remote_body(body: dict[str, Any]) -> ChannelState:
    """Build a ChannelState from a channel response body."""
    state = ChannelState()
    for mapping in FIELD_MAPPINGS:
        setattr(state, mapping.state_attr, mapping.read_remote(body))
    return state
