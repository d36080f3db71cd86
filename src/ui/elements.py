"""Element factory: the Textual side of HostCapabilities.create_element."""

from __future__ import annotations

import logging
from typing import Any, Callable

from textual.widget import Widget
from textual.widgets import Button, Input, Select

from ui.widgets.header import ChannelHeader

log = logging.getLogger(__name__)


def _textfield(id: str, title: str = "", value: str = "") -> Input:
    field = Input(value=value, placeholder=title, id=id, classes="input")
    field.border_title = title
    return field


def _select(id: str, title: str = "") -> Select:
    selector: Select = Select([], prompt=title or "Select", id=id, classes="input")
    selector.border_title = title
    return selector


def _button(id: str, text: str = "") -> Button:
    return Button(text, id=id, variant="primary", classes="input")


def _header(text: str, icon: str = "") -> ChannelHeader:
    return ChannelHeader(text, icon=icon)


ELEMENT_FACTORIES: dict[str, Callable[..., Widget]] = {
    "header": _header,
    "textfield": _textfield,
    "select": _select,
    "button": _button,
}


def create_element(kind: str, **attrs: Any) -> Widget:
    """Create a control by kind name.

    Raises:
        ValueError: if the kind is not known
    """
    factory = ELEMENT_FACTORIES.get(kind)
    if factory is None:
        raise ValueError(f"Unknown element kind: {kind}")
    log.debug(f"create_element({kind!r}, {attrs})")
    return factory(**attrs)
