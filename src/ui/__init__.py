"""UI module containing widgets, the element factory and styles."""

from ui.widgets import ChannelHeader
from ui.elements import ELEMENT_FACTORIES, create_element
from ui import ids

__all__ = [
    "ChannelHeader",
    "ELEMENT_FACTORIES",
    "create_element",
    "ids",
]
