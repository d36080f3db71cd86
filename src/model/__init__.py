"""Model classes for chanpanel."""

from model.catalog_item import CatalogItem, Page
from model.channel_state import ChannelState
from model.selector_option import SelectorOption
from model.panel_settings import PanelSettings

__all__ = [
    "CatalogItem",
    "Page",
    "ChannelState",
    "SelectorOption",
    "PanelSettings",
]
