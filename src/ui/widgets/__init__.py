"""Custom Textual widgets for chanpanel."""

from ui.widgets.header import ChannelHeader, ICON_COLORS

__all__ = [
    "ChannelHeader",
    "ICON_COLORS",
]
