"""Widget ID constants for the panel.

Using constants prevents typos and makes refactoring easier.
"""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css, STATUS_BAR
        self.query_one(css(STATUS_BAR), Static)
    """
    return f"#{widget_id}"

# Container IDs
HEADER = "panel-header"
CHANNEL_FORM = "channel-form"
FORM_INNER = "form-inner"
STATUS_BAR = "status-bar"

# Form controls
TITLE_INPUT = "title-input"
CATEGORY_SELECT = "game"
SAVE_BTN = "save-btn"
