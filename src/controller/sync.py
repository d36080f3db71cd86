"""ChannelSyncManager: bidirectional UI ↔ ChannelState synchronization."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from controller.field_mappings import FIELD_MAPPINGS, FieldMapping
from model import SelectorOption
import ui.ids as ids

if TYPE_CHECKING:
    from model import ChannelState

log = logging.getLogger(__name__)


class ChannelSyncManager:
    """Manages bidirectional UI ↔ ChannelState synchronization.

    1. **UI → State** (sync_state_from_ui): read the title field and the
       selector into ChannelState. Called on every user edit.

    2. **State → UI** (sync_ui_from_state): write ChannelState into the
       widgets. Called after refresh() and save() replace the state.

    The panel controller registers the widgets it creates with cache_widget(),
    so the manager never needs a running app.
    """

    def __init__(self, state: ChannelState) -> None:
        self.state = state
        self.options: list[SelectorOption] = []
        self._widget_cache: dict[str, Any] = {}

    def cache_widget(self, widget_id: str, widget: Any) -> None:
        """Cache a widget reference for lookup by id."""
        self._widget_cache[widget_id] = widget

    def get_widget(self, widget_id: str) -> Any | None:
        return self._widget_cache.get(widget_id)

    def sync_state_from_ui(self) -> None:
        """Read the form widgets and update ChannelState."""
        for mapping in FIELD_MAPPINGS:
            widget = self.get_widget(mapping.widget_id)
            if widget is None:
                continue
            value = widget.value
            if mapping.value_transform:
                value = mapping.value_transform(value)
            setattr(self.state, mapping.state_attr, value)

    def sync_ui_from_state(self) -> None:
        """Read ChannelState and update the form widgets."""
        for mapping in FIELD_MAPPINGS:
            widget = self.get_widget(mapping.widget_id)
            if widget is None:
                continue
            value = getattr(self.state, mapping.state_attr)
            if mapping.widget_id == ids.CATEGORY_SELECT:
                self.ensure_option(value)
            self._write(widget, mapping, value)

    def _write(self, widget: Any, mapping: FieldMapping, value: Any) -> None:
        if mapping.inverse_transform:
            value = mapping.inverse_transform(value)
        widget.value = value

    def populate_options(self, options: list[SelectorOption]) -> None:
        """Replace the selector's option list."""
        self.options = list(options)
        self._push_options()
        log.debug(f"Selector populated with {len(self.options)} options")

    def ensure_option(self, category: str) -> None:
        """Append an option for a category the catalog does not contain.

        The catalog only lists top categories, so the server may report one
        the selector has never seen.
        """
        if not category or any(opt.value == category for opt in self.options):
            return
        log.debug(f"Adding off-catalog category option: {category!r}")
        self.options.append(SelectorOption(value=category, label=category))
        self._push_options()

    def _push_options(self) -> None:
        selector = self.get_widget(ids.CATEGORY_SELECT)
        if selector is None:
            log.debug("category selector not found")
            return
        selector.set_options([opt.as_select_item() for opt in self.options])
