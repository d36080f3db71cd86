"""ChannelPanelController: composition root for the channel panel."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from controller.catalog import CatalogAggregator
from controller.form import FormStateMachine
from controller.options import build_options
from controller.sync import ChannelSyncManager
from model import ChannelState, PanelSettings
from transport import ChannelApi
import ui.ids as ids

if TYPE_CHECKING:
    from context import HostCapabilities, PanelContext
    from model import CatalogItem

log = logging.getLogger(__name__)


class ChannelPanelController:
    """Builds the panel's controls and wires them to the sync engine.

    On mount the whole catalog is fetched, turned into selector options, and
    the channel is refreshed to fill in the initial title and category.
    Form submission and the save button both go through the same save()
    transition.
    """

    def __init__(
        self,
        context: PanelContext,
        host: HostCapabilities,
        settings: PanelSettings | None = None,
        on_status: Callable[[str], None] | None = None,
    ) -> None:
        self.context = context
        self.settings = settings or PanelSettings()
        self._on_status = on_status
        self.state = ChannelState()
        self.catalog: tuple[CatalogItem, ...] = ()

        self.api = ChannelApi(context.remote, context.integration)
        self.aggregator = CatalogAggregator(
            self.api,
            page_size=self.settings.page_size,
            max_pages=self.settings.max_pages,
        )

        create = host.create_element
        self.header = create("header", text="Channel", icon=context.integration)
        self.title_field = create("textfield", id=ids.TITLE_INPUT, title="Title")
        self.selector = create("select", id=ids.CATEGORY_SELECT, title="Game")
        self.button = create("button", id=ids.SAVE_BTN, text="Save Changes")

        self.sync = ChannelSyncManager(self.state)
        self.sync.cache_widget(ids.TITLE_INPUT, self.title_field)
        self.sync.cache_widget(ids.CATEGORY_SELECT, self.selector)

        self.form = FormStateMachine(
            self.api,
            self.identity,
            self.state,
            context.notify,
            controls=[self.title_field, self.selector, self.button],
            on_state_changed=lambda _state: self.sync.sync_ui_from_state(),
            guard_refresh=self.settings.guard_refresh,
        )

        host.mounted_hook(self.mounted)

    @property
    def identity(self) -> str:
        return self.context.identity_provider.identity

    @property
    def controls(self) -> list[Any]:
        """The three interactive controls, in form order."""
        return [self.title_field, self.selector, self.button]

    def _set_status(self, message: str) -> None:
        if self._on_status is not None:
            self._on_status(message)

    async def mounted(self) -> None:
        """Load the catalog, populate the selector, then refresh the form."""
        self._set_status("Loading categories...")
        items = await self.aggregator.fetch_all()
        self.catalog = tuple(items)
        self.sync.populate_options(
            build_options(
                self.catalog,
                self.settings.thumbnail_width,
                self.settings.thumbnail_height,
            )
        )
        self._set_status(f"{len(self.catalog)} categories loaded")
        await self.form.refresh()

    def on_user_edit(self) -> None:
        """Pull user edits from the widgets into ChannelState."""
        self.sync.sync_state_from_ui()

    async def submit(self) -> None:
        """Form submit and button click both land here."""
        if self.form.loading:
            log.debug("Submit ignored: save already in flight")
            return
        self.sync.sync_state_from_ui()
        await self.form.save()
        self._set_status("Channel saved")
