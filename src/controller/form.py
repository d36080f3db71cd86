"""FormStateMachine: save/refresh transitions with a re-entrancy guard."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Iterable, Protocol

from controller.field_mappings import from_remote_body, to_remote_payload

if TYPE_CHECKING:
    from model import ChannelState
    from transport import ChannelApi

log = logging.getLogger(__name__)

SAVE_SUCCESS_MESSAGE = "Channel updated successfully"


class FormState(Enum):
    IDLE = "idle"
    BUSY = "busy"


class Disableable(Protocol):
    """Anything with a writable ``disabled`` flag (Textual widgets qualify)."""

    disabled: Any


class FormStateMachine:
    """Coordinates save() and refresh() for one channel form.

    The loading flag is the Busy state. While it is set, every registered
    control is disabled, which is what stops the user from starting a second
    save while one is in flight. A save() that arrives while Busy is dropped.

    Server responses overwrite the local ChannelState wholesale; edits made
    while a request was in flight are lost.

    refresh() does not raise the loading flag unless ``guard_refresh`` is set,
    so by default a save() can race an in-flight refresh(). The race is logged.
    """

    def __init__(
        self,
        api: ChannelApi,
        identity: str,
        state: ChannelState,
        notify: Callable[[str], None],
        controls: Iterable[Disableable] = (),
        on_state_changed: Callable[[ChannelState], None] | None = None,
        guard_refresh: bool = False,
    ) -> None:
        self.api = api
        self.identity = identity
        self.state = state
        self._notify = notify
        self._controls: list[Disableable] = list(controls)
        self._on_state_changed = on_state_changed
        self.guard_refresh = guard_refresh
        self._loading = False
        self._refreshing = False

    @property
    def loading(self) -> bool:
        return self._loading

    @loading.setter
    def loading(self, loading: bool) -> None:
        self._loading = loading
        for control in self._controls:
            control.disabled = loading

    @property
    def state_name(self) -> FormState:
        return FormState.BUSY if self._loading else FormState.IDLE

    @property
    def refreshing(self) -> bool:
        """True while a refresh() request is in flight."""
        return self._refreshing

    async def refresh(self) -> None:
        """Reload title and category from the server."""
        if self.guard_refresh:
            if self._loading:
                log.debug("refresh() ignored: form is busy")
                return
            self.loading = True

        self._refreshing = True
        try:
            body = await self.api.get_channel()
        finally:
            self._refreshing = False
            if self.guard_refresh:
                self.loading = False

        fresh = from_remote_body(body)
        self._apply(fresh)
        log.info(f"Refreshed channel: title={fresh.title!r} category={fresh.category!r}")

    async def save(self) -> None:
        """Push the local title and category, then adopt the server's echo."""
        if self._loading:
            log.debug("save() ignored: form is busy")
            return
        if self._refreshing:
            log.warning("save() started while refresh() is in flight; the refresh result may overwrite this save")

        self.loading = True
        try:
            log.info(f"Saving channel {self.identity}: title={self.state.title!r} category={self.state.category!r}")
            body = await self.api.put_channel(self.identity, to_remote_payload(self.state))
            self._apply(from_remote_body(body))
            self._notify(SAVE_SUCCESS_MESSAGE)
        finally:
            self.loading = False

    def _apply(self, fresh: ChannelState) -> None:
        self.state.replace_with(fresh)
        if self._on_state_changed is not None:
            self._on_state_changed(self.state)
