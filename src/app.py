"""Main TUI application for chanpanel."""

import logging
import os
from pathlib import Path
from typing import Awaitable, Callable

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.widgets import Button, Input, Select, Static
from textual.worker import Worker, WorkerState

from context import HostCapabilities, PanelContext, StaticIdentity
from controller import ChannelPanelController
from model import PanelSettings
from transport import RemoteCall
from ui import create_element
from ui.ids import css
import ui.ids as ids

# Set up logging to XDG state directory
def _get_log_path() -> Path:
    """Get the log file path following XDG Base Directory conventions."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / "chanpanel"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "chanpanel.log"

logging.basicConfig(
    filename=str(_get_log_path()),
    level=logging.DEBUG,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
log = logging.getLogger(__name__)

# Load CSS from file
APP_CSS = (Path(__file__).parent / "ui" / "styles.css").read_text()


class ChannelPanelApp(App):
    """TUI panel for editing a channel's title and game."""

    TITLE = "Channel"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    BINDINGS = [
        Binding("ctrl+s", "save", "Save", show=True),
        Binding("escape", "quit", "Quit", show=True),
    ]

    def __init__(self, remote: RemoteCall, settings: PanelSettings) -> None:
        super().__init__()
        self.settings = settings
        self._mounted_hooks: list[Callable[[], Awaitable[None]]] = []
        self.status_message = ""

        context = PanelContext(
            remote=remote,
            identity_provider=StaticIdentity(settings.identity),
            notify=self._notify_user,
            integration=settings.integration,
        )
        host = HostCapabilities(
            create_element=create_element,
            mounted_hook=self._mounted_hooks.append,
        )
        self.controller = ChannelPanelController(
            context,
            host,
            settings,
            on_status=self._set_status,
        )

    def compose(self) -> ComposeResult:
        log.info(f"compose() called for identity {self.settings.identity!r}")
        yield self.controller.header
        with Vertical(id=ids.CHANNEL_FORM):
            with Vertical(id=ids.FORM_INNER):
                yield self.controller.title_field
                yield self.controller.selector
            yield self.controller.button
        yield Static("", id=ids.STATUS_BAR)

    # =========================================================================
    # Status and Notifications
    # =========================================================================

    def _set_status(self, message: str) -> None:
        """Set status bar message."""
        self.status_message = message
        try:
            status = self.query_one(css(ids.STATUS_BAR), Static)
            status.update(message)
        except NoMatches:
            pass

    def _notify_user(self, message: str) -> None:
        """Notifier handed to the panel core."""
        log.info(f"notify: {message}")
        self.notify(message)

    # =========================================================================
    # Event Handlers
    # =========================================================================

    @on(Input.Changed, css(ids.TITLE_INPUT))
    def on_title_changed(self, event: Input.Changed) -> None:
        """Handle title edits."""
        self.controller.on_user_edit()

    @on(Select.Changed, css(ids.CATEGORY_SELECT))
    def on_category_changed(self, event: Select.Changed) -> None:
        """Handle game selection."""
        self.controller.on_user_edit()

    @on(Input.Submitted, css(ids.TITLE_INPUT))
    def on_form_submitted(self, event: Input.Submitted) -> None:
        """Enter in the title field submits the form."""
        event.stop()
        self.action_save()

    @on(Button.Pressed, css(ids.SAVE_BTN))
    def on_save_pressed(self, event: Button.Pressed) -> None:
        """Save button."""
        self.action_save()

    def action_save(self) -> None:
        """Run the save transition in a worker."""
        self.run_worker(self.controller.submit(), name="save", group="form", exit_on_error=False)

    # =========================================================================
    # Error Boundary
    # =========================================================================

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Report failures from the mount sequence and save()."""
        if event.state != WorkerState.ERROR:
            return
        error = event.worker.error
        log.error(f"{event.worker.name} failed: {error}", exc_info=error)
        self._set_status(f"Error: {error}")
        self.notify(str(error), title=f"{event.worker.name} failed", severity="error")

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def _run_mounted_hooks(self) -> None:
        for hook in self._mounted_hooks:
            await hook()

    def on_mount(self) -> None:
        """Called when the app is mounted."""
        self.run_worker(self._run_mounted_hooks(), name="mount", exit_on_error=False)
        self.controller.title_field.focus()

    async def on_unmount(self) -> None:
        """Release the transport's connections."""
        close = getattr(self.controller.context.remote, "aclose", None)
        if close is not None:
            await close()
