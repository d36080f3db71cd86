"""Panel header widget: ChannelHeader."""

from textual.widgets import Static

from ui.ids import HEADER

# Brand colours per integration icon
ICON_COLORS = {
    "twitch": "rgb(100,65,164)",
}


class ChannelHeader(Static):
    """Coloured header bar naming the panel and its integration."""

    def __init__(self, label: str, icon: str = "", color: str | None = None) -> None:
        super().__init__(self.markup_for(label, icon), id=HEADER)
        self.label = label
        self.icon_name = icon
        self.brand_color = color or ICON_COLORS.get(icon, "rgb(64,64,64)")

    @staticmethod
    def markup_for(label: str, icon: str) -> str:
        if icon:
            return f"[bold]{label}[/bold]  [dim]{icon}[/dim]"
        return f"[bold]{label}[/bold]"

    def on_mount(self) -> None:
        self.styles.background = self.brand_color
