"""Channel state model: the editable title and category."""

from dataclasses import dataclass


@dataclass
class ChannelState:
    """The channel resource under synchronization."""

    title: str = ""
    category: str = ""  # Name of the selected catalog item

    def replace_with(self, other: "ChannelState") -> None:
        """Overwrite both fields in place (server responses are authoritative)."""
        self.title = other.title
        self.category = other.category
