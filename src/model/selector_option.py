"""Selector option model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectorOption:
    """An entry of the game selector."""

    value: str
    label: str
    thumbnail: str = ""

    def as_select_item(self) -> tuple[str, str]:
        """Return the (prompt, value) pair Textual's Select expects."""
        return (self.label, self.value)
