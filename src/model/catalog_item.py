"""Catalog models: one listing entry and one page of the listing."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class CatalogItem:
    """One entry of the remote game catalog."""

    name: str
    image_url_template: str = ""  # e.g. "https://.../{width}x{height}.jpg"

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_remote(cls, data: dict[str, Any]) -> CatalogItem:
        """Build from a remote item, accepting the Twitch key for box art."""
        template = data.get("imageUrlTemplate")
        if template is None:
            template = data.get("box_art_url", "")
        return cls(name=str(data["name"]), image_url_template=str(template or ""))

    def image_url(self, width: int, height: int) -> str:
        """Substitute the size tokens of the image template."""
        return (
            self.image_url_template
            .replace("{width}", str(width))
            .replace("{height}", str(height))
        )


@dataclass(frozen=True)
class Page:
    """One response of the cursor-paginated catalog listing."""

    items: list[CatalogItem] = field(default_factory=list)
    next_cursor: str | None = None

    @property
    def is_last(self) -> bool:
        """An absent or empty cursor marks the terminal page."""
        return not self.next_cursor

    @classmethod
    def from_remote(cls, data: dict[str, Any]) -> Page:
        """Build from `{items, nextCursor}` or the Twitch `{data, pagination}` shape."""
        if "items" in data:
            raw_items = data.get("items") or []
            cursor = data.get("nextCursor")
        else:
            raw_items = data.get("data") or []
            cursor = (data.get("pagination") or {}).get("cursor")
        items = [CatalogItem.from_remote(item) for item in raw_items]
        return cls(items=items, next_cursor=str(cursor) if cursor else None)
