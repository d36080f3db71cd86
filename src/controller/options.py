"""Catalog → selector option mapping."""

from __future__ import annotations

from typing import Iterable

from model import CatalogItem, SelectorOption
from model.panel_settings import DEFAULT_THUMBNAIL_HEIGHT, DEFAULT_THUMBNAIL_WIDTH


def build_options(
    items: Iterable[CatalogItem],
    width: int = DEFAULT_THUMBNAIL_WIDTH,
    height: int = DEFAULT_THUMBNAIL_HEIGHT,
) -> list[SelectorOption]:
    """Map catalog items to selector options, preserving order.

    Args:
        items: Catalog items as returned by the aggregator
        width: Thumbnail width substituted for ``{width}``
        height: Thumbnail height substituted for ``{height}``
    """
    return [
        SelectorOption(
            value=item.name,
            label=item.name,
            thumbnail=item.image_url(width, height),
        )
        for item in items
    ]
