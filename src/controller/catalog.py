"""CatalogAggregator: walks the cursor-paginated catalog listing."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from errors import PaginationLimitError
from model.panel_settings import DEFAULT_MAX_PAGES, DEFAULT_PAGE_SIZE

if TYPE_CHECKING:
    from model import CatalogItem
    from transport import ChannelApi

log = logging.getLogger(__name__)


class CatalogAggregator:
    """Materializes the whole remote catalog into one ordered list.

    Pages are requested strictly one after another, starting from an empty
    cursor and following each page's cursor until a page arrives without one.
    Items are kept in page order and duplicates are not filtered.

    The remote is trusted to terminate its cursor chain, but not blindly:
    the walk stops with PaginationLimitError after ``max_pages`` pages or on a
    cursor that was already visited. Transport errors propagate unchanged.
    In both cases nothing partial is returned.
    """

    def __init__(
        self,
        api: ChannelApi,
        page_size: int = DEFAULT_PAGE_SIZE,
        max_pages: int = DEFAULT_MAX_PAGES,
    ) -> None:
        self.api = api
        self.page_size = page_size
        self.max_pages = max_pages

    async def fetch_all(self) -> list[CatalogItem]:
        items: list[CatalogItem] = []
        seen_cursors: set[str] = set()
        after = ""

        for page_number in range(1, self.max_pages + 1):
            page = await self.api.get_catalog_page(after, self.page_size)
            items.extend(page.items)
            log.debug(f"Catalog page {page_number}: {len(page.items)} items, cursor={page.next_cursor!r}")

            if page.is_last:
                log.info(f"Catalog loaded: {len(items)} items in {page_number} pages")
                return items

            if page.next_cursor in seen_cursors:
                raise PaginationLimitError(
                    f"Catalog cursor {page.next_cursor!r} repeated after {page_number} pages"
                )
            seen_cursors.add(page.next_cursor)
            after = page.next_cursor

        raise PaginationLimitError(
            f"Catalog did not terminate within {self.max_pages} pages ({len(items)} items so far)"
        )
