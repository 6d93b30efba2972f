"""
HNPaginator — walk an in-memory ID list page by page.

The API has no paging of its own: a story listing is one array of IDs. This
slices that array into fixed-size pages and fetches each page with one
HNItems.get_many() fan-out, so a caller can stop early without fetching all
500 top stories:

    async with HNClient() as hn:
        async for page in HNPaginator.story_pages(HNStories(hn), "top", perpage=30):
            show(page)
            if enough():
                break

Stops when:
  - the ID list is exhausted (a short page is the last page)
  - max_pages is reached
  - a page fails; its error propagates and nothing further is fetched
"""

import logging
from typing import AsyncIterator

from HNTypes import HNItem, HNStoryType

log = logging.getLogger("hnapi.paginator")

DEFAULT_PERPAGE = 30


class HNPaginator:
    """Page-by-page fetching over ID lists. All methods are static."""

    @staticmethod
    async def pages(
        items_api,
        ids: list[int],
        perpage: int = DEFAULT_PERPAGE,
        max_pages: int | None = None,
    ) -> AsyncIterator[list[HNItem]]:
        """
        Yield successive pages of items for ids.

        Args:
            items_api: An HNItems instance.
            ids:       Item IDs in the order they should be paged.
            perpage:   Items per page (>= 1).
            max_pages: Stop after this many pages. None = until exhausted.
        """
        if perpage < 1:
            raise ValueError(f"perpage must be >= 1, got {perpage}")
        ids = list(ids)

        page = 0
        for start in range(0, len(ids), perpage):
            if max_pages is not None and page >= max_pages:
                log.debug(f"Paginator: max_pages={max_pages} reached, stopping")
                return
            chunk = ids[start:start + perpage]
            page += 1
            items = await items_api.get_many(chunk)
            log.debug(f"Paginator: page {page} → {len(items)} items")
            yield items

    @staticmethod
    async def story_pages(
        stories_api,
        category: HNStoryType | str,
        perpage: int = DEFAULT_PERPAGE,
        max_pages: int | None = None,
    ) -> AsyncIterator[list[HNItem]]:
        """Fetch a category's ID list once, then page through its stories."""
        ids = await stories_api.get_ids(category)
        async for items in HNPaginator.pages(stories_api.items_api, ids, perpage, max_pages):
            yield items
