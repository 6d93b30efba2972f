"""
HNStories — story listings (top, new, best, ask, show, job).

Each listing is one /<category>stories.json document: a JSON array of item
IDs in the server's ranking order. How many IDs a listing serves depends on
the category:

    top, new        up to 500
    ask, show, job  up to 200
    best            no documented cap

get_items() validates the requested limit against that cap BEFORE any
request is made, slices the ID list, then hands the slice to
HNItems.get_many() so ranking order survives end to end.

Offset semantics:
    By default the slice is always ids[offset : offset + limit], so an offset
    past the end gives [] and a window running off the end is truncated.

    legacy_offset=True reproduces the older listing behaviour: whenever the
    whole list already fits inside limit it is returned untouched and offset
    is ignored. Only use it if you depend on that quirk.
"""

import logging

from HNClient import HNClient
from HNExceptions import HNLimitExceededError
from HNItems import HNItems
from HNTypes import HNItem, HNStoryType, decode_id_list

log = logging.getLogger("hnapi.stories")


def validate_limit(category: HNStoryType, limit: int | None) -> None:
    """Raise HNLimitExceededError if limit is above the category's cap."""
    if limit is None:
        return
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        raise ValueError(f"limit must be a non-negative int, got {limit!r}")
    max_limit = category.max_limit
    if max_limit is not None and limit > max_limit:
        raise HNLimitExceededError(category, max_limit)


def slice_ids(
    ids: list[int],
    limit: int | None,
    offset: int = 0,
    legacy_offset: bool = False,
) -> list[int]:
    """
    Window of ids starting at offset, at most limit long.

    Never raises for out-of-range offsets; the window just comes back
    short or empty.
    """
    if isinstance(offset, bool) or not isinstance(offset, int) or offset < 0:
        raise ValueError(f"offset must be a non-negative int, got {offset!r}")
    if limit is None:
        return list(ids[offset:])
    if legacy_offset and len(ids) <= limit:
        return list(ids)
    return list(ids[offset:offset + limit])


class HNStories:
    """Read story listings (/<category>stories.json endpoints)."""

    def __init__(self, client: HNClient):
        self._hn    = client
        self._items = HNItems(client)

    @property
    def items_api(self) -> HNItems:
        return self._items

    async def get_ids(self, category: HNStoryType | str) -> list[int]:
        """The full current ID list for a category, in server order."""
        category = HNStoryType.parse(category)
        data = await self._hn.get_resource(category.endpoint, resource_id=category)
        ids  = list(decode_id_list(data, category.endpoint))
        log.debug(f"{category.endpoint}: {len(ids)} id(s)")
        return ids

    async def get_items(
        self,
        category: HNStoryType | str,
        limit: int | None = None,
        offset: int = 0,
        legacy_offset: bool = False,
    ) -> list[HNItem]:
        """
        Fetch story items for a category, keeping the listing's order.

        Args:
            category:      HNStoryType or its name ("top", "ask", ...).
            limit:         How many stories to fetch. None = the whole list.
            offset:        Position in the list to start from.
            legacy_offset: See module docstring.

        Raises:
            HNLimitExceededError: limit is above the category's cap. Raised
                                  before any request goes out.
            ValueError:           negative limit or offset.
        """
        category = HNStoryType.parse(category)
        validate_limit(category, limit)
        if isinstance(offset, bool) or not isinstance(offset, int) or offset < 0:
            raise ValueError(f"offset must be a non-negative int, got {offset!r}")

        ids = await self.get_ids(category)
        if not ids:
            return []

        window = slice_ids(ids, limit, offset, legacy_offset=legacy_offset)
        log.debug(f"{category}: fetching {len(window)} of {len(ids)} stories (offset={offset}, limit={limit})")
        return await self._items.get_many(window)
