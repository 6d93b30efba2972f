"""
HNItems — fetch Hacker News items by ID, one at a time or fanned out.

Stories, comments, jobs, polls and poll options all live in one ID space
under /item/<id>.json. IDs are positive and increasing: newer items have
larger IDs.

get_many() is the fan-out: one asyncio task per ID, no concurrency cap,
fail-fast. The first failing fetch cancels the rest and its exception is
re-raised as-is, so a caller never sees a partial list:

    async with HNClient() as hn:
        items = await HNItems(hn).get_many([8863, 8864, 8865])
"""

import asyncio
import logging
from typing import Iterable

from HNClient import HNClient, resource_path
from HNExceptions import HNDecodeError
from HNTypes import HNItem

log = logging.getLogger("hnapi.items")


def check_item_id(item_id: int) -> int:
    # bool is an int subclass; HNItems.get(True) is a caller bug
    if isinstance(item_id, bool) or not isinstance(item_id, int):
        raise ValueError(f"Item ID must be an int, got {item_id!r}")
    if item_id < 1:
        raise ValueError(f"Item ID must be positive, got {item_id}")
    return item_id


class HNItems:
    """Read items (/item/<id>.json endpoint)."""

    def __init__(self, client: HNClient):
        self._hn = client

    async def get(self, item_id: int) -> HNItem:
        """
        Fetch one item.

        Raises:
            ValueError:       item_id is not a positive int (no request made).
            HNNotFoundError:  the API answered null for this ID.
            HNDecodeError:    the body is not an item, or is a different item.
            HNTransportError: the request itself failed.
        """
        check_item_id(item_id)
        data = await self._hn.get_resource(resource_path("item", item_id), resource_id=item_id)
        item = HNItem.from_json(data)
        if item.id != item_id:
            raise HNDecodeError(f"Asked for item {item_id}, got item {item.id}")
        return item

    async def get_many(self, item_ids: Iterable[int]) -> list[HNItem]:
        """
        Fetch every item in item_ids concurrently.

        Returns the items in the same order as item_ids. An empty input
        returns [] without touching the network.

        All IDs are validated before any request goes out. If any fetch
        fails, the still-running fetches are cancelled and that first error
        is raised unchanged.
        """
        ids = list(item_ids)
        if not ids:
            return []
        for item_id in ids:
            check_item_id(item_id)

        log.debug(f"Fan-out: fetching {len(ids)} item(s)")
        tasks = [asyncio.create_task(self.get(item_id), name=f"hn_item_{item_id}") for item_id in ids]

        try:
            done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        except asyncio.CancelledError:
            await _cancel_all(tasks)
            raise

        failed = [t for t in tasks if t in done and not t.cancelled() and t.exception() is not None]
        if failed:
            if pending:
                log.info(f"Fan-out: item fetch failed, cancelling {len(pending)} pending fetch(es)")
                await _cancel_all(pending)
            raise failed[0].exception()

        return [t.result() for t in tasks]

    async def get_kids(self, item: HNItem) -> list[HNItem]:
        """Direct replies of an item, in ranked display order."""
        return await self.get_many(item.kids or ())

    async def get_parts(self, poll: HNItem) -> list[HNItem]:
        """Poll options of a poll, in display order."""
        return await self.get_many(poll.parts or ())


async def _cancel_all(tasks) -> None:
    for t in tasks:
        t.cancel()
    # Drain so no task is left running and no exception goes unretrieved
    await asyncio.gather(*tasks, return_exceptions=True)
