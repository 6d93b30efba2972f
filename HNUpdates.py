"""
HNUpdates — the two "what's happening now" endpoints.

    maxitem.json  the current largest item ID. Walk backwards from it to
                  reach every item ever posted.
    updates.json  items and profiles changed recently. No cursor, no
                  ordering; two calls may overlap or skip changes.
"""

from HNClient import HNClient
from HNExceptions import HNDecodeError
from HNTypes import HNUpdate


class HNUpdates:
    """Read /maxitem.json and /updates.json."""

    def __init__(self, client: HNClient):
        self._hn = client

    async def max_item(self) -> int:
        data = await self._hn.get_resource("maxitem.json", resource_id="maxitem")
        if isinstance(data, bool) or not isinstance(data, int):
            raise HNDecodeError(f"maxitem.json should be an integer, got {data!r}")
        return data

    async def get(self) -> HNUpdate:
        data = await self._hn.get_resource("updates.json", resource_id="updates")
        return HNUpdate.from_json(data)
