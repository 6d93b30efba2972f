"""
HNUsers — look up Hacker News user profiles by username.

Usernames are case-sensitive and passed through exactly as given:
"pg" and "PG" are different lookups. Only users with public activity
are served; anyone else comes back as HNNotFoundError.
"""

from HNClient import HNClient, resource_path
from HNExceptions import HNDecodeError
from HNTypes import HNUser


class HNUsers:
    """Look up user profiles (/user/<username>.json endpoint)."""

    def __init__(self, client: HNClient):
        self._hn = client

    async def get(self, username: str) -> HNUser:
        """Get a user's profile by username."""
        if not isinstance(username, str) or not username:
            raise ValueError(f"Username must be a non-empty string, got {username!r}")
        data = await self._hn.get_resource(resource_path("user", username), resource_id=username)
        user = HNUser.from_json(data)
        if user.id != username:
            raise HNDecodeError(f"Asked for user {username!r}, got {user.id!r}")
        return user

    async def get_submissions(self, username: str, limit: int | None = None) -> list:
        """
        A user's submissions (stories, comments, polls) as items, newest first.

        limit caps how many submitted IDs are fetched; None fetches them all.
        """
        from HNItems import HNItems
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        user = await self.get(username)
        ids  = list(user.submitted or ())
        if limit is not None:
            ids = ids[:limit]
        return await HNItems(self._hn).get_many(ids)
