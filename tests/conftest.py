"""Shared fixtures: an in-memory Hacker News API served through httpx.MockTransport."""

import asyncio
import json

import httpx
import pytest
import pytest_asyncio

from HNClient import HNClient

# item/1.json as served by the live API
ITEM_1 = {
    "by": "pg",
    "descendants": 15,
    "id": 1,
    "kids": [15, 234509, 487171, 82729],
    "score": 57,
    "time": 1160418111,
    "title": "Y Combinator",
    "type": "story",
    "url": "http://ycombinator.com",
}

USER_PG = {
    "about": "Bug fixer.",
    "created": 1160418092,
    "id": "pg",
    "karma": 155111,
    "submitted": [39517, 39514, 1],
}


def story(item_id: int, **fields) -> dict:
    return {"id": item_id, "type": "story", "by": "someone", "time": 1700000000 + item_id,
            "title": f"Story {item_id}", "score": item_id % 100, **fields}


class FakeHN:
    """
    Route table keyed by path relative to /v0/, e.g. "item/1.json".

    Unknown paths answer 401 "Permission denied" like the real backend.
    """

    def __init__(self):
        self.routes:    dict = {}
        self.delays:    dict[str, float] = {}
        self.requests:  list[str] = []
        self.cancelled: list[str] = []

    def json(self, path: str, body, status: int = 200) -> None:
        self.routes[path] = (status, json.dumps(body).encode())

    def raw(self, path: str, body: bytes, status: int = 200) -> None:
        self.routes[path] = (status, body)

    def fail(self, path: str, exc_type: type) -> None:
        self.routes[path] = exc_type

    def items(self, *bodies: dict) -> None:
        for body in bodies:
            self.json(f"item/{body['id']}.json", body)

    async def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path.removeprefix("/v0/")
        self.requests.append(path)

        delay = self.delays.get(path)
        if delay:
            try:
                await asyncio.sleep(delay)
            except asyncio.CancelledError:
                self.cancelled.append(path)
                raise

        route = self.routes.get(path)
        if route is None:
            return httpx.Response(401, json={"error": "Permission denied"})
        if isinstance(route, type):
            raise route("simulated failure", request=request)
        status, body = route
        return httpx.Response(status, content=body, headers={"content-type": "application/json"})


@pytest.fixture
def fake():
    return FakeHN()


@pytest_asyncio.fixture
async def hn(fake):
    client = HNClient(transport=httpx.MockTransport(fake.handler))
    yield client
    await client.aclose()
