"""
HNClient.py — Async HTTP client for the Hacker News Firebase API (v0).

One HNClient owns one httpx.AsyncClient. It is created lazily on the first
request and reused for every request after that, so all resource classes
that share an HNClient share its connection pool. Construct it once and pass
it around:

    async with HNClient() as hn:
        item  = await HNItems(hn).get(8863)
        top   = await HNStories(hn).get_items("top", limit=30)

There is no retry, no rate limiting and no cache here. Timeouts are the
httpx.Timeout the client was built with.
"""

import json
import logging
from typing import Any
from urllib.parse import quote

import httpx

from hn_config import DEFAULT_HEADERS, DEFAULT_TIMEOUT, HN_API_URL
from HNExceptions import (
    HNDecodeError,
    HNNotFoundError,
    HNStatusError,
    HNTimeoutError,
    HNTransportError,
)

log = logging.getLogger("hnapi.client")


def resource_path(kind: str, identifier: Any) -> str:
    """item/8863.json, user/pg.json. The identifier is path-escaped, never case-folded."""
    return f"{kind}/{quote(str(identifier), safe='')}.json"


# ── Core request logic ─────────────────────────────────────────────────────────

async def _raw_get(client: httpx.AsyncClient, path: str) -> tuple[int, bytes]:
    log.debug(f"HN GET /{path}")
    try:
        r = await client.get(path)
    except httpx.TimeoutException as e:
        log.warning(f"HN /{path} timed out: {e!r}")
        raise HNTimeoutError(f"HN /{path} timed out", timeout=client.timeout) from e
    except httpx.TransportError as e:
        log.warning(f"HN /{path} transport error: {e!r}")
        raise HNTransportError(f"HN /{path} failed: {e}") from e

    preview = r.content[:200].decode("utf-8", errors="replace") if len(r.content) < 300 else f"({len(r.content)} bytes)"
    log.debug(f"HN /{path} → HTTP {r.status_code} | {preview}")

    return r.status_code, r.content


def _parse_response(result: tuple[int, bytes], path: str) -> Any:
    status, body = result
    if not 200 <= status < 300:
        log.warning(f"HN /{path} returned HTTP {status}")
        raise HNStatusError(f"HN /{path} returned HTTP {status}", status_code=status, raw=body)
    try:
        return json.loads(body)
    except ValueError as e:
        log.warning(f"HN /{path} returned non-JSON: {body[:200]!r}")
        raise HNDecodeError(f"HN /{path} returned non-JSON: {e}", status_code=status, raw=body) from e


# ── Public client class ────────────────────────────────────────────────────────

class HNClient:
    """
    Async Hacker News API client.

    Args:
        base_url:  API root, default https://hacker-news.firebaseio.com/v0/.
        timeout:   httpx.Timeout (or seconds) applied to every request.
        headers:   Extra headers merged over the defaults.
        transport: Optional httpx transport, e.g. httpx.MockTransport in tests.
    """

    def __init__(
        self,
        base_url: str = HN_API_URL,
        timeout: httpx.Timeout | float = DEFAULT_TIMEOUT,
        headers: dict | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url  = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout   = timeout
        self.headers   = {**DEFAULT_HEADERS, **(headers or {})}
        self.transport = transport
        self._http: httpx.AsyncClient | None = None

    # ── Connection pool ────────────────────────────────────────────────────────

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http is not None and not self._http.is_closed:
            return self._http
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers=self.headers,
            transport=self.transport,
            follow_redirects=True,
        )
        return self._http

    async def aclose(self) -> None:
        client, self._http = self._http, None
        if client and not client.is_closed:
            await client.aclose()

    @property
    def is_closed(self) -> bool:
        return self._http is None or self._http.is_closed

    async def __aenter__(self) -> "HNClient":
        return self

    async def __aexit__(self, *_) -> None:
        await self.aclose()

    # ── Async API ──────────────────────────────────────────────────────────────

    async def get_json(self, path: str) -> Any:
        """GET base_url + path and return the decoded JSON body (may be None)."""
        result = await _raw_get(self._get_http_client(), path)
        return _parse_response(result, path)

    async def get_resource(self, path: str, resource_id: Any = None) -> Any:
        """
        Like get_json(), but a JSON null body raises HNNotFoundError.

        The API never 404s an unknown ID; it answers 200 with "null".
        """
        data = await self.get_json(path)
        if data is None:
            log.debug(f"HN /{path} → null (not found)")
            raise HNNotFoundError(f"No such resource: {path}", resource_id=resource_id, status_code=200)
        return data

    def __repr__(self) -> str:
        return f"HNClient(base_url={self.base_url!r}, closed={self.is_closed})"
