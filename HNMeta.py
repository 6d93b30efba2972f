"""
HNMeta — Open Graph preview for the external URL of a story.

Not part of the API client proper: nothing in HNItems/HNStories calls this.
It exists so calling code can enrich a story it already fetched:

    from HNMeta import HNMeta

    meta = HNMeta().for_item(story)     # None if the item has no url
    if meta:
        print(meta.title, meta.image)

Pages are fetched synchronously with requests (the API client itself is
async httpx). Only <meta property="og:*" content="..."> tags are read.
"""

import html
import logging
import re
from dataclasses import dataclass, field

import requests

from hn_config import DEFAULT_HEADERS
from HNExceptions import HNMetaError

log = logging.getLogger("hnapi.meta")

_META_TAG = re.compile(r"<meta\b[^>]*>", re.IGNORECASE)
_ATTR     = re.compile(r"""([a-zA-Z_:.-]+)\s*=\s*("([^"]*)"|'([^']*)'|([^\s"'>]+))""")
_HEAD_END = re.compile(r"</head\s*>", re.IGNORECASE)


@dataclass(frozen=True)
class HNMetaResult:
    """Open Graph properties of one page. properties holds every og:* tag seen."""
    url:         str
    title:       str | None = None
    description: str | None = None
    image:       str | None = None
    site_name:   str | None = None
    type:        str | None = None
    properties:  dict = field(default_factory=dict)


def parse_open_graph(page: str) -> dict[str, str]:
    """
    Extract og:* properties from an HTML document.

    Only the <head> is scanned when one is present. The first occurrence
    of a property wins.
    """
    head_end = _HEAD_END.search(page)
    if head_end:
        page = page[:head_end.start()]

    props: dict[str, str] = {}
    for tag in _META_TAG.findall(page):
        attrs = {}
        for m in _ATTR.finditer(tag):
            value = next(v for v in m.group(3, 4, 5) if v is not None)
            attrs[m.group(1).lower()] = html.unescape(value)
        # Some sites put og: tags in name= instead of property=
        key = attrs.get("property") or attrs.get("name") or ""
        if key.startswith("og:") and "content" in attrs:
            props.setdefault(key[3:], attrs["content"])
    return props


class HNMeta:
    """
    Fetches Open Graph metadata of external pages.

    Args:
        timeout: (connect, read) seconds for requests.
    """

    TIMEOUT = (8, 15)

    def __init__(self, timeout: tuple[float, float] = TIMEOUT):
        self.timeout = timeout

    def fetch_meta(self, url: str) -> HNMetaResult:
        """Fetch url and return its Open Graph properties."""
        try:
            response = requests.get(url, headers={"User-Agent": DEFAULT_HEADERS["User-Agent"]}, timeout=self.timeout)
        except requests.Timeout as e:
            raise HNMetaError(f"Fetching {url} timed out") from e
        except requests.RequestException as e:
            raise HNMetaError(f"Fetching {url} failed: {e}") from e

        if response.status_code != 200:
            log.warning(f"Open Graph fetch {url} → HTTP {response.status_code}")
            raise HNMetaError(
                f"Fetching {url} returned HTTP {response.status_code}",
                status_code=response.status_code,
                raw=response.content[:300],
            )

        props = parse_open_graph(response.text)
        log.debug(f"Open Graph {url}: {sorted(props)}")
        return HNMetaResult(
            url=props.get("url", url),
            title=props.get("title"),
            description=props.get("description"),
            image=props.get("image"),
            site_name=props.get("site_name"),
            type=props.get("type"),
            properties=props,
        )

    def for_item(self, item) -> HNMetaResult | None:
        """Open Graph metadata for a story's url. None when the item has no url."""
        if not item.url:
            return None
        return self.fetch_meta(item.url)
