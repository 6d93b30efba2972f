"""
hn_config — fixed endpoints and transport defaults for the Hacker News API.

Nothing here is read from the environment. Override per client instead:

    HNClient(base_url="http://localhost:8080/v0/", timeout=httpx.Timeout(5.0))
"""

import httpx

HN_API_URL = "https://hacker-news.firebaseio.com/v0/"
HN_WEB_URL = "https://news.ycombinator.com"

DEFAULT_HEADERS = {
    "User-Agent": "hn-api/1.0 (+https://github.com/HackerNews/API)",
    "Accept":     "application/json",
}

DEFAULT_TIMEOUT = httpx.Timeout(connect=8.0, read=15.0, write=8.0, pool=5.0)

# Maximum number of IDs each story list serves. best is uncapped.
STORY_LIMITS = {
    "top":  500,
    "new":  500,
    "best": None,
    "ask":  200,
    "show": 200,
    "job":  200,
}
