from setuptools import setup

# 'requests' is only used by HNMeta for the synchronous Open Graph page fetch.
# Every Hacker News API call goes through HNClient (async httpx).

setup(
    name="hn-api",
    version="1.0.0",
    description="Async Hacker News API client — concurrent item fetching, story listings, CLI",
    py_modules=[
        # Config
        "cli", "hn_config",
        # Core
        "HNClient", "HNExceptions", "HNTypes",
        # Resource APIs
        "HNItems", "HNUsers", "HNStories", "HNUpdates",
        # Utilities
        "HNPaginator", "HNText", "HNMeta",
    ],
    install_requires=[
        "httpx>=0.25.0",   # async HTTP client — all API calls
        "requests",        # sync Open Graph fetch in HNMeta
        "click>=8.0",      # CLI
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
    entry_points={
        "console_scripts": [
            "hn=cli:cli",
        ],
    },
    python_requires=">=3.11",
)
