"""
HNExceptions — custom exceptions for the Hacker News API wrapper.

Every failure raises; nothing is reported by returning None.

Usage:
    from HNExceptions import HNNotFoundError, HNTransportError, HNLimitExceededError

    try:
        stories = await HNStories(hn).get_items("top", limit=30)
    except HNLimitExceededError as e:
        # Asked for more than the list serves; e.max_limit is the cap
        ...
    except HNNotFoundError as e:
        # One of the IDs came back as null
        print(f"missing: {e.resource_id}")
    except HNTransportError:
        # Connection refused, TLS failure, timeout, non-2xx status
        ...
    except HNError:
        # Catch-all for any HN API error
        ...

All exceptions are subclasses of HNError so you can catch everything
with a single except clause if you prefer.
"""


class HNError(Exception):
    """
    Base class for all Hacker News API errors.

    Attributes:
        message:     Human-readable description.
        status_code: HTTP status that triggered this error (0 if unknown).
        raw:         Raw response body bytes (may be empty).
    """

    def __init__(self, message: str, status_code: int = 0, raw: bytes = b""):
        super().__init__(message)
        self.message     = message
        self.status_code = status_code
        self.raw         = raw

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, status={self.status_code})"


class HNTransportError(HNError):
    """
    Raised when the request never produced a usable response:
    connection refused, DNS failure, TLS failure, broken protocol.

    Example:
        except HNTransportError as e:
            print(f"Network problem: {e}")
    """


class HNTimeoutError(HNTransportError):
    """
    Raised when httpx gives up waiting on the connection pool, the connect,
    the write or the read.

    Attributes:
        timeout: Description of the timeout configuration that was exceeded.
    """

    def __init__(self, message: str = "HN API request timed out", timeout: object = None, **kwargs):
        super().__init__(message, **kwargs)
        self.timeout = timeout


class HNStatusError(HNTransportError):
    """
    Raised on any non-2xx response. The Firebase backend answers unknown
    paths with 401 "Permission denied" rather than 404.

    Attributes:
        status_code: The actual HTTP status.
    """


class HNDecodeError(HNError):
    """
    Raised when the body is not valid JSON, or is valid JSON whose shape
    does not match the expected record (wrong types, unknown item type).

    Attributes:
        raw: The raw response bytes for debugging.

    Example:
        except HNDecodeError as e:
            print(f"Bad response: {e.raw[:200]}")
    """


class HNNotFoundError(HNError):
    """
    Raised when the API answers HTTP 200 with a JSON null body, which is
    how it reports unknown item IDs and usernames.

    Kept apart from HNDecodeError: the body parsed fine, there is just
    nothing behind the identifier.

    Attributes:
        resource_id: The item ID or username that was requested.
    """

    def __init__(self, message: str, resource_id: object = None, **kwargs):
        super().__init__(message, **kwargs)
        self.resource_id = resource_id


class HNLimitExceededError(HNError):
    """
    Raised when a story limit is above what the category serves
    (500 for top/new, 200 for ask/show/job). Raised before any request.

    Attributes:
        category:  The HNStoryType that was requested.
        max_limit: The category's cap.
    """

    def __init__(self, category, max_limit: int):
        name = getattr(category, "value", category)
        super().__init__(f"Maximum limit for story type '{name}' is {max_limit}.")
        self.category  = category
        self.max_limit = max_limit


class HNMetaError(HNError):
    """
    Raised when the Open Graph preview of a story URL cannot be fetched.
    Only HNMeta raises this; the API fetchers never touch external pages.
    """
