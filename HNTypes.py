"""
HNTypes — records for Hacker News API responses.

Every record is a frozen dataclass built from one decoded JSON document via
from_json(). Records are point-in-time snapshots: re-fetching the same ID can
return a different score or kids list, so never treat one as current.

Usage:
    from HNTypes import HNItem, HNItemType

    item = HNItem.from_json({"id": 8863, "type": "story", "time": 1175714200})
    item.type is HNItemType.STORY   # True
    item.time.year                  # 2007

Wire conventions:
    - Keys are snake_case single words that are already valid identifiers.
    - Timestamps are Unix epoch SECONDS; they decode to UTC-aware datetimes.
    - Absent keys decode to None. Unknown keys are ignored.
    - A key present with the wrong JSON type raises HNDecodeError.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any

from hn_config import HN_WEB_URL, STORY_LIMITS
from HNExceptions import HNDecodeError


# ── Enums ──────────────────────────────────────────────────────────────────────

class HNItemType(StrEnum):
    """Every item shares one ID space; type says which kind it is."""
    JOB     = "job"
    STORY   = "story"
    COMMENT = "comment"
    POLL    = "poll"
    POLLOPT = "pollopt"


class HNStoryType(StrEnum):
    """Story listings, each backed by its own {value}stories.json endpoint."""
    TOP  = "top"
    NEW  = "new"
    BEST = "best"
    ASK  = "ask"
    SHOW = "show"
    JOB  = "job"

    @property
    def endpoint(self) -> str:
        return f"{self.value}stories.json"

    @property
    def max_limit(self) -> int | None:
        """How many IDs the list serves at most. None = no documented cap."""
        return STORY_LIMITS[self.value]

    @classmethod
    def parse(cls, value: "HNStoryType | str") -> "HNStoryType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown story type {value!r} (expected one of: {choices})") from None


# ── Field decoders ─────────────────────────────────────────────────────────────

def _expect_object(data: Any, kind: str) -> dict:
    if not isinstance(data, dict):
        raise HNDecodeError(f"Expected a JSON object for {kind}, got {type(data).__name__}")
    return data


def _int(data: dict, key: str, required: bool = False) -> int | None:
    value = data.get(key)
    if value is None:
        if required:
            raise HNDecodeError(f"Missing required field '{key}'")
        return None
    # bool is an int subclass; true/false is never a valid number here
    if isinstance(value, bool) or not isinstance(value, int):
        raise HNDecodeError(f"Field '{key}' should be an integer, got {value!r}")
    return value


def _bool(data: dict, key: str) -> bool | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise HNDecodeError(f"Field '{key}' should be a boolean, got {value!r}")
    return value


def _str(data: dict, key: str, required: bool = False) -> str | None:
    value = data.get(key)
    if value is None:
        if required:
            raise HNDecodeError(f"Missing required field '{key}'")
        return None
    if not isinstance(value, str):
        raise HNDecodeError(f"Field '{key}' should be a string, got {value!r}")
    return value


def _ids(data: dict, key: str) -> tuple[int, ...] | None:
    value = data.get(key)
    if value is None:
        return None
    return decode_id_list(value, key)


def _time(data: dict, key: str, required: bool = False) -> datetime | None:
    seconds = _int(data, key, required=required)
    if seconds is None:
        return None
    return from_timestamp(seconds)


def from_timestamp(seconds: int) -> datetime:
    """Unix epoch seconds (not milliseconds) → UTC datetime."""
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise HNDecodeError(f"Timestamp {seconds!r} is out of range: {e}") from e


def decode_id_list(value: Any, what: str = "ID list") -> tuple[int, ...]:
    """Validate a JSON array of integer IDs, keeping its order."""
    if not isinstance(value, list):
        raise HNDecodeError(f"{what} should be a JSON array, got {type(value).__name__}")
    for entry in value:
        if isinstance(entry, bool) or not isinstance(entry, int):
            raise HNDecodeError(f"{what} contains a non-integer entry {entry!r}")
    return tuple(value)


# ── Item ───────────────────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class HNItem:
    """
    A story, comment, job, poll or poll option (/item/<id>.json).

    Only id is guaranteed. Everything else depends on the item type and state:
    a deleted comment has no text or by, a job has no descendants, parent is
    set on comments only, poll on poll options only.
    """
    id:          int
    deleted:     bool | None           = None
    type:        HNItemType | None     = None
    by:          str | None            = None   # author username
    time:        datetime | None       = None   # creation time, UTC
    text:        str | None            = None   # HTML
    dead:        bool | None           = None
    parent:      int | None            = None   # comments
    poll:        int | None            = None   # poll options
    kids:        tuple[int, ...] | None = None  # child comment IDs, ranked
    url:         str | None            = None   # stories
    score:       int | None            = None
    title:       str | None            = None   # HTML
    parts:       tuple[int, ...] | None = None  # poll option IDs, display order
    descendants: int | None            = None   # total comment count

    @classmethod
    def from_json(cls, data: Any) -> "HNItem":
        data = _expect_object(data, "item")

        raw_type  = _str(data, "type")
        item_type = None
        if raw_type is not None:
            try:
                item_type = HNItemType(raw_type)
            except ValueError:
                raise HNDecodeError(f"Unknown item type {raw_type!r}") from None

        return cls(
            id=_int(data, "id", required=True),
            deleted=_bool(data, "deleted"),
            type=item_type,
            by=_str(data, "by"),
            time=_time(data, "time"),
            text=_str(data, "text"),
            dead=_bool(data, "dead"),
            parent=_int(data, "parent"),
            poll=_int(data, "poll"),
            kids=_ids(data, "kids"),
            url=_str(data, "url"),
            score=_int(data, "score"),
            title=_str(data, "title"),
            parts=_ids(data, "parts"),
            descendants=_int(data, "descendants"),
        )

    @property
    def hn_url(self) -> str:
        """The item's discussion page on news.ycombinator.com."""
        return f"{HN_WEB_URL}/item?id={self.id}"


# ── User ───────────────────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class HNUser:
    """
    A user profile (/user/<username>.json).

    Only users with public activity are served. id IS the username and is
    case-sensitive.
    """
    id:        str
    created:   datetime
    karma:     int
    about:     str | None             = None   # HTML
    submitted: tuple[int, ...] | None = None   # stories, polls and comments

    @classmethod
    def from_json(cls, data: Any) -> "HNUser":
        data = _expect_object(data, "user")
        return cls(
            id=_str(data, "id", required=True),
            created=_time(data, "created", required=True),
            karma=_int(data, "karma", required=True),
            about=_str(data, "about"),
            submitted=_ids(data, "submitted"),
        )

    @property
    def username(self) -> str:
        return self.id

    @property
    def hn_url(self) -> str:
        return f"{HN_WEB_URL}/user?id={self.id}"


# ── Updates ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class HNUpdate:
    """Items and profiles changed recently (/updates.json). Both are unordered."""
    items:    frozenset[int]
    profiles: frozenset[str]

    @classmethod
    def from_json(cls, data: Any) -> "HNUpdate":
        data = _expect_object(data, "updates")
        items = decode_id_list(data.get("items", []), "updates.items")

        profiles = data.get("profiles", [])
        if not isinstance(profiles, list) or not all(isinstance(p, str) for p in profiles):
            raise HNDecodeError(f"updates.profiles should be a list of usernames, got {profiles!r}")

        return cls(items=frozenset(items), profiles=frozenset(profiles))
