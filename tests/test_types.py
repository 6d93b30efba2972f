from datetime import datetime, timezone

import pytest

from HNExceptions import HNDecodeError
from HNTypes import HNItem, HNItemType, HNStoryType, HNUpdate, HNUser

from conftest import ITEM_1, USER_PG


def test_item_fixture_decodes_every_field():
    item = HNItem.from_json(ITEM_1)

    assert item.id == 1
    assert item.type is HNItemType.STORY
    assert item.by == "pg"
    assert item.title == "Y Combinator"
    assert item.score == 57
    assert item.descendants == 15
    assert item.url == "http://ycombinator.com"
    assert item.kids == (15, 234509, 487171, 82729)
    assert item.time == datetime(2006, 10, 9, 18, 21, 51, tzinfo=timezone.utc)


def test_item_absent_fields_are_none():
    item = HNItem.from_json({"id": 42, "deleted": True, "type": "comment", "time": 0, "extra": "ignored"})

    assert item.deleted is True
    assert item.text is None
    assert item.by is None
    assert item.kids is None
    assert item.parent is None
    assert item.time == datetime(1970, 1, 1, tzinfo=timezone.utc)


def test_item_is_immutable():
    item = HNItem.from_json(ITEM_1)
    with pytest.raises(AttributeError):
        item.score = 58


def test_item_hn_url():
    assert HNItem(id=8863).hn_url == "https://news.ycombinator.com/item?id=8863"


@pytest.mark.parametrize("body", [
    None,
    [],
    "item",
    {"type": "story"},                    # no id
    {"id": "1"},                          # id as string
    {"id": True},                         # bool is not an int
    {"id": 1, "type": "article"},         # unknown item type
    {"id": 1, "kids": "15,16"},           # kids not a list
    {"id": 1, "kids": [15, "16"]},        # kids with a string entry
    {"id": 1, "dead": "yes"},
    {"id": 1, "time": 1.5},
])
def test_item_schema_mismatch_raises_decode_error(body):
    with pytest.raises(HNDecodeError):
        HNItem.from_json(body)


def test_user_decodes_and_username_mirrors_id():
    user = HNUser.from_json(USER_PG)

    assert user.id == "pg"
    assert user.username == "pg"
    assert user.karma == 155111
    assert user.created == datetime(2006, 10, 9, 18, 21, 32, tzinfo=timezone.utc)
    assert user.submitted == (39517, 39514, 1)
    assert user.hn_url == "https://news.ycombinator.com/user?id=pg"


def test_user_requires_created_and_karma():
    with pytest.raises(HNDecodeError):
        HNUser.from_json({"id": "pg", "karma": 1})
    with pytest.raises(HNDecodeError):
        HNUser.from_json({"id": "pg", "created": 1})


def test_update_fields_are_sets():
    upd = HNUpdate.from_json({"items": [3, 1, 3], "profiles": ["pg", "dang"], "other": 1})

    assert upd.items == frozenset({1, 3})
    assert upd.profiles == frozenset({"pg", "dang"})


def test_update_rejects_non_string_profiles():
    with pytest.raises(HNDecodeError):
        HNUpdate.from_json({"items": [], "profiles": [1]})


def test_story_type_caps_and_endpoints():
    assert HNStoryType.TOP.max_limit == 500
    assert HNStoryType.NEW.max_limit == 500
    assert HNStoryType.ASK.max_limit == 200
    assert HNStoryType.SHOW.max_limit == 200
    assert HNStoryType.JOB.max_limit == 200
    assert HNStoryType.BEST.max_limit is None
    assert HNStoryType.SHOW.endpoint == "showstories.json"


def test_story_type_parse():
    assert HNStoryType.parse("Top") is HNStoryType.TOP
    assert HNStoryType.parse(HNStoryType.ASK) is HNStoryType.ASK
    with pytest.raises(ValueError):
        HNStoryType.parse("hot")
