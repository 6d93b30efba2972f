import pytest

from HNExceptions import HNDecodeError, HNNotFoundError
from HNUpdates import HNUpdates
from HNUsers import HNUsers

from conftest import USER_PG, story


@pytest.mark.asyncio
async def test_get_user(hn, fake):
    fake.json("user/pg.json", USER_PG)

    user = await HNUsers(hn).get("pg")

    assert user.username == "pg"
    assert user.karma == 155111
    assert fake.requests == ["user/pg.json"]


@pytest.mark.asyncio
async def test_username_is_case_sensitive(hn, fake):
    fake.json("user/pg.json", USER_PG)
    fake.raw("user/PG.json", b"null")

    with pytest.raises(HNNotFoundError) as exc_info:
        await HNUsers(hn).get("PG")
    assert exc_info.value.resource_id == "PG"
    assert fake.requests == ["user/PG.json"]


@pytest.mark.asyncio
async def test_empty_username_rejected(hn, fake):
    with pytest.raises(ValueError):
        await HNUsers(hn).get("")
    assert fake.requests == []


@pytest.mark.asyncio
async def test_get_submissions_fans_out_in_order(hn, fake):
    fake.json("user/pg.json", USER_PG)
    fake.items(story(39517), story(39514), story(1))

    items = await HNUsers(hn).get_submissions("pg", limit=2)

    assert [i.id for i in items] == [39517, 39514]
    assert "item/1.json" not in fake.requests


@pytest.mark.asyncio
async def test_max_item(hn, fake):
    fake.json("maxitem.json", 41234567)

    assert await HNUpdates(hn).max_item() == 41234567


@pytest.mark.asyncio
async def test_max_item_rejects_non_integer(hn, fake):
    fake.json("maxitem.json", "41234567")

    with pytest.raises(HNDecodeError):
        await HNUpdates(hn).max_item()


@pytest.mark.asyncio
async def test_updates(hn, fake):
    fake.json("updates.json", {"items": [8423305, 8420805], "profiles": ["thefox", "mdda"]})

    upd = await HNUpdates(hn).get()

    assert upd.items == {8423305, 8420805}
    assert upd.profiles == {"thefox", "mdda"}
