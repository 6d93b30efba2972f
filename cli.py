"""
HN API CLI — installable command line interface for the Hacker News API.

Install:
    pip install -e .

Usage:
    hn <command> [options]
    hn --help
"""

import asyncio
import dataclasses
import json
import logging
import sys
from datetime import datetime

import click

from hn_config import HN_API_URL
from HNClient import HNClient
from HNExceptions import HNError
from HNTypes import HNStoryType

# ── Helpers ────────────────────────────────────────────────────────────────────

def run(ctx, fn):
    """Run fn(hn) on a fresh client inside asyncio.run; HNError → exit 1."""
    factory = ctx.obj["client_factory"]

    async def _main():
        async with factory() as hn:
            return await fn(hn)

    try:
        return asyncio.run(_main())
    except HNError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def to_plain(value):
    """Records → JSON-friendly dicts/lists."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_plain(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (frozenset, set)):
        return sorted(to_plain(v) for v in value)
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    if isinstance(value, dict):
        return {k: to_plain(v) for k, v in value.items()}
    return value


def print_table(rows, keys=None):
    if not rows:
        click.echo("No results.")
        return
    keys = keys or list(rows[0].keys())
    widths = {k: max(len(k), max((len(_cell(r.get(k))) for r in rows), default=0)) for k in keys}
    click.echo("  ".join(k.ljust(widths[k]) for k in keys))
    click.echo("-" * sum(widths[k] + 2 for k in keys))
    for row in rows:
        click.echo("  ".join(_cell(row.get(k)).ljust(widths[k]) for k in keys))


def _cell(value) -> str:
    return "" if value is None else str(value)


def out(data, as_json=False, keys=None):
    if data is None or data == []:
        click.echo("No result.")
        return
    plain = to_plain(data)
    if as_json:
        click.echo(json.dumps(plain, indent=2))
        return
    if isinstance(plain, list):
        print_table(plain, keys)
    else:
        for k, v in plain.items():
            if v is None:
                continue
            if isinstance(v, list) and len(v) > 10:
                v = f"{v[:10]} … ({len(v)} total)"
            click.echo(f"  {k:<14} {v}")


ITEM_KEYS = ["id", "type", "by", "time", "score", "descendants", "title"]


def item_row(item) -> dict:
    from HNText import HNText
    row = to_plain(item)
    row["title"] = HNText.preview(item.title or item.text, length=70)
    return row


# ── Root ───────────────────────────────────────────────────────────────────────

@click.group()
@click.option("--base-url", default=HN_API_URL, show_default=True, help="API root.")
@click.option("-v", "--verbose", is_flag=True, help="Log requests to stderr.")
@click.pass_context
def cli(ctx, base_url, verbose):
    """Hacker News API CLI — items, users and story listings."""
    ctx.ensure_object(dict)
    ctx.obj.setdefault("client_factory", lambda: HNClient(base_url=base_url))
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")


# ── Items ──────────────────────────────────────────────────────────────────────

@cli.command("item")
@click.argument("item_id", type=int)
@click.option("--kids", is_flag=True, help="Also fetch direct replies.")
@click.option("--json", "as_json", is_flag=True, help="Output raw JSON.")
@click.pass_context
def item(ctx, item_id, kids, as_json):
    """Get one item (story, comment, job, poll, poll option)."""
    from HNItems import HNItems

    async def fetch(hn):
        api = HNItems(hn)
        it  = await api.get(item_id)
        replies = await api.get_kids(it) if kids else []
        return it, replies

    it, replies = run(ctx, fetch)
    if as_json:
        data = to_plain(it)
        if kids:
            data["kids_items"] = to_plain(replies)
        click.echo(json.dumps(data, indent=2))
        return
    out(it)
    click.echo(f"  {'link':<14} {it.hn_url}")
    if kids:
        click.echo("")
        print_table([item_row(r) for r in replies], ["id", "by", "time", "title"])


@cli.command("items")
@click.argument("item_ids", nargs=-1, required=True, type=int)
@click.option("--json", "as_json", is_flag=True, help="Output raw JSON.")
@click.pass_context
def items(ctx, item_ids, as_json):
    """Get several items concurrently. Fails if any one of them fails.

    \b
    Examples:
      hn items 8863 8864 8865
    """
    from HNItems import HNItems
    rows = run(ctx, lambda hn: HNItems(hn).get_many(list(item_ids)))
    if as_json:
        out(rows, True)
    else:
        out([item_row(r) for r in rows], False, ITEM_KEYS)


# ── Users ──────────────────────────────────────────────────────────────────────

@cli.command("user")
@click.argument("username")
@click.option("--submissions", type=click.IntRange(min=0), default=0, show_default=True,
              help="Also fetch this many of their latest submissions.")
@click.option("--json", "as_json", is_flag=True, help="Output raw JSON.")
@click.pass_context
def user(ctx, username, submissions, as_json):
    """Look up a user. Usernames are case-sensitive."""
    from HNUsers import HNUsers

    async def fetch(hn):
        api = HNUsers(hn)
        u   = await api.get(username)
        subs = await api.get_submissions(username, limit=submissions) if submissions else []
        return u, subs

    u, subs = run(ctx, fetch)
    if as_json:
        data = to_plain(u)
        if submissions:
            data["submitted_items"] = to_plain(subs)
        click.echo(json.dumps(data, indent=2))
        return

    from HNText import HNText
    data = to_plain(u)
    data["about"] = HNText.preview(u.about, length=200) if u.about else None
    out(data)
    click.echo(f"  {'link':<14} {u.hn_url}")
    if submissions:
        click.echo("")
        print_table([item_row(r) for r in subs], ITEM_KEYS)


# ── Stories ────────────────────────────────────────────────────────────────────

@cli.command("stories")
@click.argument("category", type=click.Choice([c.value for c in HNStoryType]), default="top")
@click.option("--limit", type=click.IntRange(min=0), default=30, show_default=True, help="How many stories.")
@click.option("--offset", type=click.IntRange(min=0), default=0, show_default=True, help="Start position in the list.")
@click.option("--ids", "ids_only", is_flag=True, help="Only print the ID list.")
@click.option("--legacy-offset", is_flag=True, help="Ignore offset when the whole list fits in limit.")
@click.option("--json", "as_json", is_flag=True, help="Output raw JSON.")
@click.pass_context
def stories(ctx, category, limit, offset, ids_only, legacy_offset, as_json):
    """Stories from a listing, in ranking order.

    \b
    Examples:
      hn stories top --limit 10
      hn stories ask --limit 20 --offset 20
      hn stories new --ids
    """
    from HNStories import HNStories

    if ids_only:
        ids = run(ctx, lambda hn: HNStories(hn).get_ids(category))
        if as_json:
            click.echo(json.dumps(ids))
        else:
            for i in ids:
                click.echo(i)
        return

    rows = run(ctx, lambda hn: HNStories(hn).get_items(category, limit, offset, legacy_offset=legacy_offset))
    if as_json:
        out(rows, True)
    else:
        out([item_row(r) for r in rows], False, ITEM_KEYS)


# ── Misc ───────────────────────────────────────────────────────────────────────

@cli.command("maxitem")
@click.pass_context
def maxitem(ctx):
    """The current largest item ID."""
    from HNUpdates import HNUpdates
    click.echo(run(ctx, lambda hn: HNUpdates(hn).max_item()))


@cli.command("updates")
@click.option("--json", "as_json", is_flag=True, help="Output raw JSON.")
@click.pass_context
def updates(ctx, as_json):
    """Items and profiles changed recently."""
    from HNUpdates import HNUpdates
    upd = run(ctx, lambda hn: HNUpdates(hn).get())
    if as_json:
        out(upd, True)
        return
    click.echo(f"items    ({len(upd.items)}): {' '.join(str(i) for i in sorted(upd.items))}")
    click.echo(f"profiles ({len(upd.profiles)}): {' '.join(sorted(upd.profiles))}")


@cli.command("meta")
@click.argument("item_id", type=int)
@click.option("--json", "as_json", is_flag=True, help="Output raw JSON.")
@click.pass_context
def meta(ctx, item_id, as_json):
    """Open Graph preview of a story's external URL."""
    from HNItems import HNItems
    from HNMeta import HNMeta

    story = run(ctx, lambda hn: HNItems(hn).get(item_id))
    try:
        result = HNMeta().for_item(story)
    except HNError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    if result is None:
        click.echo(f"Item {item_id} has no external URL.")
        return
    data = to_plain(result)
    data.pop("properties")
    out(to_plain(result) if as_json else data, as_json)


# ── Entry point ────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    cli()
