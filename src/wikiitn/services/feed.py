"""Render news items as an Atom document."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import List, Sequence

from wikiitn.config import FeedConfig
from wikiitn.models import NewsItem
from wikiitn.services.markup import escape_attribute, escape_text

__all__ = ["entry_timestamps", "format_timestamp", "render_entry", "render_feed"]

ENTRY_TEMPLATE = """
  <entry>
    <title>{title}</title>
    <link href="{url}"/>
    <id>{id}</id>
    <published>{stamp}</published>
    <updated>{stamp}</updated>
    <content type="xhtml"><div xmlns="http://www.w3.org/1999/xhtml">{body}</div></content>
  </entry>"""

FEED_TEMPLATE = """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>{title}</title>
  <link href="{feed_url}"/>
  <id>{feed_id}</id>
  <updated>{updated}</updated>{entries}
</feed>
"""


def format_timestamp(moment: datetime) -> str:
    """Format ``moment`` as RFC 3339 in UTC with whole seconds and a ``Z`` suffix."""

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def entry_timestamps(start: datetime, count: int) -> List[datetime]:
    """Return ``count`` stamps counting down from ``start`` one second at a time.

    The first stamp is ``start - 1s``; ``start`` itself is never used.
    """

    return [start - timedelta(seconds=offset) for offset in range(1, count + 1)]


def render_entry(item: NewsItem, stamp: datetime) -> str:
    text = format_timestamp(stamp)
    return ENTRY_TEMPLATE.format(
        title=escape_text(item.title),
        url=escape_attribute(item.url),
        id=escape_text(item.id),
        stamp=text,
        body=item.body,
    )


def render_feed(
    items: Sequence[NewsItem],
    *,
    now: datetime | None = None,
    config: FeedConfig | None = None,
) -> str:
    """Render ``items`` as a complete Atom document.

    Entries keep the input order and get strictly decreasing stamps, so the
    first item is the newest. The feed's own ``updated`` value is the last
    stamp handed out, which is ``now`` itself for an empty feed.
    """

    config = config or FeedConfig()
    start = now if now is not None else datetime.now(timezone.utc)

    stamps = entry_timestamps(start, len(items))
    entries = "".join(render_entry(item, stamp) for item, stamp in zip(items, stamps))
    updated = stamps[-1] if stamps else start

    return FEED_TEMPLATE.format(
        title=escape_text(config.feed_title),
        feed_url=escape_attribute(config.feed_url),
        feed_id=escape_text(config.feed_id),
        updated=format_timestamp(updated),
        entries=entries,
    )
