"""End-to-end conversion from page HTML to an Atom document."""

from __future__ import annotations

from datetime import datetime

import requests

from wikiitn.config import FeedConfig
from wikiitn.services.extractor import extract_news_items
from wikiitn.services.feed import render_feed
from wikiitn.services.fetcher import fetch_itn_html

__all__ = ["build_feed_from_url", "process_html"]


def process_html(
    html_text: str,
    *,
    config: FeedConfig | None = None,
    now: datetime | None = None,
) -> str:
    """Convert the rendered In the news page into Atom XML text."""

    config = config or FeedConfig()
    items = extract_news_items(html_text, config)
    return render_feed(items, now=now, config=config)


def build_feed_from_url(
    url: str | None = None,
    *,
    config: FeedConfig | None = None,
    session: requests.Session | None = None,
    now: datetime | None = None,
) -> str:
    """Fetch the page and convert it, see :func:`process_html`."""

    config = config or FeedConfig()
    html_text = fetch_itn_html(url, config=config, session=session)
    return process_html(html_text, config=config, now=now)
