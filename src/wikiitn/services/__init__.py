"""Service layer entry points for the In the news feed."""

from __future__ import annotations

from .extractor import convert_entry, extract_news_items  # noqa: F401
from .feed import render_feed  # noqa: F401
from .fetcher import fetch_itn_html  # noqa: F401
from .markup import serialize_children, serialize_element  # noqa: F401
from .pipeline import build_feed_from_url, process_html  # noqa: F401

__all__ = [
    "build_feed_from_url",
    "convert_entry",
    "extract_news_items",
    "fetch_itn_html",
    "process_html",
    "render_feed",
    "serialize_children",
    "serialize_element",
]
