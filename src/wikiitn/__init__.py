"""Atom feed of Wikipedia's "In the news" template."""

from __future__ import annotations

from .config import FeedConfig, PageLayout, load_config  # noqa: F401
from .exceptions import EntrySkipped, FeedError, ParseError, StructureNotFound  # noqa: F401
from .models import NewsItem  # noqa: F401

__all__ = [
    "EntrySkipped",
    "FeedConfig",
    "FeedError",
    "NewsItem",
    "PageLayout",
    "ParseError",
    "StructureNotFound",
    "load_config",
]
