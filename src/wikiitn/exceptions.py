"""Errors raised while turning the In the news page into a feed."""

from __future__ import annotations


class FeedError(Exception):
    """Base class for errors raised while building the feed."""


class ParseError(FeedError):
    """Raised when the page text cannot be parsed as HTML."""


class StructureNotFound(FeedError):
    """Raised when a fixed anchor of the page layout is missing."""

    def __init__(self, anchor: str, detail: str) -> None:
        super().__init__(f"Unable to find {anchor}: {detail}")
        self.anchor = anchor
        self.detail = detail


class EntrySkipped(FeedError):
    """Raised when a single list entry cannot become a news item."""

    def __init__(self, reason: str, content: str) -> None:
        super().__init__(f"{reason}: {content}")
        self.reason = reason
        self.content = content
