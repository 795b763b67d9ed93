"""Domain models used across the application."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class NewsItem(BaseModel):
    """One entry of the In the news list.

    ``id`` is the relative href of the headline link and ``url`` is the same
    href with the site origin prepended. ``body`` holds the entry's markup,
    already escaped and safe to embed in XML.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1)
    body: str
    url: str = Field(..., min_length=1)
    id: str = Field(..., min_length=1)

    @classmethod
    def from_link(cls, *, href: str, title: str, body: str, url_prefix: str) -> "NewsItem":
        """Build an item from a headline link's raw ``href`` and ``title``."""

        return cls(title=title, body=body, url=f"{url_prefix}{href}", id=href)
