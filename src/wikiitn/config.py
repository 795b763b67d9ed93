"""Configuration models and helpers for the In the news feed builder."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "FEED_ID",
    "FEED_TITLE",
    "FEED_URL",
    "URL_PREFIX",
    "FeedConfig",
    "PageLayout",
    "load_config",
]

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "data" / "feed.json"

URL_PREFIX = "https://en.wikipedia.org"
FEED_URL = "https://en.wikipedia.org/wiki/Template:In_the_news"
FEED_TITLE = "Wikipedia In The News"
FEED_ID = "urn:uuid:e0579856-2b18-4a8e-8c76-771c24206362"
DEFAULT_USER_AGENT = "wikiitn-feed/0.1 (+https://en.wikipedia.org/wiki/Template:In_the_news)"


class PageLayout(BaseModel):
    """Markers used to locate the news list inside the rendered page."""

    content_tag: str = Field(default="div", description="Tag of the main content region")
    content_id: str = Field(default="mw-content-text", description="id of the main content region")
    output_tag: str = Field(default="div", description="Tag of the parser output container")
    output_class: str = Field(
        default="mw-parser-output",
        description="Class carried by the parser output container",
    )
    list_tag: str = Field(default="ul", description="Tag of the target list")
    entry_tag: str = Field(default="li", description="Tag of a single news entry")
    bold_tag: str = Field(default="b", description="Tag wrapping the headline link")
    link_tag: str = Field(default="a", description="Tag of the headline link")


class FeedConfig(BaseModel):
    """Settings for building the Atom document."""

    url_prefix: str = Field(default=URL_PREFIX, description="Origin prepended to relative hrefs")
    feed_url: str = Field(
        default=FEED_URL,
        description="Self link of the feed, also the page fetched by default",
    )
    feed_title: str = Field(default=FEED_TITLE, min_length=1)
    feed_id: str = Field(default=FEED_ID, description="Constant feed identifier")
    user_agent: str = Field(default=DEFAULT_USER_AGENT)
    request_timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds")
    layout: PageLayout = Field(default_factory=PageLayout)

    @classmethod
    def from_file(cls, path: Path | str | None = None) -> "FeedConfig":
        """Load configuration data from a JSON file."""

        config_path = Path(path) if path else DEFAULT_CONFIG_PATH
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise FileNotFoundError(f"Configuration file not found: {config_path}") from exc
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in configuration file: {config_path}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Configuration file is invalid: {config_path}\n{exc}") from exc

    def dump(self, path: Path | str | None = None) -> None:
        """Persist the configuration back to disk as JSON."""

        config_path = Path(path) if path else DEFAULT_CONFIG_PATH
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(self.model_dump_json(indent=2), encoding="utf-8")


def load_config(path: Path | str | None = None) -> FeedConfig:
    """Return the configuration at ``path``, the default file, or built-in defaults.

    An explicit ``path`` must exist. Without one, :data:`DEFAULT_CONFIG_PATH` is
    used when present and the built-in defaults otherwise.
    """

    if path is not None:
        return FeedConfig.from_file(path)
    if DEFAULT_CONFIG_PATH.exists():
        return FeedConfig.from_file(DEFAULT_CONFIG_PATH)
    return FeedConfig()
