"""Extract news items from the rendered In the news template page."""

from __future__ import annotations

import logging
from typing import Iterator, List

from bs4 import BeautifulSoup, ParserRejectedMarkup
from bs4.element import Tag

from wikiitn.config import FeedConfig, PageLayout
from wikiitn.exceptions import EntrySkipped, ParseError, StructureNotFound
from wikiitn.models import NewsItem
from wikiitn.services.markup import serialize_children

__all__ = [
    "convert_entry",
    "extract_news_items",
    "find_target_list",
    "iter_entries",
    "news_item_from_entry",
    "parse_document",
]

logger = logging.getLogger(__name__)


def parse_document(html_text: str) -> BeautifulSoup:
    """Parse ``html_text`` into a navigable tree."""

    if not isinstance(html_text, (str, bytes)):
        raise ParseError(f"Expected HTML text, got {type(html_text).__name__}")
    try:
        return BeautifulSoup(html_text, "lxml")
    except ParserRejectedMarkup as exc:
        raise ParseError(f"Failed to parse document: {exc}") from exc


def find_target_list(soup: BeautifulSoup, layout: PageLayout | None = None) -> Tag:
    """Locate the list holding the news entries.

    The lookup follows a fixed path: the content container (by id), the parser
    output container inside it (by class), then the first list among the output
    container's direct children. The first match wins at every step.
    """

    layout = layout or PageLayout()

    content = soup.find(layout.content_tag, id=layout.content_id)
    if content is None:
        raise StructureNotFound(
            "content container", f"no <{layout.content_tag} id={layout.content_id!r}>"
        )

    output = content.find(layout.output_tag, class_=layout.output_class)
    if output is None:
        raise StructureNotFound(
            "output container", f"no <{layout.output_tag} class={layout.output_class!r}>"
        )

    target = output.find(layout.list_tag, recursive=False)
    if target is None:
        raise StructureNotFound(
            "target list", f"no <{layout.list_tag}> directly under the output container"
        )
    return target


def iter_entries(target: Tag, layout: PageLayout | None = None) -> Iterator[Tag]:
    """Yield the list-entry elements that are direct children of ``target``."""

    layout = layout or PageLayout()
    for child in target.children:
        if isinstance(child, Tag) and child.name == layout.entry_tag:
            yield child


def news_item_from_entry(entry: Tag, config: FeedConfig | None = None) -> NewsItem:
    """Build a :class:`NewsItem` from ``entry`` or raise :class:`EntrySkipped`."""

    config = config or FeedConfig()
    layout = config.layout

    def skip(reason: str) -> EntrySkipped:
        return EntrySkipped(reason, serialize_children(entry, config.url_prefix))

    bold = entry.find(layout.bold_tag)
    if bold is None:
        raise skip(f"no <{layout.bold_tag}> element")

    link = bold.contents[0] if bold.contents else None
    if not isinstance(link, Tag) or link.name != layout.link_tag:
        raise skip(f"first child of <{layout.bold_tag}> is not <{layout.link_tag}>")

    href = link.get("href")
    title = link.get("title")
    if not isinstance(href, str) or not href:
        raise skip("headline link has no href")
    if not isinstance(title, str) or not title:
        raise skip("headline link has no title")

    return NewsItem.from_link(
        href=href,
        title=title,
        body=serialize_children(entry, config.url_prefix),
        url_prefix=config.url_prefix,
    )


def convert_entry(entry: Tag, config: FeedConfig | None = None) -> NewsItem | None:
    """Return the news item for ``entry``, or ``None`` when it does not qualify."""

    try:
        return news_item_from_entry(entry, config)
    except EntrySkipped:
        return None


def extract_news_items(html_text: str, config: FeedConfig | None = None) -> List[NewsItem]:
    """Parse the page and return its news items in document order.

    Missing page structure is fatal. Entries that do not qualify are skipped
    and reported through the module logger.
    """

    config = config or FeedConfig()
    soup = parse_document(html_text)
    target = find_target_list(soup, config.layout)

    items: List[NewsItem] = []
    for entry in iter_entries(target, config.layout):
        try:
            items.append(news_item_from_entry(entry, config))
        except EntrySkipped as exc:
            logger.warning("Skipping list item (%s): %s", exc.reason, exc.content)

    logger.info("Extracted %d news items", len(items))
    return items
