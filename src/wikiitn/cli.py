"""Command line entry point: page HTML in, Atom XML out."""

from __future__ import annotations

import logging
import sys

import click
import requests

from wikiitn.config import load_config
from wikiitn.exceptions import FeedError
from wikiitn.services.fetcher import fetch_itn_html
from wikiitn.services.pipeline import process_html

logger = logging.getLogger(__name__)


@click.command()
@click.option("--fetch", is_flag=True, help="Download the page instead of reading it from stdin.")
@click.option("--url", default=None, help="Page to download (implies --fetch).")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="JSON configuration file.",
)
@click.option("--output", "-o", "output_path", type=click.Path(dir_okay=False), default=None)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
def main(fetch: bool, url: str | None, config_path: str | None, output_path: str | None, verbose: bool) -> None:
    """Read the rendered In the news page and print it as an Atom feed."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        config = load_config(config_path)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("Could not load configuration: %s", exc)
        sys.exit(1)

    if fetch or url:
        try:
            html_text = fetch_itn_html(url, config=config)
        except requests.RequestException as exc:
            logger.error("Failed to fetch %s: %s", url or config.feed_url, exc)
            sys.exit(1)
    else:
        html_text = click.get_text_stream("stdin").read()

    try:
        feed_xml = process_html(html_text, config=config)
    except FeedError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    if output_path:
        with open(output_path, "w", encoding="utf-8") as file:
            file.write(feed_xml)
    else:
        click.echo(feed_xml, nl=False)


if __name__ == "__main__":  # pragma: no cover
    main()
