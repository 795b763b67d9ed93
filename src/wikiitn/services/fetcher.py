"""HTTP retrieval of the rendered In the news page."""

from __future__ import annotations

import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from wikiitn.config import FeedConfig

__all__ = ["build_session", "fetch_itn_html"]

logger = logging.getLogger(__name__)

_retry = Retry(
    total=3,
    connect=3,
    read=3,
    backoff_factor=1,
    status_forcelist=[429, 500, 502, 503, 504],
    allowed_methods={"GET"},
)


def build_session(config: FeedConfig | None = None) -> requests.Session:
    """Return a session that retries transient failures and sends our User-Agent."""

    config = config or FeedConfig()
    session = requests.Session()
    session.headers.update(
        {
            "User-Agent": config.user_agent,
            "Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8",
        }
    )
    session.mount("https://", HTTPAdapter(max_retries=_retry))
    session.mount("http://", HTTPAdapter(max_retries=_retry))
    return session


def fetch_itn_html(
    url: str | None = None,
    *,
    config: FeedConfig | None = None,
    session: requests.Session | None = None,
) -> str:
    """Download the page at ``url`` (the configured feed page by default)."""

    config = config or FeedConfig()
    target = url or config.feed_url
    http = session or build_session(config)

    logger.info("Fetching %s", target)
    response = http.get(target, timeout=config.request_timeout)
    response.raise_for_status()
    return response.text
