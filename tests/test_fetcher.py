from __future__ import annotations

from types import SimpleNamespace

import pytest
import requests

from wikiitn.config import FeedConfig
from wikiitn.services.fetcher import build_session, fetch_itn_html


class DummyResponse:
    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_fetch_uses_configured_page_and_timeout() -> None:
    captured: dict[str, object] = {}

    def fake_get(url, timeout):
        captured["url"] = url
        captured["timeout"] = timeout
        return DummyResponse("<html>page</html>")

    config = FeedConfig(request_timeout=5)
    html = fetch_itn_html(config=config, session=SimpleNamespace(get=fake_get))

    assert html == "<html>page</html>"
    assert captured == {"url": "https://en.wikipedia.org/wiki/Template:In_the_news", "timeout": 5}


def test_fetch_explicit_url_overrides_config() -> None:
    requested: list[str] = []

    def fake_get(url, timeout):
        requested.append(url)
        return DummyResponse("ok")

    fetch_itn_html("https://example.org/itn", session=SimpleNamespace(get=fake_get))

    assert requested == ["https://example.org/itn"]


def test_fetch_raises_on_http_error() -> None:
    session = SimpleNamespace(get=lambda url, timeout: DummyResponse("", status_code=503))

    with pytest.raises(requests.HTTPError):
        fetch_itn_html(session=session)


def test_build_session_sets_user_agent_and_retries() -> None:
    session = build_session(FeedConfig(user_agent="test-agent/1.0"))

    assert session.headers["User-Agent"] == "test-agent/1.0"
    adapter = session.get_adapter("https://en.wikipedia.org/")
    assert adapter.max_retries.total == 3
    assert 503 in adapter.max_retries.status_forcelist
