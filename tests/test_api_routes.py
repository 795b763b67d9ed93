"""Tests for the routes in :mod:`wikiitn.api.routes`."""

from __future__ import annotations

from unittest.mock import patch

import requests
from fastapi.testclient import TestClient
from lxml import etree

from wikiitn.api.app import create_app

ATOM = "{http://www.w3.org/2005/Atom}"


def test_index_links_to_feed() -> None:
    client = TestClient(create_app())

    response = client.get("/")

    assert response.status_code == 200
    assert 'href="/api/feed"' in response.text


def test_retrieve_feed_returns_atom(page_builder) -> None:
    """The live page is fetched and converted into an Atom document."""

    page = page_builder('<li><b><a href="/wiki/Foo" title="Foo Bar">Foo Bar</a></b> is happening.</li>')
    client = TestClient(create_app())

    with patch("wikiitn.api.routes.fetch_itn_html", return_value=page) as fetch:
        response = client.get("/api/feed")

    assert fetch.called
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/atom+xml")
    root = etree.fromstring(response.content)
    assert [entry.findtext(f"{ATOM}id") for entry in root.findall(f"{ATOM}entry")] == ["/wiki/Foo"]


def test_retrieve_feed_reports_fetch_failure() -> None:
    client = TestClient(create_app())

    with patch(
        "wikiitn.api.routes.fetch_itn_html",
        side_effect=requests.ConnectionError("network down"),
    ):
        response = client.get("/api/feed")

    assert response.status_code == 502
    assert "network down" in response.json()["detail"]


def test_retrieve_feed_reports_unexpected_page() -> None:
    client = TestClient(create_app())

    with patch("wikiitn.api.routes.fetch_itn_html", return_value="<html><body>maintenance</body></html>"):
        response = client.get("/api/feed")

    assert response.status_code == 502
    assert "content container" in response.json()["detail"]


def test_convert_feed_accepts_posted_html(page_builder) -> None:
    page = page_builder('<li><b><a href="/wiki/Foo" title="Foo">Foo</a></b></li>')
    client = TestClient(create_app())

    response = client.post("/api/feed", content=page.encode("utf-8"))

    assert response.status_code == 200
    assert "<id>/wiki/Foo</id>" in response.text


def test_convert_feed_rejects_unexpected_page() -> None:
    client = TestClient(create_app())

    response = client.post("/api/feed", content=b'<div id="mw-content-text"></div>')

    assert response.status_code == 422
    assert "output container" in response.json()["detail"]


def test_list_items_returns_json(page_builder) -> None:
    page = page_builder(
        '<li><b><a href="/wiki/Foo" title="Foo Bar">Foo Bar</a></b> is happening.</li>'
        "<li>skipped</li>"
    )
    client = TestClient(create_app())

    with patch("wikiitn.api.routes.fetch_itn_html", return_value=page):
        response = client.get("/api/items")

    assert response.status_code == 200
    items = response.json()["items"]
    assert len(items) == 1
    assert items[0]["id"] == "/wiki/Foo"
    assert items[0]["url"] == "https://en.wikipedia.org/wiki/Foo"
    assert items[0]["title"] == "Foo Bar"
