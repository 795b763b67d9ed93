"""API routes serving the In the news feed."""

from __future__ import annotations

import logging
from typing import List

import requests
from fastapi import APIRouter, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response
from pydantic import BaseModel, Field

from wikiitn.config import FeedConfig, load_config
from wikiitn.exceptions import FeedError
from wikiitn.models import NewsItem
from wikiitn.services.extractor import extract_news_items
from wikiitn.services.fetcher import fetch_itn_html
from wikiitn.services.pipeline import process_html

logger = logging.getLogger(__name__)

router = APIRouter()

ATOM_MEDIA_TYPE = "application/atom+xml"


class ItemsResponse(BaseModel):
    items: List[NewsItem] = Field(default_factory=list)


def _config() -> FeedConfig:
    try:
        return load_config()
    except (FileNotFoundError, ValueError) as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


async def _fetch_page(config: FeedConfig) -> str:
    try:
        return await run_in_threadpool(fetch_itn_html, config=config)
    except requests.RequestException as exc:
        logger.exception("Failed to fetch %s", config.feed_url)
        raise HTTPException(status_code=502, detail=f"Failed to fetch {config.feed_url}: {exc}") from exc


@router.get("/feed")
async def retrieve_feed() -> Response:
    """Fetch the live page and return it as an Atom document."""

    config = _config()
    html_text = await _fetch_page(config)
    try:
        feed_xml = await run_in_threadpool(process_html, html_text, config=config)
    except FeedError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return Response(content=feed_xml, media_type=ATOM_MEDIA_TYPE)


@router.post("/feed")
async def convert_feed(request: Request) -> Response:
    """Convert page HTML posted as the request body into an Atom document."""

    config = _config()
    raw = await request.body()
    try:
        feed_xml = await run_in_threadpool(
            process_html, raw.decode("utf-8", errors="replace"), config=config
        )
    except FeedError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return Response(content=feed_xml, media_type=ATOM_MEDIA_TYPE)


@router.get("/items", response_model=ItemsResponse)
async def list_items() -> ItemsResponse:
    """Return the news items of the live page as JSON."""

    config = _config()
    html_text = await _fetch_page(config)
    try:
        items = await run_in_threadpool(extract_news_items, html_text, config)
    except FeedError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return ItemsResponse(items=items)
