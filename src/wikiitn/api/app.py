"""FastAPI application entrypoint."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from wikiitn.api.routes import router

INDEX_HTML = """
<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>Wikipedia In The News</title>
    <link rel="alternate" type="application/atom+xml" title="Wikipedia In The News" href="/api/feed" />
  </head>
  <body>
    <h1>Wikipedia In The News</h1>
    <p>Current stories from Wikipedia's main page as an Atom feed.</p>
    <ul>
      <li><a href="/api/feed">Atom feed</a></li>
      <li><a href="/api/items">Items as JSON</a></li>
    </ul>
  </body>
</html>
"""


def create_app() -> FastAPI:
    app = FastAPI(title="Wikipedia In The News", description="Atom feed of the In the news template")
    app.include_router(router, prefix="/api")

    @app.get("/", response_class=HTMLResponse)
    async def index() -> str:
        return INDEX_HTML

    return app


app = create_app()
