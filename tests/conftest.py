from __future__ import annotations

import pytest


def build_page(entries: str, *, list_tag: str = "ul") -> str:
    """Wrap ``entries`` in the container structure of the rendered template page."""

    return f"""
    <!DOCTYPE html>
    <html>
        <head><title>Template:In the news - Wikipedia</title></head>
        <body>
            <div id="mw-navigation"><ul><li><a href="/wiki/Main_Page">Main page</a></li></ul></div>
            <div id="mw-content-text" class="mw-body-content">
                <div class="mw-content-ltr mw-parser-output" lang="en" dir="ltr">
                    <div role="figure"><a href="/wiki/File:Example.jpg">Example</a></div>
                    <{list_tag}>{entries}</{list_tag}>
                    <div class="itn-footer"><ul><li><b><a href="/wiki/Portal:Current_events" title="Portal:Current events">Ongoing</a></b></li></ul></div>
                </div>
            </div>
        </body>
    </html>
    """


@pytest.fixture
def page_builder():
    return build_page
