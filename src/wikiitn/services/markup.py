"""Re-serialise parsed entry markup as XML-safe XHTML fragments."""

from __future__ import annotations

import html
import re
from typing import Mapping

from bs4.element import NavigableString, PreformattedString, Tag

from wikiitn.config import URL_PREFIX

__all__ = [
    "escape_attribute",
    "escape_text",
    "is_xml_name",
    "render_attributes",
    "serialize_children",
    "serialize_element",
    "strip_invalid_xml_chars",
]

# Code points outside the XML 1.0 Char production.
_INVALID_XML_CHARS = re.compile(r"[^\t\n\r\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")
_NCNAME = re.compile(r"[^\W\d][\w.\-]*\Z")


def strip_invalid_xml_chars(text: str) -> str:
    """Drop characters that may not appear anywhere in an XML document."""

    return _INVALID_XML_CHARS.sub("", text)


def escape_text(text: str) -> str:
    """Escape ``text`` for use as XML character data."""

    return html.escape(strip_invalid_xml_chars(text), quote=False)


def escape_attribute(value: str) -> str:
    """Escape ``value`` for use inside a double-quoted XML attribute."""

    return html.escape(strip_invalid_xml_chars(value), quote=True)


def is_xml_name(name: str) -> bool:
    """Return ``True`` when ``name`` can be written inside the XHTML fragment.

    Names must be XML NCNames. The only prefix allowed is the predeclared
    ``xml`` one, since the fragment declares no other namespaces.
    """

    prefix, sep, local = name.rpartition(":")
    if sep and prefix != "xml":
        return False
    return bool(_NCNAME.match(local))


def render_attributes(attrs: Mapping[str, object], url_prefix: str = URL_PREFIX) -> str:
    """Render ``attrs`` as a string of ``name="value"`` pairs with a leading space each.

    ``href`` values get ``url_prefix`` prepended. Multi-valued attributes such
    as ``class`` are joined with spaces. Attributes are kept in source order;
    those whose names cannot be written as XML are left out.
    """

    rendered = []
    for name, value in attrs.items():
        if not is_xml_name(name):
            continue
        if value is None:
            rendered.append(f" {name}")
            continue
        if isinstance(value, (list, tuple)):
            value = " ".join(value)
        if name == "href":
            value = f"{url_prefix}{value}"
        rendered.append(f' {name}="{escape_attribute(str(value))}"')
    return "".join(rendered)


def serialize_element(element: Tag, url_prefix: str = URL_PREFIX) -> str:
    """Return ``element`` as markup, always with an explicit closing tag.

    Elements whose names are not valid in the fragment (``<o:p>`` and the like)
    are unwrapped: only their children are written.
    """

    children = serialize_children(element, url_prefix)
    if not is_xml_name(element.name):
        return children
    attributes = render_attributes(element.attrs, url_prefix)
    return f"<{element.name}{attributes}>{children}</{element.name}>"


def serialize_children(element: Tag, url_prefix: str = URL_PREFIX) -> str:
    """Concatenate the serialised children of ``element`` in document order.

    Text is escaped; comments, doctypes and other declarations are dropped.
    """

    parts = []
    for child in element.children:
        if isinstance(child, Tag):
            parts.append(serialize_element(child, url_prefix))
        elif isinstance(child, PreformattedString):
            continue
        elif isinstance(child, NavigableString):
            parts.append(escape_text(str(child)))
    return "".join(parts)
