# ABOUTME: Stateless HTML parsing and element lookup helpers built on BeautifulSoup
# ABOUTME: Every lookup resolves relative links against an explicitly passed base URL

from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup, Tag

from backloggd_snippet.extraction.base import StructuralFault

PARSER = "html.parser"
WEB_SCHEMES = ("http", "https")


def parse_html(text: str) -> BeautifulSoup:
    """Parse raw HTML into a fresh, queryable document tree."""
    return BeautifulSoup(text, PARSER)


def require(document: BeautifulSoup | Tag, selector: str) -> Tag:
    """Return the first element matching selector or raise StructuralFault."""
    element = document.select_one(selector)
    if element is None:
        raise StructuralFault(selector)
    return element


def resolve_web_url(base_url: str, value: str) -> str | None:
    """Resolve value against base_url, keeping only absolute http(s) results.

    Placeholders such as ``data:`` images, ``javascript:`` and ``mailto:`` links
    resolve to None.
    """
    resolved = urljoin(base_url, value.strip())
    parsed = urlparse(resolved)
    if parsed.scheme not in WEB_SCHEMES or not parsed.netloc:
        return None
    return resolved


def require_url(element: Tag, attribute: str, base_url: str, selector: str) -> str:
    """Resolve a link attribute of element against base_url, raising if it is missing or unusable."""
    value = element.get(attribute)
    resolved = resolve_web_url(base_url, str(value)) if value else None
    if resolved is None:
        raise StructuralFault(selector, attribute)
    return resolved


def optional_url(element: Tag | None, attribute: str, base_url: str) -> str | None:
    if element is None:
        return None
    value = element.get(attribute)
    return resolve_web_url(base_url, str(value)) if value else None


def inline_style(element: Tag, prop: str) -> str | None:
    """Read a single property from an element's inline style attribute."""
    for declaration in str(element.get("style", "")).split(";"):
        name, sep, value = declaration.partition(":")
        if sep and name.strip().lower() == prop:
            return value.strip() or None
    return None
