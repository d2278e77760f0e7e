"""Locale scoping of internal anchor hrefs.

Every ``<a href>`` falls into exactly one class, checked in this order:

``"fragment"``
    Same-page anchor (``#section``).

``"external"``
    Absolute or protocol-relative URL (``http…``, ``//cdn…``).

``"protocol"``
    ``mailto:``, ``tel:`` or ``javascript:`` pseudo-links.

``"asset"``
    Any path containing an ``/assets/`` segment. Static files are shared by
    all locales.

``"localized"``
    First path segment (after the base path) is already a known locale.

``"internal"``
    Everything else; rewritten to carry the target locale.
"""

from typing import Iterable, Literal

from bs4 import BeautifulSoup

LinkKind = Literal["fragment", "external", "protocol", "asset", "localized", "internal"]

_EXTERNAL_PREFIXES = ("http", "//")
_PROTOCOL_PREFIXES = ("mailto:", "tel:", "javascript:")
_ASSET_MARKER = "/assets/"


def _path_part(href: str) -> str:
    """Return *href* without its query string or fragment."""
    for sep in ("?", "#"):
        href = href.split(sep, 1)[0]
    return href


def _strip_base_path(href: str, base_path: str) -> str:
    """Remove *base_path* from the front of *href* on a segment boundary."""
    if base_path and (href == base_path or href.startswith(base_path + "/")):
        return href[len(base_path):]
    return href


def _is_asset(href: str) -> bool:
    return _ASSET_MARKER in _path_part(href)


def _first_segment(href: str, base_path: str) -> str:
    path = _path_part(href)
    if path.startswith("/"):
        path = _strip_base_path(path, base_path).lstrip("/")
    return path.split("/", 1)[0]


def classify_href(href: str, locales: Iterable[str], base_path: str = "") -> LinkKind:
    """Classify *href* into one of the :data:`LinkKind` values."""
    if href.startswith("#"):
        return "fragment"
    if href.startswith(_EXTERNAL_PREFIXES):
        return "external"
    if href.startswith(_PROTOCOL_PREFIXES):
        return "protocol"
    if _is_asset(href):
        return "asset"
    if _first_segment(href, base_path) in set(locales):
        return "localized"
    return "internal"


def rewrite_href(href: str, locale: str, locales: Iterable[str], base_path: str = "") -> str:
    """Return *href* scoped to *locale*, or unchanged when it must not be rewritten.

    ``/about.html`` becomes ``{base_path}/{locale}/about.html``; a relative
    ``about.html`` becomes ``{locale}/about.html``.
    """
    if classify_href(href, locales, base_path) != "internal":
        return href
    if href.startswith("/"):
        return f"{base_path}/{locale}{_strip_base_path(href, base_path)}"
    return f"{locale}/{href}"


def rewrite_links(soup: BeautifulSoup, locale: str, locales: Iterable[str], base_path: str = "") -> int:
    """Rewrite every internal anchor of *soup* in place; return how many changed."""
    known = frozenset(locales)
    changed = 0
    for anchor in soup.find_all("a", href=True):
        href = str(anchor["href"])
        if not href:
            continue
        new_href = rewrite_href(href, locale, known, base_path)
        if new_href != href:
            anchor["href"] = new_href
            changed += 1
    return changed
