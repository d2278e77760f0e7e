"""Page filename → route and translation key mapping."""

import re
from typing import Dict, Optional

from localizer.models.page import Page

# Pages whose translation key is not the camelCase form of their filename
KEY_OVERRIDES: Dict[str, str] = {
    "index": "home",
    "404": "notFound",
}

_INDEX_STEM = "index"

_KEBAB_RE = re.compile(r"-([a-z])")


def _strip_extension(filename: str) -> str:
    stem, dot, _ = filename.rpartition(".")
    return stem if dot else filename


def to_camel_case(value: str) -> str:
    """Convert ``kebab-case`` to ``camelCase`` (``merge-pdf`` → ``mergePdf``)."""
    return _KEBAB_RE.sub(lambda match: match.group(1).upper(), value)


def resolve_translation_key(
    filename: str, overrides: Optional[Dict[str, str]] = None
) -> str:
    """Return the bundle key for *filename*; the override table wins over camelCase."""
    table = KEY_OVERRIDES if overrides is None else overrides
    stem = _strip_extension(filename)
    if stem in table:
        return table[stem]
    return to_camel_case(stem)


def page_route(filename: str) -> str:
    """Return the extension-free route of *filename*, empty for the index page."""
    stem = _strip_extension(filename)
    return "" if stem == _INDEX_STEM else stem


def make_page(filename: str) -> Page:
    return Page(
        filename=filename,
        route=page_route(filename),
        translation_key=resolve_translation_key(filename),
    )
