"""Localized <title> and description/social meta tags."""

from typing import Optional, Tuple

from bs4 import BeautifulSoup, Tag

from localizer.models.translation import TranslationEntry

# (attribute, value) pairs identifying the meta tags that mirror each field
_TITLE_META = (
    ("property", "og:title"),
    ("name", "twitter:title"),
)
_DESCRIPTION_META = (
    ("name", "description"),
    ("property", "og:description"),
    ("name", "twitter:description"),
)


def resolve_title(entry: Optional[TranslationEntry], brand: str) -> Optional[str]:
    """Return ``pageTitle``, else ``"{name} - {brand}"``, else ``None``."""
    if entry is None:
        return None
    if entry.page_title:
        return entry.page_title
    if entry.name:
        return f"{entry.name} - {brand}"
    return None


def resolve_description(entry: Optional[TranslationEntry]) -> Optional[str]:
    if entry is None or not entry.subtitle:
        return None
    return entry.subtitle


def ensure_head(soup: BeautifulSoup) -> Tag:
    """Return the document's <head>, creating it when the source has none."""
    if soup.head is not None:
        return soup.head
    head = soup.new_tag("head")
    if soup.html is not None:
        soup.html.insert(0, head)
    else:
        soup.insert(0, head)
    return head


def _set_meta_content(soup: BeautifulSoup, selectors: Tuple[Tuple[str, str], ...], value: str) -> None:
    for attr, key in selectors:
        meta = soup.find("meta", attrs={attr: key})
        if meta is not None:
            meta["content"] = value


def _set_title(soup: BeautifulSoup, title: str) -> None:
    head = ensure_head(soup)
    title_tag = head.find("title", recursive=False)
    if title_tag is None:
        title_tag = soup.new_tag("title")
        head.append(title_tag)
    title_tag.string = title


def inject_metadata(
    soup: BeautifulSoup, entry: Optional[TranslationEntry], brand: str
) -> None:
    """Write the localized title and description of *entry* into *soup*.

    Fields that do not resolve leave the existing markup untouched, so an
    absent entry is a no-op.
    """
    title = resolve_title(entry, brand)
    if title:
        _set_title(soup, title)
        _set_meta_content(soup, _TITLE_META, title)

    description = resolve_description(entry)
    if description:
        _set_meta_content(soup, _DESCRIPTION_META, description)
