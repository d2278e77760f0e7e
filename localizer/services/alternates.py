"""hreflang alternate links and the canonical link."""

from typing import List

from bs4 import BeautifulSoup

from localizer.models.config import SiteConfig
from localizer.services.metadata import ensure_head

X_DEFAULT = "x-default"


def build_url(config: SiteConfig, locale: str, route: str) -> str:
    """Return the public URL of *route* in *locale*.

    The default locale has no path prefix and an empty route (the index page)
    adds no trailing segment, so ``build_url(cfg, "fr", "")`` is
    ``{site_url}/fr``.
    """
    prefix = "" if locale == config.default_locale else locale
    parts = [config.site_url, config.base_path.lstrip("/"), prefix, route.lstrip("/")]
    return "/".join(part for part in parts if part).rstrip("/") or config.site_url


def _remove_alternates(soup: BeautifulSoup) -> None:
    for link in soup.find_all("link", rel="alternate", hreflang=True):
        link.decompose()


def _append_alternate(soup: BeautifulSoup, hreflang: str, href: str) -> None:
    link = soup.new_tag("link", attrs={"rel": "alternate", "hreflang": hreflang, "href": href})
    ensure_head(soup).append(link)


def _set_canonical(soup: BeautifulSoup, href: str) -> None:
    canonicals = soup.find_all("link", rel="canonical")
    if canonicals:
        canonical = canonicals[0]
        for extra in canonicals[1:]:
            extra.decompose()
    else:
        canonical = soup.new_tag("link", attrs={"rel": "canonical"})
        ensure_head(soup).append(canonical)
    canonical["href"] = href


def refresh_alternates(soup: BeautifulSoup, locales: List[str], route: str, config: SiteConfig) -> None:
    """Regenerate the hreflang alternate links of *soup*.

    Existing hreflang links are dropped first, leaving one link per locale
    plus ``x-default`` no matter how many times this runs. The canonical
    link is not touched.
    """
    _remove_alternates(soup)
    for locale in locales:
        _append_alternate(soup, locale, build_url(config, locale, route))
    _append_alternate(soup, X_DEFAULT, build_url(config, config.default_locale, route))


def apply_alternate_links(
    soup: BeautifulSoup,
    locales: List[str],
    current_locale: str,
    route: str,
    config: SiteConfig,
) -> None:
    """Regenerate the alternate links and point the canonical link at *current_locale*."""
    refresh_alternates(soup, locales, route, config)
    _set_canonical(soup, build_url(config, current_locale, route))
