"""Per-page, per-locale generation of localized HTML files."""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from bs4 import BeautifulSoup

from localizer.errors import ConfigurationError
from localizer.models.config import SiteConfig
from localizer.models.page import Page
from localizer.models.summary import RunSummary
from localizer.models.translation import LocaleBundle
from localizer.services.alternates import apply_alternate_links, refresh_alternates
from localizer.services.keys import make_page
from localizer.services.links import rewrite_links
from localizer.services.locales import discover_locales, load_bundle
from localizer.services.metadata import inject_metadata
from localizer.services.pages import list_pages

logger = logging.getLogger(__name__)


def _parse(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def localize_document(
    html: str,
    page: Page,
    locale: str,
    locales: List[str],
    bundle: LocaleBundle,
    config: SiteConfig,
) -> str:
    """Return the *locale* variant of *html*.

    The source is parsed afresh on every call, so no tree is shared between
    locales.
    """
    soup = _parse(html)
    if soup.html is not None:
        soup.html["lang"] = locale
    inject_metadata(soup, bundle.entry(page.translation_key), config.site_brand)
    apply_alternate_links(soup, locales, locale, page.route, config)
    rewrite_links(soup, locale, locales, config.base_path)
    return str(soup)


def refresh_default_document(html: str, page: Page, locales: List[str], config: SiteConfig) -> str:
    """Return *html* with only its hreflang alternate links regenerated."""
    soup = _parse(html)
    refresh_alternates(soup, locales, page.route, config)
    return str(soup)


def _target_locales(locales: List[str], config: SiteConfig, only: Optional[Iterable[str]]) -> List[str]:
    targets = [locale for locale in locales if locale != config.default_locale]
    if only is None:
        return targets
    requested = list(only)
    unknown = sorted(set(requested) - set(targets))
    if unknown:
        raise ConfigurationError(
            f"Unknown locale(s) requested: {', '.join(unknown)}. Available: {', '.join(targets)}"
        )
    return [locale for locale in targets if locale in requested]


def generate_pages(config: SiteConfig, only_locales: Optional[Iterable[str]] = None) -> RunSummary:
    """Write every localized page variant and refresh the default-locale pages.

    Pages are processed one at a time; for each page every target locale is
    written to ``<dist_dir>/<locale>/<filename>`` before the default file is
    overwritten in place. Any I/O error aborts the run, leaving files written
    so far on disk.

    Args:
        config:       Site settings.
        only_locales: Restrict output to these non-default locales. The
                      alternate-link set still lists every discovered locale.

    Raises:
        ConfigurationError: if the build output or locales directory is missing,
                            or *only_locales* names an unknown locale.
    """
    logger.info("Generating i18n pages for %s (base path %r)", config.site_url, config.base_path or "/")

    filenames = list_pages(config.dist_dir)
    locales = discover_locales(config.locales_dir)
    targets = _target_locales(locales, config, only_locales)
    bundles: Dict[str, LocaleBundle] = {
        locale: load_bundle(config.locales_dir, locale) for locale in targets
    }

    localized = 0
    for filename in filenames:
        page = make_page(filename)
        source_path = config.dist_dir / filename
        html = source_path.read_text(encoding="utf-8")

        for locale in targets:
            locale_dir: Path = config.dist_dir / locale
            locale_dir.mkdir(parents=True, exist_ok=True)
            output = localize_document(html, page, locale, locales, bundles[locale], config)
            (locale_dir / filename).write_text(output, encoding="utf-8")
            localized += 1
            logger.debug("Wrote %s/%s", locale, filename)

        source_path.write_text(refresh_default_document(html, page, locales, config), encoding="utf-8")
        logger.debug("Refreshed %s", filename)

    summary = RunSummary(
        pages=len(filenames),
        locales=locales,
        localized_files=localized,
        refreshed_files=len(filenames),
    )
    logger.info(
        "Generated %d localized file(s) for %d page(s) across %d locale(s)",
        summary.localized_files,
        summary.pages,
        len(summary.locales),
    )
    return summary
