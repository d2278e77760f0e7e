"""Locale discovery and translation-bundle loading."""

import json
import logging
from pathlib import Path
from typing import Dict, List

from localizer.errors import ConfigurationError
from localizer.models.translation import LocaleBundle

logger = logging.getLogger(__name__)

_BUNDLE_NAMES = ("common", "tools")


def discover_locales(locales_dir: Path) -> List[str]:
    """Return the locale codes found as immediate subdirectories of *locales_dir*.

    Codes are sorted so that every run sees the same order.

    Raises:
        ConfigurationError: if *locales_dir* does not exist.
    """
    if not locales_dir.is_dir():
        raise ConfigurationError(f"Locales directory not found: {locales_dir}")
    return sorted(entry.name for entry in locales_dir.iterdir() if entry.is_dir())


def _read_bundle(path: Path) -> Dict[str, object]:
    if not path.is_file():
        logger.debug("Bundle %s is missing, treating it as empty", path)
        return {}
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Bundle {path} must contain a JSON object.")
    return data


def load_bundle(locales_dir: Path, locale: str) -> LocaleBundle:
    """Load the ``common`` and ``tools`` bundles of *locale*.

    Absent files are empty bundles. Malformed JSON raises ``ValueError``.
    """
    locale_dir = locales_dir / locale
    bundles = {name: _read_bundle(locale_dir / f"{name}.json") for name in _BUNDLE_NAMES}
    return LocaleBundle(locale=locale, **bundles)
