from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class TranslationEntry(BaseModel):
    """Localized strings for one page, as stored in a locale bundle."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    page_title: Optional[str] = Field(default=None, alias="pageTitle")
    name: Optional[str] = None
    subtitle: Optional[str] = None


class LocaleBundle(BaseModel):
    """The ``common`` and ``tools`` bundles of a single locale."""

    locale: str
    common: Dict[str, object] = {}
    tools: Dict[str, object] = {}

    def entry(self, key: str) -> Optional[TranslationEntry]:
        """Return the page metadata entry for *key* from the ``tools`` bundle.

        ``common`` holds shared UI strings and is never consulted here. Missing
        keys and non-object values resolve to ``None``.
        """
        raw = self.tools.get(key)
        if isinstance(raw, dict):
            return TranslationEntry.model_validate(raw)
        return None
