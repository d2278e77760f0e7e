import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_SITE_URL = "https://bentopdf.com"
DEFAULT_LOCALE = "en"
DEFAULT_BRAND = "BentoPDF"


class SiteConfig(BaseModel):
    """Site-wide settings shared by every stage of the generator."""

    model_config = ConfigDict(frozen=True)

    site_url: str = DEFAULT_SITE_URL
    base_path: str = Field(
        default="",
        description="Path prefix the site is served under, e.g. '/tools'. Empty for the root.",
    )
    default_locale: str = DEFAULT_LOCALE
    site_brand: str = DEFAULT_BRAND
    dist_dir: Path = Path("dist")
    locales_dir: Path = Path("public/locales")

    @field_validator("site_url")
    @classmethod
    def _trim_site_url(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("base_path")
    @classmethod
    def _normalise_base_path(cls, value: str) -> str:
        value = value.strip().strip("/")
        return f"/{value}" if value else ""

    @classmethod
    def from_env(cls, **overrides) -> "SiteConfig":
        """Build a config from environment variables; non-None *overrides* win."""
        values = {
            "site_url": os.environ.get("SITE_URL", DEFAULT_SITE_URL),
            "base_path": os.environ.get("BASE_URL", "/"),
            "default_locale": os.environ.get("DEFAULT_LOCALE", DEFAULT_LOCALE),
            "site_brand": os.environ.get("SITE_BRAND", DEFAULT_BRAND),
            "dist_dir": os.environ.get("DIST_DIR", "dist"),
            "locales_dir": os.environ.get("LOCALES_DIR", "public/locales"),
        }
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)
