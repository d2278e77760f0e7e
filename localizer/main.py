import argparse
import logging
import logging.config
import sys
from typing import List, Optional

from localizer.errors import ConfigurationError
from localizer.models.config import SiteConfig
from localizer.services.writer import generate_pages

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "format": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                },
            },
            "root": {"level": "DEBUG" if verbose else "INFO", "handlers": ["console"]},
        }
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="page-localizer",
        description="Generate per-locale variants of built HTML pages.",
    )
    parser.add_argument("--dist-dir", help="Build output directory (env DIST_DIR, default: dist).")
    parser.add_argument("--locales-dir", help="Translation bundle root (env LOCALES_DIR, default: public/locales).")
    parser.add_argument("--site-url", help="Public site URL (env SITE_URL).")
    parser.add_argument("--base-path", help="Path prefix the site is served under (env BASE_URL).")
    parser.add_argument("--default-locale", help="Locale served without a path prefix (env DEFAULT_LOCALE, default: en).")
    parser.add_argument("--brand", dest="site_brand", help="Brand appended to composed page titles (env SITE_BRAND).")
    parser.add_argument(
        "--locale",
        action="append",
        dest="locales",
        metavar="CODE",
        help="Only write this locale; repeat for several. Default: every discovered locale.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every file written.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    config = SiteConfig.from_env(
        site_url=args.site_url,
        base_path=args.base_path,
        default_locale=args.default_locale,
        site_brand=args.site_brand,
        dist_dir=args.dist_dir,
        locales_dir=args.locales_dir,
    )

    try:
        generate_pages(config, only_locales=args.locales)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 1
    except Exception:
        logger.exception("Page generation aborted")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
