from pathlib import Path
from typing import List

from localizer.errors import ConfigurationError

_PAGE_SUFFIX = ".html"


def list_pages(dist_dir: Path) -> List[str]:
    """Return the HTML filenames directly inside *dist_dir*, sorted.

    Locale subdirectories written by earlier runs are not descended into.

    Raises:
        ConfigurationError: if *dist_dir* does not exist.
    """
    if not dist_dir.is_dir():
        raise ConfigurationError(
            f"Build output directory not found: {dist_dir}. Please run the build first."
        )
    return sorted(
        entry.name
        for entry in dist_dir.iterdir()
        if entry.is_file() and entry.name.endswith(_PAGE_SUFFIX)
    )
