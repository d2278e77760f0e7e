from pydantic import BaseModel


class Page(BaseModel):
    """One generated HTML file from the build output."""

    filename: str
    route: str  # extension-free path, empty for the index page
    translation_key: str
