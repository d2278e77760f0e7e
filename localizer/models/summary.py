from typing import List

from pydantic import BaseModel


class RunSummary(BaseModel):
    pages: int
    locales: List[str]
    localized_files: int
    refreshed_files: int
