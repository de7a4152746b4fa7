"""Search query value object."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from core.utils.constants import DEFAULT_FOLDER, DEFAULT_LIMIT, FOLDER_PATTERN, MAX_SEARCH_RESULTS


class SearchQuery(BaseModel):
    """Parameters of a single provider search call."""

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    folder: str = Field(DEFAULT_FOLDER, min_length=1, pattern=FOLDER_PATTERN)
    term: str = ""
    sort_by: str = "created_at"
    sort_order: Literal["asc", "desc"] = "desc"
    max_results: int = Field(DEFAULT_LIMIT, ge=1, le=MAX_SEARCH_RESULTS)
    cursor: str | None = None
    aggregate: str | None = None
