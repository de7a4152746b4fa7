"""
Pydantic models for the list images request.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.utils.constants import (
    DEFAULT_FOLDER,
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    FOLDER_PATTERN,
    MAX_SEARCH_RESULTS,
    MIN_LIMIT,
)


class ListImagesRequest(BaseModel):
    """
    Validation model for the list images API.

    Supports:
    - Folder scoping (``folder``)
    - Free-text search on file name and public id (``search``)
    - Sorting (``sort_by`` / ``order``)
    - Cursor continuation (``cursor``); ``page`` is echoed only
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    folder: str = Field(
        default=DEFAULT_FOLDER,
        min_length=1,
        max_length=255,
        pattern=FOLDER_PATTERN,
        description="Folder to search in",
    )
    search: str = Field(
        default="",
        max_length=255,
        description="Substring match on file name or public id",
    )

    # Pagination
    page: int = Field(
        default=DEFAULT_PAGE,
        ge=1,
        description="Caller page number (echoed back)",
    )
    limit: int = Field(
        default=DEFAULT_LIMIT,
        ge=MIN_LIMIT,
        le=MAX_SEARCH_RESULTS,
        description=f"Results per page ({MIN_LIMIT}-{MAX_SEARCH_RESULTS})",
    )
    cursor: str | None = Field(
        default=None,
        description="next_cursor from the previous page",
    )

    # Sorting
    sort_by: Literal["created_at", "public_id", "bytes", "filename"] = Field(
        default="created_at",
        description="Sort field",
    )
    order: Literal["asc", "desc"] = Field(
        default="desc",
        description="Sort order",
    )

    @field_validator("cursor")
    @classmethod
    def blank_cursor_is_none(cls, value: str | None) -> str | None:
        return value or None
