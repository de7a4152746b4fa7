"""Cursor-based page model."""

from pydantic import BaseModel, Field, StrictBool, StrictInt, model_validator

from core.models.asset import ImageAsset


class ImagePage(BaseModel):
    """One page of assets reshaped from a provider search envelope."""

    resources: list[ImageAsset] = Field(default_factory=list, description="Assets in sort order")
    total_count: StrictInt = Field(..., ge=0, description="Size of the full matching set")
    next_cursor: str | None = Field(None, description="Opaque token for the following page")
    has_more: StrictBool = Field(..., description="True iff next_cursor is present")

    page: StrictInt = Field(..., ge=1, description="Caller page number, echoed back")
    limit: StrictInt = Field(..., ge=1, description="Maximum resources requested")
    search_term: str = Field("", description="Search term as received")
    folder: str = Field(..., description="Folder scope of the search")

    @model_validator(mode="after")
    def check_consistency(self) -> "ImagePage":
        """Keep has_more tied to the cursor and the page within its limit."""
        if self.has_more != (self.next_cursor is not None):
            raise ValueError("has_more must be true exactly when next_cursor is present")
        if len(self.resources) > self.limit:
            raise ValueError("resources must not exceed limit")
        return self
