"""Pydantic models for the batch delete request/response."""

from typing import Any

from pydantic import BaseModel, Field, StrictStr


class DeleteImagesRequest(BaseModel):
    """Validation model for deleting many images at once.

    Duplicates are kept; each occurrence is counted.
    """

    public_ids: list[StrictStr] = Field(
        ...,
        min_length=1,
        description="Public IDs to delete, in order",
    )


class DeleteImagesDetails(BaseModel):
    total_requested: int
    successful: int
    failed: int
    results: list[dict[str, Any]]


class DeleteImagesResponse(BaseModel):
    """Response model for a batch delete request."""

    success: bool = Field(..., description="Outcome under the configured success policy")
    message: str = Field(..., description="Human-readable tally")
    details: DeleteImagesDetails
