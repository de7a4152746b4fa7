"""Pydantic models for delete image request/response."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class DeleteImageRequest(BaseModel):
    """Validation model for delete image request."""

    model_config = ConfigDict(str_strip_whitespace=True)
    public_id: StrictStr = Field(
        ...,
        min_length=1,
        description="Public ID of the asset to delete",
    )


class DeleteImageResponse(BaseModel):
    """Response model for a single image deletion."""

    success: bool = Field(..., description="True for 'ok' and 'not found'")
    message: str = Field(..., description="Human-readable outcome")
    result: str = Field(..., description="Provider status string")
    public_id: str = Field(..., description="Public ID that was targeted")
