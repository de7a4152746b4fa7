"""Pydantic models for the cleanup analysis request/response."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from core.utils.constants import DEFAULT_FOLDER, DEFAULT_OLDER_THAN_DAYS, FOLDER_PATTERN


class CleanupRequest(BaseModel):
    """Validation model for cleanup analysis request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    folder: str = Field(
        default=DEFAULT_FOLDER,
        min_length=1,
        max_length=255,
        pattern=FOLDER_PATTERN,
    )
    dry_run: StrictBool = Field(True, description="Only dry runs are supported")
    older_than_days: int = Field(
        default=DEFAULT_OLDER_THAN_DAYS,
        ge=0,
        le=36500,
        description="Age threshold in days",
    )


class OldImageSample(BaseModel):
    public_id: str
    created_at: str | None = None
    size: int | None = None


class CleanupAnalysis(BaseModel):
    """Age analysis of a folder's assets.

    Counts cover at most the first 1000 assets (oldest first).
    """

    total_images: int = Field(..., ge=0, description="Provider-reported folder size")
    old_images: int = Field(..., ge=0, description="Assets created before the cutoff")
    cutoff_date: str = Field(..., description="ISO 8601 cutoff (UTC)")
    sample_old_images: list[OldImageSample] = Field(default_factory=list)
