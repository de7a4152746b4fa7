"""Pydantic models for the storage statistics request/response."""

from pydantic import BaseModel, ConfigDict, Field

from core.models.stats import StatsReport
from core.utils.constants import DEFAULT_FOLDER, FOLDER_PATTERN


class GetStatsRequest(BaseModel):
    """Validation model for the storage statistics request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    folder: str = Field(
        default=DEFAULT_FOLDER,
        min_length=1,
        max_length=255,
        pattern=FOLDER_PATTERN,
        description="Folder to aggregate",
    )


class GetStatsResponse(BaseModel):
    """Response model for storage statistics."""

    stats: StatsReport = Field(..., description="Folder and optional account figures")
    timestamp: str = Field(..., description="Evaluation time (ISO 8601, UTC)")
