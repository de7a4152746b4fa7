"""Storage statistics models."""

from pydantic import BaseModel, Field, StrictBool, StrictInt


class FormatBucket(BaseModel):
    """Count and total size of assets sharing one format."""

    count: StrictInt = 0
    size: StrictInt = 0


class LargestFile(BaseModel):
    """Summary of one of the largest assets in a folder."""

    public_id: str
    filename: str | None = None
    size: int | None = None
    format: str | None = None
    created_at: str | None = None
    secure_url: str | None = None


class FolderStats(BaseModel):
    """Aggregates computed over a folder's fetched assets.

    Size based figures cover only the fetched sample (at most the provider's
    per-call ceiling). ``is_approximate`` is set when ``total_images`` exceeds
    ``sampled_images``.
    """

    name: str
    total_images: StrictInt = Field(..., ge=0)
    total_size: StrictInt = Field(..., ge=0)
    average_size: StrictInt = Field(..., ge=0)
    recent_uploads: StrictInt = Field(..., ge=0)
    format_breakdown: dict[str, FormatBucket] = Field(default_factory=dict)
    largest_files: list[LargestFile] = Field(default_factory=list)
    sampled_images: StrictInt = Field(..., ge=0)
    is_approximate: StrictBool = False


class AccountUsage(BaseModel):
    """Account-level plan usage reported by the provider."""

    plan: str | None = None
    credits_used: int | float = 0
    credits_limit: int | float = 0
    bandwidth_used: int | float = 0
    bandwidth_limit: int | float = 0
    storage_used: int | float = 0
    storage_limit: int | float = 0


class StatsReport(BaseModel):
    """Statistics response payload."""

    folder: FolderStats
    account: AccountUsage | None = None
