"""Batch deletion models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, StrictInt


class SuccessPolicy(str, Enum):
    """How a batch delete job decides overall success.

    ANY: at least one identifier was deleted.
    ALL: every identifier was deleted.
    """

    ANY = "any"
    ALL = "all"


class BatchDeleteSummary(BaseModel):
    """Outcome of a multi-asset delete request."""

    success: bool
    total_requested: StrictInt = Field(..., ge=0)
    successful: StrictInt = Field(..., ge=0)
    failed: StrictInt = Field(..., ge=0)
    results: list[dict[str, Any]] = Field(
        default_factory=list,
        description="One entry per batch: provider response or {error, batch}",
    )

    @property
    def message(self) -> str:
        text = f"Deleted {self.successful} images successfully"
        if self.failed > 0:
            text += f", {self.failed} failed"
        return text
