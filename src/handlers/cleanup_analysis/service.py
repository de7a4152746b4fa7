"""Business logic for finding old images that may be unused.

Whether an asset is still referenced elsewhere is not tracked, so the
analysis only reports age. Nothing is deleted here.
"""

from datetime import datetime

from aws_lambda_powertools import Logger

from core.filters.search_expression import AssetSearchCompiler
from core.models.search import SearchQuery
from core.repositories.media_repository import MediaStorageRepository
from core.utils.constants import CLEANUP_SAMPLE_SIZE, MAX_SEARCH_RESULTS
from core.utils.time import days_ago, parse_timestamp

from .models import CleanupAnalysis, OldImageSample

logger = Logger(UTC=True)


class CleanupAnalysisService:
    def __init__(self, storage: MediaStorageRepository) -> None:
        self.storage = storage
        self.compiler = AssetSearchCompiler()

    def analyze(
        self,
        *,
        folder: str,
        older_than_days: int,
        now: datetime | None = None,
    ) -> CleanupAnalysis:
        """Report assets in ``folder`` created before ``now - older_than_days``.

        Raises:
            ProviderError: If the folder search fails
        """
        cutoff = days_ago(older_than_days, now=now)

        query = SearchQuery(
            folder=folder,
            sort_by="created_at",
            sort_order="asc",
            max_results=MAX_SEARCH_RESULTS,
        )
        result = self.storage.search(query, expression=self.compiler.compile(folder))

        old_images = []
        for resource in result.get("resources") or []:
            created = parse_timestamp(resource.get("created_at"))
            if created is not None and created < cutoff:
                old_images.append(resource)

        logger.info(
            "Cleanup analysis completed",
            extra={
                "folder": folder,
                "old_images": len(old_images),
                "cutoff_date": cutoff.isoformat(),
            },
        )

        sample = [resource for resource in old_images if resource.get("public_id")]
        sample = sample[:CLEANUP_SAMPLE_SIZE]

        return CleanupAnalysis(
            total_images=int(result.get("total_count") or 0),
            old_images=len(old_images),
            cutoff_date=cutoff.isoformat(),
            sample_old_images=[
                OldImageSample(
                    public_id=resource["public_id"],
                    created_at=resource.get("created_at"),
                    size=resource.get("bytes"),
                )
                for resource in sample
            ],
        )
