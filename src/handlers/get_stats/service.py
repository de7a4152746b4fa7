"""Business logic for folder storage statistics.

Runs one folder search capped at the provider's per-call ceiling and
aggregates the returned sample. Account usage is fetched as an optional
enrichment: when the provider refuses it (e.g. on free plans) the report is
returned without it.
"""

from datetime import datetime

from aws_lambda_powertools import Logger

from core.analytics.stats_aggregator import StatsAggregator
from core.filters.search_expression import AssetSearchCompiler
from core.models.errors import ProviderError
from core.models.search import SearchQuery
from core.models.stats import AccountUsage, StatsReport
from core.repositories.media_repository import MediaStorageRepository
from core.utils.constants import STATS_SAMPLE_SIZE

logger = Logger(UTC=True)


class StatsService:
    """Application service responsible for storage statistics."""

    def __init__(self, storage: MediaStorageRepository) -> None:
        self.storage = storage
        self.compiler = AssetSearchCompiler()
        self.aggregator = StatsAggregator()

    def fetch_account_usage(self) -> AccountUsage | None:
        """Return account usage, or None when the provider cannot supply it."""
        try:
            usage = self.storage.usage()
        except ProviderError as exc:
            logger.warning(
                "Usage data not available",
                extra={"error": exc.upstream_message},
            )
            return None

        return self.aggregator.account_usage(usage)

    def get_stats(self, folder: str, *, now: datetime | None = None) -> StatsReport:
        """Build the statistics report for ``folder``.

        Raises:
            ProviderError: If the folder search fails
        """
        account = self.fetch_account_usage()

        query = SearchQuery(
            folder=folder,
            max_results=STATS_SAMPLE_SIZE,
            aggregate="format",
        )
        result = self.storage.search(query, expression=self.compiler.compile(folder))

        resources = result.get("resources") or []
        total_count = int(result.get("total_count") or 0)

        folder_stats = self.aggregator.aggregate(
            folder=folder,
            resources=resources,
            total_count=total_count,
            now=now,
        )

        if folder_stats.is_approximate:
            logger.info(
                "Folder statistics computed from a sample",
                extra={
                    "folder": folder,
                    "total_images": folder_stats.total_images,
                    "sampled_images": folder_stats.sampled_images,
                },
            )

        return StatsReport(folder=folder_stats, account=account)
