"""
Folder statistics computed from a sample of provider search results.

Statistics are derived fresh on every call and are never cached. The
provider caps a single search at ``STATS_SAMPLE_SIZE`` results, so for large
folders every size based figure describes the fetched sample only.
``FolderStats.is_approximate`` tells callers when that is the case.
"""

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any

from core.models.stats import AccountUsage, FolderStats, FormatBucket, LargestFile
from core.utils.constants import LARGEST_FILES_COUNT, RECENT_UPLOADS_DAYS, UNKNOWN_FORMAT
from core.utils.time import days_ago, parse_timestamp

Resource = Mapping[str, Any]


def _size_of(resource: Resource) -> int:
    return int(resource.get("bytes") or 0)


def round_half_up_division(numerator: int, denominator: int) -> int:
    """Integer ``numerator / denominator`` rounded half up; 0 for a zero denominator."""
    if denominator <= 0:
        return 0
    return (2 * numerator + denominator) // (2 * denominator)


class StatsAggregator:
    """Compute size totals, format breakdowns, and upload recency."""

    def __init__(
        self,
        *,
        largest_count: int = LARGEST_FILES_COUNT,
        recent_days: int = RECENT_UPLOADS_DAYS,
    ) -> None:
        self.largest_count = largest_count
        self.recent_days = recent_days

    @staticmethod
    def total_size(resources: Sequence[Resource]) -> int:
        return sum(_size_of(resource) for resource in resources)

    @staticmethod
    def format_breakdown(resources: Sequence[Resource]) -> dict[str, FormatBucket]:
        """Group by uppercased format, accumulating count and size per group."""
        breakdown: dict[str, FormatBucket] = {}

        for resource in resources:
            name = str(resource.get("format") or UNKNOWN_FORMAT).upper()
            bucket = breakdown.setdefault(name, FormatBucket())
            bucket.count += 1
            bucket.size += _size_of(resource)

        return breakdown

    def largest_files(self, resources: Sequence[Resource]) -> list[LargestFile]:
        """Return the largest resources by bytes, descending.

        ``sorted`` is stable, so equal sizes keep their scan order. Resources
        without a ``public_id`` cannot be referenced and are left out.
        """
        addressable = [resource for resource in resources if resource.get("public_id")]
        ranked = sorted(addressable, key=_size_of, reverse=True)

        return [
            LargestFile(
                public_id=resource["public_id"],
                filename=resource.get("filename"),
                size=resource.get("bytes"),
                format=resource.get("format"),
                created_at=resource.get("created_at"),
                secure_url=resource.get("secure_url"),
            )
            for resource in ranked[: self.largest_count]
        ]

    def recent_uploads(
        self,
        resources: Sequence[Resource],
        *,
        now: datetime | None = None,
    ) -> int:
        """Count resources created strictly after ``now - recent_days``."""
        cutoff = days_ago(self.recent_days, now=now)
        count = 0

        for resource in resources:
            created = parse_timestamp(resource.get("created_at"))
            if created is not None and created > cutoff:
                count += 1

        return count

    def aggregate(
        self,
        *,
        folder: str,
        resources: Sequence[Resource],
        total_count: int,
        now: datetime | None = None,
    ) -> FolderStats:
        """
        Aggregate folder statistics.

        Args:
            folder: Folder the resources were fetched from
            resources: Fetched resources (the sample)
            total_count: Provider-reported size of the full matching set
            now: Evaluation time for the recency window (defaults to now)

        Returns:
            Folder statistics. ``average_size`` divides the sampled total size
            by ``total_count``, rounded half up, and is 0 for an empty folder.
        """
        total_size = self.total_size(resources)

        return FolderStats(
            name=folder,
            total_images=total_count,
            total_size=total_size,
            average_size=round_half_up_division(total_size, total_count),
            recent_uploads=self.recent_uploads(resources, now=now),
            format_breakdown=self.format_breakdown(resources),
            largest_files=self.largest_files(resources),
            sampled_images=len(resources),
            is_approximate=total_count > len(resources),
        )

    @staticmethod
    def account_usage(usage: Mapping[str, Any]) -> AccountUsage:
        """Flatten the provider's usage report into plan used/limit figures."""

        def _figure(section: str, key: str) -> Any:
            value = usage.get(section)
            if isinstance(value, Mapping):
                return value.get(key) or 0
            return 0

        return AccountUsage(
            plan=usage.get("plan"),
            credits_used=_figure("credits", "used"),
            credits_limit=_figure("credits", "limit"),
            bandwidth_used=_figure("bandwidth", "used"),
            bandwidth_limit=_figure("bandwidth", "limit"),
            storage_used=_figure("storage", "used"),
            storage_limit=_figure("storage", "limit"),
        )
