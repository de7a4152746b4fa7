"""
Bounded batch deletion against the media-storage provider.

Identifiers are split into contiguous chunks of ``DELETE_BATCH_SIZE`` and
submitted one chunk at a time. A later chunk never starts before the
current chunk's provider call has returned, so every outcome is attributable
to exactly one chunk. A failed chunk is recorded and processing moves on to
the next one; nothing is retried.
"""

from collections.abc import Iterator, Sequence
from typing import Any

from aws_lambda_powertools import Logger

from core.models.batch import BatchDeleteSummary, SuccessPolicy
from core.models.errors import ProviderError
from core.repositories.media_repository import MediaStorageRepository
from core.utils.constants import DELETE_BATCH_SIZE, DELETED_STATUS

logger = Logger(UTC=True)


def chunk_ids(ids: Sequence[str], size: int = DELETE_BATCH_SIZE) -> Iterator[list[str]]:
    """Yield contiguous chunks of ``ids`` in original order.

    Raises:
        ValueError: If ``size`` is not positive
    """
    if size < 1:
        raise ValueError("Batch size must be at least 1")

    for start in range(0, len(ids), size):
        yield list(ids[start : start + size])


class BatchDeleteOrchestrator:
    """Delete many assets in sequential, fixed-size provider batches.

    Outcome classification per chunk:
    - provider answered: each identifier with status ``"deleted"`` is a
      success, any other status is a failure
    - provider call failed: every identifier in the chunk is a failure and
      the chunk is recorded as ``{"error": ..., "batch": [...]}``

    Overall success is decided by ``success_policy``.
    """

    def __init__(
        self,
        storage: MediaStorageRepository,
        *,
        batch_size: int = DELETE_BATCH_SIZE,
        success_policy: SuccessPolicy = SuccessPolicy.ANY,
    ) -> None:
        self.storage = storage
        self.batch_size = batch_size
        self.success_policy = success_policy

    def is_successful(self, *, successful: int, failed: int) -> bool:
        if self.success_policy is SuccessPolicy.ALL:
            return successful > 0 and failed == 0
        return successful > 0

    def run(self, public_ids: Sequence[str]) -> BatchDeleteSummary:
        """
        Delete ``public_ids`` batch by batch.

        Args:
            public_ids: Non-empty ordered identifiers (duplicates allowed)

        Returns:
            Summary with per-batch results and running counters. Every
            requested occurrence is counted exactly once, so
            ``successful + failed == len(public_ids)``. An id missing from the
            provider answer counts as failed.

        Raises:
            ValueError: If ``public_ids`` is empty
        """
        if not public_ids:
            raise ValueError("Public IDs array is required and must not be empty")

        results: list[dict[str, Any]] = []
        successful = 0
        failed = 0

        for number, batch in enumerate(chunk_ids(public_ids, self.batch_size), start=1):
            try:
                response = self.storage.delete_assets(batch)
            except ProviderError as exc:
                logger.error(
                    "Batch delete failed",
                    extra={"batch": number, "size": len(batch), "error": exc.upstream_message},
                )
                failed += len(batch)
                results.append({"error": exc.upstream_message, "batch": batch})
                continue

            results.append(response)

            statuses = response.get("deleted") or {}
            batch_deleted = 0
            batch_failed = 0
            for public_id in batch:
                if statuses.get(public_id) == DELETED_STATUS:
                    batch_deleted += 1
                else:
                    batch_failed += 1

            successful += batch_deleted
            failed += batch_failed

            logger.info(
                "Batch delete completed",
                extra={
                    "batch": number,
                    "deleted": batch_deleted,
                    "not_deleted": batch_failed,
                },
            )

        return BatchDeleteSummary(
            success=self.is_successful(successful=successful, failed=failed),
            total_requested=len(public_ids),
            successful=successful,
            failed=failed,
            results=results,
        )
