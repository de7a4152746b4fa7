"""Business logic for deleting many images in provider-sized batches."""

from collections.abc import Sequence

from aws_lambda_powertools import Logger

from core.batching.batch_delete import BatchDeleteOrchestrator
from core.models.batch import BatchDeleteSummary, SuccessPolicy
from core.repositories.media_repository import MediaStorageRepository

logger = Logger(UTC=True)


class BatchDeleteService:
    """Application service responsible for multi-image deletion."""

    def __init__(
        self,
        storage: MediaStorageRepository,
        *,
        success_policy: SuccessPolicy = SuccessPolicy.ANY,
    ) -> None:
        self.orchestrator = BatchDeleteOrchestrator(storage, success_policy=success_policy)

    def delete_images(self, public_ids: Sequence[str]) -> BatchDeleteSummary:
        """Delete ``public_ids`` and return the accumulated summary."""
        logger.info("Deleting multiple images", extra={"count": len(public_ids)})

        summary = self.orchestrator.run(public_ids)

        logger.info(
            summary.message,
            extra={
                "successful": summary.successful,
                "failed": summary.failed,
                "batches": len(summary.results),
            },
        )

        return summary
