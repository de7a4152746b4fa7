"""Business logic for single image deletion.

A provider answer of ``"not found"`` is treated as success: the caller's
goal (the asset no longer exists) is met either way.
"""

from aws_lambda_powertools import Logger

from core.repositories.media_repository import MediaStorageRepository

from .models import DeleteImageResponse

logger = Logger(UTC=True)

DELETE_OK = "ok"
DELETE_NOT_FOUND = "not found"


class DeleteService:
    """Application service responsible for deleting one image."""

    def __init__(self, storage: MediaStorageRepository) -> None:
        self.storage = storage

    @staticmethod
    def describe(result: str) -> str:
        if result == DELETE_OK:
            return "Image deleted successfully"
        if result == DELETE_NOT_FOUND:
            return "Image not found (may already be deleted)"
        return "Failed to delete image"

    def delete_image(self, public_id: str) -> DeleteImageResponse:
        """Delete ``public_id`` and classify the provider status.

        Raises:
            ProviderError: If the provider call fails
        """
        logger.debug("Starting image deletion", extra={"public_id": public_id})

        result = self.storage.delete_asset(public_id)
        success = result in (DELETE_OK, DELETE_NOT_FOUND)

        if not success:
            logger.warning(
                "Provider did not delete image",
                extra={"public_id": public_id, "result": result},
            )

        return DeleteImageResponse(
            success=success,
            message=self.describe(result),
            result=result,
            public_id=public_id,
        )
