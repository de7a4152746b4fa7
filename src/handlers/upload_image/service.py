"""Business logic for the debug image upload path.

Production clients upload straight to the provider with an unsigned upload
preset; this path exists for seeding and manual testing.
"""

from aws_lambda_powertools import Logger

from core.repositories.media_repository import MediaStorageRepository

from .models import UploadedImage

logger = Logger(UTC=True)


class UploadService:
    """Application service responsible for uploading images."""

    def __init__(self, storage: MediaStorageRepository) -> None:
        """Initialize the upload service with the shared media storage."""
        self.storage = storage

    def upload_image(
        self,
        *,
        image: str,
        folder: str,
        filename: str | None = None,
    ) -> UploadedImage:
        """Upload an image and project the provider result.

        Args:
            image: Data URI or URL of the image
            folder: Destination folder
            filename: Optional fixed public id inside ``folder``

        Returns:
            The uploaded asset's identity, dimensions and size

        Raises:
            ProviderError: If the upload fails
        """
        logger.debug(
            "Starting image upload",
            extra={"folder": folder, "filename": filename},
        )

        result = self.storage.upload(image=image, folder=folder, filename=filename)

        uploaded = UploadedImage(
            public_id=result["public_id"],
            secure_url=result.get("secure_url"),
            width=result.get("width"),
            height=result.get("height"),
            bytes=result.get("bytes"),
            format=result.get("format"),
            created_at=result.get("created_at"),
        )

        logger.info(
            "Image uploaded successfully",
            extra={"public_id": uploaded.public_id, "bytes": uploaded.bytes},
        )

        return uploaded
