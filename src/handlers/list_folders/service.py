"""Business logic for listing top-level folders."""

from typing import Any

from aws_lambda_powertools import Logger

from core.repositories.media_repository import MediaStorageRepository

logger = Logger(UTC=True)


class FoldersService:
    def __init__(self, storage: MediaStorageRepository) -> None:
        self.storage = storage

    def list_folders(self) -> tuple[list[dict[str, Any]], int]:
        """Return the provider's root folders and their count.

        Raises:
            ProviderError: If the provider call fails
        """
        result = self.storage.root_folders()

        folders = list(result.get("folders") or [])
        total_count = int(result.get("total_count") or 0)

        logger.info("Folders listed", extra={"total_count": total_count})

        return folders, total_count
