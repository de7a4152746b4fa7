"""Abstract contract for the remote media-storage provider."""

from abc import ABC, abstractmethod
from typing import Any

from core.models.search import SearchQuery

ProviderResult = dict[str, Any]


class MediaStorageRepository(ABC):
    """Contract for searching, inspecting, and deleting stored media assets.

    Implementations could be Cloudinary, an in-memory fake, etc.
    Services depend on this interface, not the implementation.
    """

    @abstractmethod
    def search(self, query: SearchQuery, *, expression: str) -> ProviderResult:
        """Run one search against the asset index.

        Args:
            query: Sorting, result cap, cursor and aggregate options
            expression: Compiled search expression

        Returns:
            Raw envelope with ``resources``, ``total_count`` and, when more
            results exist, ``next_cursor``

        Raises:
            ProviderError: If the search fails
        """

    @abstractmethod
    def delete_asset(self, public_id: str) -> str:
        """Delete one asset.

        Args:
            public_id: Identifier of the asset

        Returns:
            Provider status: ``"ok"``, ``"not found"`` or another status

        Raises:
            ProviderError: If the call itself fails
        """

    @abstractmethod
    def delete_assets(self, public_ids: list[str]) -> ProviderResult:
        """Delete a batch of assets in one provider call.

        Args:
            public_ids: Identifiers to delete (at most one provider batch)

        Returns:
            Raw provider response; ``deleted`` maps each identifier to its
            status (``"deleted"``, ``"not_found"``, ...)

        Raises:
            ProviderError: If the batch call fails as a whole
        """

    @abstractmethod
    def ping(self) -> ProviderResult:
        """Check provider reachability.

        Raises:
            ProviderError: If the provider cannot be reached
        """

    @abstractmethod
    def usage(self) -> ProviderResult:
        """Return account-level usage and quota figures.

        Raises:
            ProviderError: If usage is unavailable (e.g. plan restriction)
        """

    @abstractmethod
    def root_folders(self) -> ProviderResult:
        """List top-level folders.

        Raises:
            ProviderError: If listing fails
        """

    @abstractmethod
    def upload(
        self,
        *,
        image: str,
        folder: str,
        filename: str | None = None,
    ) -> ProviderResult:
        """Upload an image given as a data URI, remote URL, or path.

        Raises:
            ProviderError: If the upload fails
        """
