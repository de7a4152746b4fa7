"""Thin adapter for interacting with the Cloudinary SDK."""

from typing import Any, Protocol

import cloudinary.api
import cloudinary.uploader
from cloudinary.search import Search

from core.infrastructure.cloudinary.credentials import CloudinaryCredentials, resolve_credentials


class CloudinaryAdapterProtocol(Protocol):
    """Minimal Cloudinary adapter protocol (repository-facing)."""

    def search(
        self,
        *,
        expression: str,
        sort_by: str,
        sort_order: str,
        max_results: int,
        next_cursor: str | None = None,
        aggregate: str | None = None,
    ) -> dict[str, Any]: ...

    def destroy(self, *, public_id: str) -> dict[str, Any]: ...

    def delete_resources(self, *, public_ids: list[str]) -> dict[str, Any]: ...

    def ping(self) -> dict[str, Any]: ...

    def usage(self) -> dict[str, Any]: ...

    def root_folders(self) -> dict[str, Any]: ...

    def upload(self, *, file: str, options: dict[str, Any]) -> dict[str, Any]: ...


class CloudinaryAdapter:
    """Low-level Cloudinary operations (mechanical, no error handling).

    This adapter:
    - Wraps the Cloudinary admin, upload and search APIs
    - Passes credentials explicitly on every call (no global SDK config)
    - Does NOT handle errors (lets them bubble up)
    - Domain implementations catch and translate errors
    """

    def __init__(self, credentials: CloudinaryCredentials | None = None) -> None:
        """Create adapter from explicit or environment-resolved credentials."""
        self._credentials = credentials or resolve_credentials()

    @property
    def cloud_name(self) -> str:
        return self._credentials.cloud_name

    def _options(self, **extra: Any) -> dict[str, Any]:
        options: dict[str, Any] = dict(self._credentials.as_options())
        options.update(extra)
        return options

    def search(
        self,
        *,
        expression: str,
        sort_by: str,
        sort_order: str,
        max_results: int,
        next_cursor: str | None = None,
        aggregate: str | None = None,
    ) -> dict[str, Any]:
        """Execute a search.
        Raises Cloudinary exceptions - caught by domain implementation.
        """
        search = (
            Search()
            .expression(expression)
            .sort_by(sort_by, sort_order)
            .max_results(max_results)
        )

        if next_cursor:
            search = search.next_cursor(next_cursor)

        if aggregate:
            search = search.aggregate(aggregate)

        return dict(search.execute(**self._options()))

    def destroy(self, *, public_id: str) -> dict[str, Any]:
        """Delete a single resource.
        Raises Cloudinary exceptions - caught by domain implementation.
        """
        return dict(cloudinary.uploader.destroy(public_id, **self._options()))

    def delete_resources(self, *, public_ids: list[str]) -> dict[str, Any]:
        """Delete up to one provider batch of resources.
        Raises Cloudinary exceptions - caught by domain implementation.
        """
        return dict(cloudinary.api.delete_resources(public_ids, **self._options()))

    def ping(self) -> dict[str, Any]:
        """Ping the admin API."""
        return dict(cloudinary.api.ping(**self._options()))

    def usage(self) -> dict[str, Any]:
        """Fetch account usage."""
        return dict(cloudinary.api.usage(**self._options()))

    def root_folders(self) -> dict[str, Any]:
        """List top-level folders."""
        return dict(cloudinary.api.root_folders(**self._options()))

    def upload(self, *, file: str, options: dict[str, Any]) -> dict[str, Any]:
        """Upload a file (data URI, URL or path)."""
        return dict(cloudinary.uploader.upload(file, **self._options(**options)))
