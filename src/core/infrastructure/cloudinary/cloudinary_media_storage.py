"""Cloudinary-backed implementation of MediaStorageRepository."""

from typing import Any

from aws_lambda_powertools import Logger
from cloudinary.exceptions import Error as CloudinaryError

from core.infrastructure.adapters.cloudinary_adapter import (
    CloudinaryAdapter,
    CloudinaryAdapterProtocol,
)
from core.models.errors import ProviderError
from core.models.search import SearchQuery
from core.repositories.media_repository import MediaStorageRepository, ProviderResult
from core.utils.constants import (
    ERROR_CODE_DELETE_FAILED,
    ERROR_CODE_FOLDERS_FAILED,
    ERROR_CODE_PING_FAILED,
    ERROR_CODE_SEARCH_FAILED,
    ERROR_CODE_UPLOAD_FAILED,
    ERROR_CODE_USAGE_UNAVAILABLE,
)

logger = Logger(UTC=True)


class CloudinaryMediaStorage(MediaStorageRepository):
    """Media storage implementation backed by Cloudinary.

    All SDK and transport errors are caught and translated into
    ``ProviderError`` carrying the upstream message.
    """

    def __init__(self, adapter: CloudinaryAdapterProtocol | None = None) -> None:
        """Create storage using the provided Cloudinary adapter."""
        self._cloudinary: CloudinaryAdapterProtocol = adapter or CloudinaryAdapter()

    def search(self, query: SearchQuery, *, expression: str) -> ProviderResult:
        """Run one bounded search against the asset index."""
        logger.debug(
            "Searching assets",
            extra={
                "expression": expression,
                "sort_by": query.sort_by,
                "sort_order": query.sort_order,
                "max_results": query.max_results,
                "has_cursor": query.cursor is not None,
            },
        )

        try:
            result = self._cloudinary.search(
                expression=expression,
                sort_by=query.sort_by,
                sort_order=query.sort_order,
                max_results=query.max_results,
                next_cursor=query.cursor,
                aggregate=query.aggregate,
            )
        except CloudinaryError as exc:
            logger.error("Cloudinary search failed", extra={"expression": expression})
            raise ProviderError(
                message="Unable to search assets",
                upstream_message=str(exc),
                error_code=ERROR_CODE_SEARCH_FAILED,
                details={"expression": expression},
            ) from exc
        except Exception as exc:
            logger.exception("Unexpected error searching assets")
            raise ProviderError(
                message="Unable to search assets",
                upstream_message=str(exc),
                error_code=ERROR_CODE_SEARCH_FAILED,
                details={"expression": expression},
            ) from exc

        logger.info(
            "Asset search completed",
            extra={
                "returned": len(result.get("resources") or []),
                "total_count": result.get("total_count"),
            },
        )
        return result

    def delete_asset(self, public_id: str) -> str:
        """Delete one asset and return the provider status."""
        logger.debug("Deleting asset", extra={"public_id": public_id})

        try:
            result = self._cloudinary.destroy(public_id=public_id)
        except CloudinaryError as exc:
            logger.error("Cloudinary destroy failed", extra={"public_id": public_id})
            raise ProviderError(
                message="Failed to delete image",
                upstream_message=str(exc),
                error_code=ERROR_CODE_DELETE_FAILED,
                details={"public_id": public_id},
            ) from exc
        except Exception as exc:
            logger.exception("Unexpected error deleting asset")
            raise ProviderError(
                message="Failed to delete image",
                upstream_message=str(exc),
                error_code=ERROR_CODE_DELETE_FAILED,
                details={"public_id": public_id},
            ) from exc

        status = str(result.get("result", ""))
        logger.info("Asset delete completed", extra={"public_id": public_id, "result": status})
        return status

    def delete_assets(self, public_ids: list[str]) -> ProviderResult:
        """Delete one batch of assets."""
        logger.debug("Deleting asset batch", extra={"count": len(public_ids)})

        try:
            return self._cloudinary.delete_resources(public_ids=public_ids)
        except CloudinaryError as exc:
            logger.error("Cloudinary delete_resources failed", extra={"count": len(public_ids)})
            raise ProviderError(
                message="Failed to delete image batch",
                upstream_message=str(exc),
                error_code=ERROR_CODE_DELETE_FAILED,
                details={"count": len(public_ids)},
            ) from exc
        except Exception as exc:
            logger.exception("Unexpected error deleting asset batch")
            raise ProviderError(
                message="Failed to delete image batch",
                upstream_message=str(exc),
                error_code=ERROR_CODE_DELETE_FAILED,
                details={"count": len(public_ids)},
            ) from exc

    def ping(self) -> ProviderResult:
        try:
            return self._cloudinary.ping()
        except Exception as exc:
            logger.error("Cloudinary ping failed", extra={"error": str(exc)})
            raise ProviderError(
                message="Cloudinary connection failed",
                upstream_message=str(exc),
                error_code=ERROR_CODE_PING_FAILED,
            ) from exc

    def usage(self) -> ProviderResult:
        try:
            return self._cloudinary.usage()
        except Exception as exc:
            raise ProviderError(
                message="Usage data not available",
                upstream_message=str(exc),
                error_code=ERROR_CODE_USAGE_UNAVAILABLE,
            ) from exc

    def root_folders(self) -> ProviderResult:
        try:
            return self._cloudinary.root_folders()
        except Exception as exc:
            logger.error("Cloudinary root_folders failed", extra={"error": str(exc)})
            raise ProviderError(
                message="Failed to fetch folders",
                upstream_message=str(exc),
                error_code=ERROR_CODE_FOLDERS_FAILED,
            ) from exc

    def upload(
        self,
        *,
        image: str,
        folder: str,
        filename: str | None = None,
    ) -> ProviderResult:
        """Upload an image into ``folder``, optionally under a fixed name."""
        options: dict[str, Any] = {"folder": folder, "resource_type": "auto"}

        if filename:
            options["public_id"] = filename

        logger.debug("Uploading asset", extra={"folder": folder, "filename": filename})

        try:
            result = self._cloudinary.upload(file=image, options=options)
        except Exception as exc:
            logger.exception("Cloudinary upload failed")
            raise ProviderError(
                message="Failed to upload image",
                upstream_message=str(exc),
                error_code=ERROR_CODE_UPLOAD_FAILED,
                details={"folder": folder},
            ) from exc

        logger.info("Asset uploaded", extra={"public_id": result.get("public_id")})
        return result
