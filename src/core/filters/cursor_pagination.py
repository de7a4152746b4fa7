"""
Cursor-based pagination utilities.
"""

from collections.abc import Mapping
from typing import Any

from aws_lambda_powertools import Logger

from core.models.asset import ImageAsset
from core.models.pagination import ImagePage

logger = Logger(UTC=True)


class CursorPageAdapter:
    """
    Reshape a provider search envelope into a page-numbered response.

    The provider pages with an opaque ``next_cursor``; callers page with a
    number. The number is echoed back for the caller's bookkeeping, while
    continuation is driven only by the cursor the caller passes back in.

    Typical usage:
    1. Run a search bounded by ``limit`` (forwarding the caller's cursor)
    2. Pass the raw envelope to ``build_page``
    3. Return the page to the caller, who keeps ``next_cursor`` for the next call
    """

    @staticmethod
    def project_resources(
        resources: list[Mapping[str, Any]],
        *,
        limit: int,
    ) -> list[ImageAsset]:
        """
        Convert raw provider resources to assets, keeping at most ``limit``.

        Resources without a ``public_id`` cannot be addressed by any later
        operation and are skipped.
        """
        assets: list[ImageAsset] = []

        for resource in resources[:limit]:
            if not resource.get("public_id"):
                logger.warning("Skipping resource without public_id")
                continue
            assets.append(ImageAsset.from_resource(resource))

        return assets

    @staticmethod
    def build_page(
        result: Mapping[str, Any],
        *,
        page: int,
        limit: int,
        search_term: str,
        folder: str,
    ) -> ImagePage:
        """
        Build an ``ImagePage`` from a raw search result.

        Args:
            result: Provider search envelope (``resources``, ``total_count``,
                ``next_cursor``)
            page: Page number requested by the caller
            limit: Maximum number of resources on the page
            search_term: Term as received from the caller
            folder: Folder the search was scoped to

        Returns:
            The reshaped page. ``has_more`` is true exactly when the provider
            returned a continuation cursor.
        """
        resources = CursorPageAdapter.project_resources(
            list(result.get("resources") or []),
            limit=limit,
        )
        next_cursor = result.get("next_cursor") or None

        return ImagePage(
            resources=resources,
            total_count=int(result.get("total_count") or 0),
            next_cursor=next_cursor,
            has_more=next_cursor is not None,
            page=page,
            limit=limit,
            search_term=search_term,
            folder=folder,
        )
