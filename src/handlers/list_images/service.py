"""
Business logic for searching and paging images.
"""

from aws_lambda_powertools import Logger

from core.filters.cursor_pagination import CursorPageAdapter
from core.filters.search_expression import AssetSearchCompiler
from core.models.pagination import ImagePage
from core.models.search import SearchQuery
from core.repositories.media_repository import MediaStorageRepository

logger = Logger(UTC=True)


class ListImagesService:
    """Application service responsible for listing folder images.

    This service coordinates:
    - Compiling the folder and search term into a provider expression
    - Running one bounded search (forwarding the caller's cursor)
    - Reshaping the provider envelope into a page
    """

    def __init__(self, storage: MediaStorageRepository) -> None:
        """Initialize list service with the shared media storage."""
        self.storage = storage
        self.compiler = AssetSearchCompiler()
        self.pages = CursorPageAdapter()

    def list_images(
        self,
        *,
        folder: str,
        search: str,
        page: int,
        limit: int,
        sort_by: str,
        sort_order: str,
        cursor: str | None = None,
    ) -> ImagePage:
        """List one page of images.

        Without a cursor the search starts from the top of the result set,
        whatever ``page`` says; pass the previous ``next_cursor`` to advance.

        Raises:
            ProviderError: If the provider search fails
        """
        expression = self.compiler.compile(folder, search)

        query = SearchQuery(
            folder=folder,
            term=search,
            sort_by=sort_by,
            sort_order=sort_order,
            max_results=limit,
            cursor=cursor,
        )

        logger.info(
            "Fetching images",
            extra={
                "folder": folder,
                "page": page,
                "limit": limit,
                "search": search,
                "expression": expression,
            },
        )

        result = self.storage.search(query, expression=expression)

        image_page = self.pages.build_page(
            result,
            page=page,
            limit=limit,
            search_term=search,
            folder=folder,
        )

        logger.info(
            "Images listed successfully",
            extra={
                "count": len(image_page.resources),
                "total_count": image_page.total_count,
                "has_more": image_page.has_more,
            },
        )

        return image_page
