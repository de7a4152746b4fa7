"""
Catch-all handler for routes that match no other function.
"""

from typing import Any

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.utils.constants import AVAILABLE_ROUTES, ERROR_CODE_RESOURCE_NOT_FOUND
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder

logger = Logger(UTC=True)


@api_gateway_handler
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """Return 404 listing the routes this service does serve."""
    path = event.get("path") or "/"

    logger.warning(
        "Route not found",
        extra={"http_method": event.get("httpMethod"), "path": path},
    )

    return ResponseBuilder.not_found(
        f"Route {path} not found",
        error=ERROR_CODE_RESOURCE_NOT_FOUND,
        extra={"availableRoutes": list(AVAILABLE_ROUTES)},
    )
