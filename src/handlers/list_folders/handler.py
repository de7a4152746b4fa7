"""
Lambda handler responsible for listing top-level provider folders.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.infrastructure.provider import get_media_storage
from core.models.errors import ProviderConfigError, ProviderError
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.time import utc_now_iso

from .service import FoldersService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """Handle folder listing requests."""
    logger.info(
        "Received folder list request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    try:
        folders, total_count = FoldersService(get_media_storage()).list_folders()
    except ProviderConfigError as exc:
        logger.error("Provider is not configured", extra={"error": exc.message})
        return ResponseBuilder.internal_error(
            "Failed to fetch folders",
            error=exc.message,
            error_code=exc.error_code,
        )
    except ProviderError as exc:
        logger.exception("Error fetching folders")
        return ResponseBuilder.internal_error(
            "Failed to fetch folders",
            error=exc.upstream_message,
            error_code=exc.error_code,
        )

    return ResponseBuilder.ok(
        {
            "folders": folders,
            "total_count": total_count,
            "timestamp": utc_now_iso(),
        }
    )
