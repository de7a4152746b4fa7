"""
Lambda handler responsible for checking provider reachability.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.infrastructure.provider import get_media_storage
from core.models.errors import ProviderConfigError, ProviderError
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.time import utc_now_iso

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Ping the media-storage provider.

    Returns 200 with the provider's ping result, or 500 with the upstream
    error when the provider cannot be reached or is not configured.
    """
    logger.info(
        "Received provider health request",
        extra={
            "path": event.get("path"),
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    try:
        result = get_media_storage().ping()
    except ProviderConfigError as exc:
        logger.error("Provider is not configured", extra={"error": exc.message})
        return ResponseBuilder.internal_error(
            "Cloudinary connection failed",
            error=exc.message,
            error_code=exc.error_code,
        )
    except ProviderError as exc:
        return ResponseBuilder.internal_error(
            "Cloudinary connection failed",
            error=exc.upstream_message,
            error_code=exc.error_code,
        )

    return ResponseBuilder.ok(
        {
            "message": "Cloudinary connection is healthy",
            "timestamp": utc_now_iso(),
            "result": result,
        }
    )
