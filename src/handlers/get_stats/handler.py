"""
Lambda handler responsible for folder storage statistics.
"""

import os
from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from core.infrastructure.provider import get_media_storage
from core.models.errors import ProviderConfigError, ProviderError
from core.utils.constants import DEFAULT_FOLDER, ENV_DEFAULT_FOLDER
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.time import utc_now_iso
from core.utils.validators import sanitize_validation_errors, validate_request

from .models import GetStatsRequest, GetStatsResponse
from .service import StatsService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle storage statistics requests.

    Figures are computed over at most the first 1000 assets of the folder;
    ``stats.folder.is_approximate`` reports when the folder holds more.

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    logger.info(
        "Received storage stats request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "query_params": event.get("queryStringParameters"),
            "request_id": getattr(context, "aws_request_id", None),
            "function_name": getattr(context, "function_name", None),
        },
    )

    params = dict(event.get("queryStringParameters") or {})
    params.setdefault("folder", os.getenv(ENV_DEFAULT_FOLDER, DEFAULT_FOLDER))

    try:
        request = validate_request(GetStatsRequest, params)
    except ValidationError as exc:
        logger.error(
            "Request validation failed",
            extra={"errors": exc.errors()},
        )
        return ResponseBuilder.bad_request(
            message="Invalid request params",
            details={"errors": sanitize_validation_errors(exc.errors())},
        )

    try:
        service = StatsService(get_media_storage())
        report = service.get_stats(request.folder)
    except ProviderConfigError as exc:
        logger.error("Provider is not configured", extra={"error": exc.message})
        return ResponseBuilder.internal_error(
            "Failed to fetch storage statistics",
            error=exc.message,
            error_code=exc.error_code,
        )
    except ProviderError as exc:
        logger.exception(
            "Error fetching storage statistics",
            extra={"folder": request.folder},
        )
        return ResponseBuilder.internal_error(
            "Failed to fetch storage statistics",
            error=exc.upstream_message,
            error_code=exc.error_code,
        )

    response = GetStatsResponse(stats=report, timestamp=utc_now_iso())

    return ResponseBuilder.ok(response.model_dump(exclude_none=True))
