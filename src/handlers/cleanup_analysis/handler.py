"""
Lambda handler responsible for the dry-run cleanup analysis.
"""

import os
from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from core.infrastructure.provider import get_media_storage
from core.models.errors import ProviderConfigError, ProviderError
from core.utils.constants import (
    DEFAULT_FOLDER,
    ENV_DEFAULT_FOLDER,
    ERROR_CODE_DELETION_NOT_SUPPORTED,
)
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import parse_json_body, sanitize_validation_errors, validate_request

from .models import CleanupRequest
from .service import CleanupAnalysisService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle cleanup analysis requests.

    Only ``dry_run=true`` is accepted: asset usage is not tracked, so there is
    no safe basis for deleting anything.

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    logger.info(
        "Received cleanup analysis request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": getattr(context, "aws_request_id", None),
            "function_name": getattr(context, "function_name", None),
        },
    )

    body = parse_json_body(event)
    body.setdefault("folder", os.getenv(ENV_DEFAULT_FOLDER, DEFAULT_FOLDER))

    try:
        request = validate_request(CleanupRequest, body)
    except ValidationError as exc:
        logger.error(
            "Request validation failed",
            extra={"errors": exc.errors()},
        )
        return ResponseBuilder.bad_request(
            message="Invalid request params",
            details={"errors": sanitize_validation_errors(exc.errors())},
        )

    if not request.dry_run:
        logger.warning("Cleanup deletion requested", extra={"folder": request.folder})
        return ResponseBuilder.bad_request(
            "Actual deletion is not supported; run the analysis with dry_run=true",
            error=ERROR_CODE_DELETION_NOT_SUPPORTED,
        )

    try:
        service = CleanupAnalysisService(get_media_storage())
        analysis = service.analyze(
            folder=request.folder,
            older_than_days=request.older_than_days,
        )
    except ProviderConfigError as exc:
        logger.error("Provider is not configured", extra={"error": exc.message})
        return ResponseBuilder.internal_error(
            "Failed to perform cleanup analysis",
            error=exc.message,
            error_code=exc.error_code,
        )
    except ProviderError as exc:
        logger.exception(
            "Cleanup analysis failed",
            extra={"folder": request.folder},
        )
        return ResponseBuilder.internal_error(
            "Failed to perform cleanup analysis",
            error=exc.upstream_message,
            error_code=exc.error_code,
        )

    return ResponseBuilder.ok(
        {
            "message": "Cleanup analysis completed (dry run)",
            "analysis": analysis.model_dump(),
            "dry_run": True,
        }
    )
