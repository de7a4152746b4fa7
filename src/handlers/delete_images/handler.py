"""
Lambda handler responsible for deleting many images in one request.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from core.infrastructure.provider import get_media_storage
from core.models.errors import ProviderConfigError
from core.utils.constants import ERROR_CODE_INVALID_PUBLIC_IDS
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import parse_json_body, sanitize_validation_errors, validate_request

from .models import DeleteImagesDetails, DeleteImagesRequest, DeleteImagesResponse
from .service import BatchDeleteService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle batch deletion requests.

    Identifiers are deleted in sequential batches of 100. A failed batch is
    recorded and counted as failed; later batches still run. The response is
    200 whenever the request was valid, with ``success`` telling whether any
    image was deleted.

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    logger.info(
        "Received batch delete request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": getattr(context, "aws_request_id", None),
            "function_name": getattr(context, "function_name", None),
            "remaining_time_ms": context.get_remaining_time_in_millis()
            if hasattr(context, "get_remaining_time_in_millis")
            else None,
        },
    )

    body = parse_json_body(event)

    try:
        request = validate_request(DeleteImagesRequest, body)
    except ValidationError as exc:
        logger.error(
            "Request validation failed",
            extra={"errors": exc.errors()},
        )
        return ResponseBuilder.bad_request(
            "Public IDs array is required and must not be empty",
            error=ERROR_CODE_INVALID_PUBLIC_IDS,
            details={"errors": sanitize_validation_errors(exc.errors())},
        )

    try:
        service = BatchDeleteService(get_media_storage())
    except ProviderConfigError as exc:
        logger.error("Provider is not configured", extra={"error": exc.message})
        return ResponseBuilder.internal_error(
            "Failed to delete multiple images",
            error=exc.message,
            error_code=exc.error_code,
        )

    summary = service.delete_images(request.public_ids)

    metrics.add_metric(name="AssetsDeleted", unit=MetricUnit.Count, value=summary.successful)
    metrics.add_metric(name="AssetDeleteFailures", unit=MetricUnit.Count, value=summary.failed)

    response = DeleteImagesResponse(
        success=summary.success,
        message=summary.message,
        details=DeleteImagesDetails(
            total_requested=summary.total_requested,
            successful=summary.successful,
            failed=summary.failed,
            results=summary.results,
        ),
    )

    return ResponseBuilder.ok(response.model_dump())
