"""
Lambda handler responsible for deleting a single image.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from core.infrastructure.provider import get_media_storage
from core.models.errors import ProviderConfigError, ProviderError
from core.utils.constants import ERROR_CODE_INVALID_PUBLIC_ID_TYPE, ERROR_CODE_MISSING_PUBLIC_ID
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import first_error_type, parse_json_body, validate_request

from .models import DeleteImageRequest
from .service import DeleteService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle image deletion requests.

    This function:
    - Reads ``public_id`` from the JSON body
    - Rejects a missing/empty or non-string id before any provider call
    - Delegates deletion to the service layer
    - Translates provider errors into HTTP responses

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    logger.info(
        "Received image delete request",
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
        request = validate_request(DeleteImageRequest, body)
    except ValidationError as exc:
        logger.error(
            "Request validation failed",
            extra={"errors": exc.errors()},
        )
        type_error = first_error_type(exc.errors(), "public_id") == "string_type"
        if body.get("public_id") and type_error:
            return ResponseBuilder.bad_request(
                "Public ID must be a string",
                error=ERROR_CODE_INVALID_PUBLIC_ID_TYPE,
            )
        return ResponseBuilder.bad_request(
            "Public ID is required",
            error=ERROR_CODE_MISSING_PUBLIC_ID,
        )

    try:
        service = DeleteService(get_media_storage())
        response = service.delete_image(request.public_id)
    except ProviderConfigError as exc:
        logger.error("Provider is not configured", extra={"error": exc.message})
        return ResponseBuilder.internal_error(
            "Failed to delete image",
            error=exc.message,
            error_code=exc.error_code,
            extra={"public_id": request.public_id},
        )
    except ProviderError as exc:
        logger.exception(
            "Deletion failed",
            extra={"public_id": request.public_id},
        )
        return ResponseBuilder.internal_error(
            "Failed to delete image",
            error=exc.upstream_message,
            error_code=exc.error_code,
            extra={"public_id": request.public_id},
        )

    return ResponseBuilder.ok(response.model_dump())
