"""
Lambda handler responsible for uploading an image to the provider.
"""

import os
from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from core.infrastructure.provider import get_media_storage
from core.models.errors import ProviderConfigError, ProviderError
from core.utils.constants import DEFAULT_FOLDER, ENV_DEFAULT_FOLDER, ERROR_CODE_MISSING_IMAGE_DATA
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import parse_json_body, sanitize_validation_errors, validate_request

from .models import ImageUploadRequest, ImageUploadResponse
from .service import UploadService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle image upload requests.

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    logger.info(
        "Received image upload request",
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

    if not body.get("image"):
        logger.error("Upload request without image data")
        return ResponseBuilder.bad_request(
            "Image data is required",
            error=ERROR_CODE_MISSING_IMAGE_DATA,
        )

    body.setdefault("folder", os.getenv(ENV_DEFAULT_FOLDER, DEFAULT_FOLDER))

    try:
        request = validate_request(ImageUploadRequest, body)
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
        service = UploadService(get_media_storage())
        uploaded = service.upload_image(
            image=request.image,
            folder=request.folder,
            filename=request.filename,
        )
    except ProviderConfigError as exc:
        logger.error("Provider is not configured", extra={"error": exc.message})
        return ResponseBuilder.internal_error(
            "Failed to upload image",
            error=exc.message,
            error_code=exc.error_code,
        )
    except ProviderError as exc:
        logger.exception(
            "Upload failed",
            extra={"folder": request.folder},
        )
        return ResponseBuilder.internal_error(
            "Failed to upload image",
            error=exc.upstream_message,
            error_code=exc.error_code,
        )

    response = ImageUploadResponse(
        message="Image uploaded successfully",
        result=uploaded,
    )

    return ResponseBuilder.ok(response.model_dump())
