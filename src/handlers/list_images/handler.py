"""
Lambda handler responsible for searching and paging folder images.
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
from core.utils.validators import sanitize_validation_errors, validate_request

from .models import ListImagesRequest
from .service import ListImagesService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle requests to list images.

    Supports:
    - Folder scoping and substring search on file name / public id
    - Sorting by creation time, public id, size or file name
    - Cursor continuation through ``cursor`` (``page`` is echoed only)

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    logger.info(
        "Received image list request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "query_params": event.get("queryStringParameters"),
            "request_id": getattr(context, "aws_request_id", None),
            "function_name": getattr(context, "function_name", None),
            "remaining_time_ms": context.get_remaining_time_in_millis()
            if hasattr(context, "get_remaining_time_in_millis")
            else None,
        },
    )

    params = dict(event.get("queryStringParameters") or {})
    params.setdefault("folder", os.getenv(ENV_DEFAULT_FOLDER, DEFAULT_FOLDER))

    try:
        request = validate_request(ListImagesRequest, params)
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
        service = ListImagesService(get_media_storage())
        page = service.list_images(
            folder=request.folder,
            search=request.search,
            page=request.page,
            limit=request.limit,
            sort_by=request.sort_by,
            sort_order=request.order,
            cursor=request.cursor,
        )
    except ProviderConfigError as exc:
        logger.error("Provider is not configured", extra={"error": exc.message})
        return ResponseBuilder.internal_error(
            "Failed to fetch images",
            error=exc.message,
            error_code=exc.error_code,
        )
    except ProviderError as exc:
        logger.exception(
            "Error fetching images",
            extra={"folder": request.folder, "search": request.search},
        )
        return ResponseBuilder.internal_error(
            "Failed to fetch images",
            error=exc.upstream_message,
            error_code=exc.error_code,
        )

    return ResponseBuilder.ok(page.model_dump())
