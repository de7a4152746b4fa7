"""
Liveness check. Does not touch the provider.
"""

import os
from typing import Any

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.utils.constants import DEFAULT_ENVIRONMENT, ENV_ENVIRONMENT
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.time import utc_now_iso

logger = Logger(UTC=True)


@api_gateway_handler
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    logger.debug("Health check", extra={"path": event.get("path")})

    return ResponseBuilder.ok(
        {
            "message": "Backend server is running",
            "timestamp": utc_now_iso(),
            "environment": os.getenv(ENV_ENVIRONMENT, DEFAULT_ENVIRONMENT),
        }
    )
