"""Pydantic models for image upload request/response."""

import base64
import binascii

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.utils.constants import (
    DATA_URI_PREFIX,
    DEFAULT_FOLDER,
    FILENAME_PATTERN,
    FOLDER_PATTERN,
)

logger = Logger(UTC=True)


class ImageUploadRequest(BaseModel):
    """Validation model for image upload request.

    ``image`` is anything the provider's upload API accepts: a base64 data
    URI, a remote http(s) URL, or a provider-fetchable path.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    image: str = Field(..., min_length=1, description="Data URI or URL of the image")
    folder: str = Field(
        default=DEFAULT_FOLDER,
        min_length=1,
        max_length=255,
        pattern=FOLDER_PATTERN,
        description="Destination folder",
    )
    filename: str | None = Field(
        None,
        min_length=1,
        max_length=255,
        pattern=FILENAME_PATTERN,
        description="Fixed public id inside the folder",
    )

    @field_validator("image")
    @classmethod
    def validate_image(cls, value: str) -> str:
        """
        Validate data URIs:
        - must carry a base64 payload
        - payload must decode to a non-empty file
        """
        if not value.startswith(DATA_URI_PREFIX):
            return value

        header, _, payload = value.partition(",")
        if not header.endswith(";base64") or not payload:
            raise ValueError("Image data URI must be base64 encoded")

        try:
            file_data = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as e:
            logger.error(f"Image validation error: Invalid base64 - {e}")
            raise ValueError("Invalid base64 encoded image") from e

        if not file_data:
            raise ValueError("Decoded image is empty")

        return value


class UploadedImage(BaseModel):
    """Subset of the provider upload result returned to callers."""

    public_id: str
    secure_url: str | None = None
    width: int | None = None
    height: int | None = None
    bytes: int | None = None
    format: str | None = None
    created_at: str | None = None


class ImageUploadResponse(BaseModel):
    """Response model for successful image upload."""

    message: str = Field(..., description="Success message")
    result: UploadedImage = Field(..., description="Uploaded asset")
