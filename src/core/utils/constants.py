"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Validation Errors
ERROR_CODE_MISSING_PUBLIC_ID = "MISSING_PUBLIC_ID"
ERROR_CODE_INVALID_PUBLIC_ID_TYPE = "INVALID_PUBLIC_ID_TYPE"
ERROR_CODE_INVALID_PUBLIC_IDS = "INVALID_PUBLIC_IDS"
ERROR_CODE_MISSING_IMAGE_DATA = "MISSING_IMAGE_DATA"
ERROR_CODE_DELETION_NOT_SUPPORTED = "DELETION_NOT_SUPPORTED"

# Not Found Errors
ERROR_CODE_RESOURCE_NOT_FOUND = "NOT_FOUND"

# Provider Errors
ERROR_CODE_PROVIDER = "PROVIDER_ERROR"
ERROR_CODE_PROVIDER_CONFIG_MISSING = "PROVIDER_CONFIG_MISSING"
ERROR_CODE_SEARCH_FAILED = "SEARCH_FAILED"
ERROR_CODE_DELETE_FAILED = "DELETE_FAILED"
ERROR_CODE_UPLOAD_FAILED = "UPLOAD_FAILED"
ERROR_CODE_FOLDERS_FAILED = "FOLDERS_FAILED"
ERROR_CODE_PING_FAILED = "PING_FAILED"
ERROR_CODE_USAGE_UNAVAILABLE = "USAGE_UNAVAILABLE"

# Internal / Unexpected
ERROR_CODE_INTERNAL_ERROR = "INTERNAL_ERROR"


# ============================================================================
# Asset Search
# ============================================================================

DEFAULT_FOLDER = "business-images"
FOLDER_PATTERN = r"^[A-Za-z0-9_\-/]+$"

# Provider-side ceiling for a single search call
MAX_SEARCH_RESULTS = 1000

DEFAULT_LIMIT = 20
MIN_LIMIT = 1
DEFAULT_PAGE = 1

# Characters with meaning in the provider's search grammar
SEARCH_RESERVED_CHARACTERS: Final[frozenset[str]] = frozenset('!(){}[]*^~?:\\=&><"/+-|')


# ============================================================================
# Statistics
# ============================================================================

STATS_SAMPLE_SIZE = 1000
LARGEST_FILES_COUNT = 10
RECENT_UPLOADS_DAYS = 7
UNKNOWN_FORMAT = "UNKNOWN"


# ============================================================================
# Batch Deletion
# ============================================================================

DELETE_BATCH_SIZE = 100
DELETED_STATUS = "deleted"


# ============================================================================
# Cleanup Analysis
# ============================================================================

DEFAULT_OLDER_THAN_DAYS = 30
CLEANUP_SAMPLE_SIZE = 10


# ============================================================================
# Upload
# ============================================================================

FILENAME_PATTERN = r"^[A-Za-z0-9_\-.]+$"
DATA_URI_PREFIX = "data:"


# ============================================================================
# Client-side File Validation
# ============================================================================

CLIENT_MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB in bytes

CLIENT_ALLOWED_MIME_TYPES: Final[tuple[str, ...]] = (
    "image/jpeg",
    "image/jpg",
    "image/png",
    "image/gif",
    "image/webp",
)

DELIVERY_BASE_URL = "https://res.cloudinary.com/{cloud_name}/image/upload"
UPLOAD_API_URL = "https://api.cloudinary.com/v1_1/{cloud_name}/image/upload"
DEFAULT_API_BASE_URL = "http://localhost:5000/api"
CLIENT_TIMEOUT_SECONDS = 30


# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,POST,PUT,DELETE,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization"
DEFAULT_CONTENT_TYPE = "application/json"

AVAILABLE_ROUTES: Final[tuple[str, ...]] = (
    "GET /health",
    "GET /cloudinary/health",
    "GET /cloudinary/images",
    "GET /cloudinary/stats",
    "DELETE /cloudinary/delete",
    "POST /cloudinary/delete-multiple",
    "POST /cloudinary/upload",
    "GET /cloudinary/folders",
    "POST /cloudinary/cleanup-unused",
)

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"
ENV_ENVIRONMENT = "ENVIRONMENT"
ENV_CORS_ORIGIN = "CORS_ORIGIN"
ENV_DEFAULT_FOLDER = "DEFAULT_ASSET_FOLDER"
ENV_CLOUDINARY_URL = "CLOUDINARY_URL"
ENV_CLOUDINARY_CLOUD_NAME = "CLOUDINARY_CLOUD_NAME"
ENV_CLOUDINARY_API_KEY = "CLOUDINARY_API_KEY"
ENV_CLOUDINARY_API_SECRET = "CLOUDINARY_API_SECRET"
ENV_CLOUDINARY_SECRET_NAME = "CLOUDINARY_SECRET_NAME"
ENV_CLOUDINARY_UPLOAD_PRESET = "CLOUDINARY_UPLOAD_PRESET"
ENV_ASSET_API_BASE_URL = "ASSET_API_BASE_URL"

PRODUCTION_ENVIRONMENT = "production"
DEFAULT_ENVIRONMENT = "development"

# ============================================================================
# Helper Functions
# ============================================================================


def format_file_size(size_bytes: int) -> str:
    """Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted file size string
    """
    size: float = float(size_bytes)

    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024.0:
            return f"{size:.1f} {unit}"
        size /= 1024.0

    return f"{size:.1f} TB"


def format_megabytes(size_bytes: int) -> str:
    """Format a byte count as megabytes with two decimals (e.g. ``"10.00MB"``)."""
    return f"{size_bytes / 1024 / 1024:.2f}MB"
