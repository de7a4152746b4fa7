"""Custom exception classes for the media asset service."""

from typing import Any

from core.utils.constants import (
    ERROR_CODE_PROVIDER,
    ERROR_CODE_PROVIDER_CONFIG_MISSING,
)


class AssetServiceError(Exception):
    """
    Base exception for all media asset service errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)


class ProviderError(AssetServiceError):
    """Raised when a call to the media-storage provider fails.

    ``upstream_message`` keeps the provider's (or transport's) own message so
    it can be surfaced next to the human-readable ``message``.
    """

    upstream_message: str

    def __init__(
        self,
        *,
        message: str,
        upstream_message: str = "",
        error_code: str = ERROR_CODE_PROVIDER,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.upstream_message = upstream_message or message
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class ProviderConfigError(AssetServiceError):
    """Raised when provider credentials cannot be resolved."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_PROVIDER_CONFIG_MISSING,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
