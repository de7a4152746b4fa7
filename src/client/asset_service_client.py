"""
HTTP client for the media asset proxy.

Every public method returns a plain dict and never raises: failures are
normalised to ``{"success": False, "error": <message>}`` so UI code can
branch on ``success`` alone.
"""

import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import requests
from aws_lambda_powertools import Logger

from client.file_validation import LocalImageFile, validate_image
from client.sequencing import RequestSequencer
from client.urls import generate_optimized_url, generate_url, get_transformed_url
from core.utils.constants import (
    CLIENT_TIMEOUT_SECONDS,
    DEFAULT_API_BASE_URL,
    DEFAULT_FOLDER,
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    ENV_ASSET_API_BASE_URL,
    ENV_CLOUDINARY_CLOUD_NAME,
    ENV_CLOUDINARY_UPLOAD_PRESET,
    UPLOAD_API_URL,
)

logger = Logger(service="asset-client")

JsonDict = dict[str, Any]


class AssetServiceClient:
    """Client for the proxy endpoints plus direct preset uploads."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        cloud_name: str | None = None,
        upload_preset: str | None = None,
        *,
        session: requests.Session | None = None,
        timeout: float = CLIENT_TIMEOUT_SECONDS,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: Proxy base URL, e.g. ``http://localhost:5000/api``
            cloud_name: Provider cloud name, needed for uploads and URLs
            upload_preset: Unsigned upload preset, needed for uploads
            session: Optional pre-configured session
            timeout: Per-request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.cloud_name = cloud_name
        self.upload_preset = upload_preset
        self.timeout = timeout
        self.session = session or requests.Session()
        self.sequencer = RequestSequencer()

    @classmethod
    def from_env(cls, **kwargs: Any) -> "AssetServiceClient":
        """Build a client from ``ASSET_API_BASE_URL`` and the Cloudinary variables."""
        return cls(
            base_url=os.getenv(ENV_ASSET_API_BASE_URL, DEFAULT_API_BASE_URL),
            cloud_name=os.getenv(ENV_CLOUDINARY_CLOUD_NAME),
            upload_preset=os.getenv(ENV_CLOUDINARY_UPLOAD_PRESET),
            **kwargs,
        )

    @property
    def is_upload_configured(self) -> bool:
        return bool(self.cloud_name and self.upload_preset)

    def _request(
        self,
        method: str,
        url: str,
        *,
        failure: str,
        params: dict[str, Any] | None = None,
        json: JsonDict | None = None,
        data: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
        check_status: bool = True,
    ) -> JsonDict:
        """
        Send one request and decode its JSON body.

        Args:
            method: HTTP method
            url: Absolute URL
            failure: Context prefix for error messages
            check_status: When False, non-2xx bodies are returned as-is

        Returns:
            Decoded body, or ``{"success": False, "error": ...}``
        """
        try:
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json,
                data=data,
                files=files,
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout:
            logger.warning(f"{failure}: request timeout", extra={"url": url})
            return {"success": False, "error": f"{failure}: request timeout"}
        except requests.exceptions.RequestException as exc:
            logger.warning(f"{failure}: {exc}", extra={"url": url})
            return {"success": False, "error": f"{failure}: {exc}"}

        if check_status and not response.ok:
            message = f"{failure}: {self._error_detail(response)}"
            logger.warning(message, extra={"url": url, "status_code": response.status_code})
            return {"success": False, "error": message}

        try:
            body = response.json()
        except ValueError:
            return {"success": False, "error": f"{failure}: invalid JSON response"}

        if not isinstance(body, dict):
            return {"success": False, "error": f"{failure}: unexpected response shape"}

        return body

    @staticmethod
    def _error_detail(response: requests.Response) -> str:
        """Prefer the proxy's own message over the bare status text."""
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            detail = body.get("message") or body.get("error")
            # Provider upload errors nest the text: {"error": {"message": ...}}
            if isinstance(detail, dict):
                detail = detail.get("message")
            if detail:
                return str(detail)

        return response.reason or f"HTTP {response.status_code}"

    # ------------------------------------------------------------------
    # Proxy endpoints
    # ------------------------------------------------------------------

    def fetch_images(
        self,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
        search: str = "",
        folder: str = DEFAULT_FOLDER,
        *,
        cursor: str | None = None,
        sort_by: str | None = None,
        order: str | None = None,
    ) -> JsonDict:
        """Fetch one page of images; pass the previous ``next_cursor`` to advance."""
        params: dict[str, Any] = {
            "page": page,
            "limit": limit,
            "search": search,
            "folder": folder,
        }
        if cursor:
            params["cursor"] = cursor
        if sort_by:
            params["sort_by"] = sort_by
        if order:
            params["order"] = order

        result = self._request(
            "GET",
            f"{self.base_url}/cloudinary/images",
            failure="Failed to fetch images",
            params=params,
        )

        if not result.get("success", True) and "resources" not in result:
            result.setdefault("resources", [])
            result.setdefault("total_count", 0)

        return result

    def fetch_latest_images(self, *args: Any, **kwargs: Any) -> JsonDict:
        """
        ``fetch_images`` under last-request-wins sequencing.

        When another call was issued after this one, its result is discarded
        and a stale marker is returned instead.
        """
        token = self.sequencer.issue()
        result = self.fetch_images(*args, **kwargs)

        if not self.sequencer.is_latest(token):
            logger.debug("Discarding superseded image response", extra={"token": token})
            return {
                "success": False,
                "stale": True,
                "error": "Superseded by a newer request",
            }

        return result

    def fetch_storage_stats(self, folder: str = DEFAULT_FOLDER) -> JsonDict:
        return self._request(
            "GET",
            f"{self.base_url}/cloudinary/stats",
            failure="Failed to fetch stats",
            params={"folder": folder},
        )

    def delete_image(self, public_id: str) -> JsonDict:
        if not public_id:
            return {"success": False, "error": "Public ID is required for deletion"}

        return self._request(
            "DELETE",
            f"{self.base_url}/cloudinary/delete",
            failure="Delete failed",
            json={"public_id": public_id},
        )

    def delete_multiple_images(self, public_ids: Sequence[str]) -> JsonDict:
        if isinstance(public_ids, str) or not public_ids:
            return {"success": False, "error": "Array of public IDs is required for deletion"}

        return self._request(
            "POST",
            f"{self.base_url}/cloudinary/delete-multiple",
            failure="Bulk delete failed",
            json={"public_ids": list(public_ids)},
        )

    def test_connection(self) -> JsonDict:
        """Check the proxy's provider health endpoint.

        The health endpoint answers 500 with a JSON body when the provider is
        unreachable; that body is returned unchanged.
        """
        return self._request(
            "GET",
            f"{self.base_url}/cloudinary/health",
            failure="Connection test failed",
            check_status=False,
        )

    # ------------------------------------------------------------------
    # Direct provider upload
    # ------------------------------------------------------------------

    def upload_image(
        self,
        file: LocalImageFile | str | Path,
        folder: str = DEFAULT_FOLDER,
    ) -> JsonDict:
        """
        Upload straight to the provider using the unsigned upload preset.

        The file is validated locally first.

        Returns:
            ``{"success": True, "data": <provider result>}`` or an error dict
        """
        if not self.is_upload_configured:
            return {
                "success": False,
                "error": (
                    "Cloudinary configuration is invalid. "
                    "Please check your environment variables."
                ),
            }

        try:
            image = file if isinstance(file, LocalImageFile) else LocalImageFile.from_path(file)
        except OSError as exc:
            return {"success": False, "error": f"Upload failed: {exc}"}

        validation = validate_image(image)
        if not validation["valid"]:
            return {"success": False, "error": validation["error"]}

        if image.path is None:
            return {"success": False, "error": "Upload failed: file has no path"}

        try:
            content = image.path.read_bytes()
        except OSError as exc:
            return {"success": False, "error": f"Upload failed: {exc}"}

        result = self._request(
            "POST",
            UPLOAD_API_URL.format(cloud_name=self.cloud_name),
            failure="Upload failed",
            data={"upload_preset": self.upload_preset, "folder": folder},
            files={"file": (image.filename, content, image.content_type)},
        )

        if result.get("success") is False:
            return result

        logger.info("Image uploaded", extra={"public_id": result.get("public_id")})
        return {"success": True, "data": result}

    # ------------------------------------------------------------------
    # Local helpers
    # ------------------------------------------------------------------

    @staticmethod
    def validate_image(file: LocalImageFile | str | Path | None, **options: Any) -> JsonDict:
        return validate_image(file, **options)

    def generate_url(self, public_id: str | None, options: dict[str, Any] | None = None) -> str:
        return generate_url(public_id, self.cloud_name, options)

    def generate_optimized_url(
        self,
        public_id: str | None,
        options: dict[str, Any] | None = None,
    ) -> str:
        """Delivery URL with quality and format defaulting to ``auto``."""
        return generate_optimized_url(public_id, self.cloud_name, options)

    def get_transformed_url(self, public_id: str | None, preset: str = "medium") -> str:
        return get_transformed_url(public_id, self.cloud_name, preset)
