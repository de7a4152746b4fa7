"""
Pytest configuration and fixtures for media asset proxy tests.
Provides environment defaults, an in-memory Cloudinary adapter and sample
provider resources.
"""

import os
from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

import pytest
from cloudinary.exceptions import Error as CloudinaryError
from moto import mock_aws

os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "media-asset-proxy")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "MediaAssetProxy")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "1")
os.environ.setdefault("ENVIRONMENT", "test")

from core.infrastructure.cloudinary.cloudinary_media_storage import (  # noqa: E402
    CloudinaryMediaStorage,
)


class FakeCloudinaryAdapter:
    """In-memory stand-in for CloudinaryAdapter.

    Records every call in ``calls``. Set ``failures[<operation>]`` to an
    exception to make that operation raise, and ``failing_batches`` to the
    1-based numbers of ``delete_resources`` calls that should raise.
    """

    cloud_name = "demo"

    def __init__(
        self,
        resources: list[dict[str, Any]] | None = None,
        *,
        total_count: int | None = None,
        next_cursor: str | None = None,
    ) -> None:
        self.resources = list(resources or [])
        self.total_count = total_count
        self.next_cursor = next_cursor
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.failures: dict[str, Exception] = {}

        self.destroy_result = "ok"
        self.delete_statuses: dict[str, str] = {}
        self.failing_batches: set[int] = set()
        self._batch_number = 0

        self.usage_result: dict[str, Any] = {
            "plan": "Free",
            "credits": {"used": 1.5, "limit": 25},
            "bandwidth": {"used": 1024, "limit": 2048},
            "storage": {"used": 4096, "limit": 8192},
        }
        self.folders: list[dict[str, str]] = [
            {"name": "business-images", "path": "business-images"},
            {"name": "categories", "path": "categories"},
        ]

    def _record(self, operation: str, **kwargs: Any) -> None:
        self.calls.append((operation, kwargs))
        if operation in self.failures:
            raise self.failures[operation]

    def calls_for(self, operation: str) -> list[dict[str, Any]]:
        return [kwargs for name, kwargs in self.calls if name == operation]

    def search(
        self,
        *,
        expression: str,
        sort_by: str,
        sort_order: str,
        max_results: int,
        next_cursor: str | None = None,
        aggregate: str | None = None,
    ) -> dict[str, Any]:
        self._record(
            "search",
            expression=expression,
            sort_by=sort_by,
            sort_order=sort_order,
            max_results=max_results,
            next_cursor=next_cursor,
            aggregate=aggregate,
        )

        result: dict[str, Any] = {
            "resources": self.resources[:max_results],
            "total_count": (
                self.total_count if self.total_count is not None else len(self.resources)
            ),
        }
        if self.next_cursor:
            result["next_cursor"] = self.next_cursor
        return result

    def destroy(self, *, public_id: str) -> dict[str, Any]:
        self._record("destroy", public_id=public_id)
        return {"result": self.destroy_result}

    def delete_resources(self, *, public_ids: list[str]) -> dict[str, Any]:
        self._batch_number += 1
        self._record("delete_resources", public_ids=list(public_ids))

        if self._batch_number in self.failing_batches:
            raise CloudinaryError("Rate Limit Exceeded")

        return {
            "deleted": {pid: self.delete_statuses.get(pid, "deleted") for pid in public_ids},
            "partial": False,
        }

    def ping(self) -> dict[str, Any]:
        self._record("ping")
        return {"status": "ok"}

    def usage(self) -> dict[str, Any]:
        self._record("usage")
        return dict(self.usage_result)

    def root_folders(self) -> dict[str, Any]:
        self._record("root_folders")
        return {"folders": list(self.folders), "total_count": len(self.folders)}

    def upload(self, *, file: str, options: dict[str, Any]) -> dict[str, Any]:
        self._record("upload", file=file, options=dict(options))
        folder = options.get("folder", "")
        name = options.get("public_id", "generated_id")
        return {
            "public_id": f"{folder}/{name}" if folder else name,
            "secure_url": f"https://res.cloudinary.com/demo/image/upload/v1/{folder}/{name}.png",
            "width": 1,
            "height": 1,
            "bytes": 68,
            "format": "png",
            "created_at": "2024-01-15T10:00:00Z",
            "resource_type": "image",
        }


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture
def lambda_context():
    return SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )


@pytest.fixture
def sample_resources() -> list[dict[str, Any]]:
    """Raw provider resources as returned by the search API."""
    return [
        {
            "public_id": "business-images/logo_1",
            "secure_url": "https://res.cloudinary.com/demo/image/upload/v1/business-images/logo_1.png",
            "url": "http://res.cloudinary.com/demo/image/upload/v1/business-images/logo_1.png",
            "format": "png",
            "width": 200,
            "height": 100,
            "bytes": 100,
            "created_at": "2024-01-01T10:00:00Z",
            "folder": "business-images",
            "filename": "logo_1",
            "resource_type": "image",
            "type": "upload",
            "version": 1704103200,
            "tags": ["logo"],
            "image_metadata": {"ColorType": "RGB"},
        },
        {
            "public_id": "business-images/banner",
            "secure_url": "https://res.cloudinary.com/demo/image/upload/v1/business-images/banner.png",
            "format": "png",
            "bytes": 300,
            "created_at": "2024-01-02T10:00:00Z",
            "folder": "business-images",
            "filename": "banner",
        },
        {
            "public_id": "business-images/storefront",
            "secure_url": "https://res.cloudinary.com/demo/image/upload/v1/business-images/storefront.jpg",
            "format": "jpg",
            "bytes": 600,
            "created_at": "2024-01-03T10:00:00Z",
            "folder": "business-images",
            "filename": "storefront",
        },
    ]


@pytest.fixture
def fake_adapter(sample_resources) -> FakeCloudinaryAdapter:
    return FakeCloudinaryAdapter(sample_resources)


@pytest.fixture
def media_storage(fake_adapter) -> CloudinaryMediaStorage:
    """Real storage implementation over the in-memory adapter."""
    return CloudinaryMediaStorage(adapter=fake_adapter)


@pytest.fixture
def use_storage(monkeypatch, media_storage) -> Callable[[str], CloudinaryMediaStorage]:
    """
    Point a handler module's ``get_media_storage`` at the test storage.

    Usage:
        use_storage("handlers.list_images.handler")
    """

    def _use(module: str) -> CloudinaryMediaStorage:
        monkeypatch.setattr(f"{module}.get_media_storage", lambda: media_storage)
        return media_storage

    return _use


@pytest.fixture
def sample_image_data_uri() -> str:
    """1x1 PNG as a base64 data URI."""
    png_base64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
    return f"data:image/png;base64,{png_base64}"
