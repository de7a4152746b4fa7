"""
Fixtures for end-to-end tests against a running proxy.

Set ASSET_API_BASE_URL (e.g. http://localhost:5000/api) to enable them.
Tests that write to the provider also need E2E_ALLOW_WRITES=1.
"""

import logging
import os

import pytest

from client.asset_service_client import AssetServiceClient

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)

E2E_FOLDER = "e2e-tests"

SAMPLE_PNG_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="
)


@pytest.fixture(scope="session")
def api_base_url() -> str:
    base_url = os.getenv("ASSET_API_BASE_URL")
    if not base_url:
        pytest.skip("ASSET_API_BASE_URL is not set")
    return base_url.rstrip("/")


@pytest.fixture(scope="session")
def api_client(api_base_url) -> AssetServiceClient:
    client = AssetServiceClient(base_url=api_base_url)

    health = client.test_connection()
    if "success" not in health:
        logger.warning("Proxy did not answer the health check: %s", health)
        pytest.skip(f"Proxy is not reachable at {api_base_url}")

    return client


@pytest.fixture
def allow_writes() -> None:
    if os.getenv("E2E_ALLOW_WRITES") != "1":
        pytest.skip("E2E_ALLOW_WRITES is not enabled")


@pytest.fixture
def upload_payload() -> dict:
    return {
        "image": f"data:image/png;base64,{SAMPLE_PNG_BASE64}",
        "folder": E2E_FOLDER,
    }


@pytest.fixture
def e2e_folder() -> str:
    return E2E_FOLDER
