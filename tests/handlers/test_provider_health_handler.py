import json

import pytest
from cloudinary.exceptions import Error as CloudinaryError

from core.models.errors import ProviderConfigError
from handlers.provider_health.handler import handler

MODULE = "handlers.provider_health.handler"
EVENT = {"httpMethod": "GET", "path": "/cloudinary/health"}


@pytest.fixture(autouse=True)
def storage(use_storage):
    return use_storage(MODULE)


class TestProviderHealthHandler:
    def test_healthy(self, lambda_context) -> None:
        response = handler(EVENT, lambda_context)
        body = json.loads(response["body"])

        assert response["statusCode"] == 200
        assert body["success"] is True
        assert body["message"] == "Cloudinary connection is healthy"
        assert body["result"] == {"status": "ok"}

    def test_unreachable(self, lambda_context, fake_adapter) -> None:
        fake_adapter.failures["ping"] = CloudinaryError("Invalid credentials")

        response = handler(EVENT, lambda_context)
        body = json.loads(response["body"])

        assert response["statusCode"] == 500
        assert body["success"] is False
        assert body["message"] == "Cloudinary connection failed"
        assert body["error"] == "Invalid credentials"

    def test_not_configured(self, lambda_context, monkeypatch) -> None:
        def _raise():
            raise ProviderConfigError(message="Media provider credentials are not configured")

        monkeypatch.setattr(f"{MODULE}.get_media_storage", _raise)

        response = handler(EVENT, lambda_context)

        assert response["statusCode"] == 500
        assert json.loads(response["body"])["error_code"] == "PROVIDER_CONFIG_MISSING"
