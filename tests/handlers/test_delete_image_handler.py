import json

import pytest
from cloudinary.exceptions import Error as CloudinaryError

from handlers.delete_image.handler import handler

MODULE = "handlers.delete_image.handler"


def _event(body):
    return {
        "httpMethod": "DELETE",
        "path": "/cloudinary/delete",
        "body": body if isinstance(body, str) or body is None else json.dumps(body),
    }


def _body(response):
    return json.loads(response["body"])


@pytest.fixture(autouse=True)
def storage(use_storage):
    return use_storage(MODULE)


class TestDeleteImageHandler:
    def test_deleted(self, lambda_context, fake_adapter) -> None:
        response = handler(_event({"public_id": "business-images/logo_1"}), lambda_context)
        body = _body(response)

        assert response["statusCode"] == 200
        assert body == {
            "success": True,
            "message": "Image deleted successfully",
            "result": "ok",
            "public_id": "business-images/logo_1",
        }
        assert fake_adapter.calls_for("destroy") == [{"public_id": "business-images/logo_1"}]

    def test_not_found_counts_as_success(self, lambda_context, fake_adapter) -> None:
        fake_adapter.destroy_result = "not found"

        response = handler(_event({"public_id": "business-images/gone"}), lambda_context)
        body = _body(response)

        assert response["statusCode"] == 200
        assert body["success"] is True
        assert body["result"] == "not found"
        assert body["message"] == "Image not found (may already be deleted)"

    def test_other_provider_status(self, lambda_context, fake_adapter) -> None:
        fake_adapter.destroy_result = "error"

        body = _body(handler(_event({"public_id": "business-images/x"}), lambda_context))

        assert body["success"] is False
        assert body["message"] == "Failed to delete image"

    @pytest.mark.parametrize("payload", [{}, {"public_id": ""}, {"public_id": None}, None])
    def test_missing_public_id(self, lambda_context, fake_adapter, payload) -> None:
        response = handler(_event(payload), lambda_context)
        body = _body(response)

        assert response["statusCode"] == 400
        assert body["error"] == "MISSING_PUBLIC_ID"
        assert body["message"] == "Public ID is required"
        assert fake_adapter.calls_for("destroy") == []

    @pytest.mark.parametrize("public_id", [123, ["a"], {"id": "a"}])
    def test_non_string_public_id(self, lambda_context, fake_adapter, public_id) -> None:
        response = handler(_event({"public_id": public_id}), lambda_context)
        body = _body(response)

        assert response["statusCode"] == 400
        assert body["error"] == "INVALID_PUBLIC_ID_TYPE"
        assert body["message"] == "Public ID must be a string"
        assert fake_adapter.calls_for("destroy") == []

    def test_invalid_json(self, lambda_context, fake_adapter) -> None:
        response = handler(_event("{not json"), lambda_context)

        assert response["statusCode"] == 400
        assert _body(response)["message"] == "Invalid JSON body"

    def test_provider_failure(self, lambda_context, fake_adapter) -> None:
        fake_adapter.failures["destroy"] = CloudinaryError("Resource not found")

        response = handler(_event({"public_id": "business-images/x"}), lambda_context)
        body = _body(response)

        assert response["statusCode"] == 500
        assert body["message"] == "Failed to delete image"
        assert body["error"] == "Resource not found"
        assert body["public_id"] == "business-images/x"
