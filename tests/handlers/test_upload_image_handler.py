import json

import pytest
from cloudinary.exceptions import Error as CloudinaryError

from handlers.upload_image.handler import handler

MODULE = "handlers.upload_image.handler"


def _event(body):
    return {"httpMethod": "POST", "path": "/cloudinary/upload", "body": json.dumps(body)}


def _body(response):
    return json.loads(response["body"])


@pytest.fixture(autouse=True)
def storage(use_storage):
    return use_storage(MODULE)


class TestUploadImageHandler:
    def test_upload_data_uri(self, lambda_context, fake_adapter, sample_image_data_uri) -> None:
        response = handler(
            _event({"image": sample_image_data_uri, "folder": "categories", "filename": "icon"}),
            lambda_context,
        )
        body = _body(response)

        assert response["statusCode"] == 200
        assert body["success"] is True
        assert body["message"] == "Image uploaded successfully"
        assert body["result"]["public_id"] == "categories/icon"
        assert body["result"]["bytes"] == 68

        upload = fake_adapter.calls_for("upload")[0]
        assert upload["file"] == sample_image_data_uri
        assert upload["options"] == {
            "folder": "categories",
            "resource_type": "auto",
            "public_id": "icon",
        }

    def test_default_folder(self, lambda_context, fake_adapter, monkeypatch) -> None:
        monkeypatch.delenv("DEFAULT_ASSET_FOLDER", raising=False)

        handler(_event({"image": "https://example.com/logo.png"}), lambda_context)

        options = fake_adapter.calls_for("upload")[0]["options"]
        assert options == {"folder": "business-images", "resource_type": "auto"}

    @pytest.mark.parametrize("payload", [{}, {"image": ""}, {"image": None}])
    def test_missing_image(self, lambda_context, fake_adapter, payload) -> None:
        response = handler(_event(payload), lambda_context)
        body = _body(response)

        assert response["statusCode"] == 400
        assert body["error"] == "MISSING_IMAGE_DATA"
        assert body["message"] == "Image data is required"
        assert fake_adapter.calls_for("upload") == []

    @pytest.mark.parametrize(
        "payload",
        [
            {"image": "data:image/png;base64,@@@not-base64@@@"},
            {"image": "data:image/png,rawbytes"},
            {"image": "data:image/png;base64,"},
            {"image": "https://example.com/a.png", "folder": "../etc"},
            {"image": "https://example.com/a.png", "filename": "a/b"},
        ],
    )
    def test_invalid_request(self, lambda_context, fake_adapter, payload) -> None:
        response = handler(_event(payload), lambda_context)

        assert response["statusCode"] == 400
        assert _body(response)["message"] == "Invalid request params"
        assert fake_adapter.calls_for("upload") == []

    def test_provider_failure(self, lambda_context, fake_adapter, sample_image_data_uri) -> None:
        fake_adapter.failures["upload"] = CloudinaryError("Invalid image file")

        response = handler(_event({"image": sample_image_data_uri}), lambda_context)
        body = _body(response)

        assert response["statusCode"] == 500
        assert body["message"] == "Failed to upload image"
        assert body["error"] == "Invalid image file"
        assert body["error_code"] == "UPLOAD_FAILED"
