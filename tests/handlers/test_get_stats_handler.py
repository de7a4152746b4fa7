import json

import pytest
from cloudinary.exceptions import Error as CloudinaryError

from handlers.get_stats.handler import handler
from handlers.get_stats.service import StatsService

MODULE = "handlers.get_stats.handler"


def _event(params=None):
    return {"httpMethod": "GET", "path": "/cloudinary/stats", "queryStringParameters": params}


def _body(response):
    return json.loads(response["body"])


@pytest.fixture(autouse=True)
def storage(use_storage):
    return use_storage(MODULE)


class TestGetStatsHandler:
    def test_folder_statistics(self, lambda_context, fake_adapter) -> None:
        response = handler(_event({"folder": "business-images"}), lambda_context)
        body = _body(response)

        assert response["statusCode"] == 200
        assert body["success"] is True
        assert "timestamp" in body

        folder = body["stats"]["folder"]
        assert folder["name"] == "business-images"
        assert folder["total_images"] == 3
        assert folder["total_size"] == 1000
        assert folder["average_size"] == 333
        assert folder["format_breakdown"] == {
            "PNG": {"count": 2, "size": 400},
            "JPG": {"count": 1, "size": 600},
        }
        assert [f["public_id"] for f in folder["largest_files"]] == [
            "business-images/storefront",
            "business-images/banner",
            "business-images/logo_1",
        ]
        assert folder["is_approximate"] is False

        search = fake_adapter.calls_for("search")[0]
        assert search["max_results"] == 1000
        assert search["aggregate"] == "format"

    def test_account_usage_included(self, lambda_context) -> None:
        account = _body(handler(_event(), lambda_context))["stats"]["account"]

        assert account["plan"] == "Free"
        assert account["storage_used"] == 4096
        assert account["bandwidth_limit"] == 2048

    def test_account_usage_unavailable(self, lambda_context, fake_adapter) -> None:
        fake_adapter.failures["usage"] = CloudinaryError("Not allowed on this plan")

        response = handler(_event(), lambda_context)
        body = _body(response)

        assert response["statusCode"] == 200
        assert "account" not in body["stats"]
        assert body["stats"]["folder"]["total_images"] == 3

    def test_empty_folder(self, lambda_context, fake_adapter) -> None:
        fake_adapter.resources = []

        folder = _body(handler(_event(), lambda_context))["stats"]["folder"]

        assert folder["total_images"] == 0
        assert folder["average_size"] == 0
        assert folder["format_breakdown"] == {}
        assert folder["largest_files"] == []

    def test_sampled_statistics_are_flagged(self, lambda_context, fake_adapter) -> None:
        fake_adapter.total_count = 2500

        folder = _body(handler(_event(), lambda_context))["stats"]["folder"]

        assert folder["total_images"] == 2500
        assert folder["sampled_images"] == 3
        assert folder["is_approximate"] is True

    def test_invalid_folder(self, lambda_context, fake_adapter) -> None:
        response = handler(_event({"folder": "bad folder!"}), lambda_context)

        assert response["statusCode"] == 400
        assert fake_adapter.calls_for("search") == []

    def test_search_failure(self, lambda_context, fake_adapter) -> None:
        fake_adapter.failures["search"] = CloudinaryError("Invalid credentials")

        response = handler(_event(), lambda_context)
        body = _body(response)

        assert response["statusCode"] == 500
        assert body["message"] == "Failed to fetch storage statistics"
        assert body["error"] == "Invalid credentials"

    def test_resource_without_public_id(self, lambda_context, fake_adapter) -> None:
        fake_adapter.resources.append({"format": "png", "bytes": 5})

        response = handler(_event(), lambda_context)
        folder = _body(response)["stats"]["folder"]

        assert response["statusCode"] == 200
        assert folder["total_images"] == 4
        assert [f["public_id"] for f in folder["largest_files"]] == [
            "business-images/storefront",
            "business-images/banner",
            "business-images/logo_1",
        ]

    def test_internal_failure(self, lambda_context, monkeypatch) -> None:
        def broken(self, folder, *, now=None):
            raise KeyError("public_id")

        monkeypatch.setattr(StatsService, "get_stats", broken)

        response = handler(_event(), lambda_context)
        body = _body(response)

        assert response["statusCode"] == 500
        assert body["error_code"] == "INTERNAL_ERROR"
