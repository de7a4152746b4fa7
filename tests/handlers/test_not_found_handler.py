import json

from handlers.not_found.handler import handler


class TestNotFoundHandler:
    def test_unknown_route(self, lambda_context) -> None:
        response = handler({"httpMethod": "GET", "path": "/unknown"}, lambda_context)
        body = json.loads(response["body"])

        assert response["statusCode"] == 404
        assert body["success"] is False
        assert body["error"] == "NOT_FOUND"
        assert body["message"] == "Route /unknown not found"
        assert "GET /cloudinary/images" in body["availableRoutes"]
        assert "POST /cloudinary/cleanup-unused" in body["availableRoutes"]
