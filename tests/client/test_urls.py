import pytest

from client.urls import generate_optimized_url, generate_url, get_transformed_url

BASE = "https://res.cloudinary.com/demo/image/upload"


class TestGenerateUrl:
    def test_no_options(self) -> None:
        assert generate_url("business-images/logo", "demo") == f"{BASE}/business-images/logo"

    def test_token_order_is_fixed(self) -> None:
        url = generate_url(
            "business-images/logo",
            "demo",
            {"format": "webp", "quality": 80, "crop": "fit", "height": 100, "width": 200},
        )

        assert url == f"{BASE}/w_200,h_100,c_fit,q_80,f_webp/business-images/logo"

    def test_empty_options_are_skipped(self) -> None:
        assert generate_url("a", "demo", {"width": 0, "crop": "", "quality": None}) == f"{BASE}/a"

    @pytest.mark.parametrize("public_id,cloud_name", [("", "demo"), (None, "demo"), ("a", None)])
    def test_missing_inputs(self, public_id, cloud_name) -> None:
        assert generate_url(public_id, cloud_name, {"width": 10}) == ""


class TestOptimizedUrls:
    def test_defaults_to_auto(self) -> None:
        assert generate_optimized_url("a", "demo") == f"{BASE}/q_auto,f_auto/a"

    def test_options_override_defaults(self) -> None:
        assert generate_optimized_url("a", "demo", {"format": "png"}) == f"{BASE}/q_auto,f_png/a"

    def test_thumbnail_preset(self) -> None:
        assert get_transformed_url("a", "demo", "thumbnail") == (
            f"{BASE}/w_150,h_150,c_fill,q_auto,f_auto/a"
        )

    def test_unknown_preset_falls_back_to_medium(self) -> None:
        assert get_transformed_url("a", "demo", "poster") == get_transformed_url("a", "demo")
        assert "w_400,h_300" in get_transformed_url("a", "demo", "poster")

    def test_missing_cloud_name(self) -> None:
        assert get_transformed_url("a", None, "large") == ""
