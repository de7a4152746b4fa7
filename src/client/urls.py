"""Delivery URL construction for stored images."""

from collections.abc import Mapping
from typing import Any

from core.utils.constants import DELIVERY_BASE_URL

# (option name, URL token prefix) in emission order
TRANSFORMATION_TOKENS: tuple[tuple[str, str], ...] = (
    ("width", "w"),
    ("height", "h"),
    ("crop", "c"),
    ("quality", "q"),
    ("format", "f"),
)

PRESETS: dict[str, dict[str, Any]] = {
    "thumbnail": {"width": 150, "height": 150, "crop": "fill", "quality": "auto"},
    "medium": {"width": 400, "height": 300, "crop": "fill", "quality": "auto"},
    "large": {"width": 800, "height": 600, "crop": "fill", "quality": "auto"},
    "fullscreen": {"width": 1200, "height": 800, "crop": "fill", "quality": "auto"},
}
DEFAULT_PRESET = "medium"


def generate_url(
    public_id: str | None,
    cloud_name: str | None,
    options: Mapping[str, Any] | None = None,
) -> str:
    """
    Build a delivery URL for ``public_id``.

    Tokens are emitted as ``w_, h_, c_, q_, f_`` whatever the key order of
    ``options``; absent or empty options contribute nothing.

    Returns:
        The URL, or ``""`` when ``public_id`` or ``cloud_name`` is missing
    """
    if not public_id or not cloud_name:
        return ""

    options = options or {}
    tokens = [
        f"{prefix}_{options[name]}"
        for name, prefix in TRANSFORMATION_TOKENS
        if options.get(name)
    ]

    base_url = DELIVERY_BASE_URL.format(cloud_name=cloud_name)
    transformation = f"/{','.join(tokens)}" if tokens else ""

    return f"{base_url}{transformation}/{public_id}"


def generate_optimized_url(
    public_id: str | None,
    cloud_name: str | None,
    options: Mapping[str, Any] | None = None,
) -> str:
    """Like ``generate_url`` with quality and format defaulting to ``auto``."""
    merged: dict[str, Any] = {"quality": "auto", "format": "auto"}
    merged.update(options or {})
    return generate_url(public_id, cloud_name, merged)


def get_transformed_url(
    public_id: str | None,
    cloud_name: str | None,
    preset: str = DEFAULT_PRESET,
) -> str:
    """Optimized URL for a named preset; unknown names fall back to ``medium``."""
    options = PRESETS.get(preset, PRESETS[DEFAULT_PRESET])
    return generate_optimized_url(public_id, cloud_name, options)
