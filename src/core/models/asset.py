"""Shared media asset model."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, SerializerFunctionWrapHandler, model_serializer


class ImageAsset(BaseModel):
    """One stored media object as returned by the asset API.

    Only ``public_id`` is guaranteed. Attributes the provider did not report
    are left out of the serialized form rather than defaulted.
    """

    public_id: str = Field(..., description="Provider identifier, unique within the namespace")

    secure_url: str | None = Field(None, description="HTTPS delivery URL")
    url: str | None = Field(None, description="HTTP delivery URL")
    format: str | None = Field(None, description="File format / extension tag")
    width: int | None = Field(None, description="Width in pixels")
    height: int | None = Field(None, description="Height in pixels")
    bytes: int | None = Field(None, ge=0, description="Stored size in bytes")
    created_at: str | None = Field(None, description="ISO-8601 upload timestamp")
    folder: str | None = Field(None, description="Folder path")
    filename: str | None = Field(None, description="Original file name")
    resource_type: str | None = None
    type: str | None = None
    version: int | None = None

    context: dict[str, Any] | None = Field(None, description="Custom context key-values")
    tags: list[str] | None = Field(None, description="Asset tags")
    metadata: dict[str, Any] | None = Field(None, description="Embedded image metadata")

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data: dict[str, Any] = handler(self)
        return {key: value for key, value in data.items() if value is not None}

    @classmethod
    def from_resource(cls, resource: Mapping[str, Any]) -> "ImageAsset":
        """Project a raw provider search resource onto the asset shape."""
        return cls(
            public_id=resource["public_id"],
            secure_url=resource.get("secure_url"),
            url=resource.get("url"),
            format=resource.get("format"),
            width=resource.get("width"),
            height=resource.get("height"),
            bytes=resource.get("bytes"),
            created_at=resource.get("created_at"),
            folder=resource.get("folder"),
            filename=resource.get("filename"),
            resource_type=resource.get("resource_type"),
            type=resource.get("type"),
            version=resource.get("version"),
            context=resource.get("context"),
            tags=resource.get("tags"),
            metadata=resource.get("image_metadata"),
        )
