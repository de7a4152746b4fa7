"""Local, pre-upload validation of image files.

Nothing here talks to the network.
"""

import mimetypes
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from core.utils.constants import CLIENT_ALLOWED_MIME_TYPES, CLIENT_MAX_FILE_SIZE, format_megabytes

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class LocalImageFile(BaseModel):
    """A file on disk that is about to be uploaded."""

    filename: str = Field(..., min_length=1)
    content_type: str = Field(DEFAULT_CONTENT_TYPE)
    size: int = Field(..., ge=0, description="Size in bytes")
    path: Path | None = None

    @classmethod
    def from_path(cls, path: str | Path) -> "LocalImageFile":
        """Describe ``path`` using its extension for the MIME type.

        Raises:
            FileNotFoundError: If ``path`` does not exist
        """
        file_path = Path(path)
        content_type, _ = mimetypes.guess_type(file_path.name)

        return cls(
            filename=file_path.name,
            content_type=content_type or DEFAULT_CONTENT_TYPE,
            size=file_path.stat().st_size,
            path=file_path,
        )


def validate_image(
    file: LocalImageFile | str | Path | None,
    *,
    max_size: int = CLIENT_MAX_FILE_SIZE,
    allowed_types: Sequence[str] = CLIENT_ALLOWED_MIME_TYPES,
) -> dict[str, Any]:
    """Check MIME type against ``allowed_types`` and size against ``max_size``.

    ``file`` may also be a path, which is described with
    :meth:`LocalImageFile.from_path` first. Anything else is reported as
    invalid rather than raised.

    Returns:
        ``{"valid": True, "file": file}`` or ``{"valid": False, "error": ...}``
    """
    if file is None:
        return {"valid": False, "error": "No file provided"}

    if isinstance(file, (str, Path)):
        try:
            file = LocalImageFile.from_path(file)
        except OSError as exc:
            return {"valid": False, "error": f"Cannot read file: {exc}"}

    if not isinstance(file, LocalImageFile):
        return {"valid": False, "error": f"Unsupported file type: {type(file).__name__}"}

    if file.content_type not in allowed_types:
        return {
            "valid": False,
            "error": (
                f"File type {file.content_type} is not allowed. "
                f"Allowed types: {', '.join(allowed_types)}"
            ),
        }

    if file.size > max_size:
        return {
            "valid": False,
            "error": (
                f"File size {format_megabytes(file.size)} exceeds maximum size "
                f"{format_megabytes(max_size)}"
            ),
        }

    return {"valid": True, "file": file}
