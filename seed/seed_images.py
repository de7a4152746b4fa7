#!/usr/bin/env python3
"""
Seed script to populate a folder via the upload endpoint.

Run:
    poetry run python seed/seed_images.py \
      --api-url http://localhost:5000/api \
      --images-dir ./sample-images \
      --folder business-images-test
"""

import argparse
import base64
import mimetypes
import os
from pathlib import Path
import sys
from typing import Any, cast

from aws_lambda_powertools import Logger
import requests

from core.utils.constants import format_file_size

logger = Logger(service="seed")

DEFAULT_API_URL = "http://localhost:5000/api"
IMAGE_SUFFIXES = {".jpg", ".jpeg", ".png", ".gif", ".webp"}


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed images via the media asset proxy")

    parser.add_argument(
        "--api-url",
        default=os.getenv("ASSET_API_BASE_URL", DEFAULT_API_URL),
        help="Proxy base URL (defaults to ASSET_API_BASE_URL)",
    )
    parser.add_argument(
        "--images-dir",
        type=Path,
        default=Path(__file__).parent / "images",
        help="Directory holding the sample images",
    )
    parser.add_argument(
        "--folder",
        default="business-images",
        help="Destination folder",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=4,
        help="Number of images to seed",
    )

    return parser.parse_args()


def to_data_uri(image_path: Path) -> str:
    content_type, _ = mimetypes.guess_type(image_path.name)
    encoded = base64.b64encode(image_path.read_bytes()).decode("utf-8")
    return f"data:{content_type or 'image/png'};base64,{encoded}"


def seed_images() -> None:
    try:
        args = parse_args()

        if not args.images_dir.is_dir():
            logger.error("Images directory not found", extra={"path": str(args.images_dir)})
            sys.exit(1)

        image_paths = sorted(
            path for path in args.images_dir.iterdir() if path.suffix.lower() in IMAGE_SUFFIXES
        )[: args.limit]

        upload_url = f"{args.api_url.rstrip('/')}/cloudinary/upload"

        logger.info(
            "Starting seeding process",
            extra={"upload_url": upload_url, "folder": args.folder, "count": len(image_paths)},
        )

        for image_path in image_paths:
            payload: dict[str, Any] = {
                "image": to_data_uri(image_path),
                "folder": args.folder,
                "filename": image_path.stem,
            }

            response = requests.post(upload_url, json=payload, timeout=30)
            response_json = cast(dict[str, Any], response.json())

            if response.ok and response_json.get("success"):
                logger.info(
                    "Seeded image",
                    extra={
                        "image": image_path.name,
                        "size": format_file_size(image_path.stat().st_size),
                        "public_id": response_json.get("result", {}).get("public_id"),
                    },
                )
            else:
                logger.error(
                    "Failed to seed image",
                    extra={
                        "image": image_path.name,
                        "status": response.status_code,
                        "response": response_json,
                    },
                )

        logger.info("Seeding completed")

        list_response = requests.get(
            f"{args.api_url.rstrip('/')}/cloudinary/images",
            params={"folder": args.folder, "limit": args.limit},
            timeout=30,
        )

        logger.info(
            "List images response",
            extra={
                "status": list_response.status_code,
                "response": list_response.json() if list_response.ok else list_response.text,
            },
        )

    except Exception as exc:
        logger.exception("Seeding failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    seed_images()
