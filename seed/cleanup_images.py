#!/usr/bin/env python3
"""
Cleanup script to remove seeded images via the batch delete endpoint.

Run:
    poetry run python seed/cleanup_images.py \
      --api-url http://localhost:5000/api \
      --folder business-images-test
"""

import argparse
import os
import sys
from typing import Any, cast

from aws_lambda_powertools import Logger
import requests

logger = Logger(service="cleanup")

DEFAULT_API_URL = "http://localhost:5000/api"
PAGE_SIZE = 100


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Cleanup seeded images via the media asset proxy")

    parser.add_argument(
        "--api-url",
        default=os.getenv("ASSET_API_BASE_URL", DEFAULT_API_URL),
        help="Proxy base URL (defaults to ASSET_API_BASE_URL)",
    )
    parser.add_argument(
        "--folder",
        required=True,
        help="Folder whose images should be deleted",
    )

    return parser.parse_args()


def list_public_ids(base_url: str, folder: str) -> list[str]:
    """Walk every page of ``folder`` by cursor and collect public ids."""
    public_ids: list[str] = []
    cursor: str | None = None
    page = 1

    while True:
        params: dict[str, Any] = {"folder": folder, "limit": PAGE_SIZE, "page": page}
        if cursor:
            params["cursor"] = cursor

        response = requests.get(f"{base_url}/cloudinary/images", params=params, timeout=30)

        if not response.ok:
            logger.error(
                "Failed to list images",
                extra={"status": response.status_code, "response": response.text},
            )
            sys.exit(1)

        response_json = cast(dict[str, Any], response.json())
        resources = cast(list[dict[str, Any]], response_json.get("resources", []))
        public_ids.extend(resource["public_id"] for resource in resources)

        cursor = response_json.get("next_cursor")
        if not cursor:
            return public_ids
        page += 1


def cleanup_images() -> None:
    try:
        args = parse_args()
        base_url = args.api_url.rstrip("/")

        logger.info(
            "Starting cleanup process",
            extra={"api_base_url": base_url, "folder": args.folder},
        )

        public_ids = list_public_ids(base_url, args.folder)

        if not public_ids:
            logger.info("No images found for cleanup")
            return

        delete_resp = requests.post(
            f"{base_url}/cloudinary/delete-multiple",
            json={"public_ids": public_ids},
            timeout=120,
        )

        if delete_resp.ok:
            details = cast(dict[str, Any], delete_resp.json()).get("details", {})
            logger.info(
                "Deleted images",
                extra={
                    "successful": details.get("successful"),
                    "failed": details.get("failed"),
                },
            )
        else:
            logger.error(
                "Failed to delete images",
                extra={"status": delete_resp.status_code, "response": delete_resp.text},
            )
            sys.exit(1)

        logger.info("Cleanup completed successfully")

    except Exception as exc:
        logger.exception("Cleanup failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    cleanup_images()
