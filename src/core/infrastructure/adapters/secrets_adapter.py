"""Thin Secrets Manager adapter wrapping boto3 client operations."""

import os
from typing import Any, Protocol

import boto3

from core.utils.constants import ENV_AWS_ENDPOINT_URL, ENV_AWS_REGION


class _Boto3SecretsClient(Protocol):
    """Internal typing for boto3 Secrets Manager client (AWS-facing only)."""

    def get_secret_value(self, *, SecretId: str) -> dict[str, Any]: ...


class SecretsAdapterProtocol(Protocol):
    """Minimal secrets adapter protocol (credential-facing)."""

    def get_secret_string(self, *, secret_id: str) -> str: ...


class SecretsAdapter:
    """Low-level Secrets Manager operations (mechanical, no error handling).

    This adapter:
    - Wraps boto3 Secrets Manager client
    - Does NOT handle errors (lets them bubble up)
    - Credential resolution catches and translates errors
    """

    def __init__(self) -> None:
        """Create Secrets Manager client from environment configuration."""
        self._client: _Boto3SecretsClient = boto3.client(
            "secretsmanager",
            endpoint_url=os.getenv(ENV_AWS_ENDPOINT_URL),
            region_name=os.getenv(ENV_AWS_REGION),
        )

    def get_secret_string(self, *, secret_id: str) -> str:
        """Fetch the string value of a secret.

        Raises boto3 exceptions - caught by credential resolution.
        """
        response = self._client.get_secret_value(SecretId=secret_id)
        return str(response.get("SecretString") or "")
