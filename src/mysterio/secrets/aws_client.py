"""
Mysterio AWS Secrets Manager Client

Wraps boto3's ``secretsmanager`` ``get_secret_value`` call as an async
callable ``(secret_name) -> dict``, the contract the merger expects from any
secret store.
"""

import asyncio
import json
from collections.abc import Awaitable, Callable
from typing import Any

import boto3

from mysterio.config.constants import DEFAULT_AWS_REGION
from mysterio.utils.exceptions import SecretStoreError
from mysterio.utils.logging import get_logger

logger = get_logger(__name__)


def get_aws_secrets_client(
    aws_params: dict[str, Any] | None = None,
    client: Any | None = None,
) -> Callable[[str], Awaitable[Any]]:
    """Create a secret fetching function backed by AWS Secrets Manager.

    Args:
        aws_params: Keyword arguments for ``boto3.client("secretsmanager", ...)``.
            Defaults to ``{"region_name": "us-east-1"}``.
        client: A ready boto3 client (or stub) to use instead of creating one.

    Returns:
        An async function taking a secret name and returning the parsed
        ``SecretString`` JSON payload. boto3 errors propagate unchanged.
    """
    if client is None:
        client = boto3.client("secretsmanager", **(aws_params or {"region_name": DEFAULT_AWS_REGION}))

    async def get_secrets(secret_name: str) -> Any:
        logger.debug("get_secret_value", secret_id=secret_name)
        response = await asyncio.to_thread(client.get_secret_value, SecretId=secret_name)

        secret_string = response.get("SecretString")
        if secret_string is None:
            raise SecretStoreError(
                f'Secret "{secret_name}" has no SecretString payload',
                secret_name=secret_name,
            )
        return json.loads(secret_string)

    return get_secrets
