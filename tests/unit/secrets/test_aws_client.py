"""
Unit tests for the AWS Secrets Manager client wrapper.
"""

import json
from unittest.mock import MagicMock, patch

import pytest

from mysterio.secrets.aws_client import get_aws_secrets_client
from mysterio.utils.exceptions import SecretStoreError


@pytest.fixture
def boto_client():
    client = MagicMock()
    client.get_secret_value.return_value = {
        "SecretString": json.dumps({"db.password": "s3cret", "token": "abc"})
    }
    return client


@pytest.mark.unit
class TestAwsSecretsClient:
    """Test fetching and parsing secrets."""

    @pytest.mark.asyncio
    async def test_parses_secret_string(self, boto_client):
        get_secrets = get_aws_secrets_client(client=boto_client)

        assert await get_secrets("my-service/prod") == {"db.password": "s3cret", "token": "abc"}
        boto_client.get_secret_value.assert_called_once_with(SecretId="my-service/prod")

    @pytest.mark.asyncio
    async def test_missing_secret_string(self, boto_client):
        boto_client.get_secret_value.return_value = {"SecretBinary": b"..."}
        get_secrets = get_aws_secrets_client(client=boto_client)

        with pytest.raises(SecretStoreError) as exc_info:
            await get_secrets("my-service/prod")
        assert exc_info.value.secret_name == "my-service/prod"

    @pytest.mark.asyncio
    async def test_errors_propagate(self, boto_client):
        boto_client.get_secret_value.side_effect = RuntimeError("ResourceNotFoundException")
        get_secrets = get_aws_secrets_client(client=boto_client)

        with pytest.raises(RuntimeError, match="ResourceNotFoundException"):
            await get_secrets("my-service/prod")

    def test_creates_boto_client_with_params(self):
        with patch("mysterio.secrets.aws_client.boto3.client") as factory:
            get_aws_secrets_client({"region_name": "eu-west-1"})
            factory.assert_called_once_with("secretsmanager", region_name="eu-west-1")

    def test_default_region(self):
        with patch("mysterio.secrets.aws_client.boto3.client") as factory:
            get_aws_secrets_client()
            factory.assert_called_once_with("secretsmanager", region_name="us-east-1")
