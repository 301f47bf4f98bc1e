"""Secret store clients."""

from mysterio.secrets.aws_client import get_aws_secrets_client

__all__ = ["get_aws_secrets_client"]
