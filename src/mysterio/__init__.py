"""
Mysterio - Layered Configuration Loader

Merges default and environment-specific JSON config files, secrets from AWS
Secrets Manager, and a local rc file into one configuration mapping, and
ships CLI tools to compare configurations across environments.

License: MIT
Version: 1.0.0
"""

__version__ = "1.0.0"

from mysterio.utils.logging import configure_default_logging

configure_default_logging()

from mysterio.config.environments import read_package_name, resolve_env, resolve_secret_name
from mysterio.core.differ import DiffEntry, ObjectDiff, diff, flatten_diff
from mysterio.core.merger import ConfigMerger
from mysterio.core.sources import ConfigSource, read_config_file
from mysterio.secrets.aws_client import get_aws_secrets_client
from mysterio.utils.exceptions import ConfigurationError, MysterioError, SecretStoreError

__all__ = [
    "__version__",
    "ConfigMerger",
    "ConfigSource",
    "ConfigurationError",
    "DiffEntry",
    "MysterioError",
    "ObjectDiff",
    "SecretStoreError",
    "diff",
    "flatten_diff",
    "get_aws_secrets_client",
    "read_config_file",
    "read_package_name",
    "resolve_env",
    "resolve_secret_name",
]
