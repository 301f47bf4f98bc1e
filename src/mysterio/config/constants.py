"""
Mysterio Default Configuration Constants

Names and default values shared by the loader and the CLI.
"""

# Canonical source names, in their default merging order.
DEFAULT_MERGING_ORDER: tuple[str, ...] = ("default", "env", "secrets", "rc")

# Sources merged by `mysterio compare-configs` unless --sources is given.
DEFAULT_COMPARE_SOURCES: tuple[str, ...] = ("default", "env", "secrets")

DEFAULT_ENVIRONMENT = "local"
DEFAULT_CONFIG_DIR = "config"
DEFAULT_RC_FILENAME = ".mysteriorc"
DEFAULT_CONFIG_FILENAME = "default"
DEFAULT_MANIFEST_FILENAME = "package.json"
DEFAULT_AWS_REGION = "us-east-1"

# Separator used both for unflattening secret keys and for diff paths.
PATH_SEPARATOR = "."

# Sentinel marking a config value expected from the secret store.
PLACEHOLDER = "<aws_secret_manager>"
TEMPLATE_VALUE = "replace_with_secret"

# Environments whose secret fetch can be switched off per merge call.
LOCAL_ENVIRONMENT = "local"
TEST_ENVIRONMENT = "test"
