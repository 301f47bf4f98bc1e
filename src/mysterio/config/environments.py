"""
Mysterio Environment and Secret Name Resolution

Works out which environment is active, which package the configuration
belongs to, and therefore which secret to ask the secret store for.
"""

import json
import os
import tomllib
from collections.abc import Callable
from pathlib import Path

from mysterio.config.constants import DEFAULT_ENVIRONMENT, DEFAULT_MANIFEST_FILENAME
from mysterio.utils.exceptions import ConfigurationError
from mysterio.utils.logging import get_logger

logger = get_logger(__name__)


def resolve_env(explicit: str | None = None) -> str:
    """Return the active environment name.

    An explicit non-empty name wins, then the ``ENVIRONMENT`` variable,
    then ``"local"``.
    """
    if isinstance(explicit, str) and explicit:
        return explicit
    return os.getenv("ENVIRONMENT") or DEFAULT_ENVIRONMENT


def read_package_name(manifest_path: str | Path | None = None) -> str:
    """Read the ``name`` field of the package manifest.

    Defaults to ``package.json`` in the working directory. A ``.toml``
    manifest is read as ``pyproject.toml`` (``[project].name``). Missing or
    malformed manifests raise; there is no fallback name.
    """
    path = Path(manifest_path) if manifest_path else Path.cwd() / DEFAULT_MANIFEST_FILENAME

    if path.suffix == ".toml":
        with open(path, "rb") as f:
            manifest = tomllib.load(f)
        name = manifest.get("project", {}).get("name")
    else:
        with open(path, encoding="utf-8") as f:
            manifest = json.load(f)
        name = manifest.get("name") if isinstance(manifest, dict) else None

    if not isinstance(name, str) or not name:
        raise ConfigurationError(
            f"Package manifest {path} has no name field",
            config_key="name",
        )

    logger.debug("package_name_found", name=name, manifest=str(path))
    return name


def resolve_secret_name(
    explicit: str | None,
    package_name: str | Callable[[], str] | None,
    env: str,
) -> str:
    """Return the secret identifier, ``<package_name>/<env>`` unless given."""
    if explicit:
        return explicit

    if package_name is None:
        package_name = read_package_name
    name = package_name() if callable(package_name) else package_name

    if not isinstance(name, str) or not name:
        raise ConfigurationError(
            "Cannot resolve the secret name: pass secret_name or a non-empty package_name",
            config_key="package_name",
        )
    return f"{name}/{env}"
