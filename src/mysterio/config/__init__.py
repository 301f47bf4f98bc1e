"""
Mysterio Configuration Module

Process settings, defaults, and environment / secret name resolution.
"""

from mysterio.config.constants import DEFAULT_MERGING_ORDER, PLACEHOLDER
from mysterio.config.environments import (
    read_package_name,
    resolve_env,
    resolve_secret_name,
)
from mysterio.config.settings import LoaderSettings, Settings, get_loader_settings, get_settings

__all__ = [
    "DEFAULT_MERGING_ORDER",
    "PLACEHOLDER",
    "LoaderSettings",
    "Settings",
    "get_loader_settings",
    "get_settings",
    "read_package_name",
    "resolve_env",
    "resolve_secret_name",
]
