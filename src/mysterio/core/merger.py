"""
Mysterio Configuration Merger

Combines the default config file, the environment config file, the secret
store payload, and the local rc file into a single configuration mapping:

1. ``<config_dir>/default.json``
2. ``<config_dir>/<env>.json``
3. Secrets from the secret store (``<package_name>/<env>`` unless named)
4. The local rc file (``.mysteriorc``)

Sources are fetched concurrently and deep-merged in the requested order,
later sources winning.
"""

import asyncio
from collections.abc import Awaitable, Callable, Iterable, Mapping
from functools import partial
from pathlib import Path
from typing import Any

from mysterio.config.constants import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_MERGING_ORDER,
    LOCAL_ENVIRONMENT,
    TEST_ENVIRONMENT,
)
from mysterio.config.environments import (
    read_package_name,
    resolve_env,
    resolve_secret_name,
)
from mysterio.config.settings import get_loader_settings
from mysterio.core.dicts import deep_merge, unflatten
from mysterio.core.sources import ConfigSource, parse_merging_order, read_config_file
from mysterio.secrets.aws_client import get_aws_secrets_client
from mysterio.utils.decorators import measure_latency
from mysterio.utils.exceptions import ConfigurationError
from mysterio.utils.logging import get_logger

logger = get_logger(__name__)

SecretsClient = Callable[[str], Awaitable[Mapping[str, Any]]]


class ConfigMerger:
    """Layered configuration loader bound to one config dir, env and secret."""

    def __init__(
        self,
        config_dir: str | Path | None = None,
        env: str | None = None,
        rc_path: str | Path | None = None,
        secret_name: str | None = None,
        package_name: str | Callable[[], str] | None = None,
        secrets_client: SecretsClient | None = None,
        aws_params: dict[str, Any] | None = None,
        manifest_path: str | Path | None = None,
    ):
        settings = get_loader_settings()

        self.env = resolve_env(env)
        self._config_dir = Path(config_dir or settings.config_dir)
        self._rc_path = Path(rc_path or settings.rc_path)
        self._secret_name = secret_name
        self._package_name = package_name
        self._manifest_path = manifest_path
        self._client = secrets_client
        self._aws_params = aws_params or {"region_name": settings.aws_region}

        logger.debug(
            "config_merger_created",
            env=self.env,
            config_dir=str(self._config_dir),
            rc_path=str(self._rc_path),
        )

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    @property
    def rc_path(self) -> Path:
        return self._rc_path

    @property
    def secret_name(self) -> str:
        """The secret identifier, resolved from the package manifest if needed."""
        package_name = self._package_name
        if package_name is None:
            package_name = partial(read_package_name, self._manifest_path)
        return resolve_secret_name(self._secret_name, package_name, self.env)

    async def get_default_config(self) -> Any:
        """Return ``<config_dir>/default.json``, or ``{}`` when it is missing."""
        return await read_config_file(self._config_dir / f"{DEFAULT_CONFIG_FILENAME}.json")

    async def get_env_config(self) -> Any:
        """Return ``<config_dir>/<env>.json``, or ``{}`` when it is missing."""
        return await read_config_file(self._config_dir / f"{self.env}.json")

    async def get_rc_config(self) -> Any:
        """Return the local rc file, or ``{}`` when it is missing."""
        return await read_config_file(self._rc_path)

    async def get_secrets(self, unflatten_keys: bool = False) -> Any:
        """Fetch the secret payload, optionally expanding dotted keys."""
        secret_name = self.secret_name
        logger.debug("fetching_secrets", secret_name=secret_name)

        if self._client is None:
            self._client = get_aws_secrets_client(self._aws_params)

        secrets = await self._client(secret_name)
        if unflatten_keys and isinstance(secrets, Mapping):
            return unflatten(dict(secrets))
        return secrets

    def _secrets_suppressed(
        self,
        include_secrets_for_local: bool,
        include_secrets_for_test: bool,
    ) -> bool:
        if self.env == LOCAL_ENVIRONMENT and not include_secrets_for_local:
            return True
        if self.env == TEST_ENVIRONMENT and not include_secrets_for_test:
            return True
        return False

    async def _get_secrets_contribution(self, unflatten_keys: bool, suppressed: bool) -> Any:
        if suppressed:
            logger.debug("secrets_suppressed", env=self.env)
            return {}
        return await self.get_secrets(unflatten_keys)

    @measure_latency("config_merge")
    async def merge(
        self,
        merging_order: Iterable[str | ConfigSource] = DEFAULT_MERGING_ORDER,
        unflatten_secrets: bool = True,
        *,
        include_secrets_for_local: bool = True,
        include_secrets_for_test: bool = True,
        add_env_flag: bool = False,
        strict: bool = False,
    ) -> Any:
        """Return the merged configuration.

        Args:
            merging_order: Sources to merge, lowest precedence first.
            unflatten_secrets: Expand dotted secret keys into nested dicts
                before merging.
            include_secrets_for_local: When False, skip the secret store if
                the environment is ``local``.
            include_secrets_for_test: When False, skip the secret store if
                the environment is ``test``.
            add_env_flag: Add ``is<Env>: True`` (e.g. ``isProduction``) just
                below the rc file in precedence.
            strict: Fail when ``default`` and/or ``env`` are requested and
                every one of them came back empty, whether the file is
                missing or holds an empty object.

        Raises:
            ConfigurationError: On an invalid merging order (before any I/O)
                or, in strict mode, when no requested config file had content.
        """
        sources = parse_merging_order(merging_order)

        getters: dict[ConfigSource, Callable[[], Awaitable[Any]]] = {
            ConfigSource.DEFAULT: self.get_default_config,
            ConfigSource.ENV: self.get_env_config,
            ConfigSource.SECRETS: partial(
                self._get_secrets_contribution,
                unflatten_secrets,
                self._secrets_suppressed(include_secrets_for_local, include_secrets_for_test),
            ),
            ConfigSource.RC: self.get_rc_config,
        }

        results = await asyncio.gather(*(getters[source]() for source in sources))
        contributions = dict(zip(sources, results))

        if strict:
            self._check_config_files_found(contributions)

        env_flag = {f"is{self.env.capitalize()}": True} if add_env_flag else None

        merged: Any = {}
        for source in sources:
            if env_flag and source is ConfigSource.RC:
                merged = deep_merge(merged, env_flag)
                env_flag = None
            merged = deep_merge(merged, contributions[source])
        if env_flag:
            merged = deep_merge(merged, env_flag)

        logger.debug(
            "configs_merged",
            env=self.env,
            sources=[source.value for source in sources],
            keys=sorted(merged) if isinstance(merged, dict) else None,
        )
        return merged

    def _check_config_files_found(self, contributions: dict[ConfigSource, Any]) -> None:
        file_sources = [
            source for source in (ConfigSource.DEFAULT, ConfigSource.ENV)
            if source in contributions
        ]
        if file_sources and not any(contributions[source] for source in file_sources):
            raise ConfigurationError(
                f'Missing configuration file in {self._config_dir} for "{self.env}" env',
                config_key="config_dir",
                details={"config_dir": str(self._config_dir), "env": self.env},
            )
