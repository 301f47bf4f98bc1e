"""
``mysterio compare-secret``: report config placeholders the secret store
does not provide.
"""

import argparse
import json
import sys

from mysterio.cli.commands import (
    EXIT_DIFFERENCES,
    EXIT_ERROR,
    EXIT_OK,
    default_config_path,
    load_json_file,
)
from mysterio.cli.placeholders import find_missing_keys, find_placeholders
from mysterio.config.constants import PLACEHOLDER
from mysterio.config.environments import resolve_env, resolve_secret_name
from mysterio.core.merger import SecretsClient
from mysterio.secrets.aws_client import get_aws_secrets_client
from mysterio.utils.logging import get_logger

logger = get_logger(__name__)


def _report(options: argparse.Namespace, status: str, message: str, text: str, missing: list[str]) -> None:
    if options.output == "json":
        print(json.dumps({"status": status, "message": message, "missing": missing}, ensure_ascii=False))
    else:
        print(text)


async def compare_secret(
    options: argparse.Namespace,
    secrets_client: SecretsClient | None = None,
) -> int:
    try:
        env = resolve_env(options.env)
        config_path = options.config or default_config_path(env)
        config = await load_json_file(config_path)

        placeholders = find_placeholders(config)
        if not placeholders:
            _report(
                options,
                "ok",
                "No placeholders found in config",
                f"No {PLACEHOLDER} placeholders found in config.",
                [],
            )
            return EXIT_OK

        secret_name = resolve_secret_name(options.secret, None, env)
        client = secrets_client or get_aws_secrets_client({"region_name": options.region})
        secret_data = await client(secret_name)

        missing = find_missing_keys(placeholders, secret_data)
        logger.debug(
            "placeholders_compared",
            secret_name=secret_name,
            placeholders=len(placeholders),
            missing=len(missing),
        )

        if not missing:
            _report(
                options,
                "ok",
                "All placeholders present in secret",
                "All placeholders are present in the AWS secret.",
                [],
            )
            return EXIT_OK

        lines = [f'Missing keys in AWS secret "{secret_name}":']
        lines.extend(f"  - {key}" for key in missing)
        _report(
            options,
            "missing",
            f"{len(missing)} placeholder(s) missing",
            "\n".join(lines),
            missing,
        )
        return EXIT_DIFFERENCES

    except Exception as e:
        logger.debug("compare_secret_failed", exc_info=True)
        if options.output == "json":
            print(json.dumps({"status": "error", "message": str(e), "missing": []}, ensure_ascii=False))
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
