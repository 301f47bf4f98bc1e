"""
``mysterio compare-configs``: diff the merged configuration of two
environments.
"""

import argparse
import asyncio
import json
import sys

from mysterio.cli.commands import EXIT_DIFFERENCES, EXIT_ERROR, EXIT_OK
from mysterio.cli.formatting import format_diff_output, has_differences
from mysterio.core.differ import diff, flatten_diff
from mysterio.core.merger import ConfigMerger, SecretsClient
from mysterio.core.sources import parse_merging_order
from mysterio.utils.logging import get_logger

logger = get_logger(__name__)


def _build_merger(
    options: argparse.Namespace,
    env: str,
    secrets_client: SecretsClient | None,
) -> ConfigMerger:
    secret_name = options.secret.replace("{env}", env) if options.secret else None
    return ConfigMerger(
        config_dir=options.config_dir,
        env=env,
        secret_name=secret_name,
        secrets_client=secrets_client,
        aws_params={"region_name": options.region},
    )


async def compare_configs(
    options: argparse.Namespace,
    secrets_client: SecretsClient | None = None,
) -> int:
    env1, env2 = options.env1, options.env2

    try:
        merging_order = parse_merging_order(
            [source.strip() for source in options.sources.split(",") if source.strip()]
        )

        merger1 = _build_merger(options, env1, secrets_client)
        merger2 = _build_merger(options, env2, secrets_client)

        config1, config2 = await asyncio.gather(
            merger1.merge(merging_order),
            merger2.merge(merging_order),
        )

        tree = diff(config1, config2)

        if options.output == "json":
            print(
                json.dumps(
                    {
                        "env1": env1,
                        "env2": env2,
                        "status": tree.status.value,
                        "diff": tree.to_dict()["diff"],
                        "differences": [entry.to_dict() for entry in flatten_diff(tree)],
                    },
                    ensure_ascii=False,
                )
            )
        else:
            print(f"Comparing configs: {env1} vs {env2}")
            print(f"Sources: {', '.join(source.value for source in merging_order)}")
            print()
            print(format_diff_output(tree, env1, env2))

        return EXIT_DIFFERENCES if has_differences(tree) else EXIT_OK

    except Exception as e:
        logger.debug("compare_configs_failed", exc_info=True)
        if options.output == "json":
            print(json.dumps({"status": "error", "message": str(e)}, ensure_ascii=False))
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
