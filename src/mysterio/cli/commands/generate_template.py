"""
``mysterio generate-template``: emit a secret template for a config file's
placeholders.
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from mysterio.cli.commands import EXIT_ERROR, EXIT_OK, default_config_path, load_json_file
from mysterio.cli.placeholders import build_template, find_placeholders
from mysterio.config.constants import PLACEHOLDER
from mysterio.config.environments import resolve_env
from mysterio.utils.logging import get_logger

logger = get_logger(__name__)


async def generate_template(options: argparse.Namespace) -> int:
    try:
        env = resolve_env(options.env)
        config_path = options.config or default_config_path(env)
        config = await load_json_file(config_path)

        placeholders = find_placeholders(config)
        if not placeholders:
            print(f"No {PLACEHOLDER} placeholders found in config.", file=sys.stderr)
            return EXIT_OK

        json_output = json.dumps(build_template(placeholders), indent=2, ensure_ascii=False)

        if options.output:
            output_path = Path(options.output).resolve()
            await asyncio.to_thread(output_path.write_text, json_output + "\n", encoding="utf-8")
            print(f"Template written to: {output_path}")
        else:
            print(json_output)

        return EXIT_OK

    except Exception as e:
        logger.debug("generate_template_failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
