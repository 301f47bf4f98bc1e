"""
Mysterio Command Line Entry Point

CLI tools for Mysterio config management::

    mysterio compare-configs --env1 staging --env2 production
    mysterio compare-secret --env production
    mysterio generate-template --env production --output template.json

Exit codes: 0 on success or no differences, 1 when differences or missing
keys were found, 2 on operational errors.
"""

import argparse
import asyncio
import sys

from mysterio import __version__
from mysterio.cli.commands import EXIT_ERROR
from mysterio.cli.commands.compare_configs import compare_configs
from mysterio.cli.commands.compare_secret import compare_secret
from mysterio.cli.commands.generate_template import generate_template
from mysterio.config.constants import DEFAULT_COMPARE_SOURCES, DEFAULT_CONFIG_DIR
from mysterio.config.settings import LOG_LEVELS, Settings, get_settings
from mysterio.utils.logging import setup_logging


def create_parser(settings: Settings | None = None) -> argparse.ArgumentParser:
    settings = settings or get_settings()

    parser = argparse.ArgumentParser(
        prog="mysterio",
        description="CLI tools for Mysterio config management",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help="Logging level (default: %(default)s)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    secret_parser = subparsers.add_parser(
        "compare-secret",
        help="Find missing keys between AWS secret and local config placeholders",
    )
    secret_parser.add_argument("-c", "--config", help="Local config file path (default: ./config/{env}.json)")
    secret_parser.add_argument("-s", "--secret", help="AWS secret name (default: {packageName}/{env})")
    secret_parser.add_argument("-e", "--env", help='Environment (default: ENVIRONMENT or "local")')
    secret_parser.add_argument("-r", "--region", default=settings.aws_region, help="AWS region")
    secret_parser.add_argument("-o", "--output", choices=["text", "json"], default="text", help="Output format")
    secret_parser.set_defaults(handler=compare_secret)

    template_parser = subparsers.add_parser(
        "generate-template",
        help="Generate AWS secret template from <aws_secret_manager> placeholders",
    )
    template_parser.add_argument("-c", "--config", help="Local config file path (default: ./config/{env}.json)")
    template_parser.add_argument("-e", "--env", help='Environment (default: ENVIRONMENT or "local")')
    template_parser.add_argument("-o", "--output", help="Output file path (stdout if not specified)")
    template_parser.set_defaults(handler=generate_template)

    configs_parser = subparsers.add_parser(
        "compare-configs",
        help="Compare the merged configs of two environments",
    )
    configs_parser.add_argument("--env1", required=True, help="First environment")
    configs_parser.add_argument("--env2", required=True, help="Second environment")
    configs_parser.add_argument("-d", "--config-dir", default=f"./{DEFAULT_CONFIG_DIR}", help="Config directory")
    configs_parser.add_argument("-s", "--secret", help="Secret name template with {env} placeholder")
    configs_parser.add_argument("-r", "--region", default=settings.aws_region, help="AWS region")
    configs_parser.add_argument(
        "--sources",
        default=",".join(DEFAULT_COMPARE_SOURCES),
        help="Comma-separated merge sources (default: %(default)s)",
    )
    configs_parser.add_argument("-o", "--output", choices=["text", "json"], default="text", help="Output format")
    configs_parser.set_defaults(handler=compare_configs)

    return parser


def main(argv: list[str] | None = None) -> int:
    try:
        settings = get_settings()
    except ValueError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return EXIT_ERROR

    parser = create_parser(settings)
    args = parser.parse_args(argv)

    try:
        setup_logging(
            log_level=args.log_level,
            environment=settings.environment or "local",
            enable_json=settings.log_json,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return asyncio.run(args.handler(args))


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
