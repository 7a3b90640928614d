# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI entrypoint for benchforge.

Every operation is a subcommand of `benchforge`. The global options
(--config, --log-level, --dry-run) are inherited by every subcommand
through argparse's parent parser mechanism.

Usage:
    benchforge <subcommand> [options]
    benchforge generate --descriptor bench.yaml --output-root ./bin
    benchforge info
"""

import argparse
import sys

from benchforge.cli.commands import handle_generate, handle_info
from benchforge.cli.exit_codes import USER_ERROR


def _build_global_parser() -> argparse.ArgumentParser:
    """
    Build the parent parser with global options.

    add_help=False so help text doesn't collide between the parent and the
    subcommand parsers.
    """
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML configuration file.",
    )
    parent.add_argument(
        "--log-level",
        type=str,
        default=None,
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity. Overrides the config file; INFO when neither sets it.",
    )
    parent.add_argument(
        "--dry-run",
        action="store_true",
        default=False,
        dest="dry_run",
        help="Validate inputs without writing anything.",
    )
    return parent


def _register_subcommands(
    subparsers: argparse._SubParsersAction,  # type: ignore[type-arg]
    parent: argparse.ArgumentParser,
) -> None:
    """Register all subcommands with their handler functions."""
    generate_parser = subparsers.add_parser(
        "generate", parents=[parent], help="Generate a benchmark project from a descriptor.",
    )
    generate_parser.add_argument(
        "--descriptor",
        type=str,
        required=True,
        help="Path to the YAML benchmark descriptor.",
    )
    generate_parser.add_argument(
        "--output-root",
        type=str,
        default=None,
        dest="output_root",
        help="Directory that receives the project folder (default: config, then cwd).",
    )
    generate_parser.set_defaults(func=handle_generate)

    info_parser = subparsers.add_parser(
        "info", parents=[parent], help="Display host environment info.",
    )
    info_parser.set_defaults(func=handle_info)


def main() -> None:
    """
    Main CLI entrypoint. This is what pyproject.toml's [project.scripts] points to.

    If no subcommand is given, we show help and exit with USER_ERROR.
    """
    parent = _build_global_parser()

    root_parser = argparse.ArgumentParser(
        prog="benchforge",
        description="benchforge — generate standalone benchmark harness projects.",
        parents=[parent],
    )
    subparsers = root_parser.add_subparsers(dest="command")
    _register_subcommands(subparsers, parent)

    args = root_parser.parse_args()

    if not hasattr(args, "func") or args.func is None:
        root_parser.print_help()
        sys.exit(USER_ERROR)

    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
