# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Subcommand handlers for the benchforge CLI.

Each function here corresponds to one CLI subcommand and returns an exit
code. No print() calls; everything goes through the structured logger.
"""

import argparse
import logging
from pathlib import Path

from benchforge.cli.exit_codes import (
    CONFIG_ERROR,
    RUNTIME_ERROR,
    SUCCESS,
    VALIDATION_ERROR,
)
from benchforge.config.exceptions import ConfigError
from benchforge.config.loader import load_config
from benchforge.config.schema import BenchforgeConfig, GeneratorSettings
from benchforge.descriptor.loader import load_descriptor
from benchforge.generation.directory import resolve_project_directory
from benchforge.generation.exceptions import DescriptorLoadError, TemplateRenderError
from benchforge.logging.logger import configure_package_logging, get_logger
from benchforge.runtime.bootstrap import bootstrap
from benchforge.runtime.environment import get_host_info


def _load_and_bootstrap(
    args: argparse.Namespace,
    command_name: str,
) -> tuple[int, BenchforgeConfig | None, logging.Logger]:
    """
    Shared setup for every command: load config, run bootstrap.

    Returns (exit_code, config, logger). If exit_code is not SUCCESS, the
    caller should return it immediately.
    """
    logger = get_logger(f"benchforge.cli.{command_name}", log_level=args.log_level or "INFO")

    config = None
    if args.config is not None:
        try:
            config = load_config(Path(args.config))
        except ConfigError as err:
            logger.error(
                "Configuration error",
                extra={"command": command_name, "error": str(err)},
            )
            return CONFIG_ERROR, None, logger

    if config is not None:
        bootstrap(config.global_config, log_level=args.log_level)
    else:
        configure_package_logging(args.log_level or "INFO")
        logger.debug(
            "No config provided, running with defaults",
            extra={"command": command_name},
        )

    return SUCCESS, config, logger


def _resolve_output_root(args: argparse.Namespace, settings: GeneratorSettings) -> Path:
    """--output-root wins over config; with neither, projects go under cwd."""
    if args.output_root is not None:
        return Path(args.output_root)
    if settings.output_root is not None:
        return Path(settings.output_root)
    return Path.cwd()


def handle_generate(args: argparse.Namespace) -> int:
    """Generate a benchmark project from a descriptor file."""
    exit_code, config, logger = _load_and_bootstrap(args, "generate")
    if exit_code != SUCCESS:
        return exit_code

    settings = config.generator if config is not None else GeneratorSettings()

    try:
        descriptor = load_descriptor(Path(args.descriptor))
        root = _resolve_output_root(args, settings)
        project_dir = resolve_project_directory(descriptor.identifier, root)
    except (DescriptorLoadError, ValueError) as err:
        logger.error("Invalid descriptor", extra={"descriptor": args.descriptor, "error": str(err)})
        return VALIDATION_ERROR

    if args.dry_run:
        logger.info(
            "Dry run, would generate project",
            extra={"identifier": descriptor.identifier, "path": str(project_dir)},
        )
        return SUCCESS

    from benchforge.generation.generator import generate_project

    try:
        result = generate_project(descriptor, root, settings=settings, log=logger)
    except TemplateRenderError as err:
        logger.error("Template rendering failed", extra={"error": str(err)})
        return RUNTIME_ERROR
    except OSError as err:
        logger.error("Generation failed", extra={"error": str(err)}, exc_info=True)
        return RUNTIME_ERROR

    if not result.fresh:
        logger.warning(
            "Project written into a stale directory",
            extra={"path": str(result.directory_path), "error": str(result.error)},
        )
    return SUCCESS


def handle_info(args: argparse.Namespace) -> int:
    """Log host environment details relevant to generation."""
    exit_code, config, logger = _load_and_bootstrap(args, "info")
    if exit_code != SUCCESS:
        return exit_code

    settings = config.generator if config is not None else GeneratorSettings()
    host = get_host_info(settings.host_has_modern_jit)
    logger.info("Host environment", extra=host._asdict())
    return SUCCESS
