# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Top-level project generation.

Order matters and is fixed:
  1. provision the directory
  2. Program.cs
  3. Program.csproj, then make sure its referenced binaries are in place
  4. BuildBenchmark.bat
  5. app.config

Artifacts are written even into a stale directory; the returned
GenerationResult tells the caller that the directory wasn't cleared.
"""

import logging
from pathlib import Path
from typing import Optional

from benchforge.config.schema import GeneratorSettings
from benchforge.descriptor.models import BenchmarkDescriptor, GenerationResult
from benchforge.generation.artifacts import (
    render_app_config,
    render_build_script,
    render_program,
    render_project_file,
    write_artifact,
)
from benchforge.generation.dependencies import ensure_dependency_present
from benchforge.generation.directory import prepare_directory
from benchforge.logging.logger import get_logger
from benchforge.runtime.environment import HostInfo, get_host_info

logger = get_logger(__name__)


def generate_project(
    descriptor: BenchmarkDescriptor,
    root: Path,
    settings: Optional[GeneratorSettings] = None,
    host: Optional[HostInfo] = None,
    log: Optional[logging.Logger] = None,
) -> GenerationResult:
    """
    Generate the full project for one benchmark under `root`.

    Args:
        descriptor: The benchmark to generate a project for.
        root: Directory that receives `<identifier>/`.
        settings: Generator settings; defaults apply when omitted.
        host: Host snapshot for app.config; detected when omitted.
        log: Logger to use instead of the module logger.

    Returns:
        The directory provisioning result.

    Raises:
        OSError: If a referenced binary can't be copied into place, or an
            artifact can't be written.
        TemplateRenderError: In strict mode, if a template has unmapped placeholders.
    """
    settings = settings or GeneratorSettings()
    log = log or logger
    if host is None:
        host = get_host_info(settings.host_has_modern_jit)
    strict = settings.strict_templates

    log.info(
        "Generating benchmark project",
        extra={"identifier": descriptor.identifier, "root": str(root)},
    )

    result = prepare_directory(
        descriptor.identifier,
        root,
        attempts=settings.delete_attempts,
        retry_delay_seconds=settings.retry_delay_seconds,
        log=log,
    )
    project_dir = result.directory_path

    write_artifact(project_dir, render_program(descriptor, strict=strict))

    write_artifact(
        project_dir,
        render_project_file(descriptor, settings.base_runtime_binary, strict=strict),
    )
    target = descriptor.target
    for reference in (
        descriptor.harness_assembly,
        target.type.assembly,
        target.return_type.assembly,
    ):
        ensure_dependency_present(reference, project_dir, settings.base_runtime_binary, log=log)

    write_artifact(project_dir, render_build_script(strict=strict))
    write_artifact(project_dir, render_app_config(descriptor.run, host, strict=strict))

    log.info(
        "Benchmark project generated",
        extra={
            "identifier": descriptor.identifier,
            "path": str(project_dir),
            "fresh": result.fresh,
        },
    )
    return result
