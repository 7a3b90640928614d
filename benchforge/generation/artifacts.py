# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Artifact generators.

Each generator is a pure function from the descriptor (plus the host
snapshot, for app.config) to an Artifact: a file name and its content.
Nothing here touches the filesystem except `write_artifact`, so every
generator can be tested by looking at a string.

The four artifacts of a generated project:
  Program.cs          — entry point that runs the benchmark
  Program.csproj      — build descriptor with platform, framework, references
  BuildBenchmark.bat  — build trigger script
  app.config          — runtime configuration (legacy JIT switch)
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from benchforge.descriptor.jobs import Jit, RunConfiguration
from benchforge.descriptor.models import BenchmarkDescriptor, ParameterInstance
from benchforge.generation.dependencies import DEFAULT_BASE_RUNTIME_BINARY, reference_fragment
from benchforge.generation.templates import render
from benchforge.runtime.environment import HostInfo
from benchforge.utils.filesystem import atomic_write, make_executable

MAIN_CLASS_NAME = "Program"
PROGRAM_FILE_NAME = f"{MAIN_CLASS_NAME}.cs"
PROJECT_FILE_NAME = f"{MAIN_CLASS_NAME}.csproj"
BUILD_SCRIPT_FILE_NAME = "BuildBenchmark.bat"
APP_CONFIG_FILE_NAME = "app.config"

ARTIFACT_FILE_NAMES: tuple[str, ...] = (
    PROGRAM_FILE_NAME,
    PROJECT_FILE_NAME,
    BUILD_SCRIPT_FILE_NAME,
    APP_CONFIG_FILE_NAME,
)


@dataclass(frozen=True)
class Artifact:
    """One generated file, not yet written."""

    file_name: str
    content: str
    executable: bool = False


def write_artifact(directory: Path, artifact: Artifact) -> Path:
    """Write an artifact into `directory`, replacing any file of the same name."""
    path = directory / artifact.file_name
    atomic_write(path, artifact.content)
    if artifact.executable:
        make_executable(path)
    return path


def render_parameter_value(value: Any) -> str:
    """
    Source literal for a parameter value.

    bool is checked first since it's an int subclass. Types we don't know
    about fall through to str(); nothing validates them.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return f'"{value}"'
    return str(value)


def render_parameter_assignment(parameter: ParameterInstance) -> str:
    owner = "" if parameter.is_static else "instance."
    return f"{owner}{parameter.name} = {render_parameter_value(parameter.value)};"


def render_program(descriptor: BenchmarkDescriptor, strict: bool = False) -> Artifact:
    """Entry-point source for the generated project."""
    target = descriptor.target
    return_type = target.return_type
    is_void = return_type.is_void

    target_type_namespace = (
        f"using {target.type.namespace};" if target.type.namespace.strip() else ""
    )

    # The template always has `using System;`, don't emit it twice.
    skip_return_namespace = (
        is_void
        or return_type.namespace == "System"
        or not return_type.namespace.strip()
    )
    return_type_namespace = "" if skip_return_namespace else f"using {return_type.namespace};"

    return_type_name = "void" if is_void else return_type.display_name

    substitutions = {
        "OperationsPerInvoke": str(target.operations_per_invoke),
        "TargetTypeNamespace": target_type_namespace,
        "TargetMethodReturnTypeNamespace": return_type_namespace,
        "TargetTypeName": target.type.full_name.replace("+", "."),
        "TargetMethodName": target.method_name,
        "TargetMethodResultHolder": "" if is_void else f"private {return_type_name} value;",
        "TargetMethodDelegateType": "Action" if is_void else f"Func<{return_type_name}>",
        "TargetMethodHoldValue": "" if is_void else "value = ",
        "TargetMethodReturnType": return_type_name,
        # Setup is optional; an empty lambda keeps the call site unconditional.
        "SetupMethodName": target.setup_method_name or "() => { }",
        "IdleImplementation": "" if is_void else f"return default({return_type_name});",
        "AdditionalLogic": target.additional_logic,
        "TargetBenchmarkTaskArguments": descriptor.run.to_definition(),
        "ParamsContent": "".join(
            render_parameter_assignment(parameter) for parameter in descriptor.parameters
        ),
    }

    return Artifact(
        file_name=PROGRAM_FILE_NAME,
        content=render("BenchmarkProgram.txt", substitutions, strict=strict),
    )


def render_project_file(
    descriptor: BenchmarkDescriptor,
    base_runtime_binary: str = DEFAULT_BASE_RUNTIME_BINARY,
    strict: bool = False,
) -> Artifact:
    """Build descriptor with platform, framework and binary references."""
    target = descriptor.target
    run = descriptor.run

    substitutions = {
        "Platform": run.platform.to_config(),
        "Framework": run.framework.to_config(target.type),
        "TargetAssemblyReference": reference_fragment(
            target.type.assembly, base_runtime_binary, strict,
        ),
        # One entry per type, even when both live in the same binary.
        "TargetMethodReturnTypeAssemblyReference": reference_fragment(
            target.return_type.assembly, base_runtime_binary, strict,
        ),
    }

    return Artifact(
        file_name=PROJECT_FILE_NAME,
        content=render("BenchmarkCsproj.txt", substitutions, strict=strict),
    )


def render_build_script(strict: bool = False) -> Artifact:
    """Static build trigger script."""
    return Artifact(
        file_name=BUILD_SCRIPT_FILE_NAME,
        content=render("BuildBenchmark.txt", {}, strict=strict),
        executable=True,
    )


def use_legacy_jit(run: RunConfiguration, host: HostInfo) -> bool:
    """
    Whether the generated program should run on the legacy JIT.

    Only an explicit RyuJit choice, or a Host choice on a host whose
    default is already the modern JIT, turns it off.
    """
    if run.jit is Jit.RYU_JIT:
        return False
    if run.jit is Jit.HOST and host.has_modern_jit:
        return False
    return True


def render_app_config(run: RunConfiguration, host: HostInfo, strict: bool = False) -> Artifact:
    """Runtime configuration; empty when the job leaves the JIT to the host."""
    if run.jit is Jit.HOST:
        content = render("BenchmarkAppConfigEmpty.txt", {}, strict=strict)
    else:
        content = render(
            "BenchmarkAppConfig.txt",
            {"UseLegacyJit": "1" if use_legacy_jit(run, host) else "0"},
            strict=strict,
        )
    return Artifact(file_name=APP_CONFIG_FILE_NAME, content=content)
