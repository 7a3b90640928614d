# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Descriptor loader.

Reads a YAML descriptor written by discovery and turns it into a frozen
BenchmarkDescriptor. The expected layout:

    identifier: MyBench
    harness_assembly: {name: BenchmarkDotNet, location: /libs/BenchmarkDotNet.dll}
    target:
      type:
        full_name: Samples.Algorithms
        namespace: Samples
        display_name: Algorithms
        assembly: {name: Samples, location: /build/Samples.dll}
        target_framework: v4.5      # optional
      method_name: Sort
      return_type: {...}            # optional, defaults to void
      operations_per_invoke: 1
      setup_method_name: Setup      # optional
      additional_logic: ""
    parameters:
      - {name: Size, value: 100, is_static: false}
    run:
      platform: x64
      framework: host
      jit: ryujit

Anything missing that generation needs is a hard error. We don't guess.
"""

from enum import Enum
from pathlib import Path, PureWindowsPath
from typing import Any, TypeVar

import yaml

from benchforge.descriptor.jobs import Framework, Jit, Mode, Platform, RunConfiguration
from benchforge.descriptor.models import (
    VOID_TYPE,
    BenchmarkDescriptor,
    BenchmarkTarget,
    DependencyReference,
    ParameterInstance,
    TypeReference,
)
from benchforge.generation.exceptions import DescriptorLoadError

E = TypeVar("E", bound=Enum)


def _require(data: dict[str, Any], key: str, where: str) -> Any:
    if key not in data or data[key] is None:
        raise DescriptorLoadError(f"Missing required key '{key}' in {where}")
    return data[key]


def _mapping(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise DescriptorLoadError(f"{where} must be a mapping, got {type(value).__name__}")
    return value


def _parse_enum(enum_type: type[E], raw: Any, where: str) -> E:
    """Match an enum by value or member name, ignoring case and underscores."""
    wanted = str(raw).replace("_", "").lower()
    for member in enum_type:
        if wanted in (member.value.lower(), member.name.replace("_", "").lower()):
            return member
    choices = ", ".join(member.value for member in enum_type)
    raise DescriptorLoadError(f"Unknown {where} '{raw}'. Expected one of: {choices}")


def _parse_optional_count(data: dict[str, Any], key: str) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise DescriptorLoadError(f"run.{key} must be a positive integer, got {value!r}")
    return value


def _parse_dependency(raw: Any, where: str, base_dir: Path | None = None) -> DependencyReference:
    data = _mapping(raw, where)
    location = str(_require(data, "location", where))
    if (
        base_dir is not None
        and not Path(location).is_absolute()
        and not PureWindowsPath(location).is_absolute()
    ):
        location = str(base_dir / location)
    return DependencyReference(
        name=str(_require(data, "name", where)),
        location=location,
    )


def _parse_type(raw: Any, where: str, base_dir: Path | None = None) -> TypeReference:
    data = _mapping(raw, where)
    full_name = str(_require(data, "full_name", where))
    target_framework = data.get("target_framework")
    return TypeReference(
        full_name=full_name,
        namespace=str(data.get("namespace") or ""),
        display_name=str(data.get("display_name") or full_name.rsplit(".", 1)[-1]),
        assembly=_parse_dependency(
            _require(data, "assembly", where), f"{where}.assembly", base_dir,
        ),
        target_framework=str(target_framework) if target_framework else None,
    )


def _parse_target(raw: Any, base_dir: Path | None = None) -> BenchmarkTarget:
    data = _mapping(raw, "target")
    return_type = data.get("return_type")
    operations = data.get("operations_per_invoke", 1)
    if isinstance(operations, bool) or not isinstance(operations, int) or operations < 1:
        raise DescriptorLoadError(
            f"target.operations_per_invoke must be a positive integer, got {operations!r}"
        )
    return BenchmarkTarget(
        type=_parse_type(_require(data, "type", "target"), "target.type", base_dir),
        method_name=str(_require(data, "method_name", "target")),
        return_type=(
            _parse_type(return_type, "target.return_type", base_dir)
            if return_type is not None
            else VOID_TYPE
        ),
        operations_per_invoke=operations,
        setup_method_name=data.get("setup_method_name") or None,
        additional_logic=str(data.get("additional_logic") or ""),
    )


def _parse_parameters(raw: Any) -> tuple[ParameterInstance, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise DescriptorLoadError(f"parameters must be a list, got {type(raw).__name__}")
    parameters = []
    for index, item in enumerate(raw):
        where = f"parameters[{index}]"
        data = _mapping(item, where)
        if "value" not in data:
            raise DescriptorLoadError(f"Missing required key 'value' in {where}")
        parameters.append(ParameterInstance(
            name=str(_require(data, "name", where)),
            value=data["value"],
            is_static=bool(data.get("is_static", False)),
        ))
    return tuple(parameters)


def _parse_run(raw: Any) -> RunConfiguration:
    if raw is None:
        return RunConfiguration()
    data = _mapping(raw, "run")
    return RunConfiguration(
        mode=_parse_enum(Mode, data.get("mode", Mode.THROUGHPUT.value), "mode"),
        platform=_parse_enum(Platform, data.get("platform", Platform.HOST.value), "platform"),
        framework=_parse_enum(Framework, data.get("framework", Framework.HOST.value), "framework"),
        jit=_parse_enum(Jit, data.get("jit", Jit.HOST.value), "jit"),
        launch_count=_parse_optional_count(data, "launch_count"),
        warmup_count=_parse_optional_count(data, "warmup_count"),
        target_count=_parse_optional_count(data, "target_count"),
    )


def parse_descriptor(data: dict[str, Any], base_dir: Path | None = None) -> BenchmarkDescriptor:
    """
    Build a descriptor from an already-parsed mapping.

    Relative binary locations are joined onto `base_dir` when one is given,
    and left as they are otherwise.
    """
    data = _mapping(data, "descriptor")
    identifier = str(_require(data, "identifier", "descriptor")).strip()
    if not identifier:
        raise DescriptorLoadError("Descriptor identifier must not be blank")
    return BenchmarkDescriptor(
        identifier=identifier,
        target=_parse_target(_require(data, "target", "descriptor"), base_dir),
        harness_assembly=_parse_dependency(
            _require(data, "harness_assembly", "descriptor"), "harness_assembly", base_dir,
        ),
        parameters=_parse_parameters(data.get("parameters")),
        run=_parse_run(data.get("run")),
    )


def load_descriptor(path: Path) -> BenchmarkDescriptor:
    """
    Load a descriptor from a YAML file.

    Relative binary locations are taken relative to the descriptor file,
    not the working directory.

    Raises:
        DescriptorLoadError: Missing file, bad YAML, or a malformed descriptor.
    """
    if not path.is_file():
        raise DescriptorLoadError(f"Descriptor file not found: {path}")

    try:
        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as err:
        raise DescriptorLoadError(f"Cannot read descriptor {path}: {err}") from err

    return parse_descriptor(parsed, base_dir=path.resolve().parent)
