# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Data models for benchmark descriptors and generation results.

These are frozen dataclasses: a descriptor is fully populated by discovery
before generation starts and nothing downstream is allowed to change it.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from benchforge.descriptor.jobs import RunConfiguration

VOID_TYPE_NAME = "System.Void"


@dataclass(frozen=True)
class DependencyReference:
    """
    A binary the generated build references.

    `name` is the logical name used in the reference entry, `location` is
    where discovery found the file. Locations may use either path separator
    since they often come from a Windows host.
    """

    name: str
    location: str

    @property
    def file_name(self) -> str:
        return self.location.replace("\\", "/").rstrip("/").rsplit("/", 1)[-1]


@dataclass(frozen=True)
class TypeReference:
    """Opaque identity of a host type, decided once at discovery time."""

    full_name: str
    namespace: str
    display_name: str
    assembly: DependencyReference
    target_framework: Optional[str] = None

    @property
    def is_void(self) -> bool:
        return self.full_name == VOID_TYPE_NAME


VOID_TYPE = TypeReference(
    full_name=VOID_TYPE_NAME,
    namespace="System",
    display_name="void",
    assembly=DependencyReference(name="mscorlib", location="mscorlib.dll"),
)


@dataclass(frozen=True)
class BenchmarkTarget:
    """The method being benchmarked and what surrounds it."""

    type: TypeReference
    method_name: str
    return_type: TypeReference = VOID_TYPE
    operations_per_invoke: int = 1
    setup_method_name: Optional[str] = None
    additional_logic: str = ""


@dataclass(frozen=True)
class ParameterInstance:
    """One parameter value to assign before the benchmark runs."""

    name: str
    value: Any
    is_static: bool = False


@dataclass(frozen=True)
class BenchmarkDescriptor:
    """
    Everything generation needs for one benchmark.

    `identifier` doubles as the project directory name, so two descriptors
    with different identifiers never write to the same place.
    """

    identifier: str
    target: BenchmarkTarget
    harness_assembly: DependencyReference
    parameters: tuple[ParameterInstance, ...] = field(default_factory=tuple)
    run: RunConfiguration = field(default_factory=RunConfiguration)


@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of provisioning a project directory.

    fresh=False means the old directory couldn't be removed; the path is
    still usable but may hold leftovers. `error` carries the last delete
    failure in that case.
    """

    directory_path: Path
    fresh: bool
    error: Optional[BaseException] = None
