# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Run configuration for a benchmark job.

A RunConfiguration says how the generated program should be built and run:
target platform, framework version, JIT flavour, and the iteration counts.
Two conversions live here because the run configuration owns them:

  - Platform.to_config / Framework.to_config produce the values that go into
    the build descriptor.
  - RunConfiguration.to_definition produces the source expression that
    recreates the job inside the generated program.

The generators never look inside either result; they just paste it in.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from benchforge.descriptor.models import TypeReference

# Used for Framework.Host when discovery couldn't tell which framework the
# target binary was compiled against.
DEFAULT_FRAMEWORK_MONIKER = "v4.6"


class Mode(Enum):
    THROUGHPUT = "Throughput"
    SINGLE_RUN = "SingleRun"


class Platform(Enum):
    HOST = "Host"
    ANY_CPU = "AnyCpu"
    X86 = "X86"
    X64 = "X64"

    def to_config(self) -> str:
        """Platform value for the build descriptor."""
        return _PLATFORM_CONFIG[self]


_PLATFORM_CONFIG: dict[Platform, str] = {
    Platform.HOST: "AnyCPU",
    Platform.ANY_CPU: "AnyCPU",
    Platform.X86: "x86",
    Platform.X64: "x64",
}


class Framework(Enum):
    HOST = "Host"
    V40 = "V40"
    V45 = "V45"
    V451 = "V451"
    V452 = "V452"
    V46 = "V46"

    def to_config(self, target_type: TypeReference) -> str:
        """
        Framework moniker for the build descriptor.

        Host means "whatever the benchmark's own binary targets", which
        discovery records on the type reference.
        """
        if self is Framework.HOST:
            return target_type.target_framework or DEFAULT_FRAMEWORK_MONIKER
        return _FRAMEWORK_CONFIG[self]


_FRAMEWORK_CONFIG: dict[Framework, str] = {
    Framework.V40: "v4.0",
    Framework.V45: "v4.5",
    Framework.V451: "v4.5.1",
    Framework.V452: "v4.5.2",
    Framework.V46: "v4.6",
}


class Jit(Enum):
    HOST = "Host"
    LEGACY_JIT = "LegacyJit"
    RYU_JIT = "RyuJit"


def _count_literal(count: Optional[int]) -> str:
    return "Count.Auto" if count is None else f"new Count({count})"


@dataclass(frozen=True)
class RunConfiguration:
    """How to build and run one benchmark. None counts mean "let the engine decide"."""

    mode: Mode = Mode.THROUGHPUT
    platform: Platform = Platform.HOST
    framework: Framework = Framework.HOST
    jit: Jit = Jit.HOST
    launch_count: Optional[int] = None
    warmup_count: Optional[int] = None
    target_count: Optional[int] = None

    def to_definition(self) -> str:
        """
        Source expression that rebuilds this job in the generated program.

        Produces a single-line object initializer, e.g.
          new Job { Mode = Mode.Throughput, Platform = Platform.X64, ... }
        """
        members = [
            f"Mode = Mode.{self.mode.value}",
            f"Platform = Platform.{self.platform.value}",
            f"Jit = Jit.{self.jit.value}",
            f"Framework = Framework.{self.framework.value}",
            f"LaunchCount = {_count_literal(self.launch_count)}",
            f"WarmupCount = {_count_literal(self.warmup_count)}",
            f"TargetCount = {_count_literal(self.target_count)}",
        ]
        return "new Job { " + ", ".join(members) + " }"
