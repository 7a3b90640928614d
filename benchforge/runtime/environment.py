# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Host environment detection for benchforge.

Generation only needs one real fact from the host: whether its runtime uses
the modern JIT by default. That decides the legacy flag in app.config when
a job leaves the JIT choice to the host. The modern JIT ships for 64-bit
processes only, so bitness is the signal; config can override it for hosts
where that guess is wrong.
"""

import platform
import sys
from typing import NamedTuple, Optional

MINIMUM_PYTHON_MAJOR = 3
MINIMUM_PYTHON_MINOR = 11


class HostInfo(NamedTuple):
    """Snapshot of the current host environment."""

    python_version: str
    platform: str
    architecture: str
    hostname: str
    is_64bit: bool
    has_modern_jit: bool


def get_python_version() -> tuple[int, int, int]:
    """Return the current Python version as a (major, minor, micro) tuple."""
    return sys.version_info[:3]


def check_minimum_python() -> None:
    """
    Verify we're running Python 3.11+.

    Raises:
        RuntimeError: If Python version is below 3.11.
    """
    major, minor, _ = get_python_version()
    if major < MINIMUM_PYTHON_MAJOR or (
        major == MINIMUM_PYTHON_MAJOR and minor < MINIMUM_PYTHON_MINOR
    ):
        raise RuntimeError(
            f"benchforge requires Python >= {MINIMUM_PYTHON_MAJOR}.{MINIMUM_PYTHON_MINOR}, "
            f"but you're running {major}.{minor}. Please upgrade."
        )


def get_host_info(has_modern_jit_override: Optional[bool] = None) -> HostInfo:
    """
    Collect host information for the generator and for diagnostics.

    Args:
        has_modern_jit_override: Force the modern JIT answer instead of
            deriving it from process bitness.
    """
    is_64bit = sys.maxsize > 2**32
    has_modern_jit = is_64bit if has_modern_jit_override is None else has_modern_jit_override
    return HostInfo(
        python_version=platform.python_version(),
        platform=platform.system(),
        architecture=platform.machine(),
        hostname=platform.node(),
        is_64bit=is_64bit,
        has_modern_jit=has_modern_jit,
    )
