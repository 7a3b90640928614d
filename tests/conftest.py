# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Shared pytest fixtures for benchforge tests.

The descriptor factory builds a small but complete descriptor whose binaries
live under tmp_path/lib, so generation can copy them for real. Host
snapshots are fixed so app.config tests don't depend on the test machine.
"""

import textwrap
from pathlib import Path
from typing import Any, Callable

import pytest

from benchforge.descriptor.jobs import RunConfiguration
from benchforge.descriptor.models import (
    BenchmarkDescriptor,
    BenchmarkTarget,
    DependencyReference,
    TypeReference,
)
from benchforge.runtime.environment import HostInfo


def _host(has_modern_jit: bool) -> HostInfo:
    return HostInfo(
        python_version="3.11.0",
        platform="Windows",
        architecture="AMD64",
        hostname="bench-host",
        is_64bit=has_modern_jit,
        has_modern_jit=has_modern_jit,
    )


@pytest.fixture()
def modern_host() -> HostInfo:
    return _host(has_modern_jit=True)


@pytest.fixture()
def legacy_host() -> HostInfo:
    return _host(has_modern_jit=False)


@pytest.fixture()
def lib_dir(tmp_path: Path) -> Path:
    """Fake binaries where discovery 'found' them."""
    lib = tmp_path / "lib"
    lib.mkdir()
    (lib / "BenchmarkDotNet.dll").write_bytes(b"harness")
    (lib / "Samples.dll").write_bytes(b"samples")
    (lib / "Samples.Models.dll").write_bytes(b"models")
    return lib


@pytest.fixture()
def make_descriptor(lib_dir: Path) -> Callable[..., BenchmarkDescriptor]:
    """
    Factory for descriptors. Keyword args override BenchmarkTarget fields
    (type, method_name, return_type, ...) or descriptor fields
    (identifier, parameters, run, harness_assembly).
    """

    def factory(**overrides: Any) -> BenchmarkDescriptor:
        target_fields = {
            "type": TypeReference(
                full_name="Samples.Algorithms",
                namespace="Samples",
                display_name="Algorithms",
                assembly=DependencyReference("Samples", str(lib_dir / "Samples.dll")),
                target_framework="v4.5",
            ),
            "method_name": "Sort",
        }
        descriptor_fields: dict[str, Any] = {
            "identifier": "MyBench",
            "harness_assembly": DependencyReference(
                "BenchmarkDotNet", str(lib_dir / "BenchmarkDotNet.dll"),
            ),
            "parameters": (),
            "run": RunConfiguration(),
        }
        for key, value in overrides.items():
            if key in descriptor_fields:
                descriptor_fields[key] = value
            else:
                target_fields[key] = value
        return BenchmarkDescriptor(target=BenchmarkTarget(**target_fields), **descriptor_fields)

    return factory


@pytest.fixture()
def models_type(lib_dir: Path) -> TypeReference:
    """A non-void return type living in its own binary."""
    return TypeReference(
        full_name="Samples.Models.Result",
        namespace="Samples.Models",
        display_name="Result",
        assembly=DependencyReference("Samples.Models", str(lib_dir / "Samples.Models.dll")),
    )


@pytest.fixture()
def tmp_config_file(tmp_path: Path) -> Path:
    """Smallest config that passes schema validation."""
    config_content = textwrap.dedent("""\
        global:
          config_version: "1.0.0"
          log_level: "DEBUG"
    """)
    config_file = tmp_path / "test_config.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file
