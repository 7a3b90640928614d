# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for loading descriptors from YAML.
"""

import textwrap
from pathlib import Path

import pytest

from benchforge.descriptor.jobs import Framework, Jit, Mode, Platform
from benchforge.descriptor.loader import load_descriptor
from benchforge.descriptor.models import VOID_TYPE
from benchforge.generation.exceptions import DescriptorLoadError

_MINIMAL = """\
identifier: MyBench
harness_assembly: {name: BenchmarkDotNet, location: /lib/BenchmarkDotNet.dll}
target:
  type:
    full_name: Samples.Algorithms
    namespace: Samples
    assembly: {name: Samples, location: /lib/Samples.dll}
  method_name: Sort
"""


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "descriptor.yaml"
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


class TestLoadValidDescriptor:
    def test_relative_locations_follow_the_descriptor_file(self, tmp_path: Path) -> None:
        content = _MINIMAL.replace("/lib/Samples.dll", "lib/Samples.dll")

        descriptor = load_descriptor(_write(tmp_path, content))

        assert descriptor.target.type.assembly.location == str(tmp_path.resolve() / "lib" / "Samples.dll")
        assert descriptor.harness_assembly.location == "/lib/BenchmarkDotNet.dll"

    def test_windows_absolute_locations_are_kept(self, tmp_path: Path) -> None:
        content = _MINIMAL.replace("/lib/Samples.dll", "'C:\\build\\Samples.dll'")

        descriptor = load_descriptor(_write(tmp_path, content))

        assert descriptor.target.type.assembly.location == "C:\\build\\Samples.dll"

    def test_minimal_descriptor_gets_defaults(self, tmp_path: Path) -> None:
        descriptor = load_descriptor(_write(tmp_path, _MINIMAL))

        assert descriptor.identifier == "MyBench"
        assert descriptor.target.type.display_name == "Algorithms"
        assert descriptor.target.return_type == VOID_TYPE
        assert descriptor.target.operations_per_invoke == 1
        assert descriptor.target.setup_method_name is None
        assert descriptor.parameters == ()
        assert descriptor.run.jit is Jit.HOST

    def test_full_descriptor(self, tmp_path: Path) -> None:
        content = _MINIMAL + textwrap.dedent("""\
            parameters:
              - {name: Size, value: 100}
              - {name: Label, value: abc, is_static: true}
            run:
              mode: single_run
              platform: x64
              framework: V451
              jit: ryujit
              warmup_count: 3
        """)
        descriptor = load_descriptor(_write(tmp_path, content))

        assert [p.value for p in descriptor.parameters] == [100, "abc"]
        assert descriptor.parameters[1].is_static is True
        assert descriptor.run.mode is Mode.SINGLE_RUN
        assert descriptor.run.platform is Platform.X64
        assert descriptor.run.framework is Framework.V451
        assert descriptor.run.jit is Jit.RYU_JIT
        assert descriptor.run.warmup_count == 3
        assert descriptor.run.target_count is None

    def test_sample_descriptor_in_repo_loads(self) -> None:
        sample = Path(__file__).resolve().parents[2] / "configs" / "sample_descriptor.yaml"
        descriptor = load_descriptor(sample)
        assert descriptor.target.return_type.display_name == "int"


class TestLoadInvalidDescriptor:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DescriptorLoadError, match="not found"):
            load_descriptor(tmp_path / "missing.yaml")

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        with pytest.raises(DescriptorLoadError, match="mapping"):
            load_descriptor(_write(tmp_path, "- just\n- a list\n"))

    def test_missing_method_name(self, tmp_path: Path) -> None:
        content = _MINIMAL.replace("  method_name: Sort\n", "")
        with pytest.raises(DescriptorLoadError, match="method_name"):
            load_descriptor(_write(tmp_path, content))

    def test_unknown_jit(self, tmp_path: Path) -> None:
        content = _MINIMAL + "run: {jit: turbo}\n"
        with pytest.raises(DescriptorLoadError, match="Unknown jit"):
            load_descriptor(_write(tmp_path, content))

    def test_parameter_without_value(self, tmp_path: Path) -> None:
        content = _MINIMAL + "parameters:\n  - {name: Size}\n"
        with pytest.raises(DescriptorLoadError, match="value"):
            load_descriptor(_write(tmp_path, content))

    def test_non_positive_operations_per_invoke(self, tmp_path: Path) -> None:
        content = _MINIMAL + "  operations_per_invoke: 0\n"
        with pytest.raises(DescriptorLoadError, match="operations_per_invoke"):
            load_descriptor(_write(tmp_path, content))
