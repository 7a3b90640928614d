# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for artifact write helpers.
"""

import os
import stat
from pathlib import Path

import pytest

from benchforge.utils.filesystem import atomic_write, make_executable


class TestAtomicWrite:
    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        target = tmp_path / "nested" / "Program.cs"
        atomic_write(target, "class Program {}")
        assert target.read_text(encoding="utf-8") == "class Program {}"

    def test_overwrites_existing_file(self, tmp_path: Path) -> None:
        target = tmp_path / "app.config"
        atomic_write(target, "first")
        atomic_write(target, "second")
        assert target.read_text(encoding="utf-8") == "second"

    def test_no_leftover_temp_files(self, tmp_path: Path) -> None:
        atomic_write(tmp_path / "Program.cs", "x")
        assert list(tmp_path.glob(".benchforge_tmp_*")) == []


@pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
def test_make_executable_sets_exec_bits(tmp_path: Path) -> None:
    script = tmp_path / "BuildBenchmark.bat"
    script.write_text("@echo off", encoding="utf-8")
    script.chmod(0o644)

    make_executable(script)

    mode = script.stat().st_mode
    assert mode & stat.S_IXUSR and mode & stat.S_IXGRP and mode & stat.S_IXOTH
