# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for host environment detection.
"""

import sys
from unittest.mock import patch

import pytest

from benchforge.runtime.environment import check_minimum_python, get_host_info


class TestHostInfo:
    def test_modern_jit_follows_bitness(self) -> None:
        host = get_host_info()
        assert host.is_64bit == (sys.maxsize > 2**32)
        assert host.has_modern_jit == host.is_64bit

    @pytest.mark.parametrize("override", [True, False])
    def test_override_wins(self, override: bool) -> None:
        assert get_host_info(override).has_modern_jit is override


class TestMinimumPython:
    def test_current_interpreter_passes(self) -> None:
        check_minimum_python()

    def test_old_interpreter_fails(self) -> None:
        with patch("benchforge.runtime.environment.get_python_version", return_value=(3, 9, 0)):
            with pytest.raises(RuntimeError, match="requires Python"):
                check_minimum_python()
