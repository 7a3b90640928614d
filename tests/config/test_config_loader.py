# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for the config loader.

  1. Valid YAML loads into a frozen config with generator defaults
  2. Missing required fields and unknown keys raise ConfigValidationError
  3. Broken YAML and missing files raise ConfigLoadError
"""

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from benchforge.config.exceptions import ConfigLoadError, ConfigValidationError
from benchforge.config.loader import load_config


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(textwrap.dedent(content), encoding="utf-8")
    return path


class TestLoadValidConfig:
    def test_minimal_config_uses_generator_defaults(self, tmp_config_file: Path) -> None:
        config = load_config(tmp_config_file)

        assert config.global_config.log_level == "DEBUG"
        assert config.generator.delete_attempts == 3
        assert config.generator.retry_delay_seconds == 0.5
        assert config.generator.base_runtime_binary == "mscorlib.dll"
        assert config.generator.output_root is None
        assert config.generator.strict_templates is False

    def test_generator_section(self, tmp_path: Path) -> None:
        config = load_config(_write(tmp_path, """\
            global:
              config_version: "1.0.0"
            generator:
              output_root: /tmp/bench
              delete_attempts: 5
              strict_templates: true
        """))

        assert config.generator.output_root == "/tmp/bench"
        assert config.generator.delete_attempts == 5
        assert config.generator.strict_templates is True

    def test_config_is_frozen(self, tmp_config_file: Path) -> None:
        config = load_config(tmp_config_file)
        with pytest.raises(ValidationError):
            config.generator.delete_attempts = 10  # type: ignore[misc]

    def test_relative_paths_follow_the_config_file(self, tmp_path: Path) -> None:
        config = load_config(_write(tmp_path, """\
            global:
              config_version: "1.0.0"
              log_file: logs/benchforge.log
            generator:
              output_root: projects
        """))

        base = tmp_path.resolve()
        assert config.global_config.log_file == str(base / "logs" / "benchforge.log")
        assert config.generator.output_root == str(base / "projects")

    def test_absolute_paths_are_kept(self, tmp_path: Path) -> None:
        config = load_config(_write(tmp_path, """\
            global:
              config_version: "1.0.0"
            generator:
              output_root: 'D:\\bench'
        """))

        assert config.generator.output_root == "D:\\bench"

    def test_repo_config_loads(self) -> None:
        repo_config = Path(__file__).resolve().parents[2] / "configs" / "benchforge.yaml"
        assert load_config(repo_config).global_config.config_version == "1.0.0"


class TestInvalidConfig:
    def test_missing_global_section(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigValidationError):
            load_config(_write(tmp_path, "generator: {}\n"))

    def test_unknown_key(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigValidationError):
            load_config(_write(tmp_path, """\
                global:
                  config_version: "1.0.0"
                generator:
                  retries: 3
            """))

    def test_zero_attempts(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigValidationError):
            load_config(_write(tmp_path, """\
                global:
                  config_version: "1.0.0"
                generator:
                  delete_attempts: 0
            """))

    def test_bad_log_level(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigValidationError):
            load_config(_write(tmp_path, """\
                global:
                  config_version: "1.0.0"
                  log_level: LOUD
            """))

    def test_broken_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError):
            load_config(_write(tmp_path, "global: [unclosed\n"))

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError, match="not found"):
            load_config(tmp_path / "nope.yaml")

    def test_directory_is_not_a_config(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError, match="not a file"):
            load_config(tmp_path)

    def test_path_key_with_wrong_type_is_a_validation_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigValidationError):
            load_config(_write(tmp_path, """\
                global:
                  config_version: "1.0.0"
                generator:
                  output_root: [a, b]
            """))
