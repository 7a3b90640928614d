# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Config loader: YAML file in, frozen BenchforgeConfig out.

Relative paths in the file (`generator.output_root`, `global.log_file`) are
anchored to the directory holding the config, the same way descriptor
binary locations are anchored to the descriptor file. A config can then
be checked in next to a benchmark suite and used from any working
directory.

Anything that goes wrong is a ConfigError. Nothing is defaulted around a
broken file.
"""

from pathlib import Path, PureWindowsPath
from typing import Any

import yaml
from pydantic import ValidationError

from benchforge.config.exceptions import ConfigLoadError, ConfigValidationError
from benchforge.config.schema import BenchforgeConfig

# (section, key) pairs holding filesystem paths.
_PATH_KEYS: tuple[tuple[str, str], ...] = (
    ("global", "log_file"),
    ("generator", "output_root"),
)


def _read_yaml_file(config_path: Path) -> dict[str, Any]:
    """
    Parse the config file into a plain mapping.

    Raises:
        ConfigLoadError: Missing or unreadable file, bad YAML, or a document
            that isn't a mapping.
    """
    if not config_path.is_file():
        reason = "not a file" if config_path.exists() else "not found"
        raise ConfigLoadError(f"Config file {reason}: {config_path}")

    try:
        parsed = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except OSError as err:
        raise ConfigLoadError(f"Cannot read config file {config_path}: {err}") from err
    except yaml.YAMLError as err:
        raise ConfigLoadError(f"Invalid YAML in {config_path}: {err}") from err

    if not isinstance(parsed, dict):
        raise ConfigLoadError(
            f"Config file {config_path} must contain a YAML mapping, got {type(parsed).__name__}"
        )
    return parsed


def _anchor_paths(raw: dict[str, Any], base_dir: Path) -> dict[str, Any]:
    """Copy of `raw` with relative path settings joined onto `base_dir`."""
    anchored = dict(raw)
    for section_name, key in _PATH_KEYS:
        section = anchored.get(section_name)
        # Wrong shapes are left for schema validation to report.
        if not isinstance(section, dict) or not isinstance(section.get(key), str):
            continue
        value = section[key]
        if Path(value).is_absolute() or PureWindowsPath(value).is_absolute():
            continue
        anchored[section_name] = {**section, key: str(base_dir / value)}
    return anchored


def load_config(config_path: Path) -> BenchforgeConfig:
    """
    Load and validate a config file.

    Raises:
        ConfigLoadError: File I/O or YAML parse failures.
        ConfigValidationError: Schema violations (missing fields, wrong types, unknown keys).
    """
    raw = _anchor_paths(_read_yaml_file(config_path), config_path.resolve().parent)

    try:
        return BenchforgeConfig.model_validate(raw)
    except ValidationError as err:
        raise ConfigValidationError(f"Config validation failed for {config_path}:\n{err}") from err
