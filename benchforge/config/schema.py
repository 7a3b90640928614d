# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Type-safe configuration schemas for benchforge.

Each config section is a frozen pydantic model:
  - frozen=True: immutability after construction
  - extra="forbid": unknown fields cause immediate failure
  - validate_default=True: even defaults get type-checked

The generator section replaces what used to be ambient process state: the
output root is an explicit setting instead of whatever the current working
directory happens to be, and the directory retry budget lives here rather
than as magic numbers in the lifecycle code.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GlobalConfig(BaseModel):
    """Cross-cutting settings: schema version and observability."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    config_version: str = Field(
        description="Schema version for compatibility tracking, e.g. '1.0.0'"
    )
    log_level: str = Field(
        default="INFO",
        description="One of DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path for file-based log output",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        upper = value.upper()
        if upper not in _VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_VALID_LOG_LEVELS)}")
        return upper


class GeneratorSettings(BaseModel):
    """
    Knobs for project generation.

    The 3 attempts / 0.5s defaults absorb a previous benchmark process that
    hasn't released its file handles yet. There's no handoff signal from that
    process, so a bounded retry is all we can do.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    output_root: Optional[str] = Field(
        default=None,
        description="Directory that receives <identifier>/ project folders. None means cwd.",
    )
    delete_attempts: int = Field(
        default=3,
        ge=1,
        description="How many times to try deleting a stale project directory",
    )
    retry_delay_seconds: float = Field(
        default=0.5,
        ge=0.0,
        description="Pause before every delete attempt after the first",
    )
    base_runtime_binary: str = Field(
        default="mscorlib.dll",
        min_length=1,
        description="Platform standard library binary; never referenced or copied",
    )
    strict_templates: bool = Field(
        default=False,
        description="Fail when a rendered template still contains placeholder markers",
    )
    host_has_modern_jit: Optional[bool] = Field(
        default=None,
        description="Override host detection of modern JIT availability",
    )


class BenchforgeConfig(BaseModel):
    """
    Top-level config container.

    Only `global:` is required. A missing `generator:` section means all
    generator defaults apply.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    global_config: GlobalConfig = Field(alias="global")
    generator: GeneratorSettings = Field(default_factory=GeneratorSettings)
