# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Structured JSON logging for benchforge.

Each entry is one JSON line: `ts`, `level`, `module`, `msg`, then whatever
the call site passed through `extra` (identifier, path, attempt, error...).
Generation code never formats context into the message text.

Module loggers are created at import time, long before the CLI has read
its config. `configure_package_logging` is what the bootstrap calls once
the config is known: it re-levels every `benchforge.*` logger, both the
existing ones and the ones imported later, and points them at the
configured log file. A run started with `--log-level DEBUG` therefore also
shows the directory retry lines.

  {"ts": "2026-...", "level": "DEBUG", "module": "benchforge.generation.directory",
   "msg": "Could not delete stale project directory", "attempt": 2, ...}
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER_PREFIX = "benchforge"

# Set by configure_package_logging; loggers created later pick these up too.
_package_level = "INFO"
_package_log_file: Optional[Path] = None

# Whatever a bare record carries is bookkeeping; anything beyond it came in
# through `extra`.
_RECORD_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _json_default(value: object) -> str:
    # Delete and copy failures are passed as-is; keep their type visible.
    if isinstance(value, BaseException):
        return f"{type(value).__name__}: {value}"
    return str(value)


class JsonFormatter(logging.Formatter):
    """Render a record as a single JSON object with its `extra` fields merged in."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
        }
        entry.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=_json_default)


def _resolve_log_level(level_name: str) -> int:
    upper = level_name.upper()
    if upper not in _LEVEL_NAMES:
        raise ValueError(
            f"Invalid log level '{level_name}'. Must be one of: {', '.join(sorted(_LEVEL_NAMES))}"
        )
    return getattr(logging, upper)


def _add_handler(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)


def _has_file_handler(logger: logging.Logger, log_file: Path) -> bool:
    target = str(log_file.resolve())
    return any(
        isinstance(handler, logging.FileHandler) and handler.baseFilename == target
        for handler in logger.handlers
    )


def get_logger(
    name: str,
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Return the JSON logger for `name`, creating its handlers on first use.

    Without an explicit level or file, the package-wide settings apply.
    Calling again for the same name re-levels the existing handlers instead
    of stacking new ones, and adds the file handler if `log_file` is new.

    Raises:
        ValueError: If `log_level` is not a known level name.
    """
    level = _resolve_log_level(log_level or _package_level)
    if log_file is None:
        log_file = _package_log_file
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    if not logger.handlers:
        _add_handler(logger, logging.StreamHandler(stream=sys.stdout), level)
    else:
        for handler in logger.handlers:
            handler.setLevel(level)

    if log_file is not None and not _has_file_handler(logger, log_file):
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _add_handler(logger, logging.FileHandler(str(log_file), encoding="utf-8"), level)

    return logger


def configure_package_logging(log_level: str, log_file: Optional[Path] = None) -> list[str]:
    """
    Apply the configured level and log file to every benchforge logger,
    including the ones created after this call.

    Returns:
        Names of the existing loggers that were reconfigured.
    """
    global _package_level, _package_log_file
    _resolve_log_level(log_level)
    _package_level = log_level
    _package_log_file = log_file

    names = sorted(
        name
        for name, existing in logging.Logger.manager.loggerDict.items()
        if isinstance(existing, logging.Logger)
        and (name == PACKAGE_LOGGER_PREFIX or name.startswith(PACKAGE_LOGGER_PREFIX + "."))
    )
    for name in names:
        get_logger(name, log_level=log_level, log_file=log_file)
    return names
