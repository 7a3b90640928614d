# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Project directory lifecycle.

Each benchmark gets `<root>/<identifier>/`. A directory left behind by an
earlier run is deleted and recreated so the new project starts empty. The
earlier run's own process may still be tearing down and holding file
handles, so deletion is retried a bounded number of times with a fixed
pause. There is no cross-process signal to wait on instead.

If the directory can't be removed, that's not an error here: the caller
gets fresh=False plus the last delete failure and decides whether a stale
directory is acceptable.
"""

import logging
import shutil
import time
from pathlib import Path
from typing import Callable, Optional

from benchforge.descriptor.models import GenerationResult
from benchforge.logging.logger import get_logger

logger = get_logger(__name__)

DEFAULT_DELETE_ATTEMPTS = 3
DEFAULT_RETRY_DELAY_SECONDS = 0.5


def resolve_project_directory(identifier: str, root: Path) -> Path:
    """
    Map an identifier to its directory under `root`.

    Identifiers are directory names, not paths. The result is always a
    direct child of `root`: separators, `.` and `..` are rejected, so two
    different identifiers never share a directory and one project never
    nests inside another.

    Raises:
        ValueError: If the identifier is blank or is not a single name.
    """
    if not identifier or not identifier.strip():
        raise ValueError("Benchmark identifier must not be blank")

    if "/" in identifier or "\\" in identifier:
        raise ValueError(
            f"Identifier '{identifier}' contains a path separator; it must be a "
            f"single directory name"
        )

    resolved_root = root.resolve()
    target = (resolved_root / identifier).resolve()
    if target.parent != resolved_root:
        raise ValueError(
            f"Identifier '{identifier}' resolves to '{target}', which is not a "
            f"directory inside '{resolved_root}'"
        )
    return target


def prepare_directory(
    identifier: str,
    root: Path,
    attempts: int = DEFAULT_DELETE_ATTEMPTS,
    retry_delay_seconds: float = DEFAULT_RETRY_DELAY_SECONDS,
    sleep: Optional[Callable[[float], None]] = None,
    remove: Optional[Callable[[Path], None]] = None,
    log: Optional[logging.Logger] = None,
) -> GenerationResult:
    """
    Provision a clean project directory for one benchmark.

    Args:
        identifier: Benchmark identifier, used as the directory name.
        root: Directory that holds all generated projects.
        attempts: Maximum number of delete attempts for a stale directory.
        retry_delay_seconds: Pause before each attempt after the first.
        sleep: Pause function, time.sleep unless injected.
        remove: Recursive delete, shutil.rmtree unless injected.
        log: Logger to use instead of the module logger.

    Returns:
        GenerationResult with fresh=True when the directory is new and empty,
        fresh=False (and the last delete error) when a stale one survived.
    """
    if attempts < 1:
        raise ValueError(f"attempts must be >= 1, got {attempts}")

    log = log or logger
    sleep = sleep or time.sleep
    remove = remove or shutil.rmtree
    directory = resolve_project_directory(identifier, root)

    exists = directory.exists()
    delete_error: Optional[Exception] = None
    attempt = 0
    while exists and attempt < attempts:
        if attempt != 0:
            sleep(retry_delay_seconds)
        attempt += 1
        try:
            remove(directory)
            exists = directory.exists()
        except Exception as err:
            delete_error = err
            log.debug(
                "Could not delete stale project directory",
                extra={"path": str(directory), "attempt": attempt, "error": str(err)},
            )

    if exists:
        log.warning(
            "Stale project directory could not be removed",
            extra={"path": str(directory), "attempts": attempt, "error": str(delete_error)},
        )
        return GenerationResult(directory_path=directory, fresh=False, error=delete_error)

    # Something else may have recreated or removed it since the check above.
    directory.mkdir(parents=True, exist_ok=True)
    return GenerationResult(directory_path=directory, fresh=True, error=None)
