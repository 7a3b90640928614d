# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Dependency placement for generated projects.

The build descriptor references binaries by a relative hint path,
`..\\<file name>`, i.e. right next to the project directory. When the
benchmark was launched from somewhere else (a scratch shell, a notebook)
those binaries may not be there, so we copy them in from wherever
discovery found them.

The platform's base runtime binary is part of every install and is never
referenced or copied.

A failed copy is the one fatal error in generation: without the binary the
project can't build, so the error is logged and re-raised.
"""

import logging
import shutil
from pathlib import Path
from typing import Optional

from benchforge.descriptor.models import DependencyReference
from benchforge.generation.templates import render
from benchforge.logging.logger import get_logger

logger = get_logger(__name__)

DEFAULT_BASE_RUNTIME_BINARY = "mscorlib.dll"


def is_base_runtime(reference: DependencyReference, base_runtime_binary: str) -> bool:
    return reference.file_name.lower() == base_runtime_binary.lower()


def expected_location(reference: DependencyReference, output_dir: Path) -> Path:
    """Where the generated build will look for this binary."""
    return (output_dir / ".." / reference.file_name).resolve()


def reference_fragment(
    reference: DependencyReference,
    base_runtime_binary: str = DEFAULT_BASE_RUNTIME_BINARY,
    strict: bool = False,
) -> str:
    """Build descriptor reference entry for a binary, or "" for the base runtime."""
    if is_base_runtime(reference, base_runtime_binary):
        return ""
    fragment = render(
        "AssemblyReference.txt",
        {"AssemblyName": reference.name, "AssemblyFileName": reference.file_name},
        strict=strict,
    )
    return fragment.rstrip("\n")


def ensure_dependency_present(
    reference: DependencyReference,
    output_dir: Path,
    base_runtime_binary: str = DEFAULT_BASE_RUNTIME_BINARY,
    log: Optional[logging.Logger] = None,
) -> Optional[Path]:
    """
    Make sure `reference` sits next to the project directory.

    Returns:
        The destination path if a copy was made, None if nothing was needed.

    Raises:
        OSError: If the source is missing or the copy fails.
    """
    log = log or logger
    if is_base_runtime(reference, base_runtime_binary):
        return None

    destination = expected_location(reference, output_dir)
    if destination.is_file():
        return None

    source = Path(reference.location)
    log.info(
        "File doesn't exist",
        extra={"expected": str(destination), "actual": reference.location},
    )
    log.info(
        "Copying dependency",
        extra={
            "file": reference.file_name,
            "source_dir": str(source.parent),
            "target_dir": str(destination.parent),
        },
    )

    try:
        shutil.copyfile(source, destination)
    except OSError as err:
        log.error(str(err), extra={"file": reference.file_name, "source": reference.location})
        raise

    return destination
