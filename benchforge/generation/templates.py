# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Template loading and placeholder substitution.

Templates are plain text files shipped next to this module. A placeholder
is a literal `$Name$` marker, not an expression language. Substitution is a
single left-to-right pass over the template, so a value that itself contains
something marker-shaped (say, an interpolated string in additional logic)
is pasted verbatim and never re-expanded.

MSBuild's own `$(Property)` syntax never looks like a marker, so build
descriptor templates can use it freely.
"""

import logging
import re
from pathlib import Path
from typing import Mapping, Optional

from benchforge.generation.exceptions import TemplateNotFoundError, TemplateRenderError
from benchforge.logging.logger import get_logger

logger = get_logger(__name__)

TEMPLATE_DIR: Path = Path(__file__).resolve().parent / "templates"

PLACEHOLDER_PATTERN = re.compile(r"\$([A-Za-z][A-Za-z0-9]*)\$")


def load_template(template_name: str) -> str:
    """
    Read a bundled template by file name.

    Raises:
        TemplateNotFoundError: If no such template ships with the package.
    """
    path = TEMPLATE_DIR / template_name
    # Names are resource names, not paths.
    if path.parent != TEMPLATE_DIR or not path.is_file():
        raise TemplateNotFoundError(f"Unknown template: {template_name}")
    return path.read_text(encoding="utf-8")


def find_placeholders(text: str) -> list[str]:
    """Placeholder names in `text`, in order of first appearance, without duplicates."""
    return list(dict.fromkeys(PLACEHOLDER_PATTERN.findall(text)))


def substitute(
    template: str,
    substitutions: Mapping[str, str],
    strict: bool = False,
    template_name: str = "<inline>",
    log: Optional[logging.Logger] = None,
) -> str:
    """
    Replace every `$Name$` in `template` whose name is in `substitutions`.

    Markers without a mapping are left in place. In strict mode they raise
    TemplateRenderError instead; otherwise they're logged as a warning so a
    broken template shows up in the run log rather than in a compiler error.
    """
    log = log or logger
    unresolved = [name for name in find_placeholders(template) if name not in substitutions]
    if unresolved:
        if strict:
            raise TemplateRenderError(
                f"Template {template_name} has unmapped placeholders: {', '.join(unresolved)}"
            )
        log.warning(
            "Unmapped template placeholders",
            extra={"template": template_name, "placeholders": unresolved},
        )

    return PLACEHOLDER_PATTERN.sub(
        lambda match: substitutions.get(match.group(1), match.group(0)),
        template,
    )


def render(
    template_name: str,
    substitutions: Mapping[str, str],
    strict: bool = False,
    log: Optional[logging.Logger] = None,
) -> str:
    """Load a bundled template and fill in its placeholders."""
    return substitute(
        load_template(template_name),
        substitutions,
        strict=strict,
        template_name=template_name,
        log=log,
    )
