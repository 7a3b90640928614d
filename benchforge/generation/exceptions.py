# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Exceptions raised by project generation.

Directory contention is deliberately absent: a stale directory is reported
through GenerationResult.fresh, never raised. Dependency copy failures
propagate as the underlying OSError.
"""


class GenerationError(Exception):
    """Base for all generation errors."""


class TemplateNotFoundError(GenerationError):
    """Raised when a template name doesn't match any bundled resource."""


class TemplateRenderError(GenerationError):
    """Raised in strict mode when placeholder markers survive rendering."""


class DescriptorLoadError(GenerationError):
    """Raised when a descriptor file is missing, malformed, or incomplete."""
