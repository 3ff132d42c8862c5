"""Placeholder substitution for message previews.

Renders template text containing positional tokens (like {{1}}) into
human-readable previews from literal values, sample values or the
source each placeholder is mapped to.
"""

from .models import (
    LivePreview,
    MappingSource,
    PlaceholderResolutionMapping,
    PlaceholderSource,
)
from .resolver import (
    build_live_preview,
    build_preview_rows,
    compose_preview,
    source_hint,
    substitute_template_text,
)
from .syntax import TOKEN_PATTERN, extract_placeholder_indices, format_token

__all__ = [
    "LivePreview",
    "MappingSource",
    "PlaceholderResolutionMapping",
    "PlaceholderSource",
    "build_live_preview",
    "build_preview_rows",
    "compose_preview",
    "source_hint",
    "substitute_template_text",
    "TOKEN_PATTERN",
    "extract_placeholder_indices",
    "format_token",
]
