"""Placeholder token syntax."""

import re
from typing import Pattern

# {{1}}, {{2}}, ... - positional template variable. Non-digit bodies are
# left alone.
TOKEN_PATTERN: Pattern = re.compile(r"\{\{(\d+)\}\}", re.ASCII)


def format_token(index: int | str) -> str:
    """Render the literal token for a placeholder index."""
    return f"{{{{{index}}}}}"


def extract_placeholder_indices(text: str) -> list[int]:
    """
    Extract placeholder indices in order of first appearance.

    Args:
        text: Template text

    Returns:
        Unique indices, e.g. [1, 2] for "Hi {{1}}, order {{2}} for {{1}}"
    """
    indices: list[int] = []
    for match in TOKEN_PATTERN.finditer(text or ""):
        index = int(match.group(1))
        if index not in indices:
            indices.append(index)
    return indices
