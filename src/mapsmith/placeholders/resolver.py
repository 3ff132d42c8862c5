"""Placeholder substitution for human-readable message previews."""

import logging
from typing import Any, Callable, Mapping, Optional

from ..mapping.models import ColumnMapping, PreviewRow
from .models import LivePreview, MappingSource, PlaceholderSource
from .syntax import TOKEN_PATTERN, extract_placeholder_indices, format_token

logger = logging.getLogger(__name__)


def _lookup(values: Optional[Mapping[Any, Any]], index: str) -> Optional[Any]:
    """Find a value keyed by either the int or the string form of an index."""
    if not values:
        return None
    if int(index) in values:
        return values[int(index)]
    return values.get(index)


def _non_blank(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None


def _as_source(entry: Any) -> Optional[PlaceholderSource]:
    if entry is None or isinstance(entry, PlaceholderSource):
        return entry
    if isinstance(entry, Mapping):
        return PlaceholderSource(
            source=str(entry.get("source") or ""),
            path=entry.get("path"),
            label=entry.get("label"),
            value=entry.get("value"),
        )
    # Any other entry still marks the placeholder as mapped
    return PlaceholderSource(source="")


def _strip_prefix(path: str, prefix: str) -> str:
    return path[len(prefix):] if path.startswith(prefix) else path


def source_hint(source: PlaceholderSource) -> str:
    """
    Render the bracketed hint shown for a mapped placeholder.

    Returns:
        "[customer.<path>]", "[transaction.<path>]" or "[user input]"
    """
    kind = source.source.lower()
    path = source.path or ""
    if kind == MappingSource.CUSTOMER.value:
        return f"[customer.{_strip_prefix(path, 'customer.')}]"
    if kind == MappingSource.TRANSACTION.value:
        return f"[transaction.{_strip_prefix(path, 'transaction.')}]"
    return "[user input]"


def _render(text: Optional[str], resolve: Callable[[str], Optional[str]]) -> str:
    """Replace each {{n}} token with resolve(n), keeping it when None."""
    if not text:
        return ""

    def replace(match):
        value = resolve(match.group(1))
        return match.group(0) if value is None else value

    return TOKEN_PATTERN.sub(replace, text)


def substitute_template_text(
    text: Optional[str],
    sample_values: Optional[Mapping[Any, Any]] = None,
    mappings: Optional[Mapping[Any, Any]] = None,
    user_values: Optional[Mapping[Any, Any]] = None,
) -> str:
    """
    Resolve every {{n}} token in a template text.

    Priority per token:
    1. Non-blank user value
    2. Non-blank sample value
    3. Hint from the resolution mapping ([customer.x], [transaction.x], [user input])
    4. The token itself, unchanged

    Args:
        text: Template text; None or empty returns ""
        sample_values: Dummy values keyed by index (int or digit string)
        mappings: Resolution mapping keyed by index, PlaceholderSource or dict entries
        user_values: Per-row or per-session literals keyed by index

    Returns:
        The rendered text. A resolved value containing a {{n}} token is not
        substituted again in the same call.
    """

    def resolve(index: str) -> Optional[str]:
        value = _non_blank(_lookup(user_values, index))
        if value is not None:
            return value
        value = _non_blank(_lookup(sample_values, index))
        if value is not None:
            return value
        source = _as_source(_lookup(mappings, index))
        if source is not None:
            return source_hint(source)
        return None

    return _render(text, resolve)


def compose_preview(
    header: Optional[str] = None,
    body: Optional[str] = None,
    footer: Optional[str] = None,
    sample_values: Optional[Mapping[Any, Any]] = None,
    mappings: Optional[Mapping[Any, Any]] = None,
    user_values: Optional[Mapping[Any, Any]] = None,
) -> str:
    """Substitute each template section and join the non-empty ones."""
    sections = [
        substitute_template_text(part, sample_values, mappings, user_values)
        for part in (header, body, footer)
    ]
    return "\n\n".join(s for s in sections if s)


def _row_values(mapping: ColumnMapping, row: Mapping[str, Any]) -> dict[int, str]:
    """Values of the mapped columns in one data row, stripped."""
    values = {}
    for index, column in mapping.items():
        value = _non_blank(row.get(column)) if column else None
        if value is not None:
            values[int(index)] = value.strip()
    return values


def build_live_preview(
    text: Optional[str],
    mapping: ColumnMapping,
    phone_column: Optional[str],
    rows: list[Mapping[str, Any]],
    total_variables: Optional[int] = None,
) -> LivePreview:
    """
    Render the first data row under the current mapping.

    The preview is complete when every placeholder in the text resolves to
    a non-blank value and the row has a recipient.
    """
    indices = extract_placeholder_indices(text or "")
    if total_variables is None:
        total_variables = len(indices)

    if not text or not rows:
        return LivePreview(total_variables=total_variables)

    first_row = rows[0]
    values = _row_values(mapping, first_row)
    unmapped = [i for i in indices if i not in values]
    to = str(first_row.get(phone_column) or "").strip() if phone_column else ""

    return LivePreview(
        preview=_render(text, lambda index: values.get(int(index))),
        to=to,
        is_complete=not unmapped and bool(to),
        unmapped_variables=unmapped,
        mapped_count=len(indices) - len(unmapped),
        total_variables=total_variables,
    )


def build_preview_rows(
    text: Optional[str],
    mapping: ColumnMapping,
    phone_column: Optional[str],
    rows: list[Mapping[str, Any]],
) -> list[PreviewRow]:
    """
    Render one outgoing message per data row.

    A row is invalid when any placeholder has no value. A missing recipient
    is left for validate_preview_data to report.
    """
    indices = extract_placeholder_indices(text or "")
    previews = []

    for position, row in enumerate(rows):
        values = _row_values(mapping, row)
        missing = [i for i in indices if i not in values]
        errors = [f"Missing value for {format_token(i)}" for i in missing]
        to = str(row.get(phone_column) or "").strip() if phone_column else ""

        previews.append(
            PreviewRow(
                index=position,
                to=to,
                preview=_render(text, lambda index: values.get(int(index))),
                is_valid=not errors,
                errors=errors,
            )
        )

    logger.debug(f"Rendered {len(previews)} preview rows")
    return previews
