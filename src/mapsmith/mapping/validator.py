"""Mapping validation logic for column-to-placeholder mappings."""

import logging
from typing import Optional

from ..config import Settings, settings as default_settings
from .models import (
    ColumnMapping,
    DatasetAnalysis,
    MappingError,
    MappingErrorKind,
    MappingWarning,
    MappingWarningKind,
    PhoneColumnSuggestion,
    PreviewRow,
    PreviewValidation,
    StructureCheck,
    StructureStatus,
    TemplateAnalysis,
    TemplateVariablePlaceholder,
    ValidationResult,
)

logger = logging.getLogger(__name__)


def _format_pct(value: float) -> str:
    return f"{value:g}%"


def validate_mapping(
    mapping: ColumnMapping,
    placeholders: list[TemplateVariablePlaceholder],
    columns: list[str],
    dataset: Optional[DatasetAnalysis] = None,
    settings: Optional[Settings] = None,
) -> ValidationResult:
    """
    Validate a column mapping against the template and the dataset.

    Checks, all of which run:
    1. Every required placeholder is mapped
    2. Every mapped column exists
    3. No column is used twice (the first user in mapping order wins)
    4. Per-placeholder ingester confidence is not low (warning)
    5. Unmapped columns (single aggregate warning)

    Returns ValidationResult; warnings never affect is_valid.
    """
    cfg = settings or default_settings
    errors: list[MappingError] = []
    warnings: list[MappingWarning] = []
    known_columns = set(columns)
    by_index = {p.index: p for p in placeholders}

    for placeholder in placeholders:
        if placeholder.required and not mapping.get(placeholder.index):
            errors.append(
                MappingError(
                    kind=MappingErrorKind.MISSING_MAPPING,
                    placeholder_index=placeholder.index,
                    message=f'Required variable "{placeholder.label}" is not mapped to any CSV column',
                )
            )

    for index, column in mapping.items():
        if column and column not in known_columns:
            errors.append(
                MappingError(
                    kind=MappingErrorKind.INVALID_COLUMN,
                    placeholder_index=index,
                    message=f'Column "{column}" does not exist in CSV',
                )
            )

    used_columns: set[str] = set()
    for index, column in mapping.items():
        if not column:
            continue
        if column in used_columns:
            errors.append(
                MappingError(
                    kind=MappingErrorKind.DUPLICATE_MAPPING,
                    placeholder_index=index,
                    message=f'Column "{column}" is mapped to multiple variables',
                )
            )
        used_columns.add(column)

    if dataset is not None:
        for index, column in mapping.items():
            placeholder = by_index.get(index)
            if not column or placeholder is None:
                continue
            confidence = dataset.prior_for(index)
            if confidence < cfg.low_confidence_threshold:
                warnings.append(
                    MappingWarning(
                        kind=MappingWarningKind.LOW_CONFIDENCE,
                        message=f'Low confidence mapping for "{placeholder.label}" '
                        f'to "{column}" ({_format_pct(confidence)})',
                        suggestion="Consider reviewing this mapping",
                    )
                )

    mapped_columns = {column for column in mapping.values() if column}
    unused = [column for column in columns if column not in mapped_columns]
    if unused:
        warnings.append(
            MappingWarning(
                kind=MappingWarningKind.UNUSED_COLUMN,
                message=f"{len(unused)} CSV column(s) are not mapped: {', '.join(unused)}",
                suggestion="These columns will be ignored during message generation",
            )
        )

    if errors:
        logger.info(f"Mapping has {len(errors)} error(s), {len(warnings)} warning(s)")

    return ValidationResult(is_valid=len(errors) == 0, errors=errors, warnings=warnings)


def check_csv_structure(
    column_count: int, variable_count: int, required_count: int
) -> StructureCheck:
    """Compare the dataset's column count with the template's needs."""
    if column_count < required_count:
        return StructureCheck(
            is_valid=False,
            status=StructureStatus.INSUFFICIENT,
            message=f"CSV has {column_count} columns but template requires {required_count} "
            f"variables. Please upload a CSV with at least {required_count} columns.",
        )

    if column_count == variable_count:
        return StructureCheck(
            is_valid=True,
            status=StructureStatus.EQUAL,
            message=f"Perfect match: CSV has {column_count} columns matching the "
            f"template's {variable_count} variables.",
        )

    if column_count > variable_count:
        return StructureCheck(
            is_valid=True,
            status=StructureStatus.EXCESS,
            message=f"CSV has {column_count} columns ({column_count - variable_count} extra). "
            f"You can map the required {variable_count} variables and ignore the rest.",
        )

    return StructureCheck(
        is_valid=True,
        status=StructureStatus.UNKNOWN,
        message="CSV structure is valid for this template.",
    )


def validate_csv_structure(
    dataset: DatasetAnalysis, template: TemplateAnalysis
) -> StructureCheck:
    """Validate the dataset's shape against the template's placeholders."""
    variable_count = (
        dataset.variable_count or template.variable_count or len(template.variables)
    )
    return check_csv_structure(
        dataset.effective_column_count, variable_count, template.required_count
    )


def validate_phone_column(
    selected_column: Optional[str],
    columns: list[str],
    phone_suggestions: list[PhoneColumnSuggestion],
    settings: Optional[Settings] = None,
) -> StructureCheck:
    """
    Validate the user's choice of recipient phone column.

    A column whose suggestion scores below the advisory threshold (including
    0) stays valid but gets a warning message.
    """
    cfg = settings or default_settings

    if not selected_column:
        return StructureCheck(is_valid=False, message="Please select a phone number column")

    if selected_column not in columns:
        return StructureCheck(
            is_valid=False, message="Selected phone column does not exist in CSV"
        )

    suggestion = next((s for s in phone_suggestions if s.column == selected_column), None)
    if suggestion and suggestion.confidence < cfg.phone_advisory_threshold:
        return StructureCheck(
            is_valid=True,
            message=f"Warning: Low confidence phone column selection "
            f"({_format_pct(suggestion.confidence)})",
        )

    return StructureCheck(is_valid=True, message="Phone column selection is valid")


def validate_preview_data(rows: list[PreviewRow]) -> PreviewValidation:
    """
    Check rendered rows before sending.

    A row that is both invalid and missing a recipient appears twice in
    invalid_rows, once per problem.
    """
    invalid_rows: list[int] = []
    errors: list[str] = []

    for position, row in enumerate(rows):
        if not row.is_valid:
            invalid_rows.append(position)
            errors.append(f"Row {position + 1}: {', '.join(row.errors)}")

        if not row.to or not row.to.strip():
            invalid_rows.append(position)
            errors.append(f"Row {position + 1}: Missing phone number")

    return PreviewValidation(
        is_valid=len(invalid_rows) == 0, invalid_rows=invalid_rows, errors=errors
    )
