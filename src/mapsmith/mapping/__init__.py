"""Column-to-placeholder mapping: suggestions, phone detection and validation."""

from .models import (
    ColumnMapping,
    DatasetAnalysis,
    MappingError,
    MappingErrorKind,
    MappingSuggestion,
    MappingWarning,
    MappingWarningKind,
    PhoneColumnSuggestion,
    PlaceholderType,
    PreviewRow,
    PreviewValidation,
    Severity,
    StructureCheck,
    StructureStatus,
    SuggestionTier,
    TemplateAnalysis,
    TemplateVariablePlaceholder,
    ValidationResult,
)
from .suggestions import auto_apply_mappings, generate_suggestions
from .phone import detect_phone_columns
from .validator import (
    check_csv_structure,
    validate_csv_structure,
    validate_mapping,
    validate_phone_column,
    validate_preview_data,
)

__all__ = [
    "ColumnMapping",
    "DatasetAnalysis",
    "MappingError",
    "MappingErrorKind",
    "MappingSuggestion",
    "MappingWarning",
    "MappingWarningKind",
    "PhoneColumnSuggestion",
    "PlaceholderType",
    "PreviewRow",
    "PreviewValidation",
    "Severity",
    "StructureCheck",
    "StructureStatus",
    "SuggestionTier",
    "TemplateAnalysis",
    "TemplateVariablePlaceholder",
    "ValidationResult",
    "auto_apply_mappings",
    "generate_suggestions",
    "detect_phone_columns",
    "check_csv_structure",
    "validate_csv_structure",
    "validate_mapping",
    "validate_phone_column",
    "validate_preview_data",
]
