"""Data models for column-to-placeholder mapping."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

# Placeholder index -> column name. Insertion order is significant for
# duplicate detection.
ColumnMapping = dict[int, str]


class PlaceholderType(str, Enum):
    """Value type expected by a template placeholder."""

    TEXT = "text"
    DATE = "date"
    CURRENCY = "currency"
    URL = "url"


class TemplateVariablePlaceholder(BaseModel):
    """A positional variable slot ({{index}}) in a message template."""

    index: int = Field(ge=1)
    type: PlaceholderType = PlaceholderType.TEXT
    context: str = ""  # Template text surrounding the token
    label: str
    required: bool = True


class TemplateAnalysis(BaseModel):
    """Placeholders extracted from a template by the template analyzer."""

    variable_count: int = 0
    variables: list[TemplateVariablePlaceholder] = Field(default_factory=list)

    @property
    def required_count(self) -> int:
        return sum(1 for v in self.variables if v.required)


class DatasetAnalysis(BaseModel):
    """Columns and sample values captured from an uploaded table."""

    columns: list[str] = Field(default_factory=list)
    samples: dict[str, list[str]] = Field(default_factory=dict)
    confidence: dict[int, float] = Field(default_factory=dict)  # per placeholder index
    column_count: Optional[int] = None  # Defaults to len(columns)
    variable_count: int = 0

    def samples_for(self, column: str) -> list[str]:
        return self.samples.get(column) or []

    def prior_for(self, index: int) -> float:
        return self.confidence.get(index) or 0

    @property
    def effective_column_count(self) -> int:
        if self.column_count is None:
            return len(self.columns)
        return self.column_count


class SuggestionTier(str, Enum):
    """Confidence tier of a suggestion."""

    EXACT = "exact"  # >= exact tier (90)
    PARTIAL = "partial"  # >= partial tier (70)
    INFERRED = "inferred"  # below partial tier


class MappingSuggestion(BaseModel):
    """A scored candidate column for one placeholder."""

    column: str
    confidence: float = Field(ge=0, le=100)
    reason: str
    tier: SuggestionTier


class PhoneColumnSuggestion(BaseModel):
    """A scored candidate for the recipient phone column."""

    column: str
    confidence: float = Field(ge=0, le=100)
    patterns: list[str] = Field(default_factory=list)  # e.g. "E.164 format"


class MappingErrorKind(str, Enum):
    """Kind of blocking mapping problem."""

    MISSING_MAPPING = "missing_mapping"
    INVALID_COLUMN = "invalid_column"
    DUPLICATE_MAPPING = "duplicate_mapping"
    TYPE_MISMATCH = "type_mismatch"


class Severity(str, Enum):
    """Severity attached to a mapping error."""

    ERROR = "error"
    WARNING = "warning"


class MappingWarningKind(str, Enum):
    """Kind of advisory mapping problem."""

    LOW_CONFIDENCE = "low_confidence"
    UNUSED_COLUMN = "unused_column"
    POTENTIAL_ISSUE = "potential_issue"


class MappingError(BaseModel):
    """A mapping problem that blocks saving or sending."""

    kind: MappingErrorKind
    placeholder_index: int
    message: str
    severity: Severity = Severity.ERROR


class MappingWarning(BaseModel):
    """A mapping problem that is reported but never blocks."""

    kind: MappingWarningKind
    message: str
    suggestion: Optional[str] = None


class ValidationResult(BaseModel):
    """Result of validating a column mapping."""

    is_valid: bool
    errors: list[MappingError] = Field(default_factory=list)
    warnings: list[MappingWarning] = Field(default_factory=list)


class StructureStatus(str, Enum):
    """How the dataset's column count relates to the template."""

    INSUFFICIENT = "insufficient"
    EQUAL = "equal"
    EXCESS = "excess"
    UNKNOWN = "unknown"


class StructureCheck(BaseModel):
    """Outcome of a shape or selection check."""

    is_valid: bool
    message: str
    status: Optional[StructureStatus] = None


class PreviewRow(BaseModel):
    """A rendered outgoing message for one data row."""

    index: int
    to: str = ""
    preview: str = ""
    is_valid: bool = True
    errors: list[str] = Field(default_factory=list)


class PreviewValidation(BaseModel):
    """Result of checking rendered rows before sending."""

    is_valid: bool
    invalid_rows: list[int] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
