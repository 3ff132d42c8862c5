"""Confidence-scored column suggestions and auto-mapping."""

import logging
from typing import Optional

from ..config import Settings, settings as default_settings
from .models import (
    ColumnMapping,
    DatasetAnalysis,
    MappingSuggestion,
    SuggestionTier,
    TemplateVariablePlaceholder,
)
from .patterns import score_for_type

logger = logging.getLogger(__name__)

# Header keywords for well-known placeholder labels
LABEL_KEYWORDS: dict[str, list[str]] = {
    "Customer Name": ["name", "customer", "client", "user", "person", "caller"],
    "Company": ["company", "organization", "business", "firm", "corp"],
    "Phone Number": ["phone", "number", "mobile", "contact", "tel", "cell"],
    "Date": ["date", "time", "created", "closed", "completed"],
    "Agent": ["agent", "support", "rep", "representative", "staff"],
    "Ticket ID": ["ticket", "id", "number", "reference", "ref", "case"],
}

# Context word -> related column keywords
CONTEXT_KEYWORDS: dict[str, list[str]] = {
    "name": ["name", "customer", "client"],
    "company": ["company", "organization", "business"],
    "phone": ["phone", "number", "mobile"],
    "date": ["date", "time", "created"],
    "agent": ["agent", "support", "rep"],
}

EXACT_HEADER_SCORE = 1.0
PARTIAL_HEADER_SCORE = 0.7
KEYWORD_HEADER_SCORE = 0.5
COLUMN_IN_CONTEXT_SCORE = 0.8
CONTEXT_KEYWORD_SCORE = 0.6


def header_score(placeholder: TemplateVariablePlaceholder, column: str) -> float:
    """Score how well a column header matches the placeholder label."""
    column_lower = column.strip().lower()
    label_lower = placeholder.label.strip().lower()
    if not column_lower:
        return 0.0

    if label_lower:
        if column_lower == label_lower:
            return EXACT_HEADER_SCORE
        if label_lower in column_lower or column_lower in label_lower:
            return PARTIAL_HEADER_SCORE

    for keyword in LABEL_KEYWORDS.get(placeholder.label, []):
        if keyword in column_lower:
            return KEYWORD_HEADER_SCORE

    return 0.0


def context_keywords(context: str) -> list[str]:
    """Column keywords suggested by words in the placeholder context."""
    context_lower = context.lower()
    keywords: list[str] = []
    for word, related in CONTEXT_KEYWORDS.items():
        if word in context_lower:
            keywords.extend(related)
    return keywords


def context_score(placeholder: TemplateVariablePlaceholder, column: str) -> float:
    """Score how well a column relates to the text around the placeholder."""
    column_lower = column.strip().lower()
    if not column_lower:
        return 0.0

    if column_lower in placeholder.context.lower():
        return COLUMN_IN_CONTEXT_SCORE

    for keyword in context_keywords(placeholder.context):
        if keyword in column_lower:
            return CONTEXT_KEYWORD_SCORE

    return 0.0


def calculate_confidence(
    placeholder: TemplateVariablePlaceholder,
    column: str,
    samples: list[str],
    base_confidence: float,
    settings: Optional[Settings] = None,
) -> float:
    """
    Calculate the mapping confidence between a placeholder and a column.

    The base confidence is the ingester's prior for the placeholder and is
    added to every candidate column alike. The sample score is counted a
    second time under the type weight.

    Returns:
        Confidence clamped to [0, 100]
    """
    cfg = settings or default_settings
    sample = score_for_type(placeholder.type, samples)

    confidence = base_confidence
    confidence += header_score(placeholder, column) * cfg.header_weight
    confidence += sample * cfg.sample_weight
    confidence += context_score(placeholder, column) * cfg.context_weight
    confidence += sample * cfg.type_weight

    return min(100.0, max(0.0, confidence))


def tier_for(confidence: float, settings: Optional[Settings] = None) -> SuggestionTier:
    """Map a confidence to its suggestion tier."""
    cfg = settings or default_settings
    if confidence >= cfg.exact_tier:
        return SuggestionTier.EXACT
    if confidence >= cfg.partial_tier:
        return SuggestionTier.PARTIAL
    return SuggestionTier.INFERRED


def reason_for(confidence: float, settings: Optional[Settings] = None) -> str:
    """Human-readable explanation of a confidence value."""
    cfg = settings or default_settings
    if confidence >= cfg.exact_tier:
        return "Excellent match"
    if confidence >= cfg.partial_tier:
        return "Good match"
    if confidence >= cfg.possible_tier:
        return "Possible match"
    return "Low confidence match"


def generate_suggestions(
    placeholders: list[TemplateVariablePlaceholder],
    dataset: DatasetAnalysis,
    settings: Optional[Settings] = None,
) -> dict[int, list[MappingSuggestion]]:
    """
    Rank the dataset's columns for every placeholder.

    Args:
        placeholders: Placeholders from the template analyzer
        dataset: Columns, samples and per-placeholder priors

    Returns:
        Dict of placeholder index to suggestions with confidence > 0,
        highest first. Ties keep column order.
    """
    suggestions: dict[int, list[MappingSuggestion]] = {}

    for placeholder in placeholders:
        base = dataset.prior_for(placeholder.index)
        ranked: list[MappingSuggestion] = []

        for column in dataset.columns:
            confidence = calculate_confidence(
                placeholder, column, dataset.samples_for(column), base, settings
            )
            logger.debug(
                f"Placeholder {placeholder.index} vs column '{column}': {confidence:.1f}"
            )
            if confidence > 0:
                ranked.append(
                    MappingSuggestion(
                        column=column,
                        confidence=confidence,
                        reason=reason_for(confidence, settings),
                        tier=tier_for(confidence, settings),
                    )
                )

        # sorted() is stable, so equal scores keep column order
        suggestions[placeholder.index] = sorted(
            ranked, key=lambda s: s.confidence, reverse=True
        )

    logger.info(
        f"Generated suggestions for {len(placeholders)} placeholders "
        f"across {len(dataset.columns)} columns"
    )
    return suggestions


def auto_apply_mappings(
    placeholders: list[TemplateVariablePlaceholder],
    suggestions: dict[int, list[MappingSuggestion]],
    threshold: Optional[float] = None,
    settings: Optional[Settings] = None,
) -> ColumnMapping:
    """
    Adopt each placeholder's top suggestion when it clears the threshold.

    Two placeholders may receive the same column; duplicates are left for
    the mapping validator to report.
    """
    cfg = settings or default_settings
    if threshold is None:
        threshold = cfg.auto_apply_threshold

    mapping: ColumnMapping = {}
    for placeholder in placeholders:
        ranked = suggestions.get(placeholder.index) or []
        if ranked and ranked[0].confidence >= threshold:
            mapping[placeholder.index] = ranked[0].column

    logger.info(f"Auto-applied {len(mapping)} of {len(placeholders)} mappings")
    return mapping
