"""Detection of the recipient phone-number column."""

import logging
from typing import Optional

from ..config import Settings, settings as default_settings
from .models import DatasetAnalysis, PhoneColumnSuggestion
from .patterns import has_phone_signal, phone_match_rate, phone_pattern_labels

logger = logging.getLogger(__name__)


def calculate_phone_confidence(
    column: str, samples: list[str], settings: Optional[Settings] = None
) -> float:
    """
    Score how likely a column is to hold phone numbers.

    Every phone keyword found in the header adds the keyword weight, so a
    header like "Mobile Phone" scores twice.
    """
    cfg = settings or default_settings
    header_lower = column.lower()

    confidence = 0.0
    for keyword in cfg.phone_keywords:
        if keyword in header_lower:
            confidence += cfg.phone_keyword_weight

    confidence += phone_match_rate(samples) * cfg.phone_pattern_weight

    if has_phone_signal(samples):
        confidence += cfg.phone_signal_weight

    return min(100.0, max(0.0, confidence))


def detect_phone_columns(
    columns: list[str],
    dataset: DatasetAnalysis,
    settings: Optional[Settings] = None,
) -> list[PhoneColumnSuggestion]:
    """
    Rank every column by phone-number likelihood.

    Columns scoring 0 are kept at the bottom of the ranking, so selecting
    one of them makes validate_phone_column return its low-confidence
    advisory rather than a plain "valid".

    Returns:
        One suggestion per column, highest confidence first (ties keep
        column order), each listing the phone formats seen in its samples
    """
    suggestions = []
    for column in columns:
        samples = dataset.samples_for(column)
        confidence = calculate_phone_confidence(column, samples, settings)
        suggestions.append(
            PhoneColumnSuggestion(
                column=column,
                confidence=confidence,
                patterns=phone_pattern_labels(samples),
            )
        )

    ranked = sorted(suggestions, key=lambda s: s.confidence, reverse=True)
    if ranked:
        logger.info(
            f"Best phone column: '{ranked[0].column}' ({ranked[0].confidence:.0f}%)"
        )
    return ranked
