"""Value-shape patterns and sample scorers."""

import re
from typing import Pattern, Sequence

from .models import PlaceholderType

# Dates: YYYY-MM-DD, MM/DD/YYYY, MM-DD-YYYY
DATE_PATTERNS: list[Pattern] = [
    re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII),
    re.compile(r"\d{2}/\d{2}/\d{4}", re.ASCII),
    re.compile(r"\d{2}-\d{2}-\d{4}", re.ASCII),
]

# Currency: $123.45 or 123.45 USD
CURRENCY_PATTERNS: list[Pattern] = [
    re.compile(r"\$\d[\d,]*(\.\d+)?", re.ASCII),
    re.compile(r"\d[\d,]*(\.\d+)?\s*(USD|EUR|GBP)", re.IGNORECASE | re.ASCII),
]

URL_PATTERNS: list[Pattern] = [
    re.compile(r"^https?://.+"),
    re.compile(r"^www\..+"),
]

NUMERIC_PATTERN: Pattern = re.compile(r"^\d+$", re.ASCII)

# Phone numbers, tried against stripped sample values
PHONE_PATTERNS: list[Pattern] = [
    re.compile(r"^\+?[1-9]\d{1,14}$", re.ASCII),  # E.164
    re.compile(r"^\d{10,15}$", re.ASCII),
    re.compile(r"^\+91\d{10}$", re.ASCII),  # India
    re.compile(r"^\+1\d{10}$", re.ASCII),  # US
]

LONG_DIGIT_RUN: Pattern = re.compile(r"\d{10,}", re.ASCII)

# Display labels for the phone formats seen in a column
PHONE_PATTERN_LABELS: list[tuple[str, Pattern]] = [
    ("E.164 format", re.compile(r"^\+")),
    ("10-digit format", re.compile(r"^\d{10}$", re.ASCII)),
    ("11-digit format", re.compile(r"^\d{11}$", re.ASCII)),
    ("Indian format", re.compile(r"^\+91")),
    ("US format", re.compile(r"^\+1")),
]


def _match_fraction(samples: Sequence[str], patterns: list[Pattern]) -> float:
    """Fraction of samples matched by at least one of the patterns."""
    if not samples:
        return 0.0
    matches = sum(
        1 for sample in samples if any(p.search(sample or "") for p in patterns)
    )
    return matches / len(samples)


def date_score(samples: Sequence[str]) -> float:
    """Fraction of samples that contain a date."""
    return _match_fraction(samples, DATE_PATTERNS)


def currency_score(samples: Sequence[str]) -> float:
    """Fraction of samples that contain a money amount."""
    return _match_fraction(samples, CURRENCY_PATTERNS)


def url_score(samples: Sequence[str]) -> float:
    """Fraction of samples that look like a URL."""
    return _match_fraction(samples, URL_PATTERNS)


def text_score(samples: Sequence[str]) -> float:
    """
    Fraction of samples that are non-blank and not purely numeric.

    Blank samples count against the score: the denominator is the full
    sample list.
    """
    if not samples:
        return 0.0
    textual = [
        s for s in samples if s and s.strip() and not NUMERIC_PATTERN.match(s.strip())
    ]
    return len(textual) / len(samples)


def score_for_type(placeholder_type: PlaceholderType, samples: Sequence[str]) -> float:
    """Score samples with the validator matching the placeholder type."""
    if placeholder_type == PlaceholderType.DATE:
        return date_score(samples)
    if placeholder_type == PlaceholderType.CURRENCY:
        return currency_score(samples)
    if placeholder_type == PlaceholderType.URL:
        return url_score(samples)
    return text_score(samples)


def is_phone_value(value: str) -> bool:
    """Check whether a single value looks like a phone number."""
    if not value or not value.strip():
        return False
    stripped = value.strip()
    return any(p.match(stripped) for p in PHONE_PATTERNS)


def phone_match_rate(samples: Sequence[str]) -> float:
    """Fraction of all samples that look like phone numbers."""
    if not samples:
        return 0.0
    return sum(1 for s in samples if is_phone_value(s)) / len(samples)


def has_phone_signal(samples: Sequence[str]) -> bool:
    """True if the joined samples contain '+' or a run of 10+ digits."""
    joined = " ".join(s or "" for s in samples)
    return "+" in joined or LONG_DIGIT_RUN.search(joined) is not None


def phone_pattern_labels(samples: Sequence[str]) -> list[str]:
    """Labels of the phone formats matched by at least one sample."""
    return [
        label
        for label, pattern in PHONE_PATTERN_LABELS
        if any(pattern.search(s or "") for s in samples)
    ]
