"""Configuration management for MapSmith."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


def _parse_keywords(name: str, default: str) -> list[str]:
    """Parse a comma-separated keyword list from an environment variable."""
    raw = os.getenv(name) or default
    return [k.strip().lower() for k in raw.split(",") if k.strip()]


class Settings(BaseModel):
    """Engine settings: scoring weights and thresholds."""

    # Suggestion scoring weights (points per unit of sub-score)
    header_weight: float = float(os.getenv("MAPSMITH_HEADER_WEIGHT", "30"))
    sample_weight: float = float(os.getenv("MAPSMITH_SAMPLE_WEIGHT", "40"))
    context_weight: float = float(os.getenv("MAPSMITH_CONTEXT_WEIGHT", "20"))
    type_weight: float = float(os.getenv("MAPSMITH_TYPE_WEIGHT", "10"))

    # Suggestion tiers
    exact_tier: float = float(os.getenv("MAPSMITH_EXACT_TIER", "90"))
    partial_tier: float = float(os.getenv("MAPSMITH_PARTIAL_TIER", "70"))
    possible_tier: float = float(os.getenv("MAPSMITH_POSSIBLE_TIER", "50"))

    # Auto-apply and validation thresholds
    auto_apply_threshold: float = float(os.getenv("MAPSMITH_AUTO_APPLY_THRESHOLD", "80"))
    low_confidence_threshold: float = float(os.getenv("MAPSMITH_LOW_CONFIDENCE_THRESHOLD", "50"))
    phone_advisory_threshold: float = float(os.getenv("MAPSMITH_PHONE_ADVISORY_THRESHOLD", "70"))

    # Phone detection weights
    phone_keyword_weight: float = float(os.getenv("MAPSMITH_PHONE_KEYWORD_WEIGHT", "30"))
    phone_pattern_weight: float = float(os.getenv("MAPSMITH_PHONE_PATTERN_WEIGHT", "50"))
    phone_signal_weight: float = float(os.getenv("MAPSMITH_PHONE_SIGNAL_WEIGHT", "20"))
    phone_keywords: list[str] = _parse_keywords(
        "MAPSMITH_PHONE_KEYWORDS", "phone,number,mobile,contact,tel,cell,whatsapp"
    )

    # Logging
    log_level: str = os.getenv("MAPSMITH_LOG_LEVEL", "WARNING").upper()


settings = Settings()
