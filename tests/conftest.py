"""Pytest configuration and shared fixtures."""

import pytest

from mapsmith.config import Settings
from mapsmith.mapping import DatasetAnalysis, PlaceholderType, TemplateVariablePlaceholder


@pytest.fixture
def default_settings() -> Settings:
    """Settings with the stock weights and thresholds."""
    return Settings(
        header_weight=30,
        sample_weight=40,
        context_weight=20,
        type_weight=10,
        exact_tier=90,
        partial_tier=70,
        possible_tier=50,
        auto_apply_threshold=80,
        low_confidence_threshold=50,
        phone_advisory_threshold=70,
        phone_keyword_weight=30,
        phone_pattern_weight=50,
        phone_signal_weight=20,
        phone_keywords=["phone", "number", "mobile", "contact", "tel", "cell", "whatsapp"],
    )


@pytest.fixture
def customer_name() -> TemplateVariablePlaceholder:
    """The 'Customer Name' placeholder from a greeting template."""
    return TemplateVariablePlaceholder(
        index=1,
        label="Customer Name",
        type=PlaceholderType.TEXT,
        context="Hi NAME",
        required=True,
    )


@pytest.fixture
def contacts_dataset() -> DatasetAnalysis:
    """A two-column contact list with an ingester prior for placeholder 1."""
    return DatasetAnalysis(
        columns=["Name", "Phone"],
        samples={
            "Name": ["Alice", "Bob"],
            "Phone": ["+919999999999", "+918888888888"],
        },
        confidence={1: 60},
    )
