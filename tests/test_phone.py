"""Tests for phone column detection."""

from mapsmith.mapping import DatasetAnalysis, detect_phone_columns
from mapsmith.mapping.phone import calculate_phone_confidence


class TestPhoneConfidence:
    """Test per-column phone scoring."""

    def test_keywords_stack(self, default_settings):
        assert calculate_phone_confidence("Mobile Phone Number", [], default_settings) == 90

    def test_clamped_at_100(self, default_settings):
        assert calculate_phone_confidence("Contact Tel Cell Phone", [], default_settings) == 100

    def test_samples_only(self, default_settings):
        # 50 for the pattern match plus 20 for the 10-digit run
        assert calculate_phone_confidence("x", ["9876543210"], default_settings) == 70

    def test_partial_match_rate(self, default_settings):
        # half the samples match, '+' present
        assert calculate_phone_confidence("x", ["+14155550123", "unknown"], default_settings) == 45

    def test_no_evidence(self, default_settings):
        assert calculate_phone_confidence("Name", ["Alice", "Bob"], default_settings) == 0
        assert calculate_phone_confidence("Name", [], default_settings) == 0

    def test_custom_keywords(self, default_settings):
        tuned = default_settings.model_copy(update={"phone_keywords": ["msisdn"]})
        assert calculate_phone_confidence("MSISDN", [], tuned) == 30


class TestDetectPhoneColumns:
    """Test ranking of phone column candidates."""

    def test_contacts_scenario(self, contacts_dataset, default_settings):
        suggestions = detect_phone_columns(
            contacts_dataset.columns, contacts_dataset, default_settings
        )

        assert [s.column for s in suggestions] == ["Phone", "Name"]
        phone, name = suggestions
        assert phone.confidence == 100
        assert name.confidence == 0
        assert phone.patterns == ["E.164 format", "Indian format"]
        assert name.patterns == []

    def test_sorted_and_bounded(self, default_settings):
        dataset = DatasetAnalysis(
            columns=["Notes", "Contact", "WhatsApp Mobile Phone"],
            samples={
                "Notes": ["called at 3pm"],
                "Contact": ["9876543210", "n/a"],
                "WhatsApp Mobile Phone": ["+14155550123"],
            },
        )

        suggestions = detect_phone_columns(dataset.columns, dataset, default_settings)

        confidences = [s.confidence for s in suggestions]
        assert confidences == sorted(confidences, reverse=True)
        assert all(0 <= c <= 100 for c in confidences)
        assert suggestions[0].column == "WhatsApp Mobile Phone"
        assert suggestions[-1].column == "Notes"

    def test_no_columns(self, default_settings):
        assert detect_phone_columns([], DatasetAnalysis(), default_settings) == []
