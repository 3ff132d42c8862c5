"""Tests for placeholder substitution and previews."""

import pytest

from mapsmith.mapping import validate_preview_data
from mapsmith.placeholders import (
    PlaceholderSource,
    build_live_preview,
    build_preview_rows,
    compose_preview,
    extract_placeholder_indices,
    format_token,
    source_hint,
    substitute_template_text,
)


class TestPlaceholderSyntax:
    """Test token helpers."""

    def test_extract_indices_in_order(self):
        assert extract_placeholder_indices("Hi {{2}} {{1}} {{2}} {{name}}") == [2, 1]

    def test_extract_from_empty(self):
        assert extract_placeholder_indices("") == []

    def test_format_token(self):
        assert format_token(3) == "{{3}}"


class TestSubstituteTemplateText:
    """Test the substitution priority chain."""

    def test_no_values_leaves_tokens(self):
        assert substitute_template_text("Hi {{1}}") == "Hi {{1}}"
        assert substitute_template_text("Hi {{1}}", {}, {}, {}) == "Hi {{1}}"

    def test_customer_mapping_hint(self):
        mappings = {1: {"source": "customer", "path": "name"}}
        assert substitute_template_text("Hi {{1}}", mappings=mappings) == "Hi [customer.name]"

    def test_model_entries_and_string_keys(self):
        mappings = {"2": PlaceholderSource(source="transaction", path="totalAmount")}
        assert substitute_template_text("Paid {{2}}", mappings=mappings) == "Paid [transaction.totalAmount]"

    def test_prefixed_paths_are_not_repeated(self):
        mappings = {
            1: {"source": "customer", "path": "customer.visitMetrics.totalVisits"},
            2: {"source": "transaction", "path": "transaction.transactionDate"},
        }
        assert (
            substitute_template_text("{{1}} / {{2}}", mappings=mappings)
            == "[customer.visitMetrics.totalVisits] / [transaction.transactionDate]"
        )

    @pytest.mark.parametrize("source", ["static", "user_input", "something_else"])
    def test_other_sources_render_user_input(self, source):
        mappings = {1: {"source": source, "label": "Offer"}}
        assert substitute_template_text("Use {{1}}", mappings=mappings) == "Use [user input]"

    def test_user_value_beats_sample_and_mapping(self):
        result = substitute_template_text(
            "Hi {{1}}",
            sample_values={"1": "Sam"},
            mappings={1: {"source": "customer", "path": "name"}},
            user_values={1: "Ann"},
        )
        assert result == "Hi Ann"

    def test_blank_values_fall_through(self):
        mappings = {1: {"source": "customer", "path": "name"}}
        assert (
            substitute_template_text("Hi {{1}}", sample_values={1: "Sam"}, user_values={1: "  "})
            == "Hi Sam"
        )
        assert (
            substitute_template_text("Hi {{1}}", sample_values={1: ""}, mappings=mappings)
            == "Hi [customer.name]"
        )

    def test_values_used_verbatim(self):
        assert substitute_template_text("[{{1}}]", user_values={1: " padded "}) == "[ padded ]"

    def test_non_digit_tokens_pass_through(self):
        assert substitute_template_text("Hi {{name}} {{ 1 }}", user_values={1: "x"}) == "Hi {{name}} {{ 1 }}"

    def test_empty_text(self):
        assert substitute_template_text(None) == ""
        assert substitute_template_text("") == ""

    def test_resolved_tokens_are_substituted_on_next_pass(self):
        first = substitute_template_text("A {{1}}", sample_values={1: "{{2}}", 2: "X"})
        assert first == "A {{2}}"
        assert substitute_template_text(first, sample_values={2: "X"}) == "A X"

    def test_source_hint(self):
        assert source_hint(PlaceholderSource(source="CUSTOMER", path="email")) == "[customer.email]"


class TestComposePreview:
    """Test multi-section previews."""

    def test_joins_non_empty_sections(self):
        result = compose_preview("Hello {{1}}", "Body", None, sample_values={1: "A"})
        assert result == "Hello A\n\nBody"

    def test_all_empty(self):
        assert compose_preview() == ""


class TestLivePreview:
    """Test first-row live previews."""

    def test_partially_mapped(self):
        preview = build_live_preview(
            "Hi {{1}}, order {{2}}",
            {1: "Name"},
            "Phone",
            [{"Name": " Alice ", "Phone": "+919999999999"}],
        )

        assert preview.preview == "Hi Alice, order {{2}}"
        assert preview.to == "+919999999999"
        assert preview.unmapped_variables == [2]
        assert preview.mapped_count == 1
        assert preview.total_variables == 2
        assert preview.is_complete is False

    def test_complete(self):
        preview = build_live_preview(
            "Hi {{1}}", {1: "Name"}, "Phone", [{"Name": "Alice", "Phone": "+919999999999"}]
        )
        assert preview.is_complete is True

    def test_missing_recipient_is_incomplete(self):
        preview = build_live_preview("Hi {{1}}", {1: "Name"}, "Phone", [{"Name": "Alice"}])
        assert preview.to == ""
        assert preview.is_complete is False

    def test_no_rows(self):
        preview = build_live_preview("Hi {{1}}", {}, None, [], total_variables=3)
        assert preview.preview == ""
        assert preview.total_variables == 3
        assert preview.is_complete is False


class TestPreviewRows:
    """Test per-row rendering."""

    def test_rows_feed_preview_validation(self):
        rows = [
            {"Name": "Alice", "Phone": "+919999999999"},
            {"Name": "  ", "Phone": ""},
        ]

        previews = build_preview_rows("Hi {{1}}", {1: "Name"}, "Phone", rows)

        assert previews[0].preview == "Hi Alice"
        assert previews[0].is_valid is True
        assert previews[1].errors == ["Missing value for {{1}}"]
        assert previews[1].is_valid is False
        assert previews[1].to == ""

        result = validate_preview_data(previews)
        assert result.is_valid is False
        assert result.invalid_rows == [1, 1]


class TestTokenEdgeCases:
    """Test tokens and mapping entries outside the usual shapes."""

    def test_non_ascii_digit_tokens_pass_through(self):
        assert extract_placeholder_indices("{{١}}") == []
        assert substitute_template_text("Hi {{١}}", user_values={1: "Ann"}) == "Hi {{١}}"

    def test_unrecognised_mapping_entry_renders_user_input(self):
        assert substitute_template_text("Hi {{1}}", mappings={1: "static"}) == "Hi [user input]"
