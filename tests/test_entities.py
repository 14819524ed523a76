"""Tests for date and amount extraction stage."""

from readable.pipeline.stage_entities import (
    contains_amount,
    contains_date,
    extract_key_spans,
    find_amounts,
    find_dates,
)


class TestExtractKeySpans:
    """Tests for extract_key_spans."""

    def test_date_and_amount(self):
        """One month-name date and one two-decimal amount."""
        text = "Meeting on January 15, 2024 costs $100.50."
        result = extract_key_spans(text)

        assert len(result.dates) == 1
        assert "January" in result.dates[0].value
        assert len(result.amounts) == 1
        assert "100.50" in result.amounts[0].value

        for span in result.dates + result.amounts:
            assert text[span.index:span.end] == span.value
        assert result.amounts[0].index == text.index("$100.50")

    def test_numeric_dates(self):
        result = find_dates("Due 12/05/2024, renewed 1-2-25 and 03.04.2023")

        assert result == ["12/05/2024", "1-2-25", "03.04.2023"]

    def test_abbreviated_months_case_insensitive(self):
        result = find_dates("from sep to SEPT and oct")

        assert result == ["sep", "SEPT", "oct"]

    def test_currency_markers(self):
        result = find_amounts("Pay USD 1,250.00 or €20.00 or £ 3.50 or 7.25")

        assert result == ["USD 1,250.00", "€20.00", "£ 3.50", "7.25"]

    def test_currency_code_without_space(self):
        """Currency codes may sit directly against the number."""
        text = "Total USD100.50 due and EUR1,234.56 later"

        assert find_amounts(text) == ["USD100.50", "EUR1,234.56"]
        spans = extract_key_spans(text).amounts
        assert [s.index for s in spans] == [text.index("USD"), text.index("EUR")]
        assert contains_amount("GBP7.00")

    def test_amount_requires_two_decimals(self):
        """Whole numbers and single decimals are not amounts."""
        assert find_amounts("Room 42 holds 3.5 people and $100") == []

    def test_no_entities(self):
        result = extract_key_spans("This is just regular text.")

        assert result.dates == []
        assert result.amounts == []

    def test_empty(self):
        result = extract_key_spans(None)

        assert result.dates == []
        assert result.amounts == []

    def test_repeated_values_kept_with_unique_ids(self):
        """Matches are neither merged nor deduplicated."""
        result = extract_key_spans("Jan 5 and again Jan 9.")

        assert [s.value for s in result.dates] == ["Jan", "Jan"]
        assert result.dates[0].id != result.dates[1].id
        assert result.dates[0].index < result.dates[1].index

    def test_repeated_calls_start_from_beginning(self):
        """Pattern state does not carry over between calls."""
        text = "Paid $5.00 on May 3."

        first = extract_key_spans(text)
        second = extract_key_spans(text)

        assert first.values() == second.values()
        assert contains_amount(text)
        assert contains_amount(text)
        assert contains_date(text)
        assert contains_date(text)
