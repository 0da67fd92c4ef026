"""Tests for price parsing/formatting and the summary builder."""

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lotgrid.models import Listing
from lotgrid.summary import (
    SummaryBuilder,
    coerce_amount,
    format_amount,
    is_highlighted,
    parse_amount,
    total,
)


class TestParseAmount:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("1,234,000원", 1234000),
            ("abc", 0),
            ("-50", -50),
            ("$ 72,000", 72000),
            ("12.5", 12.5),
            ("", 0),
            ("-", 0),
            ("1.2.3", 0),
            ("Infinity", 0),
            ("1e5", 15),
        ],
    )
    def test_parse(self, text, expected):
        assert parse_amount(text) == expected

    def test_integral_result_is_int(self):
        assert isinstance(parse_amount("35,000"), int)

    def test_non_string_input_is_stringified(self):
        assert parse_amount(1200) == 1200


class TestCoerceAmount:
    def test_numbers_pass_through(self):
        assert coerce_amount(7) == 7
        assert coerce_amount(7.25) == 7.25

    def test_non_finite_numbers_become_zero(self):
        assert coerce_amount(float("nan")) == 0
        assert coerce_amount(float("-inf")) == 0

    def test_none_becomes_zero(self):
        assert coerce_amount(None) == 0

    def test_text_is_parsed(self):
        assert coerce_amount("42,000원") == 42000

    def test_int_too_large_for_float_becomes_zero(self):
        assert coerce_amount(10**400) == 0

    @pytest.mark.parametrize("value", [True, False])
    def test_booleans_are_parsed_as_text(self, value):
        assert coerce_amount(value) == parse_amount(str(value)) == 0


class TestFormatAmount:
    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (0, "0"),
            (35000, "35,000"),
            (172_000_000, "172,000,000"),
            (-1234, "-1,234"),
            (1234.5, "1,234.5"),
            (0.1234, "0.123"),
            (float("nan"), "0"),
        ],
    )
    def test_format(self, amount, expected):
        assert format_amount(amount) == expected


class TestTotal:
    def test_empty_is_zero(self):
        assert total([]) == 0

    def test_sums_prices(self):
        listings = [Listing(id=1, price=10), Listing(id=2, price=20), Listing(id=3, price=-5)]
        assert total(listings) == 25

    @given(st.lists(st.integers(min_value=-10**9, max_value=10**9), max_size=30), st.randoms())
    def test_independent_of_order(self, prices, rnd):
        listings = [Listing(id=i + 1, price=p) for i, p in enumerate(prices)]
        shuffled = list(listings)
        rnd.shuffle(shuffled)
        assert total(listings) == total(shuffled) == sum(prices)


class TestHighlight:
    def test_threshold_is_inclusive(self):
        assert is_highlighted(100_000_000, 100_000_000)
        assert not is_highlighted(99_999_999, 100_000_000)

    def test_price_cell_decorates_highlighted(self):
        builder = SummaryBuilder(threshold=100)
        cell = builder.price_cell(Listing(id=1, price=150))
        assert cell.highlighted
        assert cell.text == "150"
        assert cell.label.endswith(" 150")
        assert cell.label != cell.text

    def test_price_cell_plain_below_threshold(self):
        builder = SummaryBuilder(threshold=100)
        cell = builder.price_cell(Listing(id=1, price=99))
        assert not cell.highlighted
        assert cell.label == cell.text == "99"

    def test_row_class(self):
        builder = SummaryBuilder(threshold=100)
        assert builder.row_class(Listing(id=1, price=100)) == "highlighted"
        assert builder.row_class(Listing(id=2, price=1)) is None

    def test_highlighted_rows_keep_order(self):
        builder = SummaryBuilder(threshold=100)
        rows = [Listing(id=1, price=500), Listing(id=2, price=5), Listing(id=3, price=100)]
        assert [row.id for row in builder.highlighted_rows(rows)] == [1, 3]

    def test_highlight_does_not_touch_listing_or_total(self):
        builder = SummaryBuilder(threshold=100)
        listing = Listing(id=1, make="A", model="x", price=500)
        summary = builder.build([listing])
        assert listing.price == 500
        assert summary.total == 500


class TestBuild:
    def test_summary_for_snapshot(self):
        builder = SummaryBuilder(threshold=100)
        summary = builder.build(
            [Listing(id=1, price=10), Listing(id=2, price=150), Listing(id=3, price=1000)]
        )
        assert summary.total == 1160
        assert summary.total_text == "1,160"
        assert summary.row_count == 3
        assert summary.highlighted_ids == {2, 3}

    def test_empty_snapshot(self):
        summary = SummaryBuilder().build([])
        assert summary.total == 0
        assert summary.total_text == "0"
        assert summary.row_count == 0
        assert not summary.highlighted_ids

    def test_default_threshold(self):
        assert SummaryBuilder().threshold == 100_000_000


def test_listing_price_validator_coerces_text():
    assert Listing(id=1, price="1,000원").price == 1000
    assert Listing(id=2, price="n/a").price == 0
    assert math.isfinite(Listing(id=3, price=float("inf")).price)
