"""
Unit tests for the cost estimator.

Tests the worked examples, the per-person policy, the nightly-rate
fallback and the degenerate date range edge case.
"""

from tripfinder.estimation.cost import (
    FALLBACK_NIGHTLY_RATE,
    estimate_cost_breakdown,
    estimate_total_cost,
    nightly_rate,
    trip_days,
)
from tripfinder.query.normalizer import normalize_query
from tripfinder.shared.contracts.destination_summary import DestinationSummary


def _make_query(**overrides):
    """Create the reference query (14 days, 2 people)."""
    raw = {
        "startDate": "2024-06-01",
        "endDate": "2024-06-15",
        "flightBudget": "800",
        "activitiesBudget": "300",
        "numberOfPeople": "2",
    }
    raw.update(overrides)
    return normalize_query(raw)


def _make_destination(mid_range=None):
    """Create a summary with an optional mid-range nightly price."""
    record = {"id": 1, "name": "Bali"}
    if mid_range is not None:
        record["accommodation"] = {"midRange": mid_range}
    return DestinationSummary.model_validate(record)


class TestWorkedExamples:
    """Tests for the documented reference figures."""

    def test_with_mid_range_price(self):
        """120/night over 14 days for 2 people totals 3880."""
        breakdown = estimate_cost_breakdown(_make_query(), _make_destination(120))

        assert breakdown.days == 14
        assert breakdown.flight_cost == 1600
        assert breakdown.hotel_cost == 1680
        assert breakdown.activities_cost == 600
        assert breakdown.total == 3880

    def test_without_mid_range_price(self):
        """Missing mid-range price uses 100/night, totalling 3400."""
        breakdown = estimate_cost_breakdown(_make_query(), _make_destination())

        assert breakdown.hotel_cost == 1400
        assert breakdown.total == 3400
        assert estimate_total_cost(_make_query(), _make_destination()) == 3400


class TestCostPolicy:
    """Tests for how each input scales the estimate."""

    def test_pure(self):
        """Same inputs always give the same number."""
        query, destination = _make_query(), _make_destination(95)

        assert estimate_total_cost(query, destination) == estimate_total_cost(query, destination)

    def test_scaling_budgets_scales_only_their_terms(self):
        """Scaling flight/activities budgets by k leaves the hotel term alone."""
        base = estimate_cost_breakdown(_make_query(), _make_destination(120))
        scaled = estimate_cost_breakdown(
            _make_query(flightBudget="2400", activitiesBudget="900"),
            _make_destination(120),
        )

        assert scaled.flight_cost == base.flight_cost * 3
        assert scaled.activities_cost == base.activities_cost * 3
        assert scaled.hotel_cost == base.hotel_cost

    def test_people_do_not_multiply_hotel(self):
        """Hotel cost is per stay, not per person."""
        one = estimate_cost_breakdown(_make_query(numberOfPeople="1"), _make_destination(120))
        four = estimate_cost_breakdown(_make_query(numberOfPeople="4"), _make_destination(120))

        assert one.hotel_cost == four.hotel_cost
        assert four.flight_cost == one.flight_cost * 4

    def test_zero_mid_range_is_kept(self):
        """An explicit 0 nightly price is a price, not a missing one."""
        breakdown = estimate_cost_breakdown(_make_query(), _make_destination(0))

        assert breakdown.hotel_cost == 0


class TestNightlyRate:
    """Tests for the nightly_rate helper."""

    def test_numeric_string_is_accepted(self):
        assert nightly_rate(_make_destination("150")) == 150

    def test_price_range_string_is_not_a_rate(self):
        """Display ranges fall back to the fixed rate in estimates."""
        destination = _make_destination("$80-200/night")

        assert nightly_rate(destination) is None
        assert estimate_cost_breakdown(_make_query(), destination).hotel_cost == (
            FALLBACK_NIGHTLY_RATE * 14
        )

    def test_record_without_accommodation(self):
        assert nightly_rate(object()) is None


class TestDegenerateDateRange:
    """Known edge case: inverted or empty date ranges still produce a number."""

    def test_same_day_range_gives_zero_hotel_term(self):
        query = _make_query(endDate="2024-06-01")

        assert trip_days(query) == 0
        assert estimate_total_cost(query, _make_destination(120)) == 1600 + 600

    def test_inverted_range_gives_negative_hotel_term(self):
        query = _make_query(startDate="2024-06-15", endDate="2024-06-01")
        breakdown = estimate_cost_breakdown(query, _make_destination(120))

        assert breakdown.days == -14
        assert breakdown.hotel_cost == -1680
        assert breakdown.total == 1600 - 1680 + 600
