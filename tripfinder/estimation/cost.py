"""
Trip cost estimator.

Combines the user's budget figures with a destination's nightly price:

    days           = ceil((end_date - start_date) / 1 day)
    flight_cost    = flight_budget * number_of_people
    hotel_cost     = (accommodation.mid_range or FALLBACK_NIGHTLY_RATE) * days
    activities     = activities_budget * number_of_people
    total          = flight_cost + hotel_cost + activities

The per-person multiplier applies to flights and activities only; hotel
cost is per stay, scaled by nights. An inverted or empty date range yields
a zero or negative hotel term instead of an error.
"""

import math
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Optional

from tripfinder.query.schemas import CanonicalQuery


# Nightly rate used when the destination supplies no mid-range price
FALLBACK_NIGHTLY_RATE = 100.0


@dataclass(frozen=True)
class CostBreakdown:
    """Itemized estimate for one destination."""

    days: int
    flight_cost: float
    hotel_cost: float
    activities_cost: float

    @property
    def total(self) -> float:
        return self.flight_cost + self.hotel_cost + self.activities_cost


def trip_days(query: CanonicalQuery) -> int:
    """Whole days between start and end date, rounded up. May be <= 0."""
    return math.ceil((query.end_date - query.start_date) / timedelta(days=1))


def nightly_rate(destination: Any) -> Optional[float]:
    """
    Numeric mid-range nightly price of a destination, if it has one.

    Accepts any record with an optional ``accommodation.mid_range``. Numeric
    strings ("120") are accepted; price ranges like "$80-200/night" are not.
    """
    accommodation = getattr(destination, "accommodation", None)
    value = getattr(accommodation, "mid_range", None)
    if value is None or isinstance(value, bool):
        return None
    try:
        rate = float(value)
    except (TypeError, ValueError):
        return None
    return rate if math.isfinite(rate) else None


def estimate_cost_breakdown(query: CanonicalQuery, destination: Any) -> CostBreakdown:
    """
    Estimate trip cost for one destination, itemized.

    Args:
        query: Canonical search query (dates, budgets, traveler count)
        destination: Summary or detail record

    Returns:
        CostBreakdown with day count and the three cost terms
    """
    days = trip_days(query)
    people = query.number_of_people

    rate = nightly_rate(destination)
    if rate is None:
        rate = FALLBACK_NIGHTLY_RATE

    return CostBreakdown(
        days=days,
        flight_cost=query.flight_budget * people,
        hotel_cost=rate * days,
        activities_cost=query.activities_budget * people,
    )


def estimate_total_cost(query: CanonicalQuery, destination: Any) -> float:
    """Estimated total trip cost for one destination."""
    return estimate_cost_breakdown(query, destination).total
