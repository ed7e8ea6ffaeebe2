"""Trip cost estimation from budget inputs and destination pricing."""

from tripfinder.estimation.cost import (
    CostBreakdown,
    FALLBACK_NIGHTLY_RATE,
    estimate_cost_breakdown,
    estimate_total_cost,
    nightly_rate,
    trip_days,
)

__all__ = [
    "CostBreakdown",
    "FALLBACK_NIGHTLY_RATE",
    "estimate_cost_breakdown",
    "estimate_total_cost",
    "nightly_rate",
    "trip_days",
]
