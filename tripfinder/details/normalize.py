"""
Destination profile normalization.

Applies display defaults to a fetched DestinationDetail exactly once, so
renderers read plain strings and lists and never walk optional chains.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from tripfinder.estimation.cost import estimate_cost_breakdown
from tripfinder.query.schemas import CanonicalQuery, format_amount
from tripfinder.shared.contracts.destination_detail import DestinationDetail


PLACEHOLDER_IMAGE = "/placeholder-destination.jpg"

DEFAULT_FLIGHT_DURATION = "12-15 hours"
DEFAULT_FLIGHT_COST = "$600-900"
DEFAULT_AIRPORTS = "International Airport"
DEFAULT_BUDGET_RATE = "$30-80/night"
DEFAULT_MID_RANGE_RATE = "$80-200/night"
DEFAULT_LUXURY_RATE = "$200-500/night"


class ActivityProfile(BaseModel):
    """Display fields for one activity."""

    name: str = ""
    cost: str = ""
    duration: str = ""
    description: str = ""


class DiningProfile(BaseModel):
    """Display fields for food and dining."""

    average_meal_cost: str = ""
    must_try_dishes: List[str] = Field(default_factory=list)


class DestinationProfile(BaseModel):
    """
    Fully-defaulted destination detail, ready for display.

    The source record is kept for anything that needs raw values.
    """

    id: Any = Field(description="Destination identifier")
    name: str = Field(description="Destination name")
    country: str = Field(description="Country")
    main_image: str = Field(description="First image or the placeholder")
    description: str = Field(description="Detailed description, else short one")

    flight_duration: str = Field(description="Round trip duration")
    flight_cost: str = Field(description="Average flight cost")
    airports: str = Field(description="Comma-separated major airports")

    budget_rate: str = Field(description="Budget nightly rate")
    mid_range_rate: str = Field(description="Mid-range nightly rate")
    luxury_rate: str = Field(description="Luxury nightly rate")
    hotel_recommendations: List[str] = Field(default_factory=list)

    activities: List[ActivityProfile] = Field(default_factory=list)
    food_and_dining: Optional[DiningProfile] = Field(
        default=None, description="Absent when the service has no dining data"
    )

    trip_days: int = Field(description="Days between start and end date")
    estimated_total_cost: float = Field(description="Estimated total trip cost")

    source: DestinationDetail = Field(description="Record as fetched")


def _display(value: Any, default: str = "") -> str:
    if value is None or value == "":
        return default
    if isinstance(value, float):
        return format_amount(value)
    return str(value)


def normalize_detail(
    detail: DestinationDetail,
    query: CanonicalQuery,
    requested_id: Any = None,
) -> DestinationProfile:
    """
    Build the display profile for a fetched destination.

    Args:
        detail: Detail record as returned by the detail client
        query: Canonical query used for the cost estimate
        requested_id: Identifier the detail was fetched for; used when the
            record omits its own id

    Returns:
        DestinationProfile with every display field populated
    """
    flight = detail.flight_info
    lodging = detail.accommodation
    dining = detail.food_and_dining
    breakdown = estimate_cost_breakdown(query, detail)

    airports = ", ".join(flight.major_airports) if flight and flight.major_airports else ""

    activities = [
        ActivityProfile(
            name=_display(activity.name),
            cost=_display(activity.cost),
            duration=_display(activity.duration),
            description=_display(activity.description),
        )
        for activity in detail.activities or []
    ]

    dining_profile = None
    if dining is not None:
        dining_profile = DiningProfile(
            average_meal_cost=_display(dining.average_meal_cost),
            must_try_dishes=list(dining.must_try_dishes or []),
        )

    return DestinationProfile(
        id=detail.id if detail.id is not None else requested_id,
        name=_display(detail.name),
        country=_display(detail.country),
        main_image=detail.images[0] if detail.images else PLACEHOLDER_IMAGE,
        description=_display(detail.detailed_description) or _display(detail.description),
        flight_duration=_display(flight and flight.average_duration, DEFAULT_FLIGHT_DURATION),
        flight_cost=_display(flight and flight.average_cost, DEFAULT_FLIGHT_COST),
        airports=airports or DEFAULT_AIRPORTS,
        budget_rate=_display(lodging and lodging.budget, DEFAULT_BUDGET_RATE),
        mid_range_rate=_display(lodging and lodging.mid_range, DEFAULT_MID_RANGE_RATE),
        luxury_rate=_display(lodging and lodging.luxury, DEFAULT_LUXURY_RATE),
        hotel_recommendations=list(lodging.recommendations or []) if lodging else [],
        activities=activities,
        food_and_dining=dining_profile,
        trip_days=breakdown.days,
        estimated_total_cost=breakdown.total,
        source=detail,
    )
