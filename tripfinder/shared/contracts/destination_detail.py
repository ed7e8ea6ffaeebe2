"""
Destination detail contract.

Defines the full destination record returned by the per-id detail
endpoint. Every nested field is optional; defaults for display are applied
once by tripfinder.details.normalize, not here.
"""

from typing import List, Optional, Union

from pydantic import Field

from tripfinder.shared.contracts.destination_summary import (
    AccommodationPricing,
    DestinationSummary,
    WireModel,
)


class FlightInfo(WireModel):
    """Typical flight information for reaching the destination."""

    average_duration: Optional[str] = Field(
        default=None, alias="averageDuration", description="Round trip duration"
    )
    average_cost: Optional[Union[float, str]] = Field(
        default=None, alias="averageCost", description="Typical fare"
    )
    major_airports: Optional[List[str]] = Field(
        default=None, alias="majorAirports", description="Serving airports"
    )


class Activity(WireModel):
    """A bookable activity or experience."""

    name: Optional[str] = Field(default=None, description="Activity name")
    cost: Optional[Union[float, str]] = Field(default=None, description="Cost")
    duration: Optional[str] = Field(default=None, description="Duration")
    description: Optional[str] = Field(default=None, description="Description")


class FoodAndDining(WireModel):
    """Dining costs and signature dishes."""

    average_meal_cost: Optional[Union[float, str]] = Field(
        default=None, alias="averageMealCost", description="Typical meal cost"
    )
    must_try_dishes: Optional[List[str]] = Field(
        default=None, alias="mustTryDishes", description="Signature dishes"
    )


class DestinationDetail(DestinationSummary):
    """
    Full destination record.

    Shares the summary's identifying fields and adds flight, lodging,
    activity and dining information.
    """

    id: Optional[Union[int, str]] = Field(
        default=None, description="Destination identifier (may be omitted by the service)"
    )
    detailed_description: Optional[str] = Field(
        default=None, alias="detailedDescription", description="Long description"
    )
    flight_info: Optional[FlightInfo] = Field(
        default=None, alias="flightInfo", description="Flight information"
    )
    accommodation: Optional[AccommodationPricing] = Field(
        default=None, description="Nightly price ranges and recommendations"
    )
    activities: Optional[List[Activity]] = Field(
        default=None, description="Activities and experiences"
    )
    food_and_dining: Optional[FoodAndDining] = Field(
        default=None, alias="foodAndDining", description="Food and dining"
    )
