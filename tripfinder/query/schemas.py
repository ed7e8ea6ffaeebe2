"""
Schemas for the canonical search query.

Defines the wire parameter names, their documented defaults and the
immutable CanonicalQuery record consumed by the clients and the cost
estimator.
"""

from datetime import date
from decimal import Decimal
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field


# Wire parameter name -> CanonicalQuery field name, in wire order
QUERY_PARAM_NAMES: Tuple[Tuple[str, str], ...] = (
    ("startingCity", "starting_city"),
    ("startDate", "start_date"),
    ("endDate", "end_date"),
    ("flightBudget", "flight_budget"),
    ("hotelBudget", "hotel_budget"),
    ("activitiesBudget", "activities_budget"),
    ("totalBudget", "total_budget"),
    ("vacationType", "vacation_type"),
    ("numberOfPeople", "number_of_people"),
)

# Substituted when a parameter is absent, empty or unparseable
QUERY_DEFAULTS: Dict[str, str] = {
    "startingCity": "New York",
    "startDate": "2024-06-01",
    "endDate": "2024-06-15",
    "flightBudget": "800",
    "hotelBudget": "150",
    "activitiesBudget": "300",
    "totalBudget": "1250",
    "vacationType": "Beach",
    "numberOfPeople": "2",
}


def format_amount(value: float) -> str:
    """Render an amount as a plain fixed-point string ("800", "812.5", "0.00001")."""
    if float(value).is_integer():
        return str(int(value))
    # Fixed-point, never exponent form
    return format(Decimal(repr(float(value))), "f")


class CanonicalQuery(BaseModel):
    """
    Fully-defaulted representation of the user's search intent.

    end_date > start_date is expected to hold already; nothing here
    re-validates it.
    """

    model_config = ConfigDict(frozen=True)

    starting_city: str = Field(description="Departure city")
    start_date: date = Field(description="Trip start date")
    end_date: date = Field(description="Trip end date")
    flight_budget: float = Field(description="Per-person flight budget")
    hotel_budget: float = Field(description="Hotel budget")
    activities_budget: float = Field(description="Per-person activities budget")
    total_budget: float = Field(description="Total budget")
    vacation_type: str = Field(description="Vacation type (e.g., 'Beach')")
    number_of_people: int = Field(description="Number of travelers")

    def to_params(self) -> Dict[str, str]:
        """
        Serialize as the flat string mapping sent to the discovery endpoint.

        Dates are YYYY-MM-DD, budgets are decimal strings.
        """
        params: Dict[str, str] = {}
        for param_name, field_name in QUERY_PARAM_NAMES:
            value = getattr(self, field_name)
            if isinstance(value, date):
                params[param_name] = value.isoformat()
            elif isinstance(value, float):
                params[param_name] = format_amount(value)
            else:
                params[param_name] = str(value)
        return params
