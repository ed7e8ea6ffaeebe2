"""
Destination summary contract.

Defines the abbreviated destination record returned by the discovery
endpoint. Field names follow the service's camelCase wire format through
aliases; unknown fields are preserved.
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WireModel(BaseModel):
    """Base for records decoded from the service's camelCase JSON."""

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)


class AccommodationPricing(WireModel):
    """Nightly price ranges for a destination."""

    budget: Optional[Union[float, str]] = Field(
        default=None, description="Budget tier nightly price"
    )
    mid_range: Optional[Union[float, str]] = Field(
        default=None,
        alias="midRange",
        description="Mid-range tier nightly price (numeric drives cost estimates)",
    )
    luxury: Optional[Union[float, str]] = Field(
        default=None, description="Luxury tier nightly price"
    )
    recommendations: Optional[List[str]] = Field(
        default=None, description="Recommended hotels"
    )


class DestinationSummary(WireModel):
    """A single destination as listed by the discovery endpoint."""

    id: Union[int, str] = Field(description="Destination identifier")
    name: Optional[str] = Field(default=None, description="Destination name")
    country: Optional[str] = Field(default=None, description="Country")
    destination_type: Optional[str] = Field(
        default=None, alias="type", description="Vacation type (e.g., 'Beach')"
    )
    description: Optional[str] = Field(default=None, description="Short description")
    images: List[str] = Field(default_factory=list, description="Image URLs, in order")
    highlights: List[str] = Field(
        default_factory=list, description="Highlight phrases, in order"
    )
    rating: Optional[float] = Field(default=None, description="Rating out of 5")
    accommodation: Optional[AccommodationPricing] = Field(
        default=None, description="Nightly price ranges"
    )

    @field_validator("images", "highlights", mode="before")
    @classmethod
    def _drop_blank_entries(cls, v: Any) -> Any:
        if v is None:
            return []
        if not isinstance(v, list):
            return v
        return [item for item in v if isinstance(item, str)]
