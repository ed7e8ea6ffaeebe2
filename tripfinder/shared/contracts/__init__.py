"""Server record contracts for discovery and detail responses."""

from tripfinder.shared.contracts.destination_summary import (
    AccommodationPricing,
    DestinationSummary,
)
from tripfinder.shared.contracts.destination_detail import DestinationDetail

__all__ = ["AccommodationPricing", "DestinationSummary", "DestinationDetail"]
