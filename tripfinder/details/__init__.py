"""
Detail client and destination profile normalization.

Fetches the full record for one destination and applies display defaults
once per fetched record.
"""

from tripfinder.details.client import DetailClient, DETAIL_PATH
from tripfinder.details.normalize import DestinationProfile, normalize_detail

__all__ = ["DetailClient", "DETAIL_PATH", "DestinationProfile", "normalize_detail"]
