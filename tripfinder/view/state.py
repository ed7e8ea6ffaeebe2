"""
Destinations view state schema.

The list phase and the detail flags are orthogonal: a detail fetch can be
loading while the list stays ready.
"""

from typing import List, Literal, Optional, TypedDict

from tripfinder.details.normalize import DestinationProfile
from tripfinder.shared.contracts.destination_summary import DestinationSummary


ListPhase = Literal["loading", "ready", "error"]
Screen = Literal["loading", "error", "results"]


class ViewState(TypedDict):
    """
    State owned by the destinations view.

    Written only by DestinationsView; readers receive copies.
    """

    # List fetch
    phase: ListPhase
    summaries: List[DestinationSummary]
    error_message: Optional[str]

    # Detail fetch
    selected_detail: Optional[DestinationProfile]
    detail_open: bool
    detail_loading: bool
    detail_error: Optional[str]


def initial_view_state() -> ViewState:
    """State on mount: the list is loading and no detail is selected."""
    return {
        "phase": "loading",
        "summaries": [],
        "error_message": None,
        "selected_detail": None,
        "detail_open": False,
        "detail_loading": False,
        "detail_error": None,
    }
