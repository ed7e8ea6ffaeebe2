"""
Destinations view.

State machine, state schema and card view-models for the results view.
"""

from tripfinder.view.state import ViewState, initial_view_state
from tripfinder.view.cards import DestinationCard, build_card, build_cards
from tripfinder.view.machine import DestinationsView

__all__ = [
    "ViewState",
    "initial_view_state",
    "DestinationCard",
    "build_card",
    "build_cards",
    "DestinationsView",
]
