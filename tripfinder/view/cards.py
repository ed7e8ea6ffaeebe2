"""
Destination card view-model.

Derives what a results card shows from a summary and the canonical
query, including the estimated total trip cost.
"""

import math
from typing import Any, List

from pydantic import BaseModel, Field

from tripfinder.details.normalize import PLACEHOLDER_IMAGE
from tripfinder.estimation.cost import estimate_total_cost
from tripfinder.query.schemas import CanonicalQuery
from tripfinder.shared.contracts.destination_summary import DestinationSummary


DESCRIPTION_PREVIEW_CHARS = 120
HIGHLIGHT_PREVIEW_CHARS = 30
HIGHLIGHT_PREVIEW_COUNT = 2
DEFAULT_RATING = 4.0


class DestinationCard(BaseModel):
    """Display fields for one destination in the results grid."""

    id: Any
    name: str
    country: str
    destination_type: str
    image: str
    description_preview: str
    highlights_preview: List[str] = Field(default_factory=list)
    rating: float
    stars: int
    estimated_total_cost: float
    cost_label: str


def format_cost(amount: float) -> str:
    """Format an amount for display, e.g. 3880 -> "$3,880"."""
    if float(amount).is_integer():
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"


def _truncate(text: str, limit: int) -> str:
    return text[:limit] + "..." if len(text) > limit else text


def build_card(summary: DestinationSummary, query: CanonicalQuery) -> DestinationCard:
    """
    Build the card for one summary.

    Args:
        summary: Destination summary from the discovery client
        query: Canonical query driving the cost estimate

    Returns:
        DestinationCard with previews, rating and estimated cost
    """
    # A zero rating is treated as missing
    rating = summary.rating or DEFAULT_RATING
    total = estimate_total_cost(query, summary)
    description = summary.description or ""

    return DestinationCard(
        id=summary.id,
        name=summary.name or "",
        country=summary.country or "",
        destination_type=summary.destination_type or "",
        image=summary.images[0] if summary.images else PLACEHOLDER_IMAGE,
        description_preview=description[:DESCRIPTION_PREVIEW_CHARS] + "..." if description else "",
        highlights_preview=[
            _truncate(highlight, HIGHLIGHT_PREVIEW_CHARS)
            for highlight in summary.highlights[:HIGHLIGHT_PREVIEW_COUNT]
        ],
        rating=rating,
        stars=max(0, math.floor(rating)),
        estimated_total_cost=total,
        cost_label=format_cost(total),
    )


def build_cards(summaries: List[DestinationSummary], query: CanonicalQuery) -> List[DestinationCard]:
    """Cards for every summary, in list order."""
    return [build_card(summary, query) for summary in summaries]
