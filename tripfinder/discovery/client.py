"""
Discovery client for the destination list.

Sends the full canonical query as flat string parameters and returns the
first max_results destinations in server order. A record that fails
validation is skipped; the rest of the list is kept.
"""

import logging
from typing import List, Optional

from pydantic import ValidationError

from tripfinder.query.schemas import CanonicalQuery
from tripfinder.shared.config import ClientConfig
from tripfinder.shared.contracts.destination_summary import DestinationSummary
from tripfinder.shared.errors import ParseError
from tripfinder.shared.http.client import ServiceClient


logger = logging.getLogger(__name__)

DISCOVERY_PATH = "/api/v2/discovery"
FALLBACK_MESSAGE = "Failed to fetch destinations"


class DiscoveryClient:
    """Fetches destination summaries for a canonical query."""

    def __init__(
        self,
        service: ServiceClient,
        config: Optional[ClientConfig] = None,
    ):
        self.service = service
        self.config = config or service.config

    async def fetch_summaries(self, query: CanonicalQuery) -> List[DestinationSummary]:
        """
        Fetch the top destinations for a query.

        Args:
            query: Canonical search query

        Returns:
            Up to config.max_results summaries, in server order

        Raises:
            TransportError: Non-2xx status or network failure
            ApplicationError: Service answered success=false
            ParseError: Envelope data is missing or malformed
        """
        _log = f"[client=discovery] [city={query.starting_city}] [type={query.vacation_type}] "
        logger.info(
            f"{_log}Fetching destinations | dates={query.start_date}..{query.end_date}, "
            f"people={query.number_of_people}"
        )

        data = await self.service.get_data(
            DISCOVERY_PATH,
            params=query.to_params(),
            fallback_message=FALLBACK_MESSAGE,
        )

        destinations = data.get("destinations") if isinstance(data, dict) else None
        if not isinstance(destinations, list):
            logger.warning(f"{_log}Envelope has no destinations list")
            raise ParseError(FALLBACK_MESSAGE)

        top = destinations[: self.config.max_results]
        summaries = []
        for position, item in enumerate(top):
            try:
                summaries.append(DestinationSummary.model_validate(item))
            except ValidationError as e:
                logger.warning(f"{_log}Skipping destination at position {position}: {e}")

        logger.info(
            f"{_log}Destinations received | total={len(destinations)}, kept={len(summaries)}"
        )
        return summaries
