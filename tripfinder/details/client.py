"""
Detail client for a single destination.

Same envelope contract and failure classification as the discovery
client, scoped to one identifier. No retries.
"""

import logging
from typing import Union
from urllib.parse import quote

from pydantic import ValidationError

from tripfinder.shared.contracts.destination_detail import DestinationDetail
from tripfinder.shared.errors import ParseError
from tripfinder.shared.http.client import ServiceClient


logger = logging.getLogger(__name__)

DETAIL_PATH = "/api/v2/details/{destination_id}"
FALLBACK_MESSAGE = "Failed to fetch destination details"


class DetailClient:
    """Fetches the detail record for one destination."""

    def __init__(self, service: ServiceClient):
        self.service = service

    async def fetch_detail(self, destination_id: Union[int, str]) -> DestinationDetail:
        """
        Fetch a destination's detail record.

        Args:
            destination_id: Identifier from a DestinationSummary

        Returns:
            Parsed DestinationDetail

        Raises:
            TransportError: Non-2xx status or network failure
            ApplicationError: Service answered success=false
            ParseError: Envelope data is missing or malformed
        """
        _log = f"[client=detail] [destination={destination_id}] "
        logger.info(f"{_log}Fetching destination details")

        path = DETAIL_PATH.format(destination_id=quote(str(destination_id), safe=""))
        data = await self.service.get_data(path, fallback_message=FALLBACK_MESSAGE)

        if not isinstance(data, dict):
            logger.warning(f"{_log}Envelope has no detail record")
            raise ParseError(FALLBACK_MESSAGE)

        try:
            detail = DestinationDetail.model_validate(data)
        except ValidationError as e:
            logger.warning(f"{_log}Detail record failed validation: {e}")
            raise ParseError(FALLBACK_MESSAGE) from e

        logger.info(f"{_log}Details received | name={detail.name}")
        return detail
