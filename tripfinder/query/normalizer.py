"""
Query normalizer.

Maps raw, possibly-absent string parameters onto a CanonicalQuery. Absent,
empty or unparseable values fall back to QUERY_DEFAULTS so no NaN-like
value ever reaches the cost math. No other validation happens here.
"""

import logging
import math
from datetime import date
from typing import Callable, Mapping, Optional, TypeVar

from tripfinder.query.schemas import CanonicalQuery, QUERY_DEFAULTS


logger = logging.getLogger(__name__)

T = TypeVar("T")


def _raw_value(raw: Mapping[str, Optional[str]], name: str) -> str:
    value = raw.get(name)
    if value is None:
        return QUERY_DEFAULTS[name]
    value = str(value).strip()
    return value or QUERY_DEFAULTS[name]


def _parse_amount(value: str) -> float:
    amount = float(value)
    if not math.isfinite(amount):
        raise ValueError(f"non-finite amount: {value}")
    return amount


def _parse_count(value: str) -> int:
    # "2.0" and "2.5" are accepted and truncated
    return int(_parse_amount(value))


def _parse_field(
    raw: Mapping[str, Optional[str]],
    name: str,
    parse: Callable[[str], T],
) -> T:
    value = _raw_value(raw, name)
    try:
        return parse(value)
    except ValueError:
        logger.warning(
            f"[query=normalize] Unparseable {name}={value!r}, "
            f"using default {QUERY_DEFAULTS[name]!r}"
        )
        return parse(QUERY_DEFAULTS[name])


def normalize_query(raw: Mapping[str, Optional[str]]) -> CanonicalQuery:
    """
    Produce a CanonicalQuery from raw query parameters.

    Args:
        raw: Mapping of wire parameter name to string (or None). Typically
            decoded from a URL query string.

    Returns:
        CanonicalQuery with all nine fields populated.
    """
    return CanonicalQuery(
        starting_city=_raw_value(raw, "startingCity"),
        start_date=_parse_field(raw, "startDate", date.fromisoformat),
        end_date=_parse_field(raw, "endDate", date.fromisoformat),
        flight_budget=_parse_field(raw, "flightBudget", _parse_amount),
        hotel_budget=_parse_field(raw, "hotelBudget", _parse_amount),
        activities_budget=_parse_field(raw, "activitiesBudget", _parse_amount),
        total_budget=_parse_field(raw, "totalBudget", _parse_amount),
        vacation_type=_raw_value(raw, "vacationType"),
        number_of_people=_parse_field(raw, "numberOfPeople", _parse_count),
    )
