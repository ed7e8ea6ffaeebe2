"""
Helpers for the upstream query-parameter contract.

The search form hands its nine fields to the results view as URL query
parameters. These helpers produce and decode that flat mapping.
"""

import math
from typing import Any, Dict, Mapping
from urllib.parse import parse_qsl

from tripfinder.query.schemas import QUERY_PARAM_NAMES, format_amount


def parse_query_string(search: str) -> Dict[str, str]:
    """
    Decode a location query string ("?a=b&c=d") into a flat mapping.

    The first occurrence of a repeated key wins. Blank values are kept so
    the normalizer can substitute defaults for them.
    """
    params: Dict[str, str] = {}
    for key, value in parse_qsl(search.lstrip("?"), keep_blank_values=True):
        params.setdefault(key, value)
    return params


def _to_amount(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return float("nan")


def encode_search_form(form: Mapping[str, Any]) -> Dict[str, str]:
    """
    Encode submitted search form fields as the results-view parameters.

    totalBudget is derived as flightBudget + hotelBudget + activitiesBudget.
    When any budget is not numeric the total is left empty, and the
    normalizer falls back to its default.

    Args:
        form: Search form values keyed by wire parameter name. numberOfPeople
            defaults to 1, as on the form.

    Returns:
        Mapping of all nine wire parameter names to strings.
    """
    total = (
        _to_amount(form.get("flightBudget"))
        + _to_amount(form.get("hotelBudget"))
        + _to_amount(form.get("activitiesBudget"))
    )

    params: Dict[str, str] = {}
    for param_name, _ in QUERY_PARAM_NAMES:
        if param_name == "totalBudget":
            params[param_name] = "" if math.isnan(total) else format_amount(total)
        elif param_name == "numberOfPeople":
            people = form.get("numberOfPeople")
            params[param_name] = "1" if people is None or people == "" else str(people)
        else:
            value = form.get(param_name)
            params[param_name] = "" if value is None else str(value)
    return params
