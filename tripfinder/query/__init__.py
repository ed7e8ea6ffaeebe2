"""
Canonical search query.

Turns the loosely-typed query parameters handed over by the search form
into a fully-populated, immutable query record.
"""

from tripfinder.query.schemas import CanonicalQuery, QUERY_DEFAULTS, QUERY_PARAM_NAMES
from tripfinder.query.normalizer import normalize_query
from tripfinder.query.params import parse_query_string, encode_search_form

__all__ = [
    "CanonicalQuery",
    "QUERY_DEFAULTS",
    "QUERY_PARAM_NAMES",
    "normalize_query",
    "parse_query_string",
    "encode_search_form",
]
