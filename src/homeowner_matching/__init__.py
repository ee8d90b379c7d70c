"""Fuzzy homeowner lookup by property address."""

import logging

from .components import CandidateAddress, MatchOptions, MatchResult
from .distance import levenshtein_distance
from .engine import (
    AddressMatcher,
    EngineConfig,
    are_addresses_similar,
    find_matching_homeowner,
    find_multiple_matches,
    get_match_quality_description,
)
from .errors import HomeownerLookupError, HomeownerMatchError
from .normalize import normalize_address
from .parser import extract_street_name, extract_street_number
from .scorer import calculate_similarity, describe_match_quality

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AddressMatcher",
    "CandidateAddress",
    "EngineConfig",
    "HomeownerLookupError",
    "HomeownerMatchError",
    "MatchOptions",
    "MatchResult",
    "are_addresses_similar",
    "calculate_similarity",
    "describe_match_quality",
    "extract_street_name",
    "extract_street_number",
    "find_matching_homeowner",
    "find_multiple_matches",
    "get_match_quality_description",
    "levenshtein_distance",
    "normalize_address",
]
