from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple, Union

from .components import CandidateAddress, MatchOptions, MatchResult
from .errors import HomeownerLookupError
from .normalize import normalize_address
from .scorer import (
    calculate_similarity,
    describe_match_quality,
    jaro_winkler_similarity,
    surface_similarity,
)

logger = logging.getLogger(__name__)

CandidateLike = Union[CandidateAddress, Mapping[str, Any]]
CandidateSource = Union[Iterable[CandidateLike], Callable[[], Iterable[CandidateLike]]]


@dataclass(frozen=True)
class EngineConfig:
    min_similarity: float = 0.7
    multi_match_limit: int = 5
    similar_threshold: float = 0.85
    # Candidates scoring below this are not worth a debug line.
    log_floor: float = 0.3


class AddressMatcher:
    """Resolve a free-text address to the most plausible homeowner.

    Holds nothing but its config; candidates are supplied on every call,
    either as an iterable or as a zero-argument callable that fetches them.
    Failures inside that fetch surface as :class:`HomeownerLookupError`.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()

    def _options(self, options: MatchOptions | None) -> MatchOptions:
        if options is None:
            return MatchOptions(min_similarity=self.config.min_similarity)
        if options.min_similarity is None:
            return replace(options, min_similarity=self.config.min_similarity)
        return options

    def _load_candidates(self, candidates: CandidateSource, failure: str) -> List[CandidateAddress]:
        try:
            source = candidates() if callable(candidates) else candidates
            return [
                item if isinstance(item, CandidateAddress) else CandidateAddress.from_row(item)
                for item in source
            ]
        except Exception as exc:
            logger.error("%s: %s", failure, exc)
            raise HomeownerLookupError(f"{failure}: {exc}") from exc

    def _rank(
        self, query_address: str, candidates: List[CandidateAddress], min_similarity: float
    ) -> List[MatchResult]:
        """Score every candidate with an address and return those meeting the threshold, best first.

        Equal similarities fall back to closeness of the raw text, then to input order.
        """
        logger.info("Comparing against %d candidates", len(candidates))
        ranked: List[Tuple[Tuple[float, float, int], MatchResult]] = []

        for index, candidate in enumerate(candidates):
            if not candidate.has_address:
                logger.debug("Skipping %s (%s): no address on file", candidate.name, candidate.id)
                continue

            similarity = calculate_similarity(query_address, candidate.address)
            if similarity >= self.config.log_floor:
                logger.debug(
                    "%s (%s): %d%% similar, input=%r stored=%r",
                    candidate.name,
                    candidate.id,
                    round(similarity * 100),
                    query_address,
                    candidate.address,
                )
            if similarity < min_similarity:
                continue

            tie_breaker = surface_similarity(query_address, candidate.address)
            ranked.append(((-similarity, -tie_breaker, index), MatchResult(candidate, similarity)))

        ranked.sort(key=lambda entry: entry[0])
        return [result for _, result in ranked]

    def _annotate(self, query_address: str, result: MatchResult) -> MatchResult:
        address = result.candidate.address
        result.diagnostics["normalized_query"] = normalize_address(query_address)
        result.diagnostics["normalized_address"] = normalize_address(address)
        result.diagnostics["jaro_winkler"] = f"{jaro_winkler_similarity(query_address, address):.3f}"
        result.diagnostics["quality"] = result.quality
        return result

    def find_matching_homeowner(
        self,
        candidates: CandidateSource,
        query_address: Optional[str],
        options: MatchOptions | None = None,
    ) -> Optional[MatchResult]:
        opts = self._options(options)
        logger.info("Matching address %r (min similarity %.2f)", query_address, opts.min_similarity)

        if not query_address or not query_address.strip():
            logger.warning("Empty address provided, skipping match")
            return None

        loaded = self._load_candidates(candidates, "failed to match homeowner")
        ranked = self._rank(query_address, loaded, opts.min_similarity)

        if not ranked:
            logger.info("No match found above %d%% threshold", round(opts.min_similarity * 100))
            return None

        best = self._annotate(query_address, ranked[0])
        logger.info(
            "Best match: %s (%s), %d%% similar",
            best.candidate.name,
            best.candidate.id,
            round(best.similarity * 100),
        )
        return best

    def find_multiple_matches(
        self,
        candidates: CandidateSource,
        query_address: Optional[str],
        options: MatchOptions | None = None,
    ) -> List[MatchResult]:
        opts = self._options(options)
        limit = opts.limit if opts.limit is not None else self.config.multi_match_limit
        logger.info("Finding up to %d matches for %r", limit, query_address)

        if not query_address or not query_address.strip():
            logger.warning("Empty address provided, skipping match")
            return []

        loaded = self._load_candidates(candidates, "failed to find multiple matches")
        matches = [
            self._annotate(query_address, result)
            for result in self._rank(query_address, loaded, opts.min_similarity)[:limit]
        ]
        logger.info(
            "Found %d matches above %d%% threshold", len(matches), round(opts.min_similarity * 100)
        )
        return matches

    def are_addresses_similar(
        self, left: Optional[str], right: Optional[str], threshold: float | None = None
    ) -> bool:
        if threshold is None:
            threshold = self.config.similar_threshold
        return calculate_similarity(left, right) >= threshold


_default_matcher = AddressMatcher()


def find_matching_homeowner(
    candidates: CandidateSource,
    query_address: Optional[str],
    options: MatchOptions | None = None,
) -> Optional[MatchResult]:
    return _default_matcher.find_matching_homeowner(candidates, query_address, options)


def find_multiple_matches(
    candidates: CandidateSource,
    query_address: Optional[str],
    options: MatchOptions | None = None,
) -> List[MatchResult]:
    return _default_matcher.find_multiple_matches(candidates, query_address, options)


def are_addresses_similar(left: Optional[str], right: Optional[str], threshold: float = 0.85) -> bool:
    return _default_matcher.are_addresses_similar(left, right, threshold)


def get_match_quality_description(similarity: float) -> str:
    return describe_match_quality(similarity)
