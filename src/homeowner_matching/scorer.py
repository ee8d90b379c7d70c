from __future__ import annotations

from typing import Optional, Tuple

from rapidfuzz.distance import JaroWinkler

from .distance import levenshtein_distance
from .normalize import normalize_address

QUALITY_BANDS: Tuple[Tuple[float, str], ...] = (
    (0.95, "Excellent match"),
    (0.85, "Very good match"),
    (0.70, "Good match"),
    (0.50, "Fair match"),
)
WEAK_MATCH = "Weak match"


def _edit_similarity(left: str, right: str) -> float:
    # Both empty is a trivial match of absence; one empty matches nothing.
    if left == right:
        return 1.0
    if not left or not right:
        return 0.0
    longest = max(len(left), len(right))
    score = 1.0 - levenshtein_distance(left, right) / longest
    return min(1.0, max(0.0, score))


def calculate_similarity(left: Optional[str], right: Optional[str]) -> float:
    """Similarity of two raw addresses in [0, 1].

    Both sides are normalized first, so ``"123 Main Street"`` and
    ``"123 Main St"`` score exactly 1.0. The score is
    ``1 - distance / len(longer)`` over the normalized forms.
    """
    return _edit_similarity(normalize_address(left), normalize_address(right))


def surface_similarity(left: Optional[str], right: Optional[str]) -> float:
    """Edit similarity of the lowercased raw text, without abbreviation folding."""
    left_text = " ".join(str(left or "").lower().split())
    right_text = " ".join(str(right or "").lower().split())
    return _edit_similarity(left_text, right_text)


def jaro_winkler_similarity(left: Optional[str], right: Optional[str]) -> float:
    left_norm = normalize_address(left)
    right_norm = normalize_address(right)
    if left_norm == right_norm:
        return 1.0
    if not left_norm or not right_norm:
        return 0.0
    return JaroWinkler.normalized_similarity(left_norm, right_norm)


def describe_match_quality(similarity: float) -> str:
    """Map a similarity score to a human readable band.

    Bands are checked top-down and include their lower edge, so exactly
    0.95 is an excellent match and exactly 0.85 a very good one.
    """
    for floor, label in QUALITY_BANDS:
        if similarity >= floor:
            return label
    return WEAK_MATCH
