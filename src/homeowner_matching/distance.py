from __future__ import annotations

from typing import List, Optional


def levenshtein_distance(left: Optional[str], right: Optional[str]) -> int:
    """Minimum number of single-character insertions, deletions or substitutions
    turning ``left`` into ``right``.

    Keeps one rolling row sized to the shorter string, so memory is
    O(min(len(left), len(right))) while time stays O(len(left) * len(right)).
    """
    left = left or ""
    right = right or ""

    if left == right:
        return 0
    if len(left) < len(right):
        left, right = right, left
    if not right:
        return len(left)

    previous: List[int] = list(range(len(right) + 1))
    for i, left_char in enumerate(left, start=1):
        current = [i]
        for j, right_char in enumerate(right, start=1):
            insertion = current[j - 1] + 1
            deletion = previous[j] + 1
            substitution = previous[j - 1] + (left_char != right_char)
            current.append(min(insertion, deletion, substitution))
        previous = current

    return previous[-1]
