from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .scorer import describe_match_quality


@dataclass(frozen=True)
class CandidateAddress:
    """A stored homeowner we can match a query address against."""

    id: str
    name: str = ""
    address: Optional[str] = None

    @property
    def has_address(self) -> bool:
        return self.address is not None and bool(str(self.address).strip())

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "CandidateAddress":
        """Build a candidate from a storage row with ``id``, ``name`` and ``address`` keys."""
        address = row.get("address")
        return cls(
            id=str(row["id"]),
            name=str(row.get("name") or ""),
            address=None if address is None else str(address),
        )


@dataclass(frozen=True)
class MatchOptions:
    """Per-call matching options.

    Fields left as ``None`` fall back to the matcher's :class:`EngineConfig`.
    """

    min_similarity: Optional[float] = None
    limit: Optional[int] = None

    def __post_init__(self) -> None:
        if self.min_similarity is not None and not 0.0 <= self.min_similarity <= 1.0:
            raise ValueError(f"min_similarity must be within [0, 1], got {self.min_similarity!r}")
        if self.limit is None:
            return
        if isinstance(self.limit, bool) or not isinstance(self.limit, int) or self.limit < 1:
            raise ValueError(f"limit must be a positive integer, got {self.limit!r}")


@dataclass
class MatchResult:
    """A candidate paired with its similarity to the query address."""

    candidate: CandidateAddress
    similarity: float
    diagnostics: Dict[str, str] = field(default_factory=dict)

    @property
    def quality(self) -> str:
        return describe_match_quality(self.similarity)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "id": self.candidate.id,
            "name": self.candidate.name,
            "address": self.candidate.address,
            "similarity": self.similarity,
            "quality": self.quality,
        }
