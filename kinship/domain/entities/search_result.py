"""
Ranked file-similarity search results.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .relationship import SimilarityMethod


@dataclass(frozen=True)
class FileSimilarityResult:
    """One ranked artwork in a file-similarity search."""

    artwork_id: str
    title: str
    artist: str
    score: int  # percentage, 0-100

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.artwork_id,
            "title": self.title,
            "artist": self.artist,
            "score": self.score,
        }


@dataclass
class TieredResults:
    """Search results bucketed into high, moderate and distant tiers."""

    method: SimilarityMethod = SimilarityMethod.NONE
    high: List[FileSimilarityResult] = field(default_factory=list)
    moderate: List[FileSimilarityResult] = field(default_factory=list)
    distant: List[FileSimilarityResult] = field(default_factory=list)

    def all_results(self) -> List[FileSimilarityResult]:
        return [*self.high, *self.moderate, *self.distant]

    def is_empty(self) -> bool:
        return not (self.high or self.moderate or self.distant)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "high": [r.to_dict() for r in self.high],
            "moderate": [r.to_dict() for r in self.moderate],
            "distant": [r.to_dict() for r in self.distant],
            "method": self.method.value,
        }
