"""
Kinship relationship value objects.

A relationship is an undirected similarity link between two artworks.
The stored direction (``artwork_a_id`` -> ``artwork_b_id``) is a storage
convention only; ``pair_key`` gives the canonical unordered identity.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Union


class SimilarityMethod(str, Enum):
    """How a similarity score was produced."""

    VECTOR = "vector"
    METADATA = "metadata"
    TYPE_MATCH = "type-match"
    NONE = "none"


PairKey = tuple[str, str]


def pair_key(artwork_a_id: str, artwork_b_id: str) -> PairKey:
    """Canonical (min-id, max-id) key for an unordered artwork pair."""
    a, b = str(artwork_a_id), str(artwork_b_id)
    return (a, b) if a <= b else (b, a)


@dataclass(frozen=True)
class VectorDimensions:
    """Dimension scores of a feature-vector comparison."""

    visual: float
    medium: float
    year: float

    @property
    def method(self) -> SimilarityMethod:
        return SimilarityMethod.VECTOR

    def to_dict(self) -> Dict[str, Any]:
        return {
            "visual": self.visual,
            "medium": self.medium,
            "year": self.year,
            "method": self.method.value,
        }


@dataclass(frozen=True)
class MetadataDimensions:
    """Dimension scores of a metadata-only comparison."""

    medium: float
    year: float

    @property
    def method(self) -> SimilarityMethod:
        return SimilarityMethod.METADATA

    def to_dict(self) -> Dict[str, Any]:
        return {
            "medium": self.medium,
            "year": self.year,
            "method": self.method.value,
        }


DimensionBreakdown = Union[VectorDimensions, MetadataDimensions]


@dataclass(frozen=True)
class KinshipRelationship:
    """A proposed or stored kinship link between two artworks."""

    artwork_a_id: str
    artwork_b_id: str
    similarity_score: float
    dimensions: DimensionBreakdown

    def __post_init__(self) -> None:
        if self.artwork_a_id == self.artwork_b_id:
            raise ValueError("An artwork cannot be related to itself")
        if not 0.0 <= self.similarity_score <= 1.0:
            raise ValueError(
                f"Similarity score {self.similarity_score} is outside [0, 1]"
            )

    @property
    def method(self) -> SimilarityMethod:
        return self.dimensions.method

    @property
    def pair_key(self) -> PairKey:
        return pair_key(self.artwork_a_id, self.artwork_b_id)

    def involves(self, artwork_id: str) -> bool:
        return artwork_id in (self.artwork_a_id, self.artwork_b_id)

    def other(self, artwork_id: str) -> str:
        """Return the id on the opposite end from ``artwork_id``."""
        if artwork_id == self.artwork_a_id:
            return self.artwork_b_id
        if artwork_id == self.artwork_b_id:
            return self.artwork_a_id
        raise ValueError(f"Artwork {artwork_id} is not part of this relationship")

    def to_record(self) -> Dict[str, Any]:
        """Row shape used by the kinship table."""
        return {
            "artwork_a_id": self.artwork_a_id,
            "artwork_b_id": self.artwork_b_id,
            "similarity_score": self.similarity_score,
            "dimensions": self.dimensions.to_dict(),
        }


@dataclass
class KinshipResult:
    """Outcome of one kinship computation for a source artwork."""

    artwork_id: str
    method: SimilarityMethod
    compared: int = 0
    created: List[KinshipRelationship] = field(default_factory=list)

    @property
    def kinship_created(self) -> int:
        return len(self.created)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "artwork_id": self.artwork_id,
            "kinship_created": self.kinship_created,
            "method": self.method.value,
            "compared": self.compared,
            "created": [rel.to_record() for rel in self.created],
        }
