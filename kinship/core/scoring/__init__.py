# Scoring Package
"""
Artwork similarity scoring.

Provides:
- cosine_similarity: Feature-vector similarity clamped to [0, 1]
- medium_similarity: Token overlap between medium descriptions
- year_similarity: Stepped creation-year proximity
- type_match_similarity: File-type fallback heuristic
- WeightedScorer: Vector or metadata weighted combination

Example:
    >>> from kinship.core.scoring import cosine_similarity, WeightedScorer
    >>>
    >>> sim = cosine_similarity(vec_a, vec_b)
    >>> score, dimensions = WeightedScorer().score(source, candidate)
"""

from .similarity import (
    batch_cosine_similarity,
    cosine_similarity,
    medium_similarity,
    to_percentage,
    type_match_similarity,
    year_similarity,
)
from .weighted_scorer import WeightedScorer

__all__ = [
    # Similarity functions
    "cosine_similarity",
    "batch_cosine_similarity",
    "medium_similarity",
    "year_similarity",
    "type_match_similarity",
    "to_percentage",
    # Weighted scoring
    "WeightedScorer",
]
