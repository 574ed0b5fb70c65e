"""
Pairwise similarity functions for artworks.

All functions are pure and return a score in [0, 1]:

- cosine_similarity: feature-vector alignment
- medium_similarity: token overlap of free-text medium descriptions
- year_similarity: stepped proximity of creation years
- type_match_similarity: coarse file-type heuristic used when no vectors exist

Example:
    >>> from kinship.core.scoring.similarity import cosine_similarity
    >>> cosine_similarity([1.0, 0.0], [1.0, 0.0])
    1.0
"""

from __future__ import annotations

import math
from typing import Iterable, List, Optional, Sequence, Union

import numpy as np

# Type alias for vectors
VectorLike = Union[np.ndarray, Sequence[float]]

# Missing metadata is weak evidence of dissimilarity, not neutral.
MISSING_MEDIUM_PRIOR = 0.2
MISSING_YEAR_PRIOR = 0.3

# (max absolute difference in years, score), checked in order
YEAR_BANDS = (
    (0, 1.0),
    (2, 0.8),
    (5, 0.6),
    (10, 0.4),
)
DISTANT_YEAR_SCORE = 0.1


def cosine_similarity(
    vec_a: Optional[VectorLike],
    vec_b: Optional[VectorLike],
) -> float:
    """
    Compute cosine similarity between two feature vectors, clamped to [0, 1].

    Unlike a textbook cosine, negative alignment is floored to 0: visual
    feature vectors pointing in opposite directions are unrelated, not
    anti-related.

    Vectors that are absent, empty or of different lengths cannot be
    compared and score 0.0. No exception is raised for a length mismatch.

    Args:
        vec_a: First vector (numpy array or sequence of floats).
        vec_b: Second vector.

    Returns:
        Similarity in [0, 1].

    Example:
        >>> cosine_similarity([1.0, 0.0], [0.0, 1.0])
        0.0
        >>> cosine_similarity([1.0, 2.0], [1.0])
        0.0
    """
    if vec_a is None or vec_b is None:
        return 0.0

    a = np.asarray(vec_a, dtype=np.float64).ravel()
    b = np.asarray(vec_b, dtype=np.float64).ravel()

    if a.size == 0 or b.size == 0 or a.size != b.size:
        return 0.0

    norm_a = np.linalg.norm(a)
    norm_b = np.linalg.norm(b)

    # Zero vectors have no direction
    if norm_a == 0 or norm_b == 0:
        return 0.0

    similarity = np.dot(a, b) / (norm_a * norm_b)

    return float(np.clip(similarity, 0.0, 1.0))


def _tokens(text: str) -> set[str]:
    return set(text.lower().split())


def medium_similarity(medium_a: Optional[str], medium_b: Optional[str]) -> float:
    """
    Compare two free-text medium descriptions.

    Returns MISSING_MEDIUM_PRIOR if either side is missing or blank, 1.0 for
    a case-insensitive exact match, otherwise the Jaccard index of their
    whitespace-separated words. "oil on canvas" vs "oil on wood" scores 0.5.
    """
    if not medium_a or not medium_b:
        return MISSING_MEDIUM_PRIOR

    a = medium_a.strip().lower()
    b = medium_b.strip().lower()
    if not a or not b:
        return MISSING_MEDIUM_PRIOR
    if a == b:
        return 1.0

    words_a = _tokens(a)
    words_b = _tokens(b)
    return len(words_a & words_b) / len(words_a | words_b)


def _is_missing_year(year) -> bool:
    if year is None:
        return True
    if isinstance(year, str):
        return not year.strip()
    # Year 0 is treated as unknown
    return year == 0


def year_similarity(year_a, year_b) -> float:
    """
    Stepped proximity score for two creation years.

    Years may be ints, floats or numeric strings. A gap of 0 years scores
    1.0, up to 2 scores 0.8, up to 5 scores 0.6, up to 10 scores 0.4 and
    anything wider 0.1. Missing years score MISSING_YEAR_PRIOR.

    Raises:
        ValueError: If a year is present but not numeric.
    """
    if _is_missing_year(year_a) or _is_missing_year(year_b):
        return MISSING_YEAR_PRIOR

    diff = abs(float(year_a) - float(year_b))
    for max_diff, score in YEAR_BANDS:
        if diff <= max_diff:
            return score
    return DISTANT_YEAR_SCORE


def type_match_similarity(
    query_type: Optional[str],
    candidate_type: Optional[str],
    code_like_types: Iterable[str],
    exact_score: float = 0.60,
    code_like_score: float = 0.55,
    fallback_score: float = 0.10,
) -> float:
    """
    Coarse file-type similarity for searches without a feature vector.

    Identical types score ``exact_score``. Two different types that are both
    code-like (markup or script) score ``code_like_score``. Anything else
    scores ``fallback_score``.
    """
    if query_type and candidate_type == query_type:
        return exact_score

    code_like = set(code_like_types)
    if (query_type or "") in code_like and (candidate_type or "") in code_like:
        return code_like_score

    return fallback_score


def to_percentage(score: float) -> int:
    """Scale a [0, 1] score to an integer percentage, rounding halves up."""
    return int(math.floor(score * 100 + 0.5))


def batch_cosine_similarity(
    query: VectorLike,
    candidates: List[Optional[VectorLike]],
) -> List[float]:
    """
    Score one query vector against many candidate vectors.

    Each candidate is scored with cosine_similarity, so missing or
    mismatched candidates score 0.0 instead of breaking the batch.
    """
    return [cosine_similarity(query, candidate) for candidate in candidates]
