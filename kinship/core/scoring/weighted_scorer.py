"""
Weighted scorer combining visual and metadata similarities.

Two scoring paths exist:

    vector:   visual_w × cosine + medium_w × medium + year_w × year
    metadata: medium_w × medium + year_w × year

The vector path is chosen only when both artworks carry a feature vector.

Example:
    >>> from kinship.core.scoring import WeightedScorer
    >>> scorer = WeightedScorer()  # Default weights
    >>> score, dimensions = scorer.score(source, candidate)
"""

from __future__ import annotations

from typing import Optional, Tuple

from kinship.domain.entities.artwork import Artwork
from kinship.domain.entities.relationship import (
    DimensionBreakdown,
    MetadataDimensions,
    VectorDimensions,
)
from kinship.utils.config import MetadataWeights, VectorWeights
from kinship.utils.logger import get_logger

from .similarity import cosine_similarity, medium_similarity, year_similarity

logger = get_logger(__name__)


class WeightedScorer:
    """
    Scores an artwork pair and records the dimensions behind the score.

    Attributes:
        vector_weights: Weights used when both artworks have vectors.
        metadata_weights: Weights used for the metadata fallback.

    Example:
        >>> scorer = WeightedScorer(
        ...     vector_weights=VectorWeights(visual=0.7, medium=0.2, year=0.1),
        ... )
    """

    def __init__(
        self,
        vector_weights: Optional[VectorWeights] = None,
        metadata_weights: Optional[MetadataWeights] = None,
    ):
        self._vector_weights = vector_weights or VectorWeights()
        self._metadata_weights = metadata_weights or MetadataWeights()
        logger.debug(
            f"WeightedScorer initialized: "
            f"vector={self._vector_weights.model_dump()}, "
            f"metadata={self._metadata_weights.model_dump()}"
        )

    @property
    def vector_weights(self) -> VectorWeights:
        return self._vector_weights

    @property
    def metadata_weights(self) -> MetadataWeights:
        return self._metadata_weights

    @staticmethod
    def can_use_vectors(source: Artwork, candidate: Artwork) -> bool:
        """Return True when both artworks are eligible for the vector path."""
        return source.has_feature_vector() and candidate.has_feature_vector()

    def score_vector(self, source: Artwork, candidate: Artwork) -> Tuple[float, VectorDimensions]:
        """Score a pair with visual similarity dominating."""
        dimensions = VectorDimensions(
            visual=cosine_similarity(source.features, candidate.features),
            medium=medium_similarity(source.medium, candidate.medium),
            year=year_similarity(source.year, candidate.year),
        )
        w = self._vector_weights
        score = (
            w.visual * dimensions.visual
            + w.medium * dimensions.medium
            + w.year * dimensions.year
        )
        return score, dimensions

    def score_metadata(self, source: Artwork, candidate: Artwork) -> Tuple[float, MetadataDimensions]:
        """Score a pair from medium and year alone."""
        dimensions = MetadataDimensions(
            medium=medium_similarity(source.medium, candidate.medium),
            year=year_similarity(source.year, candidate.year),
        )
        w = self._metadata_weights
        score = w.medium * dimensions.medium + w.year * dimensions.year
        return score, dimensions

    def score(self, source: Artwork, candidate: Artwork) -> Tuple[float, DimensionBreakdown]:
        """
        Score a pair using the best available path.

        Returns:
            Tuple of (raw weighted score, dimension breakdown).
        """
        if self.can_use_vectors(source, candidate):
            return self.score_vector(source, candidate)
        return self.score_metadata(source, candidate)

    def __repr__(self) -> str:
        return (
            f"WeightedScorer(vector={self._vector_weights.model_dump()}, "
            f"metadata={self._metadata_weights.model_dump()})"
        )
