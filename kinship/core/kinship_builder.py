"""Kinship builder: proposes "related works" links for an artwork.

For every candidate the builder scores the pair (feature vectors when both
sides have one, metadata otherwise), discards noise below the relevance
threshold and drops pairs that are already linked. It performs no I/O:
fetching the candidate pool and persisting the proposals belong to the
caller.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional, Sequence

from kinship.domain.entities.artwork import Artwork
from kinship.domain.entities.relationship import (
    KinshipRelationship,
    KinshipResult,
    PairKey,
    SimilarityMethod,
    pair_key,
)
from kinship.utils import get_logger
from kinship.utils.config import KinshipConfig

from .scoring import WeightedScorer

logger = get_logger(__name__)


class KinshipBuilder:
    """Builds deduplicated kinship proposals for a source artwork."""

    def __init__(self, config: Optional[KinshipConfig] = None):
        """Initialize the builder.

        Args:
            config: Kinship configuration; defaults are used when None
        """
        self.config = config or KinshipConfig()
        self.scorer = WeightedScorer(
            vector_weights=self.config.vector_weights,
            metadata_weights=self.config.metadata_weights,
        )

    @property
    def min_relevance(self) -> float:
        return self.config.min_relevance

    def finalize_score(self, score: float) -> float:
        """Round half up to the configured precision and cap at 1.0."""
        step = Decimal(1).scaleb(-self.config.score_precision)
        return min(1.0, float(Decimal(score).quantize(step, rounding=ROUND_HALF_UP)))

    def compute(
        self,
        source: Artwork,
        candidates: Sequence[Artwork],
        existing_pairs: Iterable[tuple[str, str]] = (),
    ) -> KinshipResult:
        """Compute new kinship proposals for ``source``.

        Args:
            source: The artwork relationships are computed for
            candidates: Pool of artworks to compare against; the source
                itself is skipped if present
            existing_pairs: Already stored (a, b) id pairs in either direction

        Returns:
            KinshipResult with the new relationships and the number compared
        """
        known: set[PairKey] = {pair_key(a, b) for a, b in existing_pairs}
        method = (
            SimilarityMethod.VECTOR
            if source.has_feature_vector()
            else SimilarityMethod.METADATA
        )
        result = KinshipResult(artwork_id=source.id, method=method)

        for candidate in candidates:
            if candidate.id == source.id:
                continue
            result.compared += 1

            score, dimensions = self.scorer.score(source, candidate)
            if score <= self.min_relevance:
                continue

            key = pair_key(source.id, candidate.id)
            if key in known:
                continue
            known.add(key)

            result.created.append(
                KinshipRelationship(
                    artwork_a_id=source.id,
                    artwork_b_id=candidate.id,
                    similarity_score=self.finalize_score(score),
                    dimensions=dimensions,
                )
            )

        logger.debug(
            f"Kinship for {source.id}: compared={result.compared}, "
            f"created={result.kinship_created}, method={method.value}"
        )
        return result


def compute_kinship(
    source: Artwork,
    candidates: Sequence[Artwork],
    existing_pairs: Iterable[tuple[str, str]] = (),
    config: Optional[KinshipConfig] = None,
) -> KinshipResult:
    """Functional wrapper around KinshipBuilder.compute."""
    return KinshipBuilder(config).compute(source, candidates, existing_pairs)
