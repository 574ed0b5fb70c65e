"""File-similarity ranker for exploratory "find similar" search.

Candidates are scored against a query feature vector when one is available,
otherwise against the query's file type, then bucketed into high, moderate
and distant tiers.
"""

from typing import Any, Mapping, Optional, Sequence

from kinship.domain.entities.artwork import Artwork
from kinship.domain.entities.relationship import SimilarityMethod
from kinship.domain.entities.search_result import FileSimilarityResult, TieredResults
from kinship.utils import get_logger
from kinship.utils.config import RankerConfig

from .scoring import batch_cosine_similarity, to_percentage, type_match_similarity

logger = get_logger(__name__)


class FileSimilarityRanker:
    """Ranks a candidate pool against a query vector or file type."""

    def __init__(self, config: Optional[RankerConfig] = None):
        """Initialize the ranker.

        Args:
            config: Ranker configuration; defaults are used when None
        """
        self.config = config or RankerConfig()
        self._code_like = frozenset(self.config.code_like_types)

    def type_match_score(self, query_type: Optional[str], candidate_type: Optional[str]) -> float:
        return type_match_similarity(
            query_type,
            candidate_type,
            self._code_like,
            exact_score=self.config.exact_match_score,
            code_like_score=self.config.code_like_score,
            fallback_score=self.config.fallback_score,
        )

    def tier_for(self, score: int) -> Optional[str]:
        """Return the tier name for a percentage score, or None if dropped."""
        if score >= self.config.high_threshold:
            return "high"
        if score >= self.config.moderate_threshold:
            return "moderate"
        if score >= self.config.distant_threshold:
            return "distant"
        return None

    def score_candidates(
        self,
        candidates: Sequence[Artwork],
        query_vector: Optional[Sequence[float]] = None,
        file_type: Optional[str] = None,
    ) -> tuple[list[FileSimilarityResult], SimilarityMethod]:
        """Score every candidate and sort descending.

        Returns:
            Tuple of (sorted results, method used)
        """
        has_query_vector = query_vector is not None and len(query_vector) > 0
        use_vectors = has_query_vector and any(
            c.has_feature_vector() for c in candidates
        )
        method = SimilarityMethod.VECTOR if use_vectors else SimilarityMethod.TYPE_MATCH

        cosines = (
            batch_cosine_similarity(query_vector, [c.features for c in candidates])
            if use_vectors
            else [0.0] * len(candidates)
        )

        scored = []
        for candidate, cosine in zip(candidates, cosines):
            if use_vectors and candidate.has_feature_vector():
                score = cosine
            else:
                score = self.type_match_score(file_type, candidate.file_type)
            scored.append(
                FileSimilarityResult(
                    artwork_id=candidate.id,
                    title=candidate.title,
                    artist=candidate.attribution,
                    score=to_percentage(score),
                )
            )

        # Stable: equal scores keep pool order
        scored.sort(key=lambda r: r.score, reverse=True)
        return scored, method

    def rank(
        self,
        candidates: Sequence[Artwork],
        query_vector: Optional[Sequence[float]] = None,
        file_type: Optional[str] = None,
    ) -> TieredResults:
        """Rank candidates into tiers.

        Args:
            candidates: Artworks to rank
            query_vector: Feature vector of the uploaded file, if any
            file_type: Lowercase extension of the uploaded file, if any

        Returns:
            TieredResults; all tiers empty with method ``none`` for an empty pool
        """
        if not candidates:
            return TieredResults(method=SimilarityMethod.NONE)

        scored, method = self.score_candidates(candidates, query_vector, file_type)
        results = TieredResults(method=method)
        limit = self.config.tier_limit

        for entry in scored:
            tier = self.tier_for(entry.score)
            if tier is None:
                continue
            bucket = getattr(results, tier)
            if len(bucket) < limit:
                bucket.append(entry)

        logger.debug(
            f"Ranked {len(candidates)} candidates via {method.value}: "
            f"high={len(results.high)}, moderate={len(results.moderate)}, "
            f"distant={len(results.distant)}"
        )
        return results


def rank_file_similarity(
    query: Mapping[str, Any],
    candidates: Sequence[Artwork],
    config: Optional[RankerConfig] = None,
) -> TieredResults:
    """Functional wrapper taking a ``{"vector": ..., "file_type": ...}`` query."""
    return FileSimilarityRanker(config).rank(
        candidates,
        query_vector=query.get("vector"),
        file_type=query.get("file_type"),
    )
