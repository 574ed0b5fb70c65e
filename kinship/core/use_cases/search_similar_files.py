# Search Similar Files Use Case
"""
Use case for "find similar" search on an uploaded file.

The upload's feature vector (when the client extracted one) drives cosine
ranking; otherwise the file extension drives the type-match fallback.
"""
from pathlib import PurePath
from typing import List, Optional, Sequence, Union
import json
import logging

from kinship.core.file_ranker import FileSimilarityRanker
from kinship.domain.entities.search_result import TieredResults
from kinship.domain.interfaces.repository_interface import ArtworkRepositoryInterface
from kinship.utils.config import RankerConfig
from kinship.utils.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

FeaturesInput = Union[str, Sequence[float], None]


def file_extension(filename: str) -> str:
    """Lowercase extension without the dot, e.g. ``"Sketch.HTML"`` -> ``"html"``."""
    suffix = PurePath(filename).suffix
    if suffix:
        return suffix[1:].lower()
    # No dot: the whole name is used as the type tag
    return PurePath(filename).name.lower()


def parse_features(features: FeaturesInput) -> Optional[List[float]]:
    """
    Normalize client-supplied features to a list of floats.

    JSON strings are decoded. Undecodable input, input that is not a list,
    or a list with non-numeric entries is logged and ignored so the search
    falls back to type matching.
    """
    if features is None:
        return None

    if isinstance(features, str):
        try:
            features = json.loads(features)
        except json.JSONDecodeError as exc:
            logger.warning(f"Ignoring undecodable features payload: {exc}")
            return None

    if not isinstance(features, (list, tuple)):
        logger.warning(f"Ignoring features payload of type {type(features).__name__}")
        return None

    try:
        return [float(v) for v in features]
    except (TypeError, ValueError) as exc:
        logger.warning(f"Ignoring non-numeric features payload: {exc}")
        return None


class SearchSimilarFilesUseCase:
    """
    Use case for ranking approved artworks against an uploaded file.
    """

    def __init__(
        self,
        repository: ArtworkRepositoryInterface,
        config: Optional[RankerConfig] = None,
    ):
        """
        Initialize the use case.

        Args:
            repository: Storage for artworks.
            config: Ranker configuration; defaults when None.
        """
        self.repository = repository
        self.ranker = FileSimilarityRanker(config)

    def execute(self, filename: Optional[str], features: FeaturesInput = None) -> TieredResults:
        """
        Rank approved artworks against an uploaded file.

        Args:
            filename: Original name of the uploaded file.
            features: Feature vector as a list or JSON string, optional.

        Returns:
            TieredResults with high, moderate and distant matches.

        Raises:
            InvalidInputError: If no filename was supplied.
        """
        if not filename:
            raise InvalidInputError("No file uploaded", field="file")

        file_type = file_extension(filename)
        query_vector = parse_features(features)

        candidates = self.repository.list_approved(
            limit=self.ranker.config.candidate_pool_limit
        )
        results = self.ranker.rank(candidates, query_vector=query_vector, file_type=file_type)

        logger.info(
            f"File search for {filename!r}: {len(results.all_results())} results "
            f"via {results.method.value}"
        )
        return results
