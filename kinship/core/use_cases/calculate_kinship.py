# Calculate Kinship Use Case
"""
Use cases for computing and reading kinship relationships.

Run when an artwork is approved (or on demand) to link it with related
works, and when a client asks for the works related to an artwork.
"""
from dataclasses import dataclass
from typing import List, Optional
import logging

from kinship.core.kinship_builder import KinshipBuilder
from kinship.domain.entities.relationship import KinshipRelationship, KinshipResult
from kinship.domain.interfaces.repository_interface import ArtworkRepositoryInterface
from kinship.utils.config import KinshipConfig
from kinship.utils.exceptions import ArtworkNotFoundError

logger = logging.getLogger(__name__)


class CalculateKinshipUseCase:
    """
    Use case for linking an artwork to its related works.

    This use case:
    1. Loads the source artwork (missing source is an error)
    2. Loads every other approved artwork as the candidate pool
    3. Loads the relationships already stored for the source
    4. Builds new proposals and persists them
    """

    def __init__(
        self,
        repository: ArtworkRepositoryInterface,
        config: Optional[KinshipConfig] = None,
    ):
        """
        Initialize the use case.

        Args:
            repository: Storage for artworks and relationships.
            config: Kinship configuration; defaults when None.
        """
        self.repository = repository
        self.builder = KinshipBuilder(config)

    def execute(self, artwork_id: str) -> KinshipResult:
        """
        Compute and store kinship for one artwork.

        Args:
            artwork_id: ID of the artwork to link.

        Returns:
            KinshipResult describing what was created.

        Raises:
            ArtworkNotFoundError: If the artwork does not exist.
        """
        source = self.repository.get_artwork(artwork_id)
        if source is None:
            raise ArtworkNotFoundError(artwork_id=artwork_id)

        candidates = self.repository.list_approved(exclude_id=artwork_id)
        if not candidates:
            logger.info(f"No other artworks to compare with {artwork_id}")
            return self.builder.compute(source, [])

        existing = self.repository.get_existing_pairs(artwork_id)
        result = self.builder.compute(source, candidates, existing)

        if result.created:
            self.repository.add_relationships(result.created)

        logger.info(
            f"Kinship for {artwork_id}: {result.kinship_created} created "
            f"from {result.compared} compared ({result.method.value})"
        )
        return result


@dataclass
class RelatedWork:
    """One related artwork as seen from the queried artwork."""
    artwork_id: str
    similarity_score: float
    relationship: KinshipRelationship


class GetRelatedWorksUseCase:
    """Use case for listing the strongest kinship links of an artwork."""

    def __init__(self, repository: ArtworkRepositoryInterface, limit: int = 20):
        self.repository = repository
        self.limit = limit

    def execute(self, artwork_id: str, limit: Optional[int] = None) -> List[RelatedWork]:
        """
        Return related works ordered by similarity, strongest first.

        Args:
            artwork_id: ID of the artwork to look up.
            limit: Maximum number of results; defaults to the configured limit.
        """
        limit = self.limit if limit is None else limit
        relationships = sorted(
            self.repository.get_relationships(artwork_id),
            key=lambda rel: rel.similarity_score,
            reverse=True,
        )
        return [
            RelatedWork(
                artwork_id=rel.other(artwork_id),
                similarity_score=rel.similarity_score,
                relationship=rel,
            )
            for rel in relationships[:limit]
        ]
