"""
Abstract interface for the artwork and kinship storage layer.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Set

from kinship.domain.entities.artwork import Artwork
from kinship.domain.entities.relationship import KinshipRelationship, PairKey


class ArtworkRepositoryInterface(ABC):
    """
    Abstract base class for artwork repositories.

    Defines the data access the kinship use cases rely on. Implementations
    must guarantee at most one relationship per unordered artwork pair.
    """

    @abstractmethod
    def get_artwork(self, artwork_id: str) -> Optional[Artwork]:
        """
        Retrieve an artwork by ID.

        Args:
            artwork_id: The unique identifier of the artwork.

        Returns:
            The Artwork if found, None otherwise.
        """
        pass

    @abstractmethod
    def list_approved(
        self,
        exclude_id: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Artwork]:
        """
        List approved artworks.

        Args:
            exclude_id: Artwork to leave out (usually the query artwork).
            limit: Maximum number of artworks to return.

        Returns:
            Approved artworks in storage order.
        """
        pass

    @abstractmethod
    def get_existing_pairs(self, artwork_id: str) -> Set[PairKey]:
        """
        Return canonical pair keys of every stored relationship involving
        ``artwork_id``.
        """
        pass

    @abstractmethod
    def add_relationships(self, relationships: Sequence[KinshipRelationship]) -> int:
        """
        Persist new relationships.

        Args:
            relationships: Relationships to insert.

        Returns:
            Number of relationships inserted.

        Raises:
            DuplicateRelationshipError: If any pair is already stored.
        """
        pass

    @abstractmethod
    def get_relationships(self, artwork_id: str) -> List[KinshipRelationship]:
        """Return every stored relationship involving ``artwork_id``."""
        pass
