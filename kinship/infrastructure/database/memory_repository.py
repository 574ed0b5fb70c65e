"""
In-memory repository implementation for artworks and kinship links.

Stores artworks and relationships in process memory. Relationship rows are
keyed by the canonical (min-id, max-id) pair so at most one row can exist
per unordered artwork pair; concurrent writers are serialized by a lock.

Example:
    >>> from kinship.infrastructure.database import InMemoryArtworkRepository
    >>> repo = InMemoryArtworkRepository(artworks)
    >>> repo.add_relationships(result.created)
"""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Set

from kinship.domain.entities.artwork import Artwork
from kinship.domain.entities.relationship import KinshipRelationship, PairKey
from kinship.domain.interfaces.repository_interface import ArtworkRepositoryInterface
from kinship.utils.exceptions import DuplicateRelationshipError, InvalidInputError
from kinship.utils.logger import get_logger

logger = get_logger(__name__)


class InMemoryArtworkRepository(ArtworkRepositoryInterface):
    """
    Dictionary-backed artwork repository.

    Artworks keep insertion order, which is the order ``list_approved``
    returns them in.
    """

    def __init__(self, artworks: Optional[Iterable[Artwork]] = None):
        self._artworks: Dict[str, Artwork] = {}
        self._relationships: Dict[PairKey, KinshipRelationship] = {}
        self._lock = threading.Lock()

        for artwork in artworks or ():
            self.add_artwork(artwork)

    @classmethod
    def from_json(cls, path: Path | str) -> "InMemoryArtworkRepository":
        """
        Load artworks from a JSON file holding a list of artwork records.

        Raises:
            InvalidInputError: If the file cannot be read, is not JSON, does
                not contain a list, or holds a record without an ``id``.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                records = json.load(f)
        except OSError as e:
            raise InvalidInputError(
                f"Cannot read artwork file: {e.strerror or e}",
                field="artworks",
                value=str(path),
            ) from e
        except json.JSONDecodeError as e:
            raise InvalidInputError(
                f"Artwork file is not valid JSON: {e}",
                field="artworks",
                value=str(path),
            ) from e

        if not isinstance(records, list):
            raise InvalidInputError(
                "Artwork file must contain a JSON list",
                field="artworks",
                value=str(path),
            )

        artworks = []
        for index, record in enumerate(records):
            if not isinstance(record, dict) or record.get("id") in (None, ""):
                raise InvalidInputError(
                    f"Artwork record {index} has no id",
                    field="artworks",
                    value=str(path),
                )
            artworks.append(Artwork.from_record(record))

        repo = cls(artworks)
        logger.info(f"Loaded {len(repo)} artworks from {path}")
        return repo

    def __len__(self) -> int:
        return len(self._artworks)

    def add_artwork(self, artwork: Artwork) -> None:
        """Insert or replace an artwork."""
        with self._lock:
            self._artworks[artwork.id] = artwork

    def get_artwork(self, artwork_id: str) -> Optional[Artwork]:
        return self._artworks.get(artwork_id)

    def list_approved(
        self,
        exclude_id: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Artwork]:
        approved = [
            artwork
            for artwork in self._artworks.values()
            if artwork.is_approved and artwork.id != exclude_id
        ]
        if limit is not None:
            approved = approved[:limit]
        return approved

    def get_existing_pairs(self, artwork_id: str) -> Set[PairKey]:
        with self._lock:
            return {key for key in self._relationships if artwork_id in key}

    def add_relationships(self, relationships: Sequence[KinshipRelationship]) -> int:
        """
        Insert relationships atomically.

        Either every relationship is stored or none is.

        Raises:
            DuplicateRelationshipError: If a pair is already stored or repeated
                within ``relationships``.
        """
        with self._lock:
            pending: Dict[PairKey, KinshipRelationship] = {}
            for rel in relationships:
                key = rel.pair_key
                if key in self._relationships or key in pending:
                    raise DuplicateRelationshipError(pair=key)
                pending[key] = rel
            self._relationships.update(pending)

        logger.debug(f"Stored {len(pending)} relationships")
        return len(pending)

    def get_relationships(self, artwork_id: str) -> List[KinshipRelationship]:
        with self._lock:
            return [rel for rel in self._relationships.values() if rel.involves(artwork_id)]

    def count_relationships(self) -> int:
        return len(self._relationships)
