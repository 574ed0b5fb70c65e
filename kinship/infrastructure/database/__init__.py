# Database Package
"""
Storage implementations for artworks and kinship relationships.

Provides:
- InMemoryArtworkRepository: process-local repository enforcing one
  relationship per unordered artwork pair

Example:
    >>> from kinship.infrastructure.database import InMemoryArtworkRepository
    >>> repo = InMemoryArtworkRepository.from_json("artworks.json")
"""

from kinship.infrastructure.database.memory_repository import InMemoryArtworkRepository

__all__ = [
    "InMemoryArtworkRepository",
]
