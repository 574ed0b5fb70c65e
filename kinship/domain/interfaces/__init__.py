# Domain Interfaces Package
"""
Abstract base classes defining contracts for infrastructure implementations.
"""

from .repository_interface import ArtworkRepositoryInterface

__all__ = ["ArtworkRepositoryInterface"]
