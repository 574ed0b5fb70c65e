# Domain Entities Package
"""
Core entities as dataclasses.
"""

from .artwork import Artwork
from .relationship import (
    DimensionBreakdown,
    KinshipRelationship,
    KinshipResult,
    MetadataDimensions,
    SimilarityMethod,
    VectorDimensions,
    pair_key,
)
from .search_result import FileSimilarityResult, TieredResults

__all__ = [
    "Artwork",
    "DimensionBreakdown",
    "FileSimilarityResult",
    "KinshipRelationship",
    "KinshipResult",
    "MetadataDimensions",
    "SimilarityMethod",
    "TieredResults",
    "VectorDimensions",
    "pair_key",
]
