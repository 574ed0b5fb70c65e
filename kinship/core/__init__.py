"""Core similarity components for the kinship engine."""

from .file_ranker import FileSimilarityRanker, rank_file_similarity
from .kinship_builder import KinshipBuilder, compute_kinship

__all__ = [
    "FileSimilarityRanker",
    "KinshipBuilder",
    "compute_kinship",
    "rank_file_similarity",
]
