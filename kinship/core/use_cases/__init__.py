# Use Cases Package
"""
Application use cases (business logic).

Use cases orchestrate the flow of data between the repository and the
kinship builder or file ranker.
"""

from kinship.core.use_cases.calculate_kinship import (
    CalculateKinshipUseCase,
    GetRelatedWorksUseCase,
    RelatedWork,
)

from kinship.core.use_cases.search_similar_files import (
    SearchSimilarFilesUseCase,
    file_extension,
    parse_features,
)

__all__ = [
    # Kinship
    "CalculateKinshipUseCase",
    "GetRelatedWorksUseCase",
    "RelatedWork",
    # File search
    "SearchSimilarFilesUseCase",
    "file_extension",
    "parse_features",
]
