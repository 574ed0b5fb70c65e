"""Pytest fixtures and configuration for kinship tests."""

import json
from pathlib import Path

import numpy as np
import pytest

from kinship.domain.entities import Artwork
from kinship.infrastructure.database import InMemoryArtworkRepository
from kinship.utils.config import (
    AppConfig,
    KinshipConfig,
    MetadataWeights,
    RankerConfig,
    VectorWeights,
    reset_config,
)


@pytest.fixture
def test_config() -> AppConfig:
    """Provide test-specific configuration with the default tuning values."""
    return AppConfig(
        kinship=KinshipConfig(
            min_relevance=0.1,
            vector_weights=VectorWeights(visual=0.8, medium=0.12, year=0.08),
            metadata_weights=MetadataWeights(medium=0.6, year=0.4),
        ),
        ranker=RankerConfig(),
        related_limit=20,
        log_level="DEBUG",
    )


@pytest.fixture
def source_artwork() -> Artwork:
    """Artwork with a unit feature vector."""
    return Artwork(
        id="src",
        title="Source",
        artist="ada",
        features=(1.0, 0.0),
        medium="oil on canvas",
        year=2020,
        file_type="png",
    )


@pytest.fixture
def sample_gallery() -> list[Artwork]:
    """Mixed gallery: vector and metadata-only works, one unapproved."""
    rng = np.random.default_rng(seed=7)
    artworks = [
        Artwork(id="a1", title="Twin", artist="ada", features=(1.0, 0.0),
                medium="oil on canvas", year=2020, file_type="png"),
        Artwork(id="a2", title="Tilted", artist="bo", features=(1.0, 1.0),
                medium="oil on wood", year=2018, file_type="png"),
        Artwork(id="a3", title="Orthogonal", artist="cy", features=(0.0, 1.0),
                medium="ink", year=1990, file_type="jpg"),
        Artwork(id="a4", title="Sketch", artist="di", medium="oil on canvas",
                year=2021, file_type="html"),
        Artwork(id="a5", title="Loop", artist="ed", file_type="js"),
        Artwork(id="a6", title="Hidden", artist="fi", features=(1.0, 0.0),
                medium="oil on canvas", year=2020, file_type="png", is_approved=False),
    ]
    for i in range(4):
        vec = rng.standard_normal(2)
        artworks.append(
            Artwork(id=f"r{i}", title=f"Random {i}", artist="gen",
                    features=tuple(float(v) for v in vec), file_type="png")
        )
    return artworks


@pytest.fixture
def repository(source_artwork, sample_gallery) -> InMemoryArtworkRepository:
    """Repository holding the source artwork and the sample gallery."""
    return InMemoryArtworkRepository([source_artwork, *sample_gallery])


@pytest.fixture
def artworks_file(tmp_path) -> Path:
    """JSON dump of artwork records in storage-row shape."""
    records = [
        {"id": "a1", "title": "First", "features": [1.0, 0.0], "medium": "acrylic",
         "year": 2020, "file_type": "png", "profiles": {"username": "ada"}},
        {"id": "a2", "title": "Second", "features": [1.0, 0.0], "medium": "acrylic",
         "year": 2020, "file_type": "png", "profiles": {"username": "bo"}},
        {"id": "a3", "title": "Third", "features": None, "medium": "acrylic",
         "year": 2020, "file_type": "html", "profiles": {"username": "cy"}},
    ]
    path = tmp_path / "artworks.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached configuration between tests."""
    yield
    reset_config()
