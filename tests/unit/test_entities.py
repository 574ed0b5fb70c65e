"""Unit tests for domain entities."""

import pytest

from kinship.domain.entities import (
    Artwork,
    FileSimilarityResult,
    KinshipRelationship,
    MetadataDimensions,
    SimilarityMethod,
    TieredResults,
    VectorDimensions,
    pair_key,
)


class TestArtwork:
    """Test the artwork entity."""

    def test_feature_vector_predicate(self):
        assert Artwork(id="a", features=(0.1, 0.2)).has_feature_vector()
        assert not Artwork(id="a", features=()).has_feature_vector()
        assert not Artwork(id="a").has_feature_vector()

    def test_features_become_tuple(self):
        artwork = Artwork(id="a", features=[0.1, 0.2])
        assert artwork.features == (0.1, 0.2)

    def test_immutable(self):
        artwork = Artwork(id="a")
        with pytest.raises(AttributeError):
            artwork.medium = "oil"

    def test_empty_id_rejected(self):
        with pytest.raises(ValueError):
            Artwork(id="")

    def test_attribution(self):
        assert Artwork(id="a", artist="ada").attribution == "@ada"

    @pytest.mark.parametrize("artist", [None, "", "   "])
    def test_attribution_without_artist(self, artist):
        assert Artwork(id="a", artist=artist).attribution == "@unknown"

    def test_from_record_with_profile_join(self):
        artwork = Artwork.from_record({
            "id": 42,
            "title": "Dusk",
            "features": [0.5, 0.5],
            "medium": "acrylic",
            "year": 2019,
            "file_type": "png",
            "is_approved": True,
            "profiles": {"username": "ada"},
        })

        assert artwork.id == "42"
        assert artwork.artist == "ada"
        assert artwork.features == (0.5, 0.5)
        assert artwork.year == 2019

    def test_from_record_non_list_features_ignored(self):
        artwork = Artwork.from_record({"id": "a", "features": "not-a-vector"})
        assert artwork.features is None
        assert artwork.title == ""


class TestKinshipRelationship:
    """Test relationship value objects."""

    def test_pair_key_is_unordered(self):
        assert pair_key("b", "a") == pair_key("a", "b") == ("a", "b")

    def test_relationship_pair_key(self):
        rel = KinshipRelationship("z", "m", 0.5, MetadataDimensions(medium=0.5, year=0.5))
        assert rel.pair_key == ("m", "z")

    def test_method_from_dimensions(self):
        vector = KinshipRelationship("a", "b", 0.9, VectorDimensions(visual=1.0, medium=0.5, year=0.5))
        metadata = KinshipRelationship("a", "b", 0.4, MetadataDimensions(medium=0.2, year=0.3))

        assert vector.method == SimilarityMethod.VECTOR
        assert metadata.method == SimilarityMethod.METADATA

    def test_other_end(self):
        rel = KinshipRelationship("a", "b", 0.5, MetadataDimensions(medium=0.5, year=0.5))
        assert rel.other("a") == "b"
        assert rel.other("b") == "a"
        with pytest.raises(ValueError):
            rel.other("c")

    def test_self_relationship_rejected(self):
        with pytest.raises(ValueError):
            KinshipRelationship("a", "a", 0.5, MetadataDimensions(medium=0.5, year=0.5))

    @pytest.mark.parametrize("score", [-0.1, 1.001])
    def test_score_out_of_range_rejected(self, score):
        with pytest.raises(ValueError):
            KinshipRelationship("a", "b", score, MetadataDimensions(medium=0.5, year=0.5))

    def test_to_record(self):
        rel = KinshipRelationship("a", "b", 0.52, MetadataDimensions(medium=0.5, year=0.3))
        assert rel.to_record() == {
            "artwork_a_id": "a",
            "artwork_b_id": "b",
            "similarity_score": 0.52,
            "dimensions": {"medium": 0.5, "year": 0.3, "method": "metadata"},
        }


class TestTieredResults:

    def test_defaults_empty(self):
        results = TieredResults()
        assert results.is_empty()
        assert results.to_dict() == {"high": [], "moderate": [], "distant": [], "method": "none"}

    def test_all_results_order(self):
        high = FileSimilarityResult("h", "H", "@a", 90)
        low = FileSimilarityResult("d", "D", "@a", 20)
        results = TieredResults(method=SimilarityMethod.VECTOR, high=[high], distant=[low])
        assert results.all_results() == [high, low]
