"""Unit tests for pairwise similarity functions."""

import numpy as np
import pytest

from kinship.core.scoring.similarity import (
    MISSING_MEDIUM_PRIOR,
    MISSING_YEAR_PRIOR,
    batch_cosine_similarity,
    cosine_similarity,
    medium_similarity,
    to_percentage,
    type_match_similarity,
    year_similarity,
)


class TestCosineSimilarity:
    """Test feature-vector cosine similarity."""

    def test_identical_vectors(self):
        """A non-zero vector is fully similar to itself."""
        vec = [0.3, -1.2, 4.5, 0.01]
        assert cosine_similarity(vec, vec) == pytest.approx(1.0)

    def test_orthogonal_vectors(self):
        assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == 0.0

    def test_opposite_vectors_floor_to_zero(self):
        """Negative alignment means unrelated, not anti-related."""
        assert cosine_similarity([1.0, 2.0], [-1.0, -2.0]) == 0.0

    def test_symmetric(self):
        rng = np.random.default_rng(seed=0)
        for _ in range(20):
            a = rng.standard_normal(16)
            b = rng.standard_normal(16)
            assert cosine_similarity(a, b) == pytest.approx(cosine_similarity(b, a))

    def test_bounded(self):
        rng = np.random.default_rng(seed=1)
        for _ in range(50):
            score = cosine_similarity(rng.standard_normal(8), rng.standard_normal(8))
            assert 0.0 <= score <= 1.0

    def test_magnitude_independent(self):
        assert cosine_similarity([1.0, 1.0], [10.0, 10.0]) == pytest.approx(1.0)

    @pytest.mark.parametrize(
        "vec_a,vec_b",
        [
            (None, [1.0]),
            ([1.0], None),
            ([], [1.0]),
            ([], []),
            ([1.0, 2.0], [1.0, 2.0, 3.0]),
        ],
    )
    def test_incomparable_vectors_score_zero(self, vec_a, vec_b):
        """Missing, empty or mismatched vectors are incomparable, not errors."""
        assert cosine_similarity(vec_a, vec_b) == 0.0

    def test_zero_vector(self):
        assert cosine_similarity([0.0, 0.0], [1.0, 1.0]) == 0.0
        assert cosine_similarity([1.0, 1.0], [0.0, 0.0]) == 0.0

    def test_accepts_numpy_arrays(self):
        a = np.array([1.0, 0.0], dtype=np.float32)
        assert cosine_similarity(a, a) == pytest.approx(1.0)

    def test_batch_matches_pairwise(self):
        query = [1.0, 0.0]
        candidates = [[1.0, 0.0], [0.0, 1.0], None, [1.0, 2.0, 3.0]]
        scores = batch_cosine_similarity(query, candidates)
        assert scores == [pytest.approx(1.0), 0.0, 0.0, 0.0]


class TestMediumSimilarity:
    """Test medium text similarity."""

    def test_case_insensitive_exact_match(self):
        assert medium_similarity("Oil on canvas", "OIL ON CANVAS") == 1.0

    def test_jaccard_partial_overlap(self):
        # {oil, on, canvas} vs {oil, on, wood}: 2 shared of 4
        assert medium_similarity("oil on canvas", "oil on wood") == pytest.approx(0.5)

    def test_jaccard_longer_description(self):
        # {oil, on, canvas} vs {oil, on, wood, panel}: 2 shared of 5
        assert medium_similarity("oil on canvas", "oil on wood panel") == pytest.approx(0.4)

    def test_no_overlap(self):
        assert medium_similarity("ink", "bronze") == 0.0

    @pytest.mark.parametrize("a,b", [(None, "oil"), ("oil", None), (None, None), ("", "oil")])
    def test_missing_medium_prior(self, a, b):
        assert medium_similarity(a, b) == MISSING_MEDIUM_PRIOR == 0.2

    def test_blank_medium_is_missing(self):
        assert medium_similarity("   ", "oil") == MISSING_MEDIUM_PRIOR

    def test_extra_whitespace_ignored(self):
        assert medium_similarity("oil  on canvas", "oil on   wood") == pytest.approx(0.5)


class TestYearSimilarity:
    """Test stepped year proximity."""

    @pytest.mark.parametrize(
        "year_b,expected",
        [
            (2020, 1.0),
            (2021, 0.8),
            (2022, 0.8),
            (2023, 0.6),
            (2025, 0.6),
            (2026, 0.4),
            (2030, 0.4),
            (2031, 0.1),
            (1900, 0.1),
        ],
    )
    def test_bands(self, year_b, expected):
        assert year_similarity(2020, year_b) == expected

    def test_order_does_not_matter(self):
        assert year_similarity(2022, 2020) == year_similarity(2020, 2022)

    def test_coercible_values(self):
        assert year_similarity("2020", 2020) == 1.0
        assert year_similarity(2020.0, "2024") == 0.6

    @pytest.mark.parametrize("a,b", [(None, 2020), (2020, None), ("", 2020), (0, 2020)])
    def test_missing_year_prior(self, a, b):
        assert year_similarity(a, b) == MISSING_YEAR_PRIOR == 0.3

    def test_non_numeric_year_raises(self):
        with pytest.raises(ValueError):
            year_similarity("circa 1900", 1900)


class TestTypeMatchSimilarity:
    """Test the file-type fallback heuristic."""

    CODE_LIKE = {"html", "htm", "js"}

    def test_exact_match(self):
        assert type_match_similarity("png", "png", self.CODE_LIKE) == 0.60

    def test_both_code_like(self):
        assert type_match_similarity("html", "js", self.CODE_LIKE) == 0.55

    def test_exact_code_like_match_prefers_exact(self):
        assert type_match_similarity("html", "html", self.CODE_LIKE) == 0.60

    def test_unrelated(self):
        assert type_match_similarity("png", "html", self.CODE_LIKE) == 0.10

    def test_missing_types(self):
        assert type_match_similarity(None, None, self.CODE_LIKE) == 0.10
        assert type_match_similarity("png", None, self.CODE_LIKE) == 0.10


class TestToPercentage:

    @pytest.mark.parametrize(
        "score,expected",
        [(0.0, 0), (1.0, 100), (0.6, 60), (0.556, 56), (0.125, 13), (0.146, 15), (0.144, 14)],
    )
    def test_rounding(self, score, expected):
        assert to_percentage(score) == expected
