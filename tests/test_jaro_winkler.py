"""Tests for Jaro-Winkler similarity scoring."""

import pytest

from jaro_winkler.similarity.constants import (
    JARO_WINKLER_BOOST_THRESHOLD,
    JARO_WINKLER_PREFIX_SIZE,
    JARO_WINKLER_SCALING_FACTOR,
)
from jaro_winkler.similarity.jaro import jaro_distance
from jaro_winkler.similarity.winkler import (
    common_prefix_length,
    compute_jaro_winkler_components,
    jaro_winkler_distance,
    jaro_winkler_similarity,
)


class TestJaroWinklerReferencePairs:
    def test_martha_marhta(self):
        score = jaro_winkler_distance("MARTHA", "MARHTA")
        assert score == pytest.approx(17 / 18 + 0.3 * (1 / 18))
        assert score == pytest.approx(0.961, abs=1e-3)

    def test_dixon_dicksonx(self):
        assert jaro_winkler_distance("DIXON", "DICKSONX") == pytest.approx(24.4 / 30)

    def test_dwayne_duane(self):
        assert jaro_winkler_distance("DWAYNE", "DUANE") == pytest.approx(0.84)

    def test_no_common_prefix_leaves_score(self):
        # Above the threshold, but the first symbols differ
        assert jaro_winkler_distance("CRATE", "TRACE") == jaro_distance("CRATE", "TRACE")

    def test_empty_scores_zero(self):
        assert jaro_winkler_distance("", "ABC") == 0.0
        assert jaro_winkler_distance("ABC", "") == 0.0
        assert jaro_winkler_distance(None, None) == 0.0

    def test_identical_scores_one(self):
        assert jaro_winkler_distance("ABCDEF", "ABCDEF") == 1.0

    def test_similarity_alias(self):
        assert jaro_winkler_similarity is jaro_winkler_distance


class TestBoostThreshold:
    def test_no_boost_at_or_below_threshold(self):
        # Jaro is 2/3 despite a two-symbol shared prefix
        assert jaro_distance("ABCD", "ABXY") == pytest.approx(2 / 3)
        assert jaro_winkler_distance("ABCD", "ABXY") == jaro_distance("ABCD", "ABXY")

        components = compute_jaro_winkler_components("ABCD", "ABXY")
        assert components["boost_applied"] is False
        assert components["prefix_length"] == 0
        assert components["score"] == components["jaro_score"]

    def test_lower_threshold_enables_boost(self):
        score = jaro_winkler_distance("ABCD", "ABXY", boost_threshold=0.6)
        assert score == pytest.approx(2 / 3 + 0.1 * 2 * (1 / 3))

    def test_components_when_boosted(self):
        components = compute_jaro_winkler_components("MARTHA", "MARHTA")

        assert components["boost_applied"] is True
        assert components["prefix_length"] == 3
        assert components["matches"] == 6
        assert components["transpositions"] == 2
        assert components["jaro_score"] == pytest.approx(17 / 18)
        assert components["score"] == pytest.approx(jaro_winkler_distance("MARTHA", "MARHTA"))


class TestCommonPrefix:
    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("MARTHA", "MARHTA", 3),
            ("ABCDEF", "ABCDEF", 4),
            ("ABCDEF", "ABCDXY", 4),
            ("AB", "ABCDEF", 2),
            ("A", "B", 0),
            ("", "ABC", 0),
        ],
    )
    def test_capped_at_default(self, a, b, expected):
        assert common_prefix_length(a, b) == expected

    def test_custom_cap(self):
        assert common_prefix_length("ABCDEF", "ABCDEF", max_prefix=10) == 6
        assert common_prefix_length("ABCDEF", "ABCDEF", max_prefix=0) == 0

    def test_token_sequences(self):
        assert common_prefix_length(["acme", "corp", "x"], ["acme", "corp", "y"]) == 2


class TestTuningParameters:
    def test_defaults_match_constants(self):
        explicit = jaro_winkler_distance(
            "DIXON",
            "DICKSONX",
            prefix_weight=JARO_WINKLER_SCALING_FACTOR,
            prefix_size=JARO_WINKLER_PREFIX_SIZE,
            boost_threshold=JARO_WINKLER_BOOST_THRESHOLD,
        )
        assert explicit == jaro_winkler_distance("DIXON", "DICKSONX")

    def test_maximum_weight_stays_bounded(self):
        score = jaro_winkler_distance("MARTHA", "MARHTA", prefix_weight=0.25)
        assert score == pytest.approx(17 / 18 + 0.75 * (1 / 18))
        assert score <= 1.0

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"prefix_weight": 0.3},
            {"prefix_weight": -0.1},
            {"prefix_size": -1},
            {"prefix_size": 2.5},
            {"boost_threshold": 1.5},
            {"boost_threshold": -0.1},
            {"prefix_weight": float("nan")},
            {"prefix_weight": float("inf"), "prefix_size": 0},
            {"prefix_weight": "0.1"},
            {"boost_threshold": float("nan")},
            {"boost_threshold": "0.7"},
        ],
    )
    def test_invalid_parameters_raise(self, kwargs):
        with pytest.raises(ValueError):
            jaro_winkler_distance("MARTHA", "MARHTA", **kwargs)

    def test_invalid_parameters_raise_for_components(self):
        with pytest.raises(ValueError, match="prefix_weight"):
            compute_jaro_winkler_components("MARTHA", "MARHTA", prefix_weight=0.5)


class TestScoreCutoff:
    def test_cutoff_applies_to_boosted_score(self):
        # Jaro alone is below 0.95, the boosted score is not
        assert jaro_distance("MARTHA", "MARHTA", score_cutoff=0.95) == 0.0
        assert jaro_winkler_distance("MARTHA", "MARHTA", score_cutoff=0.95) == pytest.approx(
            0.961, abs=1e-3
        )

    def test_below_cutoff_reports_zero(self):
        assert jaro_winkler_distance("MARTHA", "MARHTA", score_cutoff=0.99) == 0.0


def test_generic_inputs():
    assert jaro_winkler_distance(b"MARTHA", b"MARHTA") == jaro_winkler_distance(
        "MARTHA", "MARHTA"
    )
    assert jaro_winkler_distance(iter("MARTHA"), iter("MARHTA")) == pytest.approx(
        jaro_winkler_distance("MARTHA", "MARHTA")
    )
