"""Tests for the Jaro and JaroWinkler metric modules."""

from __future__ import annotations

import logging

import pytest

from winklerfuzz import jaro_winkler_distance
from winklerfuzz.config import JaroWinklerConfig
from winklerfuzz.distance import Jaro, JaroWinkler


class TestMatchingCharacters:
    def test_dixon_against_dicksonx(self) -> None:
        assert Jaro.matching_characters("dixon", "dicksonx", 3) == "dion"

    def test_dicksonx_against_dixon(self) -> None:
        # the trailing "x" is outside its window
        assert Jaro.matching_characters("dicksonx", "dixon", 3) == "dion"

    def test_martha_both_directions(self) -> None:
        assert Jaro.matching_characters("martha", "marhta", 4) == "martha"
        assert Jaro.matching_characters("marhta", "martha", 4) == "marhta"

    def test_each_position_consumed_once(self) -> None:
        # only one "a" to match against
        assert Jaro.matching_characters("aaa", "a", 2) == "a"

    def test_leftmost_unconsumed_match_wins(self) -> None:
        # second "a" skips consumed index 0 and takes index 2
        assert Jaro.matching_characters("aa", "aba", 2) == "aa"
        assert Jaro.matching_characters("aa", "xaa", 2) == "aa"

    def test_window_bounds(self) -> None:
        # "c" at index 0 of first may look at [0, 1) only
        assert Jaro.matching_characters("c", "abc", 1) == ""
        assert Jaro.matching_characters("c", "abc", 3) == "c"

    def test_empty(self) -> None:
        assert Jaro.matching_characters("", "abc", 1) == ""
        assert Jaro.matching_characters("abc", "", 1) == ""

    def test_does_not_modify_input(self) -> None:
        second = "abc"
        Jaro.matching_characters("abc", second, 2)
        assert second == "abc"


class TestTranspositions:
    def test_none(self) -> None:
        assert Jaro.transpositions("dion", "dion") == 0

    def test_one_swap(self) -> None:
        assert Jaro.transpositions("martha", "marhta") == 1

    def test_odd_mismatch_rounds_down(self) -> None:
        assert Jaro.transpositions("abc", "bca") == 1

    def test_unequal_lengths_raise(self) -> None:
        with pytest.raises(ValueError, match="equal length"):
            Jaro.transpositions("ab", "abc")


class TestJaro:
    def test_martha(self) -> None:
        assert Jaro.similarity("martha", "marhta") == pytest.approx((1 + 1 + 5 / 6) / 3)

    def test_dixon(self) -> None:
        assert Jaro.similarity("dixon", "dicksonx") == pytest.approx((4 / 5 + 4 / 8 + 1) / 3)

    def test_hello_hey(self) -> None:
        assert Jaro.similarity("Hello", "hey") == pytest.approx(0.6889, abs=1e-3)

    def test_identical_and_empty(self) -> None:
        assert Jaro.similarity("abc", "abc") == 1.0
        assert Jaro.similarity("", "") == 1.0
        assert Jaro.similarity("", "a") == 0.0

    def test_case_folding(self) -> None:
        assert Jaro.similarity("ABC", "abc") == 1.0
        assert Jaro.similarity("STRASSE", "straße") == 1.0

    def test_distance(self) -> None:
        sim = Jaro.similarity("dixon", "dicksonx")
        assert Jaro.distance("dixon", "dicksonx") == pytest.approx(1 - sim)
        assert Jaro.distance("abc", "abc") == 0.0

    def test_normalized_aliases(self) -> None:
        assert Jaro.normalized_similarity is Jaro.similarity
        assert Jaro.normalized_distance is Jaro.distance

    def test_score_cutoff(self) -> None:
        assert Jaro.similarity("dixon", "dicksonx", score_cutoff=0.9) == 0.0
        assert Jaro.similarity("dixon", "dicksonx", score_cutoff=0.5) > 0.5
        assert Jaro.distance("dixon", "dicksonx", score_cutoff=0.1) == 1.0

    def test_unequal_match_strings_score_zero(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        # "a" finds no "a" in its window, but "bba"'s "a" reaches back to index 0
        assert Jaro.matching_characters("ab", "bba", 2) == "b"
        assert Jaro.matching_characters("bba", "ab", 2) == "ba"
        with caplog.at_level(logging.DEBUG, logger="winklerfuzz.distance.Jaro"):
            assert Jaro.similarity("ab", "bba") == 0.0
        assert "differ in length (1 != 2)" in caplog.text

    def test_unequal_match_strings_through_jaro_winkler(self) -> None:
        assert jaro_winkler_distance("bba", "ab") == 0.0
        assert jaro_winkler_distance("ab", "bba") == 0.0


class TestJaroWinkler:
    def test_similarity(self) -> None:
        assert JaroWinkler.similarity("martha", "marhta") == pytest.approx(0.9611, abs=1e-3)

    def test_prefix_weight(self) -> None:
        jaro = Jaro.similarity("dixon", "dicksonx")
        assert JaroWinkler.similarity("dixon", "dicksonx", prefix_weight=0.25) == (
            pytest.approx(jaro + 0.25 * 2 * (1 - jaro))
        )

    def test_config(self) -> None:
        cfg = JaroWinklerConfig(prefix_weight=0.2)
        assert JaroWinkler.similarity("martha", "marhta", config=cfg) == (
            JaroWinkler.similarity("martha", "marhta", prefix_weight=0.2)
        )

    def test_config_max_prefix(self) -> None:
        cfg = JaroWinklerConfig(max_prefix=0)
        assert JaroWinkler.similarity("martha", "marhta", config=cfg) == (
            Jaro.similarity("martha", "marhta")
        )

    def test_config_and_prefix_weight_conflict(self) -> None:
        with pytest.raises(TypeError, match="not both"):
            JaroWinkler.similarity(
                "a", "b", prefix_weight=0.1, config=JaroWinklerConfig()
            )

    def test_invalid_prefix_weight_rejected_before_scoring(self) -> None:
        with pytest.raises(ValueError):
            JaroWinkler.similarity(None, None, prefix_weight=0.5)

    def test_prefix_uses_folded_strings(self) -> None:
        assert JaroWinkler.similarity("MARtha", "marhta") == (
            JaroWinkler.similarity("martha", "marhta")
        )

    def test_distance(self) -> None:
        sim = JaroWinkler.similarity("dixon", "dicksonx")
        assert JaroWinkler.distance("dixon", "dicksonx") == pytest.approx(1 - sim)
        assert JaroWinkler.distance("", "") == 0.0
        assert JaroWinkler.distance("abc", "xyz") == 1.0

    def test_score_cutoff(self) -> None:
        assert JaroWinkler.similarity("dixon", "dicksonx", score_cutoff=0.9) == 0.0
        assert JaroWinkler.similarity("martha", "marhta", score_cutoff=0.9) > 0.9
        assert JaroWinkler.distance("martha", "marhta", score_cutoff=0.01) == 1.0
