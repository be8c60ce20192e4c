"""Tests for round scoring."""
import dataclasses

import pytest

from app.calculation import (
    RoundResult, accuracy, chars_per_second, round_half_up, score_round,
)


class TestHelpers:

    def test_accuracy(self):
        assert accuracy(9, 1) == pytest.approx(90.0)
        assert accuracy(10, 0) == 100.0

    def test_accuracy_empty(self):
        assert accuracy(0, 0) == 100.0

    def test_accuracy_only_misses(self):
        assert accuracy(0, 3) == 0.0

    def test_cps(self):
        assert chars_per_second(10, 4.0) == pytest.approx(2.5)

    def test_cps_zero_elapsed(self):
        assert chars_per_second(10, 0.0) == 0.0

    @pytest.mark.parametrize("value,expected", [
        (0.0, 0), (0.4, 0), (0.5, 1), (1.5, 2), (2.5, 3), (2.49, 2),
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected


class TestScoreRound:

    def test_clean_round(self):
        r = score_round(elapsed=5.0, total_chars=10, misses=0)
        assert r.cps == pytest.approx(2.0)
        assert r.accuracy == 100.0
        assert r.score == pytest.approx(2000.0)
        # 10 * (1 + 0.2) = 12
        assert r.xp == 12

    def test_misses_penalised_cubically(self):
        r = score_round(elapsed=5.0, total_chars=9, misses=1)
        acc_mod = 0.9 ** 3
        assert r.accuracy == pytest.approx(90.0)
        assert r.score == pytest.approx(1.8 * 100 * acc_mod * 9)
        assert r.xp == round_half_up(9 * 1.18 * acc_mod)

    def test_accurate_beats_sloppy(self):
        clean = score_round(elapsed=6.0, total_chars=20, misses=0)
        sloppy = score_round(elapsed=5.0, total_chars=20, misses=5)
        assert clean.score > sloppy.score

    def test_zero_elapsed(self):
        r = score_round(elapsed=0.0, total_chars=10, misses=0)
        assert r.cps == 0.0
        assert r.score == 0.0
        assert r.xp == 10

    def test_empty_round(self):
        r = score_round(elapsed=0.0, total_chars=0, misses=0)
        assert r == RoundResult(
            elapsed=0.0, total_chars=0, misses=0, cps=0.0,
            accuracy=100.0, score=0.0, xp=0,
        )

    def test_all_misses(self):
        r = score_round(elapsed=3.0, total_chars=0, misses=4)
        assert r.accuracy == 0.0
        assert r.xp == 0

    def test_result_is_frozen(self):
        r = score_round(elapsed=1.0, total_chars=1, misses=0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.xp = 99
