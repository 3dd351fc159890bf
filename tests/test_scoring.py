"""Unit tests for the pace and clarity scorer.

WHY: The clarity score is the headline number in every report. Its
formula, weights, clipping and zero-word guard must be exact.

HOW: Known-answer tests for the formula, then the degenerate inputs,
then the rating helpers at their band boundaries.

RULES:
- Expected scores are worked out by hand from the formula
"""

import pytest

from speech_profiler.core.scoring import (
    calculate_clarity_score,
    filler_rate,
    filler_severity,
    pace_severity,
    round_half_up,
    score_rating,
)


class TestClarityScore:

    def test_perfect_score(self):
        assert calculate_clarity_score(100, 0, 150) == 100

    def test_ten_percent_fillers_zero_filler_score(self):
        # filler score 0, pace score 100 -> 0.4 * 100
        assert calculate_clarity_score(100, 10, 150) == 40

    def test_one_percent_fillers(self):
        # filler score 90, pace score 100 -> 54 + 40
        assert calculate_clarity_score(100, 1, 150) == 94

    def test_pace_penalty_is_linear(self):
        # pace score 80 -> 60 + 32
        assert calculate_clarity_score(100, 0, 130) == 92
        assert calculate_clarity_score(100, 0, 170) == 92

    def test_pace_score_clipped_at_zero(self):
        assert calculate_clarity_score(100, 0, 400) == 60

    def test_filler_score_clipped_at_zero(self):
        assert calculate_clarity_score(10, 10, 150) == 40

    def test_returns_int(self):
        assert isinstance(calculate_clarity_score(100, 3, 141.7), int)


class TestDegenerateInputs:

    def test_zero_words_does_not_raise(self):
        # filler score resolves to 0, pace score 100
        assert calculate_clarity_score(0, 0, 150) == 40

    def test_empty_transcript_scores_zero(self):
        assert calculate_clarity_score(0, 0, 0.0) == 0


class TestFillerRate:

    def test_percentage(self):
        assert filler_rate(1, 4) == pytest.approx(25.0)

    def test_zero_words(self):
        assert filler_rate(0, 0) == 0.0
        assert filler_rate(3, 0) == 0.0


class TestRoundHalfUp:

    def test_half_goes_up(self):
        assert round_half_up(62.5) == 63
        assert round_half_up(0.5) == 1

    def test_below_half_goes_down(self):
        assert round_half_up(62.49) == 62


class TestRatings:

    @pytest.mark.parametrize("wpm,expected", [
        (0, "slow"),
        (129.9, "slow"),
        (130, "optimal"),
        (150, "optimal"),
        (170, "optimal"),
        (170.1, "fast"),
    ])
    def test_pace_severity(self, wpm, expected):
        assert pace_severity(wpm) == expected

    @pytest.mark.parametrize("rate,expected", [
        (0, "low"),
        (1.99, "low"),
        (2, "medium"),
        (4.99, "medium"),
        (5, "high"),
    ])
    def test_filler_severity(self, rate, expected):
        assert filler_severity(rate) == expected

    @pytest.mark.parametrize("score,expected", [
        (100, "Excellent"),
        (80, "Excellent"),
        (79, "Good"),
        (60, "Good"),
        (59, "Needs Work"),
        (0, "Needs Work"),
    ])
    def test_score_rating(self, score, expected):
        assert score_rating(score) == expected
