"""Pace and clarity scoring.

WHY: A single 0-100 number is what speakers track between practice
sessions. It blends how often they used fillers with how far their pace
was from a comfortable listening speed.

HOW: Filler rate (percent of words) costs 10 points per percent. Pace
costs 1 point per WPM away from 150. The two sub-scores are weighted
60/40 and rounded half-up to an integer.

RULES:
- filler_rate is 0 when total_words is 0 (no division error)
- The filler sub-score is 0 when total_words is 0
- Both sub-scores are clipped below at 0; the filler sub-score is not
  capped above
- Rounding is half-up (62.5 -> 63), not banker's rounding
- Everything here is pure: no I/O, no state
"""

from __future__ import annotations

import math

from speech_profiler.config import (
    FILLER_PENALTY_PER_PERCENT,
    FILLER_RATE_HIGH_FROM,
    FILLER_RATE_MEDIUM_FROM,
    FILLER_WEIGHT,
    IDEAL_WPM,
    PACE_FAST_ABOVE,
    PACE_SLOW_BELOW,
    PACE_WEIGHT,
    SCORE_EXCELLENT_FROM,
    SCORE_GOOD_FROM,
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (62.5 -> 63)."""
    return int(math.floor(value + 0.5))


def filler_rate(filler_count: int, total_words: int) -> float:
    """Return filler occurrences as a percentage of total words."""
    if total_words <= 0:
        return 0.0
    return filler_count / total_words * 100


def calculate_clarity_score(
    total_words: int,
    filler_count: int,
    average_wpm: float,
) -> int:
    """Compute the composite clarity score.

    Args:
        total_words: Whitespace-delimited token count of the transcript.
        filler_count: Number of detected filler occurrences.
        average_wpm: Global words per minute for the recording.

    Returns:
        Integer score, practically in 0..100.
    """
    if total_words <= 0:
        filler_score = 0.0
    else:
        rate = filler_rate(filler_count, total_words)
        filler_score = max(0.0, 100 - rate * FILLER_PENALTY_PER_PERCENT)

    wpm_score = max(0.0, 100 - abs(average_wpm - IDEAL_WPM))

    return round_half_up(filler_score * FILLER_WEIGHT + wpm_score * PACE_WEIGHT)


def pace_severity(wpm: float) -> str:
    """Classify a pace as "slow", "optimal" or "fast"."""
    if wpm < PACE_SLOW_BELOW:
        return "slow"
    if wpm > PACE_FAST_ABOVE:
        return "fast"
    return "optimal"


def filler_severity(rate: float) -> str:
    """Classify a filler rate (percent) as "low", "medium" or "high"."""
    if rate < FILLER_RATE_MEDIUM_FROM:
        return "low"
    if rate < FILLER_RATE_HIGH_FROM:
        return "medium"
    return "high"


def score_rating(score: int) -> str:
    if score >= SCORE_EXCELLENT_FROM:
        return "Excellent"
    if score >= SCORE_GOOD_FROM:
        return "Good"
    return "Needs Work"
