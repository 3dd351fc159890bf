"""Analysis orchestration: segment, detect fillers, score.

WHY: The clarity score depends on the filler count, and the filler count
on the detector, so the three core steps must run in a fixed order.
Callers (CLI, HTTP API, tests) should not have to know that order.

HOW: analyze_speech runs the segmenter, then the filler detector, then
the scorer, and returns a SpeechProfile holding the scored
AnalysisResult and the filler occurrences.

RULES:
- Order: segment -> detect fillers -> score; never score before detection
- The segmenter and the detector see the same timings, so both fall back
  to estimated timing together when none are supplied
- An empty timings sequence is treated as no timings
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Optional, Sequence

from speech_profiler.core.fillers import detect_filler_words
from speech_profiler.core.ir import SpeechProfile, WordTiming
from speech_profiler.core.scoring import calculate_clarity_score
from speech_profiler.core.segmenter import analyze_transcript

logger = logging.getLogger(__name__)


def analyze_speech(
    transcript: str,
    duration: float,
    words: Optional[Sequence[WordTiming]] = None,
    source_filename: str = "",
) -> SpeechProfile:
    """Run the full analysis for one transcript.

    Args:
        transcript: Raw transcript text.
        duration: Recording length in seconds.
        words: Optional word timings from the transcriber.
        source_filename: Name of the analyzed recording, for report naming.

    Returns:
        SpeechProfile with a scored AnalysisResult and filler occurrences.
    """
    timings = list(words) if words else None

    analysis = analyze_transcript(transcript, duration, timings)
    fillers = detect_filler_words(transcript, timings)
    score = calculate_clarity_score(
        analysis.total_words,
        len(fillers),
        analysis.average_wpm,
    )

    logger.info(
        "Analyzed %s: %d words, %d fillers, %.1f WPM, clarity %d",
        source_filename or "transcript",
        analysis.total_words,
        len(fillers),
        analysis.average_wpm,
        score,
    )

    return SpeechProfile(
        analysis=dataclasses.replace(analysis, clarity_score=score),
        filler_words=fillers,
        source_filename=source_filename,
    )
