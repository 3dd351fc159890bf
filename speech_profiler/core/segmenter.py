"""Time-windowed segmentation and pace computation.

WHY: A single average pace hides the moments where a speaker rushed or
stalled. Segments give per-window word counts and WPM so reports can
chart pace over the recording and point at the slow or fast stretches.

HOW: Two mutually exclusive algorithms, chosen by whether word timings
are available:
  TIMING      : fixed 10 s windows from 0 to the total duration; each
                 word belongs to the window containing its start time.
  PROPORTIONAL: no timings: the token sequence is cut into ~20 equal
                 chunks, each given a time offset and length in
                 proportion to its share of the tokens.
Totals are computed from the raw transcript independently of either path.

RULES:
- total_words = whitespace-delimited tokens of the transcript, whichever
  path ran
- average_wpm = total_words / duration * 60 (global, not a segment mean)
- Windows with no words are dropped, not emitted with zero counts
- The last timing window is clipped to the total duration
- Words starting at or after the total duration fall in no window
- duration <= 0 or non-finite: average_wpm is 0 and no segments are produced
- clarity_score is left at 0; the aggregator scores it once fillers are known
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Sequence, Tuple

from speech_profiler.config import PROPORTIONAL_SEGMENT_COUNT, SEGMENT_WINDOW_S
from speech_profiler.core.fillers import tokenize
from speech_profiler.core.ir import (
    AnalysisResult,
    SegmentationMode,
    TranscriptSegment,
    WordTiming,
)

logger = logging.getLogger(__name__)


def count_words(transcript: str) -> int:
    """Count the non-empty whitespace-delimited tokens in a transcript."""
    return len(tokenize(transcript))


def _usable_duration(duration_s: float) -> bool:
    return math.isfinite(duration_s) and duration_s > 0


def words_per_minute(word_count: int, duration_s: float) -> float:
    """Return word_count / duration_s * 60, or 0 for an unusable duration."""
    if not _usable_duration(duration_s):
        return 0.0
    return max(word_count / duration_s * 60, 0.0)


def segment_by_timings(
    words: Sequence[WordTiming],
    total_duration: float,
    window_s: float = SEGMENT_WINDOW_S,
) -> List[TranscriptSegment]:
    """Group timed words into fixed-length windows.

    HOW: Each word is bucketed into window start // window_s, so the
    work grows with the number of words, not with the duration. Window k
    covers [k * window_s, min((k + 1) * window_s, total_duration)); only
    buckets that received words become segments.

    Args:
        words: Word timings ordered by start time.
        total_duration: Recording length in seconds.
        window_s: Window length in seconds.

    Returns:
        Non-empty segments ordered by timestamp.
    """
    segments: List[TranscriptSegment] = []
    if not _usable_duration(total_duration) or window_s <= 0:
        return segments

    buckets: Dict[int, List[WordTiming]] = {}
    for w in words:
        if 0 <= w.start < total_duration:
            buckets.setdefault(int(w.start // window_s), []).append(w)

    for index in sorted(buckets):
        in_window = buckets[index]
        window_start = index * window_s
        actual_duration = min(window_start + window_s, total_duration) - window_start
        segments.append(TranscriptSegment(
            text=" ".join(w.word for w in in_window),
            timestamp=window_start,
            duration=actual_duration,
            word_count=len(in_window),
            wpm=words_per_minute(len(in_window), actual_duration),
        ))

    return segments


def segment_proportionally(
    transcript: str,
    total_duration: float,
    segment_count: int = PROPORTIONAL_SEGMENT_COUNT,
) -> List[TranscriptSegment]:
    """Cut an untimed transcript into equal token chunks with estimated times.

    HOW: chunk size is ceil(tokens / segment_count). Chunk i starting at
    token index k gets timestamp k / tokens * duration and duration
    chunk_tokens / tokens * duration.

    Args:
        transcript: Raw transcript text.
        total_duration: Recording length in seconds.
        segment_count: Target number of chunks.

    Returns:
        Segments ordered by timestamp; at most segment_count of them.
    """
    tokens = tokenize(transcript)
    segments: List[TranscriptSegment] = []
    if not tokens or not _usable_duration(total_duration):
        return segments

    total = len(tokens)
    chunk_size = math.ceil(total / segment_count)

    for start in range(0, total, chunk_size):
        chunk = tokens[start:start + chunk_size]
        duration = len(chunk) / total * total_duration
        segments.append(TranscriptSegment(
            text=" ".join(chunk),
            timestamp=start / total * total_duration,
            duration=duration,
            word_count=len(chunk),
            wpm=words_per_minute(len(chunk), duration),
        ))

    return segments


def segment_transcript(
    transcript: str,
    duration: float,
    timings: Optional[Sequence[WordTiming]] = None,
) -> Tuple[SegmentationMode, List[TranscriptSegment]]:
    """Pick the segmentation mode for the available data and run it."""
    if timings:
        return SegmentationMode.TIMING, segment_by_timings(timings, duration)
    return SegmentationMode.PROPORTIONAL, segment_proportionally(transcript, duration)


def analyze_transcript(
    transcript: str,
    duration: float,
    timings: Optional[Sequence[WordTiming]] = None,
) -> AnalysisResult:
    """Segment a transcript and compute its word totals and average pace.

    Args:
        transcript: Raw transcript text.
        duration: Recording length in seconds.
        timings: Optional word timings; a non-empty sequence selects the
                 timing-based mode.

    Returns:
        AnalysisResult with clarity_score still 0.
    """
    mode, segments = segment_transcript(transcript, duration, timings)
    total_words = count_words(transcript)

    logger.debug(
        "Segmented %d words into %d segments (%s mode, %.2fs)",
        total_words, len(segments), mode.value, duration,
    )

    return AnalysisResult(
        transcript=transcript,
        segments=segments,
        total_words=total_words,
        total_duration=duration,
        average_wpm=words_per_minute(total_words, duration),
        segmentation_mode=mode,
    )
