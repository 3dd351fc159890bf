"""Filler-word detection over a whitespace-tokenized transcript.

WHY: Fillers ("um", "you know", ...) are the main thing speakers want to
cut. Reports need every occurrence with a timestamp to seek to and a
short highlighted excerpt that shows how it was used.

HOW: The transcript is split on whitespace runs. A lowercased working
copy is used for matching; context excerpts use the original tokens.
Two independent passes run over the full token sequence:
  1. Multi-word phrases: a window of the phrase's length slides across
     the tokens and the lowercased slice is compared to the phrase.
  2. Single words: each token, with trailing .,!?;: stripped, is looked
     up in the single-word lexicon.
Occurrences are then stably sorted by timestamp.

RULES:
- Overlapping matches are all kept: "like, you know" may yield both
  "like" and "you know", and single-word entries inside a multi-word
  phrase are counted independently
- Multi-word phrases compare raw lowercased tokens (no punctuation
  stripping), so "you know," does not match "you know"
- Timestamp: start of the word timing at the match index; without a
  timing for that index, index * 0.5 seconds
- Context: 5 tokens each side, clipped to the transcript, with the
  matched tokens lowercased and wrapped as **match**
- Empty transcript -> empty list; nothing here raises
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import List, Optional, Sequence, Tuple

from speech_profiler.config import (
    CONTEXT_RADIUS,
    FALLBACK_SECONDS_PER_WORD,
    HIGHLIGHT_MARKER,
)
from speech_profiler.core.ir import FillerOccurrence, TranscriptSegment, WordTiming
from speech_profiler.core.lexicon import MULTI_WORD_FILLERS, SINGLE_WORD_FILLERS

logger = logging.getLogger(__name__)

# Trailing punctuation ignored when comparing single-word fillers.
_TRAILING_PUNCTUATION = ".,!?;:"


def tokenize(transcript: str) -> List[str]:
    """Split a transcript on runs of whitespace, dropping empty tokens."""
    return transcript.split()


def _timestamp_for(index: int, timings: Optional[Sequence[WordTiming]]) -> float:
    if timings is not None and index < len(timings):
        return timings[index].start
    return index * FALLBACK_SECONDS_PER_WORD


def _build_context(
    tokens: List[str],
    lowered: List[str],
    index: int,
    span: int,
) -> str:
    """Render the excerpt around a match with the match highlighted.

    WHY: A bare count does not show how a filler was used. Five tokens
    either side is enough to read the phrase in place.

    HOW: Takes up to CONTEXT_RADIUS original-casing tokens before and
    after the matched span and joins them around the highlighted,
    lowercased match.
    """
    before = tokens[max(0, index - CONTEXT_RADIUS):index]
    after = tokens[index + span:index + span + CONTEXT_RADIUS]
    highlighted = "{marker}{text}{marker}".format(
        marker=HIGHLIGHT_MARKER,
        text=" ".join(lowered[index:index + span]),
    )
    return " ".join(before + [highlighted] + after)


def detect_filler_words(
    transcript: str,
    timings: Optional[Sequence[WordTiming]] = None,
) -> List[FillerOccurrence]:
    """Find every filler occurrence in a transcript.

    Args:
        transcript: Raw transcript text.
        timings: Optional word timings aligned index-by-index with the
                 transcript's whitespace tokens.

    Returns:
        FillerOccurrence objects sorted ascending by timestamp; equal
        timestamps keep discovery order (multi-word pass first).
    """
    tokens = tokenize(transcript)
    lowered = [t.lower() for t in tokens]
    occurrences: List[FillerOccurrence] = []

    # Pass 1: multi-word phrases
    for phrase in MULTI_WORD_FILLERS:
        length = len(phrase.split(" "))
        for i in range(len(lowered) - length + 1):
            if " ".join(lowered[i:i + length]) == phrase:
                occurrences.append(FillerOccurrence(
                    word=phrase,
                    timestamp=_timestamp_for(i, timings),
                    context=_build_context(tokens, lowered, i, length),
                ))

    # Pass 2: single words
    for i, token in enumerate(lowered):
        clean = token.rstrip(_TRAILING_PUNCTUATION)
        if clean in SINGLE_WORD_FILLERS:
            occurrences.append(FillerOccurrence(
                word=clean,
                timestamp=_timestamp_for(i, timings),
                context=_build_context(tokens, lowered, i, 1),
            ))

    logger.debug("Detected %d filler occurrences in %d tokens", len(occurrences), len(tokens))

    # sorted() is stable, so ties keep discovery order
    return sorted(occurrences, key=lambda o: o.timestamp)


def filler_breakdown(fillers: Sequence[FillerOccurrence]) -> List[Tuple[str, int]]:
    """Count occurrences per filler word, most frequent first.

    Ties keep the order in which each word was first seen.
    """
    counts: Counter = Counter(f.word for f in fillers)
    return counts.most_common()


def fillers_in_segment(
    fillers: Sequence[FillerOccurrence],
    segment: TranscriptSegment,
) -> List[FillerOccurrence]:
    """Return the occurrences whose timestamp falls inside a segment.

    RULES:
    - Window is half-open: [timestamp, timestamp + duration)
    """
    end = segment.timestamp + segment.duration
    return [f for f in fillers if segment.timestamp <= f.timestamp < end]
