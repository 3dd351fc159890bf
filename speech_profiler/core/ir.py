"""Intermediate representation dataclasses for speech analysis.

WHY: Filler detection, segmentation and scoring each produce a piece of
the final picture, and every report formatter needs all of them. The IR
gives one well-typed shape that the core produces and every formatter,
the CLI and the HTTP API consume, decoupling analysis from presentation.

HOW: Six types form the model:
  WordTiming       : one recognized token with start/end seconds
  FillerOccurrence : one detected filler phrase with timestamp and context
  TranscriptSegment: one time window with its word count and pace
  SegmentationMode : which segmentation algorithm produced the segments
  AnalysisResult   : totals, pace and clarity score for one transcript
  SpeechProfile    : AnalysisResult plus its filler occurrences

RULES:
- All times are in float seconds from the start of the recording
- FillerOccurrence is immutable once created
- Segments are ordered by timestamp; empty windows are never emitted
- clarity_score is derived from total_words, filler count and average_wpm;
  it is 0 until the aggregator fills it in
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from speech_profiler.core.scoring import filler_rate


@dataclass
class WordTiming:
    """A single recognized token with temporal bounds.

    RULES:
    - word: token text as delivered by the transcriber (not lowercased)
    - start / end: seconds from recording start, 0 <= start < end
    - Ordering across a sequence is guaranteed upstream, not re-validated
    """

    word: str
    start: float
    end: float


@dataclass(frozen=True)
class FillerOccurrence:
    """One detected filler word or phrase.

    WHY: Reports show not only how many fillers were used but where and
    in what surrounding words, so a speaker can find them in the audio.

    RULES:
    - word: matched phrase, lowercased, multi-word phrases space-joined
    - timestamp: start of the first matched token, or index * 0.5 s
      when no word timings exist
    - context: up to 5 tokens each side, matched tokens wrapped in ** **
    """

    word: str
    timestamp: float
    context: str


@dataclass
class TranscriptSegment:
    """A window of the transcript with its own local pace.

    RULES:
    - text: the window's words space-joined in original casing
    - timestamp: window start in seconds
    - duration: window length (last window may be shorter)
    - word_count: tokens in the window, always >= 1
    - wpm: word_count / duration * 60, never negative
    """

    text: str
    timestamp: float
    duration: float
    word_count: int
    wpm: float


class SegmentationMode(str, Enum):
    """Which segmentation algorithm produced an AnalysisResult's segments."""

    TIMING = "timing"
    PROPORTIONAL = "proportional"


@dataclass
class AnalysisResult:
    """Totals, pacing and clarity for one analyzed transcript.

    WHY: This is the structure presentation layers chart and summarize.
    average_wpm is the global rate (total words over total duration), not
    the mean of segment rates, which differ for uneven segments.

    RULES:
    - total_words counts whitespace-separated tokens of the raw transcript
    - average_wpm and segment wpm are 0 when total_duration is 0
    - clarity_score is 0 until scored with the filler count
    """

    transcript: str
    segments: list[TranscriptSegment]
    total_words: int
    total_duration: float
    average_wpm: float
    clarity_score: int = 0
    segmentation_mode: SegmentationMode = SegmentationMode.PROPORTIONAL


@dataclass
class SpeechProfile:
    """The complete result of one analysis run.

    WHY: Formatters need the scored AnalysisResult and the filler
    occurrences together, plus the source name for output file naming.
    """

    analysis: AnalysisResult
    filler_words: list[FillerOccurrence] = field(default_factory=list)
    source_filename: str = ""

    @property
    def filler_count(self) -> int:
        return len(self.filler_words)

    @property
    def filler_rate(self) -> float:
        """Filler occurrences as a percentage of total words."""
        return filler_rate(self.filler_count, self.analysis.total_words)
