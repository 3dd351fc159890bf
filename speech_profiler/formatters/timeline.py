"""Per-segment timeline with the fillers found in each window.

WHY: The summary says how a talk went overall; the timeline says when.
Walking the segments in order with their pace and fillers shows exactly
where a speaker rushed, stalled, or leaned on "um".

HOW: For each segment, writes a header line with its start time, pace,
word count and pace band, the segment text, and the filler occurrences
whose timestamps fall inside the segment window.

RULES:
- One block per segment, blank line between blocks
- Header: "[M:SS] N WPM, W words (band)"
- Fillers line only when the segment has fillers: "Fillers: um (0:03), ..."
- Empty profile (no segments) renders "No segments." on its own line
- Output suffix: "-timeline.txt", media type: "text/plain"
"""

from __future__ import annotations

from typing import List

from speech_profiler.core.fillers import fillers_in_segment
from speech_profiler.core.ir import SpeechProfile
from speech_profiler.core.scoring import pace_severity, round_half_up
from speech_profiler.formatters.base import BaseFormatter, FormatterOutput
from speech_profiler.formatters.summary import format_clock


class TimelineFormatter(BaseFormatter):
    """Formatter that lists segments in time order with their fillers."""

    @property
    def name(self) -> str:
        return "Timeline"

    @property
    def suffix(self) -> str:
        return "-timeline.txt"

    def format(self, profile: SpeechProfile) -> List[FormatterOutput]:
        blocks: List[str] = []

        for segment in profile.analysis.segments:
            lines = [
                "[{}] {} WPM, {} words ({})".format(
                    format_clock(segment.timestamp),
                    round_half_up(segment.wpm),
                    segment.word_count,
                    pace_severity(segment.wpm),
                ),
                segment.text,
            ]
            fillers = fillers_in_segment(profile.filler_words, segment)
            if fillers:
                lines.append("Fillers: {}".format(", ".join(
                    "{} ({})".format(f.word, format_clock(f.timestamp)) for f in fillers
                )))
            blocks.append("\n".join(lines))

        content = "\n\n".join(blocks) if blocks else "No segments."

        return [
            FormatterOutput(
                suffix=self.suffix,
                content=content + "\n",
                media_type="text/plain",
            )
        ]
