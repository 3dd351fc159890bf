"""Plain text performance summary.

WHY: Not every consumer wants JSON. A short readable summary of the
headline metrics is what a speaker glances at after a practice run and
what gets pasted into a chat or an email.

HOW: Renders the clarity score with its rating, word and time totals,
average pace with its band, the filler count with rate and severity,
and the ten most frequent filler words.

RULES:
- Times render as M:SS
- Rates render with two decimals; pace as a whole number of WPM
- At most ten filler words are listed, most frequent first
- No trailing whitespace on any line; output ends with a newline
- Output suffix: "-summary.txt", media type: "text/plain"
"""

from __future__ import annotations

from typing import List

from speech_profiler.core.fillers import filler_breakdown
from speech_profiler.core.ir import SpeechProfile
from speech_profiler.core.scoring import (
    filler_severity,
    pace_severity,
    round_half_up,
    score_rating,
)
from speech_profiler.formatters.base import BaseFormatter, FormatterOutput

_TOP_FILLERS = 10


def format_clock(seconds: float) -> str:
    """Render seconds as M:SS, e.g. 75.4 -> "1:15"."""
    whole = int(seconds)
    return "{}:{:02d}".format(whole // 60, whole % 60)


class SummaryFormatter(BaseFormatter):
    """Formatter that produces a short human-readable summary."""

    @property
    def name(self) -> str:
        return "Text Summary"

    @property
    def suffix(self) -> str:
        return "-summary.txt"

    def format(self, profile: SpeechProfile) -> List[FormatterOutput]:
        analysis = profile.analysis
        rate = profile.filler_rate

        lines = ["Speech Performance Summary"]
        if profile.source_filename:
            lines.append("Source: {}".format(profile.source_filename))
        lines.append("")
        lines.append("Clarity score: {}/100 ({})".format(
            analysis.clarity_score, score_rating(analysis.clarity_score),
        ))
        lines.append("Total words: {}".format(analysis.total_words))
        lines.append("Duration: {}".format(format_clock(analysis.total_duration)))
        lines.append("Average pace: {} WPM ({})".format(
            round_half_up(analysis.average_wpm), pace_severity(analysis.average_wpm),
        ))
        lines.append("Filler words: {} ({:.2f}%, {})".format(
            profile.filler_count, rate, filler_severity(rate),
        ))

        breakdown = filler_breakdown(profile.filler_words)[:_TOP_FILLERS]
        if breakdown:
            lines.append("")
            lines.append("Top filler words:")
            for word, count in breakdown:
                lines.append('  "{}" x {}'.format(word, count))

        return [
            FormatterOutput(
                suffix=self.suffix,
                content="\n".join(lines) + "\n",
                media_type="text/plain",
            )
        ]
