"""Downloadable JSON performance report.

WHY: Speakers keep reports to compare sessions over time, and other
tools (dashboards, spreadsheets, coaching prompts) ingest them. The
report flattens a SpeechProfile into a stable, documented JSON shape.

HOW: Builds a dict with a generation date, a summary block, the filler
breakdown (word, count pairs, most frequent first), the transcript and
a compact per-segment list, then serializes with 2-space indentation.
report_schema.json in this package documents and validates the shape.

RULES:
- Keys are camelCase; this is the report's wire format
- summary.fillerRate is a string with two decimals and a "%" sign
- summary.averageWPM and segment wpm are rounded half-up to integers
- summary.duration is whole seconds with an "s" suffix, e.g. "95s"
- fillerWordsBreakdown is a list of [word, count] pairs, counts descending
- Output suffix: "-report.json", media type: "application/json"
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from speech_profiler.core.fillers import filler_breakdown
from speech_profiler.core.ir import SpeechProfile
from speech_profiler.core.scoring import round_half_up
from speech_profiler.formatters.base import BaseFormatter, FormatterOutput


def build_report(
    profile: SpeechProfile,
    generated_at: datetime,
) -> Dict[str, Any]:
    """Build the report dict for a profile.

    Args:
        profile: The analyzed speech profile.
        generated_at: Timestamp written to the report's "date" field.

    Returns:
        A JSON-serializable dict matching report_schema.json.
    """
    analysis = profile.analysis

    return {
        "date": generated_at.isoformat(),
        "summary": {
            "totalWords": analysis.total_words,
            "fillerWords": profile.filler_count,
            "fillerRate": "{:.2f}%".format(profile.filler_rate),
            "averageWPM": round_half_up(analysis.average_wpm),
            "clarityScore": analysis.clarity_score,
            "duration": "{}s".format(round_half_up(analysis.total_duration)),
        },
        "fillerWordsBreakdown": [
            [word, count] for word, count in filler_breakdown(profile.filler_words)
        ],
        "transcript": analysis.transcript,
        "segments": [
            {
                "timestamp": seg.timestamp,
                "wpm": round_half_up(seg.wpm),
                "wordCount": seg.word_count,
                "text": seg.text,
            }
            for seg in analysis.segments
        ],
    }


class JsonReportFormatter(BaseFormatter):
    """Formatter that produces the JSON performance report.

    Args:
        generated_at: Fixed report date; defaults to the current UTC time
                      when format() runs.
    """

    def __init__(self, generated_at: Optional[datetime] = None) -> None:
        self._generated_at = generated_at

    @property
    def name(self) -> str:
        return "JSON Report"

    @property
    def suffix(self) -> str:
        return "-report.json"

    def format(self, profile: SpeechProfile) -> List[FormatterOutput]:
        generated_at = self._generated_at or datetime.now(timezone.utc)
        report = build_report(profile, generated_at)
        return [
            FormatterOutput(
                suffix=self.suffix,
                content=json.dumps(report, indent=2, ensure_ascii=False),
                media_type="application/json",
            )
        ]
