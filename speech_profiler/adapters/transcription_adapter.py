"""Adapter: transcription provider payload to analysis input.

WHY: Speech-to-text providers hand back slightly different shapes. The
Whisper-style ``verbose_json`` uses ``text`` and ``words`` with ``word``
entries; other tools write ``transcript``; some omit the duration. The
core only wants a transcript string, a duration, and an optional list
of WordTiming. This adapter bridges the difference and rejects
malformed input with a clear message before any analysis runs.

HOW: parse_transcription_payload reads a decoded JSON dict.
load_transcription_file reads a ``.json`` payload or a ``.txt``
transcript from disk and delegates to the parser.

RULES:
- Transcript key: "transcript", falling back to "text"; missing -> ""
- Word entries: {"word" | "text", "start", "end"}, numbers in seconds
- Missing duration is inferred from the last word's end; with no words
  either, a ValueError is raised
- Negative, non-finite (inf, nan) or non-numeric durations and timings
  raise ValueError
- An empty "words" list means no timings (proportional segmentation)
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from speech_profiler.core.ir import WordTiming


@dataclass
class TranscriptionInput:
    """Validated analysis input from one transcription.

    Attributes:
        transcript: Raw transcript text.
        duration: Recording length in seconds.
        words: Word timings, empty when the provider gave none.
        source_filename: Name used for output file naming.
    """

    transcript: str
    duration: float
    words: List[WordTiming] = field(default_factory=list)
    source_filename: str = ""


def _as_seconds(value: Any, what: str) -> float:
    # bool is an int subclass; "true" is never a valid time
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("{} must be a number of seconds, got {!r}.".format(what, value))
    if not math.isfinite(value):
        raise ValueError("{} must be a finite number of seconds, got {}.".format(what, value))
    if value < 0:
        raise ValueError("{} must not be negative, got {}.".format(what, value))
    return float(value)


def _parse_words(raw_words: Any) -> List[WordTiming]:
    if raw_words is None:
        return []
    if not isinstance(raw_words, list):
        raise ValueError("'words' must be a list of word timing objects.")

    words: List[WordTiming] = []
    for i, entry in enumerate(raw_words):
        if not isinstance(entry, dict):
            raise ValueError("Word entry {} is not an object.".format(i))
        text = entry.get("word", entry.get("text"))
        if not isinstance(text, str):
            raise ValueError("Word entry {} has no 'word' text.".format(i))
        words.append(WordTiming(
            word=text.strip(),
            start=_as_seconds(entry.get("start"), "Word {} start".format(i)),
            end=_as_seconds(entry.get("end"), "Word {} end".format(i)),
        ))
    return words


def parse_transcription_payload(
    data: Dict[str, Any],
    source_filename: str = "",
    duration: Optional[float] = None,
) -> TranscriptionInput:
    """Build a TranscriptionInput from a provider payload dict.

    Args:
        data: Decoded JSON payload from the transcription provider.
        source_filename: Name of the analyzed recording.
        duration: Explicit duration overriding the payload's own.

    Returns:
        A validated TranscriptionInput.

    Raises:
        ValueError: If the payload is malformed or has no usable duration.
    """
    if not isinstance(data, dict):
        raise ValueError("Transcription payload must be a JSON object.")

    transcript = data.get("transcript", data.get("text", ""))
    if transcript is None:
        transcript = ""
    if not isinstance(transcript, str):
        raise ValueError("'transcript' must be a string.")

    words = _parse_words(data.get("words"))

    if duration is not None:
        total = _as_seconds(duration, "Duration")
    elif data.get("duration") is not None:
        total = _as_seconds(data["duration"], "Duration")
    elif words:
        total = words[-1].end
    else:
        raise ValueError(
            "Transcription payload has no 'duration' and no word timings "
            "to infer it from."
        )

    return TranscriptionInput(
        transcript=transcript,
        duration=total,
        words=words,
        source_filename=source_filename,
    )


def load_transcription_file(
    path: Path,
    duration: Optional[float] = None,
) -> TranscriptionInput:
    """Load a transcription from a ``.json`` payload or ``.txt`` transcript.

    RULES:
    - .json is parsed with parse_transcription_payload
    - .txt is the transcript itself and requires an explicit duration
    - Files are read as UTF-8

    Raises:
        ValueError: On unsupported extension, invalid JSON, or missing duration.
    """
    path = Path(path)
    ext = path.suffix.lower()
    content = path.read_text(encoding="utf-8")

    if ext == ".json":
        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise ValueError("Invalid JSON in {}: {}".format(path.name, exc)) from exc
        return parse_transcription_payload(data, source_filename=path.name, duration=duration)

    if ext == ".txt":
        if duration is None:
            raise ValueError(
                "A plain text transcript needs an explicit duration (--duration)."
            )
        return TranscriptionInput(
            transcript=content.strip(),
            duration=_as_seconds(duration, "Duration"),
            source_filename=path.name,
        )

    raise ValueError("Unsupported input file type '{}'.".format(ext))
