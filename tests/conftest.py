"""Shared test fixtures for the speech_profiler test suite.

WHY: Several test modules need the same hand-checked sample talk: a
short timed transcript whose fillers, segments, pace and score have
been worked out by hand. Centralizing it here keeps every module on the
same authoritative numbers.

HOW: Pytest fixtures provide the timed sample as WordTiming objects, as
a provider payload dict, and as an analyzed SpeechProfile, plus the
untimed "um so I think we should um go" example.

RULES:
- Timed sample: 13 words over 15 s, fillers "um" (1.2 s) and "you know" (4.5 s)
- Expected: segments [0, 10) with 11 words and [10, 15) with 2 words,
  average 52 WPM, clarity score 1
- The untimed sample has fillers at token indices 0, 1 and 6
"""

from typing import Any, Dict, List

import pytest

from speech_profiler.core.aggregator import analyze_speech
from speech_profiler.core.ir import WordTiming


# ---------------------------------------------------------------------------
# Hand-checked timed sample
# ---------------------------------------------------------------------------

TIMED_WORDS: List[Dict[str, Any]] = [
    {"word": "Hello",     "start": 0.0,  "end": 0.4},
    {"word": "everyone,", "start": 0.5,  "end": 1.0},
    {"word": "um,",       "start": 1.2,  "end": 1.5},
    {"word": "today",     "start": 2.0,  "end": 2.4},
    {"word": "I",         "start": 2.5,  "end": 2.6},
    {"word": "want",      "start": 2.7,  "end": 2.9},
    {"word": "to",        "start": 3.0,  "end": 3.1},
    {"word": "talk",      "start": 3.2,  "end": 3.5},
    {"word": "about",     "start": 3.6,  "end": 3.9},
    {"word": "you",       "start": 4.5,  "end": 4.7},
    {"word": "know",      "start": 4.8,  "end": 5.0},
    {"word": "our",       "start": 11.0, "end": 11.2},
    {"word": "roadmap.",  "start": 11.3, "end": 11.9},
]

TIMED_TRANSCRIPT = " ".join(w["word"] for w in TIMED_WORDS)
TIMED_DURATION = 15.0

UNTIMED_TRANSCRIPT = "um so I think we should um go"


@pytest.fixture
def timed_words():
    """The timed sample as WordTiming objects."""
    return [WordTiming(**w) for w in TIMED_WORDS]


@pytest.fixture
def timed_payload():
    """The timed sample as a Whisper-style verbose_json payload."""
    return {
        "text": TIMED_TRANSCRIPT,
        "duration": TIMED_DURATION,
        "words": [dict(w) for w in TIMED_WORDS],
    }


@pytest.fixture
def timed_profile(timed_words):
    """The timed sample analyzed end to end."""
    return analyze_speech(
        TIMED_TRANSCRIPT,
        TIMED_DURATION,
        timed_words,
        source_filename="talk.json",
    )


@pytest.fixture
def empty_profile():
    """An empty transcript analyzed over ten seconds."""
    return analyze_speech("", 10.0, source_filename="silence.json")
