"""Configuration constants, rating thresholds, and .env loading.

WHY: Centralizes every number the analysis depends on so it is easy to
find and reason about. Window length, fallback cadence, ideal pace and
score weights are plain data, not buried in logic, so both humans
and coding agents can review them confidently.

HOW: python-dotenv loads the .env file on import. Analysis constants are
module-level literals. Only surface settings (log level, API bind
address) read from the environment.

RULES:
- Analysis constants are fixed; same inputs always give same outputs
- Only SPEECH_PROFILER_* surface settings can be overridden via env
- Thresholds used by ratings are inclusive/exclusive exactly as documented
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Segmentation
# ---------------------------------------------------------------------------

SEGMENT_WINDOW_S = 10.0
"""Length of one timing-based window, in seconds."""

PROPORTIONAL_SEGMENT_COUNT = 20
"""Target number of chunks when no word timings are available."""

# ---------------------------------------------------------------------------
# Filler detection
# ---------------------------------------------------------------------------

FALLBACK_SECONDS_PER_WORD = 0.5
"""Estimated cadence used for filler timestamps without word timings."""

CONTEXT_RADIUS = 5
"""Tokens shown on each side of a filler match in its context string."""

HIGHLIGHT_MARKER = "**"

# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

IDEAL_WPM = 150.0
FILLER_PENALTY_PER_PERCENT = 10.0
FILLER_WEIGHT = 0.6
PACE_WEIGHT = 0.4

# Pace bands (words per minute)
PACE_SLOW_BELOW = 130.0
PACE_FAST_ABOVE = 170.0

# Filler rate bands (percent of total words)
FILLER_RATE_MEDIUM_FROM = 2.0
FILLER_RATE_HIGH_FROM = 5.0

# Clarity score bands
SCORE_EXCELLENT_FROM = 80
SCORE_GOOD_FROM = 60

# ---------------------------------------------------------------------------
# Surface settings (CLI / HTTP API)
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("SPEECH_PROFILER_LOG_LEVEL", "WARNING").upper()
API_HOST = os.getenv("SPEECH_PROFILER_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("SPEECH_PROFILER_API_PORT", "8000"))

SUPPORTED_INPUT_FORMATS: set[str] = {".json", ".txt"}
"""Input file extensions accepted by the CLI (lowercase, with dot)."""
