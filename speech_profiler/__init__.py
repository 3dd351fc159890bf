"""Speech Profiler: transcript analysis for speaking performance.

WHY: A speech transcript on its own says nothing about how well it was
delivered. Coaching and report layers need hard numbers: which filler
words were used and where, how the speaking pace moved over time, and
one composite clarity score. This package turns a transcript (with or
without per-word timings) into those numbers.

HOW: Three-stage pipeline: adapt (provider payload into typed input),
analyze (segmentation, filler detection, scoring into the core IR),
format (pluggable report formatters). Each stage is independently testable.

RULES:
- The core never decodes audio, calls the network, or persists anything
- All formatters consume the same SpeechProfile
- Adding a new report format = one new formatter module, no core changes
"""

__version__ = "0.1.0"
