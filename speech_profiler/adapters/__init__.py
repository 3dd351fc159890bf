"""Adapters between external shapes and the analysis IR.

WHY: Transcription providers and files on disk do not speak the IR.
Adapters convert their payloads into validated analysis input so the
core never has to know where a transcript came from.

RULES:
- Adapters validate and convert; they never analyze
- Malformed input raises ValueError with a human-readable message
"""

from speech_profiler.adapters.transcription_adapter import (
    TranscriptionInput,
    load_transcription_file,
    parse_transcription_payload,
)

__all__ = [
    "TranscriptionInput",
    "load_transcription_file",
    "parse_transcription_payload",
]
