"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation. Pydantic
models enforce field types at runtime and generate JSON Schema that
appears in the /docs UI.

HOW: One request model mirrors the transcription provider payload; the
response models mirror the core IR with snake_case fields.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Response models never expose internal implementation details
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class WordTimingModel(BaseModel):
    """One recognized word with its start and end time."""

    word: str = Field(description="Token text as recognized.")
    start: float = Field(
        ge=0,
        allow_inf_nan=False,
        description="Start time in seconds from recording start.",
    )
    end: float = Field(
        ge=0,
        allow_inf_nan=False,
        description="End time in seconds from recording start.",
    )


class AnalysisRequest(BaseModel):
    """A transcription to analyze.

    RULES:
    - duration may be omitted when words are given (inferred from the last word)
    - words may be omitted; segmentation then falls back to proportional mode
    """

    transcript: str = Field(default="", description="Raw transcript text.")
    duration: Optional[float] = Field(
        default=None,
        ge=0,
        allow_inf_nan=False,
        description="Recording length in seconds.",
    )
    words: Optional[List[WordTimingModel]] = Field(
        default=None,
        description="Optional per-word timings aligned with the transcript tokens.",
    )
    source_filename: str = Field(
        default="",
        description="Name of the analyzed recording, used for report file naming.",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "transcript": "Um so I think we should um go",
                "duration": 10.0,
                "words": None,
                "source_filename": "standup.wav",
            }
        ]
    }}


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class FillerOccurrenceModel(BaseModel):
    word: str = Field(description="Matched filler phrase, lowercased.")
    timestamp: float = Field(description="Seconds from recording start.")
    context: str = Field(description="Surrounding words with the match wrapped in **.")


class SegmentModel(BaseModel):
    text: str = Field(description="Words in this window, in original casing.")
    timestamp: float = Field(description="Window start in seconds.")
    duration: float = Field(description="Window length in seconds.")
    word_count: int = Field(description="Number of words in the window.")
    wpm: float = Field(description="Words per minute within the window.")


class AnalysisResponse(BaseModel):
    """The analysis of one transcription.

    RULES:
    - average_wpm is total words over total duration, not a segment mean
    - filler_rate is a percentage of total words
    """

    transcript: str = Field(description="The analyzed transcript.")
    total_words: int = Field(description="Whitespace-delimited word count.")
    total_duration: float = Field(description="Recording length in seconds.")
    average_wpm: float = Field(description="Global words per minute.")
    clarity_score: int = Field(description="Composite clarity score, 0-100.")
    clarity_rating: str = Field(description="'Excellent', 'Good' or 'Needs Work'.")
    pace: str = Field(description="Pace band: 'slow', 'optimal' or 'fast'.")
    filler_rate: float = Field(description="Filler occurrences as a percentage of words.")
    filler_severity: str = Field(description="Filler band: 'low', 'medium' or 'high'.")
    segmentation_mode: str = Field(description="'timing' or 'proportional'.")
    segments: List[SegmentModel] = Field(description="Segments ordered by timestamp.")
    filler_words: List[FillerOccurrenceModel] = Field(
        description="Filler occurrences ordered by timestamp.",
    )


class FormatInfo(BaseModel):
    """Description of an available report format."""

    key: str = Field(description="Format identifier used in API requests.")
    name: str = Field(description="Human-readable format name.")
    suffix: str = Field(description="File suffix produced (e.g. '-report.json').")


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
