"""FastAPI application with analysis API routes and OpenAPI docs.

WHY: Upload pages, coaching services and automation tools need an HTTP
API to analyze a transcription and fetch reports without shelling out
to the CLI. FastAPI provides automatic OpenAPI documentation and
request validation.

HOW: A single FastAPI app exposes 4 endpoints grouped by tags. Analysis
is pure and fast, so every request is answered synchronously: the
request body goes through the transcription adapter, then the core
aggregator, then (for reports) the selected formatter.

RULES:
- All endpoints have OpenAPI descriptions on every parameter and response
- Error responses use a consistent ErrorResponse schema
- Adapter ValueErrors become 400 responses; unknown formats are 404
- Nothing is stored between requests
- Analysis handlers are plain def so FastAPI runs them in its threadpool,
  keeping the CPU-bound work off the event loop
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response

from speech_profiler import __version__
from speech_profiler.adapters.transcription_adapter import parse_transcription_payload
from speech_profiler.config import API_HOST, API_PORT
from speech_profiler.core.aggregator import analyze_speech
from speech_profiler.core.ir import SpeechProfile
from speech_profiler.core.scoring import filler_severity, pace_severity, score_rating
from speech_profiler.formatters import FORMATTERS
from speech_profiler.server.models import (
    AnalysisRequest,
    AnalysisResponse,
    ErrorResponse,
    FillerOccurrenceModel,
    FormatInfo,
    HealthResponse,
    SegmentModel,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Speech Profiler API",
    description=(
        "REST API for analyzing speech transcripts: filler-word detection "
        "with context, pace over time, and a composite clarity score. "
        "Submit a transcription and receive the analysis or a report file."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _analyze_request(request: AnalysisRequest) -> SpeechProfile:
    """Validate a request through the adapter and run the analysis.

    Raises:
        HTTPException: 400 when the payload cannot be analyzed.
    """
    try:
        payload = parse_transcription_payload(
            request.model_dump(),
            source_filename=request.source_filename,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    return analyze_speech(
        payload.transcript,
        payload.duration,
        payload.words,
        source_filename=payload.source_filename,
    )


def _profile_to_response(profile: SpeechProfile) -> AnalysisResponse:
    """Convert a SpeechProfile to an AnalysisResponse Pydantic model."""
    analysis = profile.analysis
    return AnalysisResponse(
        transcript=analysis.transcript,
        total_words=analysis.total_words,
        total_duration=analysis.total_duration,
        average_wpm=analysis.average_wpm,
        clarity_score=analysis.clarity_score,
        clarity_rating=score_rating(analysis.clarity_score),
        pace=pace_severity(analysis.average_wpm),
        filler_rate=profile.filler_rate,
        filler_severity=filler_severity(profile.filler_rate),
        segmentation_mode=analysis.segmentation_mode.value,
        segments=[
            SegmentModel(
                text=seg.text,
                timestamp=seg.timestamp,
                duration=seg.duration,
                word_count=seg.word_count,
                wpm=seg.wpm,
            )
            for seg in analysis.segments
        ],
        filler_words=[
            FillerOccurrenceModel(word=f.word, timestamp=f.timestamp, context=f.context)
            for f in profile.filler_words
        ],
    )


# ---------------------------------------------------------------------------
# Endpoints: Analyses
# ---------------------------------------------------------------------------


@app.post(
    "/analyses",
    response_model=AnalysisResponse,
    tags=["analyses"],
    summary="Analyze a transcription",
    description=(
        "Analyze a transcript, optionally with per-word timings. Returns "
        "filler occurrences, segments with pace, totals and the clarity score."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Payload cannot be analyzed"},
    },
)
def create_analysis(request: AnalysisRequest) -> AnalysisResponse:
    profile = _analyze_request(request)
    return _profile_to_response(profile)


@app.post(
    "/reports/{format_key}",
    tags=["analyses"],
    summary="Analyze a transcription and download a report",
    description=(
        "Analyze a transcription and return the report produced by the "
        "selected formatter as a file download."
    ),
    responses={
        400: {"model": ErrorResponse, "description": "Payload cannot be analyzed"},
        404: {"model": ErrorResponse, "description": "Unknown report format"},
    },
)
def create_report(format_key: str, request: AnalysisRequest) -> Response:
    if format_key not in FORMATTERS:
        raise HTTPException(
            status_code=404,
            detail="Unknown report format '{}'. Available formats: {}".format(
                format_key, ", ".join(sorted(FORMATTERS.keys())),
            ),
        )

    profile = _analyze_request(request)
    output = FORMATTERS[format_key]().format(profile)[0]

    stem = Path(request.source_filename).stem or "speech"
    filename = "{}{}".format(stem, output.suffix)
    logger.info("Generated %s report %s", format_key, filename)

    return Response(
        content=output.content,
        media_type=output.media_type,
        headers={"Content-Disposition": 'attachment; filename="{}"'.format(filename)},
    )


# ---------------------------------------------------------------------------
# Endpoints: Formats
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List available report formats",
    description=(
        "Returns all supported report formats with their identifiers, "
        "human-readable names, and file suffixes."
    ),
)
async def list_formats() -> List[FormatInfo]:
    result = []
    for key, formatter_cls in sorted(FORMATTERS.items()):
        formatter = formatter_cls()
        result.append(FormatInfo(key=key, name=formatter.name, suffix=formatter.suffix))
    return result


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness and readiness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the speech-profiler-api console script."""
    import uvicorn
    uvicorn.run(app, host=API_HOST, port=API_PORT)
