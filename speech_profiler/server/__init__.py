"""HTTP API for the Speech Profiler.

WHY: Web front ends and automation need to analyze transcriptions over
HTTP. This package holds the FastAPI app and its Pydantic models.

RULES:
- The server is a thin shell over the core; no analysis logic lives here
"""
