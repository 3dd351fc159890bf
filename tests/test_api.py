"""Tests for the FastAPI HTTP API.

WHY: The API is the integration point for web front ends and
automation. Status codes, response shapes and download headers are its
contract with those clients.

HOW: Uses the FastAPI TestClient (synchronous) against the app. The
analysis is pure, so nothing needs to be patched.

RULES:
- All tests use the FastAPI TestClient
- Request bodies mirror the transcription provider payload
"""

from __future__ import annotations

import inspect
import json

import pytest
from fastapi.testclient import TestClient

from speech_profiler import __version__
from speech_profiler.server.app import app, create_analysis, create_report

from conftest import TIMED_DURATION, TIMED_TRANSCRIPT, TIMED_WORDS, UNTIMED_TRANSCRIPT


@pytest.fixture
def client():
    return TestClient(app)


def _timed_body():
    return {
        "transcript": TIMED_TRANSCRIPT,
        "duration": TIMED_DURATION,
        "words": [dict(w) for w in TIMED_WORDS],
        "source_filename": "talk.wav",
    }


# ---------------------------------------------------------------------------
# POST /analyses
# ---------------------------------------------------------------------------


class TestCreateAnalysis:

    def test_untimed_transcript(self, client):
        resp = client.post("/analyses", json={"transcript": UNTIMED_TRANSCRIPT, "duration": 10})
        assert resp.status_code == 200
        body = resp.json()
        assert body["total_words"] == 8
        assert body["segmentation_mode"] == "proportional"
        assert [f["word"] for f in body["filler_words"]] == ["um", "so", "um"]
        assert body["clarity_score"] == 0
        assert body["clarity_rating"] == "Needs Work"

    def test_timed_transcript(self, client):
        resp = client.post("/analyses", json=_timed_body())
        assert resp.status_code == 200
        body = resp.json()
        assert body["segmentation_mode"] == "timing"
        assert [s["word_count"] for s in body["segments"]] == [11, 2]
        assert body["average_wpm"] == pytest.approx(52.0)
        assert body["pace"] == "slow"
        assert body["filler_severity"] == "high"
        assert body["filler_words"][1] == {
            "word": "you know",
            "timestamp": 4.5,
            "context": "I want to talk about **you know** our roadmap.",
        }

    def test_duration_inferred_from_words(self, client):
        body = _timed_body()
        del body["duration"]
        resp = client.post("/analyses", json=body)
        assert resp.status_code == 200
        assert resp.json()["total_duration"] == pytest.approx(11.9)

    def test_missing_duration_and_words(self, client):
        resp = client.post("/analyses", json={"transcript": "hello"})
        assert resp.status_code == 400
        assert "duration" in resp.json()["detail"]

    def test_negative_duration_rejected(self, client):
        resp = client.post("/analyses", json={"transcript": "hello", "duration": -5})
        assert resp.status_code == 422

    def test_overflowing_duration_rejected(self, client):
        # 1e309 decodes to inf
        resp = client.post(
            "/analyses",
            content='{"transcript": "um so I go", "duration": 1e309}',
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 422

    def test_non_finite_word_time_rejected(self, client):
        resp = client.post(
            "/analyses",
            content=(
                '{"transcript": "hi", "duration": 5, '
                '"words": [{"word": "hi", "start": 0, "end": 1e309}]}'
            ),
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 422

    def test_handlers_run_in_threadpool(self):
        # plain def handlers keep the analysis off the event loop
        assert not inspect.iscoroutinefunction(create_analysis)
        assert not inspect.iscoroutinefunction(create_report)

    def test_empty_transcript(self, client):
        resp = client.post("/analyses", json={"transcript": "", "duration": 10})
        assert resp.status_code == 200
        body = resp.json()
        assert body["total_words"] == 0
        assert body["segments"] == []
        assert body["filler_rate"] == 0.0


# ---------------------------------------------------------------------------
# POST /reports/{format_key}
# ---------------------------------------------------------------------------


class TestCreateReport:

    def test_json_report_download(self, client):
        resp = client.post("/reports/json_report", json=_timed_body())
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("application/json")
        assert resp.headers["content-disposition"] == 'attachment; filename="talk-report.json"'
        report = json.loads(resp.content)
        assert report["summary"]["totalWords"] == 13

    def test_text_report(self, client):
        resp = client.post("/reports/timeline", json=_timed_body())
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/plain")
        assert resp.text.startswith("[0:00] 66 WPM")

    def test_default_filename_stem(self, client):
        resp = client.post("/reports/summary", json={"transcript": "hi", "duration": 1})
        assert resp.headers["content-disposition"] == 'attachment; filename="speech-summary.txt"'

    def test_unknown_format(self, client):
        resp = client.post("/reports/pdf", json=_timed_body())
        assert resp.status_code == 404
        assert "Unknown report format" in resp.json()["detail"]

    def test_invalid_payload(self, client):
        resp = client.post("/reports/summary", json={"transcript": "hi"})
        assert resp.status_code == 400


# ---------------------------------------------------------------------------
# GET /formats and /health
# ---------------------------------------------------------------------------


class TestFormats:

    def test_lists_all_formats(self, client):
        resp = client.get("/formats")
        assert resp.status_code == 200
        assert resp.json() == [
            {"key": "json_report", "name": "JSON Report", "suffix": "-report.json"},
            {"key": "summary", "name": "Text Summary", "suffix": "-summary.txt"},
            {"key": "timeline", "name": "Timeline", "suffix": "-timeline.txt"},
        ]


class TestHealth:

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "version": __version__}
