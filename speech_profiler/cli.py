"""Command-line interface for the Speech Profiler.

WHY: Users need a simple way to analyze a transcription from the
terminal. The CLI wires together the whole pipeline behind a single command:
input validation, payload adaptation, analysis, report output and saving.

HOW: Uses argparse to accept an input file (a provider ``.json`` payload
or a ``.txt`` transcript), an optional duration, output format selection
and an output directory. Status messages go to stderr; report files are
saved next to the input (or to --output-dir).

RULES:
- Positional argument: input transcription file path
- Validates file extension against SUPPORTED_INPUT_FORMATS before reading
- --duration overrides the payload's duration and is required for .txt
- --formats: comma-separated formatter keys (default: all registered)
- Output naming: {stem}{suffix}, numeric suffix for conflicts (-report-2.json)
- Status output goes to stderr (not stdout)
- Exit code 1 on any input or configuration error; argparse usage errors
  (bad option values such as an unknown --log-level) exit with 2
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from speech_profiler.adapters.transcription_adapter import load_transcription_file
from speech_profiler.config import LOG_LEVEL, SUPPORTED_INPUT_FORMATS
from speech_profiler.core.aggregator import analyze_speech
from speech_profiler.core.scoring import round_half_up, score_rating
from speech_profiler.formatters import FORMATTERS
from speech_profiler.formatters.base import FormatterOutput

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(stem: str, suffix: str, output_dir: Path) -> Path:
    """Pick a report path in output_dir that no earlier run has written.

    Speakers re-analyze the same talk to compare sessions, so an existing
    talk-report.json is kept and the new report becomes
    talk-report-2.json, then -3, and so on.
    """
    label, dot, extension = suffix.rpartition(".")
    if not dot:
        label, extension = suffix, ""
    else:
        extension = dot + extension

    candidate = output_dir / (stem + suffix)
    counter = 2
    while candidate.exists():
        candidate = output_dir / "{}{}-{}{}".format(stem, label, counter, extension)
        counter += 1
    return candidate


def _save_output(output: FormatterOutput, stem: str, output_dir: Path) -> Path:
    """Write one report as UTF-8 text (or raw bytes) and return its path."""
    path = _resolve_output_path(stem, output.suffix, output_dir)
    if isinstance(output.content, bytes):
        path.write_bytes(output.content)
    else:
        path.write_text(output.content, encoding="utf-8")
    return path


def _select_formats(formats: Optional[str]) -> List[str]:
    if not formats:
        return list(FORMATTERS.keys())

    format_keys = [f.strip() for f in formats.split(",") if f.strip()]
    for key in format_keys:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            _fail("Unknown format '{}'. Available formats: {}".format(key, available))
    return format_keys


def _run_pipeline(args: argparse.Namespace) -> List[Path]:
    """Execute the full analysis pipeline.

    RULES:
    - Validate the input file and output directory before analysis
    - Status messages to stderr at each step
    - Save each formatter's output files with conflict avoidance

    Returns:
        Paths of the saved report files.
    """
    input_path = Path(args.input_file).resolve()

    if not input_path.is_file():
        _fail("File not found: {}".format(input_path))

    ext = input_path.suffix.lower()
    if ext not in SUPPORTED_INPUT_FORMATS:
        _fail("Unsupported file type '{}'. Supported formats: {}".format(
            ext, ", ".join(sorted(SUPPORTED_INPUT_FORMATS)),
        ))

    output_dir = Path(args.output_dir).resolve() if args.output_dir else input_path.parent
    if not output_dir.is_dir():
        _fail("Output directory does not exist: {}".format(output_dir))

    format_keys = _select_formats(args.formats)

    _status("Loading {}...".format(input_path.name))
    try:
        payload = load_transcription_file(input_path, duration=args.duration)
    except ValueError as e:
        _fail(str(e))
    _status("  {} timed words, {:.1f}s".format(len(payload.words), payload.duration))

    _status("Analyzing...")
    profile = analyze_speech(
        payload.transcript,
        payload.duration,
        payload.words,
        source_filename=payload.source_filename,
    )
    analysis = profile.analysis
    _status("  {} words, {} segments ({} mode)".format(
        analysis.total_words,
        len(analysis.segments),
        analysis.segmentation_mode.value,
    ))
    _status("  {} filler words, {} WPM, clarity {} ({})".format(
        profile.filler_count,
        round_half_up(analysis.average_wpm),
        analysis.clarity_score,
        score_rating(analysis.clarity_score),
    ))

    _status("Formatting output...")
    stem = input_path.stem
    saved_files: List[Path] = []
    for key in format_keys:
        formatter = FORMATTERS[key]()
        for output in formatter.format(profile):
            saved_path = _save_output(output, stem, output_dir)
            saved_files.append(saved_path)
            _status("  Saved: {}".format(saved_path.name))

    _status("")
    _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))
    return saved_files


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without running the pipeline.
    """
    parser = argparse.ArgumentParser(
        prog="speech_profiler",
        description="Analyze a speech transcript for filler words, pacing "
                    "and clarity, and write performance reports.",
    )

    parser.add_argument(
        "input_file",
        help="Transcription to analyze: a provider .json payload or a .txt transcript.",
    )

    parser.add_argument(
        "--duration",
        type=float,
        default=None,
        help="Recording length in seconds. Required for .txt input; "
             "overrides the payload duration for .json input.",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of report formats. "
             "Available: {}. Default: all.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save report files (default: same as input file).",
    )

    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level for diagnostic output (default: %(default)s).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    # the env-provided default bypasses argparse choices
    if args.log_level not in LOG_LEVELS:
        _fail("Invalid log level '{}'. Choose from: {}".format(
            args.log_level, ", ".join(LOG_LEVELS),
        ))
    logging.basicConfig(
        level=args.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    _run_pipeline(args)


if __name__ == "__main__":
    main()
