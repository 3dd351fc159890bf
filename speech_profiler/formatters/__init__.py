"""Report formatter registry, the pluggable format hub.

WHY: The CLI and the HTTP API need a single lookup to find the right
formatter by name. A central dict makes it trivial to add new formats:
create the formatter class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["json_report"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags and API paths)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from speech_profiler.formatters.json_report import JsonReportFormatter
from speech_profiler.formatters.summary import SummaryFormatter
from speech_profiler.formatters.timeline import TimelineFormatter

if TYPE_CHECKING:
    from speech_profiler.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "json_report": JsonReportFormatter,
    "summary": SummaryFormatter,
    "timeline": TimelineFormatter,
}
