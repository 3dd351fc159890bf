"""Abstract base formatter and output container.

WHY: Every report format consumes the same SpeechProfile but produces
different file content. This base class enforces a consistent interface
so the CLI and the HTTP API can work with any formatter generically.

HOW: BaseFormatter is an ABC with three requirements: a ``name``
property, a ``suffix`` property and a ``format()`` method.
FormatterOutput is a plain dataclass that bundles a file suffix with its
content and MIME type.

RULES:
- Subclasses MUST implement ``name``, ``suffix`` and ``format()``
- ``format()`` returns a list; every current formatter returns one item
- ``suffix`` starts with a hyphen, e.g. ``"-report.json"``
- The caller is responsible for prepending the source filename stem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from speech_profiler.core.ir import SpeechProfile


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``"-report.json"`` → ``"keynote-report.json"``.
        content: The file content as a string (JSON, plain text)
                 or bytes (future binary formats).
        media_type: MIME type for the content, e.g. ``"application/json"``.
    """

    suffix: str
    content: str | bytes
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all report formatters.

    To add a new report format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement name, suffix and format()
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'JSON Report'."""

    @property
    @abstractmethod
    def suffix(self) -> str:
        """File suffix of the primary output, e.g. '-report.json'."""

    @abstractmethod
    def format(self, profile: SpeechProfile) -> list[FormatterOutput]:
        """Convert a SpeechProfile into one or more output files.

        Args:
            profile: The complete analysis result, including segments,
                     totals, clarity score and filler occurrences.

        Returns:
            List of FormatterOutput objects, each containing a file suffix,
            content string/bytes, and MIME type.
        """
