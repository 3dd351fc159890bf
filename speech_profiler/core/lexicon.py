"""The filler-word lexicon.

WHY: Every filler occurrence in every report traces back to this list.
Keeping it as one immutable, process-wide table means the matcher has a
single source of truth and nothing can mutate it between analyses.

HOW: FILLER_PHRASES keeps the lexicon in its canonical order. The two
derived tuples split it by token length because the matcher scans
multi-word phrases and single words in separate passes.

RULES:
- Entries are lowercase; matching is case-insensitive
- Multi-word entries use a single space between tokens
- Tuples, not lists: the lexicon has no runtime mutation path
"""

from __future__ import annotations

from typing import Tuple

FILLER_PHRASES: Tuple[str, ...] = (
    "um",
    "uh",
    "like",
    "you know",
    "so",
    "basically",
    "actually",
    "literally",
    "kind of",
    "sort of",
    "i mean",
    "right",
)

MULTI_WORD_FILLERS: Tuple[str, ...] = tuple(p for p in FILLER_PHRASES if " " in p)

SINGLE_WORD_FILLERS: frozenset = frozenset(p for p in FILLER_PHRASES if " " not in p)
