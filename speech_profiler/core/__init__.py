"""Core analysis and intermediate representation modules.

WHY: The core package contains the stable heart of the analyzer: the
IR dataclasses and the pure analysis functions. Everything else (CLI,
HTTP API, formatters) is a consumer of these.

HOW: ir.py defines the data structures, lexicon.py the filler table,
fillers.py detection, segmenter.py windows and pace, scoring.py the
clarity score, aggregator.py the ordered composition of the three.

RULES:
- IR dataclasses are the contract; change with care
- Core functions are pure: no I/O, no network, no mutable shared state
- Presentation concerns (grouping, rounding for display) stay in formatters
"""
