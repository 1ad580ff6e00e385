"""
Boyer-Moore Search Engine

Exact substring search using the Boyer-Moore bad-character and good-suffix
heuristics, with an optional per-alignment trace for visualization.

Main API:
    preprocess(pattern): build the last-occurrence and good-suffix tables
    scan(pattern, text, tables=None, trace=False): find all occurrences
    Matcher(pattern): compiled pattern reusable across many texts
    Scanner(pattern, text): resumable, one alignment per advance()

Example Usage:
    from boyer_moore import Matcher

    m = Matcher("AAA")
    m.search("AAAAA").matches     # (0, 1, 2)
"""

from .engine import Matcher
from .errors import InvalidPatternError
from .models import (
    GoodSuffixTable,
    LastOccurrenceTable,
    ScanResult,
    ShiftRule,
    StepRecord,
    Tables,
)
from .search import Scanner, find_all, scan
from .tables import build_good_suffix, build_last_occurrence, preprocess

__version__ = "1.0.0"
__all__ = [
    "Matcher",
    "Scanner",
    "InvalidPatternError",
    "GoodSuffixTable",
    "LastOccurrenceTable",
    "ScanResult",
    "ShiftRule",
    "StepRecord",
    "Tables",
    "build_good_suffix",
    "build_last_occurrence",
    "find_all",
    "preprocess",
    "scan",
]
