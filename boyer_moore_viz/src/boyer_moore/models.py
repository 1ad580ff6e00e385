# boyer_moore/models.py
"""
Data models for the Boyer-Moore engine.

This module defines the small, immutable containers passed between the
preprocessing step, the scan loop and the presentation layer:

- LastOccurrenceTable: bad-character heuristic (sparse, per pattern character).
- GoodSuffixTable: good-suffix heuristic (shift + border position arrays).
- Tables: the pair produced by preprocess().
- StepRecord: one scan alignment, as replayed by the visualizer.
- ScanResult: match positions plus counters and the optional trace.

These classes hold no search logic beyond trivial lookups, so the
preprocessing and scanning code in tables.py and search.py stays the single
source of truth for the algorithm.
"""

from __future__ import annotations
import bisect
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Hashable, NamedTuple, Optional, Tuple

from .config import NOT_PRESENT


@dataclass(frozen=True)
class LastOccurrenceTable:
    """
    Sparse bad-character table.

    Attributes
    ----------
    positions : Dict[Hashable, Tuple[int, ...]]
        For each distinct pattern character, every index where it occurs,
        ascending. The last entry is the rightmost occurrence.
    """
    positions: Dict[Hashable, Tuple[int, ...]]

    def last(self, ch: Hashable) -> int:
        """Rightmost index of ch in the pattern, or NOT_PRESENT."""
        occ = self.positions.get(ch)
        return occ[-1] if occ else NOT_PRESENT

    def last_before(self, ch: Hashable, index: int) -> int:
        """Rightmost index of ch strictly left of index, or NOT_PRESENT."""
        occ = self.positions.get(ch)
        if not occ:
            return NOT_PRESENT
        k = bisect.bisect_left(occ, index)
        return occ[k - 1] if k > 0 else NOT_PRESENT

    def as_dict(self) -> Dict[Hashable, int]:
        return {ch: occ[-1] for ch, occ in self.positions.items()}

    def __contains__(self, ch: object) -> bool:
        return ch in self.positions

    def __len__(self) -> int:
        return len(self.positions)


@dataclass(frozen=True)
class GoodSuffixTable:
    """
    Good-suffix table for a pattern of length m.

    shift[j] is the shift applied when the mismatch happens at pattern index
    j - 1, i.e. after m - j trailing characters matched; shift[0] is the skip
    after a full match. border_position[i] is the start of the widest border
    of the suffix pattern[i:] (m + 1 when it has none).
    """
    shift: Tuple[int, ...]
    border_position: Tuple[int, ...]

    @property
    def pattern_length(self) -> int:
        return len(self.shift) - 1

    @property
    def border_width(self) -> int:
        """Width of the widest proper border of the whole pattern."""
        return self.pattern_length - self.border_position[0]


class Tables(NamedTuple):
    last_occurrence: LastOccurrenceTable
    good_suffix: GoodSuffixTable


class ShiftRule(str, Enum):
    BAD_CHARACTER = "bad_character"
    GOOD_SUFFIX = "good_suffix"
    BOTH = "both"
    MATCH = "match"


@dataclass(frozen=True)
class StepRecord:
    """
    One alignment of the pattern against the text.

    Attributes
    ----------
    alignment : int
        1-based alignment counter within the scan.
    window_start : int
        Text index where the pattern is aligned.
    comparisons : int
        Characters compared during this alignment (right to left).
    matched : int
        Trailing pattern characters that matched before the mismatch
        (equals the pattern length on a full match).
    mismatch_index : Optional[int]
        Pattern index of the mismatch; None on a full match.
    text_char : Optional[Hashable]
        Text character at the mismatch; None on a full match.
    is_match : bool
        True when the whole pattern matched at window_start.
    bad_character_shift : int
        Candidate shift from the bad-character rule (0 on a full match).
    good_suffix_shift : int
        Candidate shift from the good-suffix table.
    shift : int
        Shift actually applied (the larger candidate, never below 1).
    rule : ShiftRule
        Which heuristic produced the applied shift.
    """
    alignment: int
    window_start: int
    comparisons: int
    matched: int
    mismatch_index: Optional[int]
    text_char: Optional[Hashable]
    is_match: bool
    bad_character_shift: int
    good_suffix_shift: int
    shift: int
    rule: ShiftRule

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["rule"] = self.rule.value
        return d


@dataclass(frozen=True)
class ScanResult:
    matches: Tuple[int, ...]
    alignments: int
    comparisons: int
    text_length: int
    pattern_length: int
    steps: Optional[Tuple[StepRecord, ...]] = None

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "matches": list(self.matches),
            "alignments": self.alignments,
            "comparisons": self.comparisons,
            "text_length": self.text_length,
            "pattern_length": self.pattern_length,
        }
        if self.steps is not None:
            d["steps"] = [s.to_dict() for s in self.steps]
        return d
