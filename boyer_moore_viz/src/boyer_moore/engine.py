# boyer_moore/engine.py
from __future__ import annotations

import logging
from typing import Hashable, Optional, Sequence

from . import config as CFG
from .errors import InvalidPatternError
from .models import ScanResult, Tables
from .search import Scanner, scan
from .tables import preprocess

log = logging.getLogger(__name__)


class Matcher:
    """
    A compiled pattern: the pattern plus its two skip tables.

    Preprocessing happens once in __init__; the same Matcher can then search
    any number of texts (and be shared between threads, since nothing it
    holds is mutated).

    Public API (used by CLI/Flask):
      * search(text, trace):  full scan -> ScanResult
      * scanner(text):        resumable Scanner for step-by-step driving
      * bad_char_rule(offset, char), good_suffix_rule(offset), match_skip():
        the individual shift rules, for inspection and teaching
    """

    # ------------- lifecycle -------------

    def __init__(self, pattern: Sequence[Hashable], alphabet: Optional[str] = CFG.DEFAULT_ALPHABET) -> None:
        if not pattern:
            raise InvalidPatternError("Pattern must not be empty")
        if alphabet is not None and not isinstance(pattern, str):
            raise TypeError("an alphabet can only restrict str patterns")
        self.alphabet = frozenset(alphabet) if alphabet is not None else None
        if self.alphabet is not None:
            for ch in pattern:
                self._check_alphabet(ch)

        self.pattern = pattern
        self.tables: Tables = preprocess(pattern)
        log.info("Compiled pattern of length %d (%d distinct characters)",
                 len(pattern), len(self.tables.last_occurrence))

    def __len__(self) -> int:
        return len(self.pattern)

    def __repr__(self) -> str:
        return f"Matcher({self.pattern!r})"

    # ------------- search -------------

    def search(self, text: Sequence[Hashable], *, trace: bool = False) -> ScanResult:
        result = scan(self.pattern, text, self.tables, trace=trace)
        log.info("Searched %d characters: %d match(es), %d alignments, %d comparisons",
                 result.text_length, len(result.matches), result.alignments, result.comparisons)
        return result

    def scanner(self, text: Sequence[Hashable]) -> Scanner:
        return Scanner(self.pattern, text, self.tables)

    # ------------- individual rules -------------

    def bad_char_rule(self, offset: int, char: Hashable) -> int:
        """
        Shift given by the bad-character rule when the text character `char`
        mismatches pattern[offset]: distance to the rightmost occurrence of
        `char` left of offset, or offset + 1 when there is none.
        """
        self._check_offset(offset)
        self._check_alphabet(char)
        return offset - self.tables.last_occurrence.last_before(char, offset)

    def good_suffix_rule(self, offset: int) -> int:
        """Shift given by the good-suffix table for a mismatch at pattern[offset]."""
        self._check_offset(offset)
        return self.tables.good_suffix.shift[offset + 1]

    def match_skip(self) -> int:
        """Shift applied after a full match (keeps overlapping matches reachable)."""
        return self.tables.good_suffix.shift[0]

    # ------------- internals -------------

    def _check_offset(self, offset: int) -> None:
        if not 0 <= offset < len(self.pattern):
            raise IndexError(f"Invalid offset {offset}")

    def _check_alphabet(self, ch: Hashable) -> None:
        if self.alphabet is not None and ch not in self.alphabet:
            raise InvalidPatternError(f"{ch!r} not found in alphabet")
