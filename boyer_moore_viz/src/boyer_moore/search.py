from __future__ import annotations
import logging
from typing import Hashable, Iterator, List, Optional, Sequence, Tuple

from .errors import InvalidPatternError
from .models import ScanResult, ShiftRule, StepRecord, Tables
from .tables import preprocess

log = logging.getLogger(__name__)


def _check_units(pattern: Sequence[Hashable], text: Sequence[Hashable]) -> None:
    if isinstance(pattern, str) != isinstance(text, str):
        raise TypeError(
            "pattern and text must use the same unit: "
            f"got {type(pattern).__name__} and {type(text).__name__}"
        )


def _pick_rule(bad: int, good: int) -> ShiftRule:
    if bad == good:
        return ShiftRule.BOTH
    return ShiftRule.BAD_CHARACTER if bad > good else ShiftRule.GOOD_SUFFIX


class Scanner:
    """
    Resumable Boyer-Moore scan.

    Holds the window start and counters as explicit state so a caller can
    drive the search one alignment at a time (e.g. pausing on user input)
    instead of running it to completion:

        sc = Scanner("abc", "xxabcabc")
        while (step := sc.advance()) is not None:
            render(step)

    The pattern, text and tables are only read, never modified.
    """

    def __init__(
        self,
        pattern: Sequence[Hashable],
        text: Sequence[Hashable],
        tables: Optional[Tables] = None,
    ) -> None:
        _check_units(pattern, text)
        if not pattern:
            raise InvalidPatternError("Pattern must not be empty")
        if tables is None:
            tables = preprocess(pattern)
        elif tables.good_suffix.pattern_length != len(pattern):
            raise ValueError("tables were built for a pattern of a different length")

        self.pattern = pattern
        self.text = text
        self.tables = tables
        self._m = len(pattern)
        self._n = len(text)
        self._s = 0
        self._alignments = 0
        self._comparisons = 0
        self._matches: List[int] = []

    # ------------- state -------------

    @property
    def done(self) -> bool:
        return self._s > self._n - self._m

    @property
    def window_start(self) -> int:
        return self._s

    @property
    def matches(self) -> List[int]:
        return list(self._matches)

    @property
    def alignments(self) -> int:
        return self._alignments

    @property
    def comparisons(self) -> int:
        return self._comparisons

    # ------------- stepping -------------

    def advance(self) -> Optional[StepRecord]:
        """Run one alignment, apply its shift and return the record (None when finished)."""
        if self.done:
            return None

        p, t, s, m = self.pattern, self.text, self._s, self._m
        shift_table = self.tables.good_suffix.shift

        # right-to-left; j counts the characters still unmatched
        j = m
        compared = 0
        while j > 0:
            compared += 1
            if p[j - 1] != t[s + j - 1]:
                break
            j -= 1

        self._alignments += 1
        self._comparisons += compared

        if j == 0:
            self._matches.append(s)
            good = shift_table[0]
            step = StepRecord(
                alignment=self._alignments,
                window_start=s,
                comparisons=compared,
                matched=m,
                mismatch_index=None,
                text_char=None,
                is_match=True,
                bad_character_shift=0,
                good_suffix_shift=good,
                shift=max(good, 1),
                rule=ShiftRule.MATCH,
            )
        else:
            c = t[s + j - 1]
            # absent to the left of the mismatch -> last_before is -1 -> shift j
            bad = j - 1 - self.tables.last_occurrence.last_before(c, j - 1)
            good = shift_table[j]
            step = StepRecord(
                alignment=self._alignments,
                window_start=s,
                comparisons=compared,
                matched=m - j,
                mismatch_index=j - 1,
                text_char=c,
                is_match=False,
                bad_character_shift=bad,
                good_suffix_shift=good,
                shift=max(bad, good, 1),
                rule=_pick_rule(bad, good),
            )

        log.debug("alignment %d at %d: %s, shift %d (%s)",
                  step.alignment, s, "match" if step.is_match else "mismatch",
                  step.shift, step.rule.value)
        self._s = s + step.shift
        return step

    def to_result(self, steps: Optional[Tuple[StepRecord, ...]] = None) -> ScanResult:
        """Snapshot of the matches and counters gathered so far."""
        return ScanResult(
            matches=tuple(self._matches),
            alignments=self._alignments,
            comparisons=self._comparisons,
            text_length=self._n,
            pattern_length=self._m,
            steps=steps,
        )

    def __iter__(self) -> Iterator[StepRecord]:
        while True:
            step = self.advance()
            if step is None:
                return
            yield step


def scan(
    pattern: Sequence[Hashable],
    text: Sequence[Hashable],
    tables: Optional[Tables] = None,
    trace: bool = False,
) -> ScanResult:
    """
    Find every occurrence of pattern in text, overlapping ones included.

    Tables are computed with preprocess() when not supplied. A pattern longer
    than the text (or an empty text) simply yields no matches. With trace=True
    the result carries one StepRecord per alignment.
    """
    sc = Scanner(pattern, text, tables)
    steps: Optional[Tuple[StepRecord, ...]] = None
    if trace:
        steps = tuple(sc)
    else:
        for _ in sc:
            pass
    log.debug("scan finished: matches=%d alignments=%d comparisons=%d",
              len(sc.matches), sc.alignments, sc.comparisons)
    return sc.to_result(steps)


def find_all(pattern: Sequence[Hashable], text: Sequence[Hashable]) -> List[int]:
    """Convenience: match positions only."""
    return list(scan(pattern, text).matches)
