from __future__ import annotations
from typing import Dict, Hashable, List, Sequence, Tuple

from .errors import InvalidPatternError
from .models import GoodSuffixTable, LastOccurrenceTable, Tables


def build_last_occurrence(pattern: Sequence[Hashable]) -> LastOccurrenceTable:
    """
    Scan the pattern left to right once; later occurrences extend each
    character's position list, so the last entry is always the rightmost.
    """
    seen: Dict[Hashable, List[int]] = {}
    for i, ch in enumerate(pattern):
        seen.setdefault(ch, []).append(i)
    return LastOccurrenceTable(positions={ch: tuple(occ) for ch, occ in seen.items()})


def _border_positions(pattern: Sequence[Hashable]) -> Tuple[List[int], List[int]]:
    """
    /* ~~~ pass 1: widest border of every suffix, scanning right to left ~~~ */
    bpos[i] is where the widest border of pattern[i:] starts. While the
    border cannot be extended by pattern[i-1], the mismatch gives the
    good-suffix shift for the suffix that starts at j.
    """
    m = len(pattern)
    shift = [0] * (m + 1)
    bpos = [0] * (m + 1)

    i, j = m, m + 1
    bpos[i] = j
    while i > 0:
        while j <= m and pattern[i - 1] != pattern[j - 1]:
            if shift[j] == 0:
                shift[j] = j - i
            j = bpos[j]
        i -= 1
        j -= 1
        bpos[i] = j
    return shift, bpos


def _fill_from_pattern_border(shift: List[int], bpos: List[int]) -> None:
    # /* ~~~ pass 2: entries left unset fall back to the pattern's own border ~~~ */
    m = len(shift) - 1
    j = bpos[0]
    for i in range(m + 1):
        if shift[i] == 0:
            shift[i] = j
        if i == j:
            j = bpos[j]


def build_good_suffix(pattern: Sequence[Hashable]) -> GoodSuffixTable:
    if not pattern:
        raise InvalidPatternError("Pattern must not be empty")
    shift, bpos = _border_positions(pattern)
    _fill_from_pattern_border(shift, bpos)
    return GoodSuffixTable(shift=tuple(shift), border_position=tuple(bpos))


def preprocess(pattern: Sequence[Hashable]) -> Tables:
    """Build both skip tables. Deterministic: same pattern, same tables."""
    if not pattern:
        raise InvalidPatternError("Pattern must not be empty")
    return Tables(
        last_occurrence=build_last_occurrence(pattern),
        good_suffix=build_good_suffix(pattern),
    )
