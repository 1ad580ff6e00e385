# visualizer/terminal.py
# ANSI rendering of Boyer-Moore tables and scan steps.
# - Frames are built as plain lists of strings (easy to test).
# - play_step() animates one alignment right-to-left with cursor movement.

from __future__ import annotations
import os
import sys
import time
from typing import Callable, Iterator, List, Optional, TextIO

from boyer_moore import config as CFG
from boyer_moore.engine import Matcher
from boyer_moore.models import ScanResult, StepRecord

CSI = "\033["
CURSOR_UP_3 = f"{CSI}3F"
ERASE_PREV_LINE = f"{CSI}F{CSI}K"


# -------------------- small helpers --------------------

def supports_color(stream: Optional[TextIO] = None) -> bool:
    stream = stream or sys.stdout
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty()) and os.environ.get("NO_COLOR", "") == ""


def colorize(text: str, code: str, enabled: bool = True) -> str:
    if not enabled or not text:
        return text
    return f"{CSI}{code}m{text}{CSI}0m"


# -------------------- frames --------------------

def render_frame(text: str, pattern: str, step: StepRecord, upto: int, color: bool = False) -> List[str]:
    """
    Three lines for the comparison sweep of one alignment, after comparing
    pattern[upto:] against the text: text row, pattern row, arrow row.
    The mismatching pair (if upto is the mismatch index) is red, the rest of
    the compared suffix green.
    """
    s, m = step.window_start, len(pattern)
    green = lambda x: colorize(x, CFG.COLOR_MATCH, color)
    red = lambda x: colorize(x, CFG.COLOR_MISMATCH, color)
    pad = " " * s

    if step.is_match or upto != step.mismatch_index:
        text_row = text[:s + upto] + green(pattern[upto:]) + text[s + m:]
        pattern_row = pad + pattern[:upto] + green(pattern[upto:])
    else:
        text_row = (text[:s + upto] + red(text[s + upto]) + green(pattern[upto + 1:])
                    + text[s + m:])
        pattern_row = pad + pattern[:upto] + red(pattern[upto]) + green(pattern[upto + 1:])

    arrow = CFG.ARROW_HEAD + CFG.ARROW_BODY * (m - upto - 1)
    arrow_row = " " * (s + upto) + colorize(arrow, CFG.COLOR_ARROW, color)
    return [text_row, pattern_row, arrow_row]


def iter_frames(text: str, pattern: str, step: StepRecord, color: bool = False) -> Iterator[List[str]]:
    """One frame per character comparison, from the last pattern index leftwards."""
    stop = 0 if step.is_match else step.mismatch_index
    for i in range(len(pattern) - 1, stop - 1, -1):
        yield render_frame(text, pattern, step, i, color)


def play_step(
    step: StepRecord,
    text: str,
    pattern: str,
    out: Optional[TextIO] = None,
    delay: float = CFG.DEFAULT_DELAY,
    color: Optional[bool] = None,
) -> None:
    out = out or sys.stdout
    if color is None:
        color = supports_color(out)
    frames = list(iter_frames(text, pattern, step, color))
    for k, frame in enumerate(frames):
        out.write("\n".join(frame) + "\n")
        out.flush()
        if delay > 0:
            time.sleep(delay)
        if k < len(frames) - 1:
            # redraw the next comparison over this one
            out.write(CURSOR_UP_3)
    out.write("\n")


# -------------------- text blocks --------------------

def render_shift(step: StepRecord, total: Optional[int] = None) -> List[str]:
    lines = [f"Comparisons (this alignment): {step.comparisons}"]
    if total is not None:
        lines.append(f"Comparisons: {total}")
    if step.bad_character_shift > 0:
        lines.append(f"Bad character shift: {step.bad_character_shift}")
    if step.good_suffix_shift > 0:
        lines.append(f"Good suffix shift: {step.good_suffix_shift}")
    lines.append(f"Applied shift: {step.shift} ({step.rule.value.replace('_', ' ')})")
    return lines


def render_tables(matcher: Matcher, color: bool = False) -> List[str]:
    last = matcher.tables.last_occurrence.as_dict()
    gs = matcher.tables.good_suffix
    head = lambda x: colorize(x, CFG.COLOR_HEAD, color)

    lines = [head("Last occurrence (bad character)")]
    for ch in sorted(last, key=last.get):
        lines.append(f"  {ch!r:<6} {last[ch]}")
    lines.append(colorize("  (any other character: -1)", CFG.COLOR_DIM, color))

    lines.append(head("Good suffix"))
    width = max(len(str(v)) for v in gs.shift + gs.border_position + (len(gs.shift),))
    cell = lambda v: f"{v:>{width}}"
    lines.append("  j      " + " ".join(cell(j) for j in range(len(gs.shift))))
    lines.append("  shift  " + " ".join(cell(v) for v in gs.shift))
    lines.append("  border " + " ".join(cell(v) for v in gs.border_position))
    return lines


def render_summary(result: ScanResult) -> List[str]:
    return [
        f"Text length: {result.text_length}",
        f"Pattern length: {result.pattern_length}",
        f"Occurrences: {list(result.matches)}",
        f"Alignments: {result.alignments}",
        f"Comparisons: {result.comparisons}",
    ]


def wait_for_enter(out: Optional[TextIO] = None, read: Optional[Callable[[], str]] = None) -> None:
    out = out or sys.stdout
    read = read or input
    out.write("Press Enter to continue ...\r")
    out.flush()
    try:
        read()
    except EOFError:
        pass
    out.write(ERASE_PREV_LINE)
    out.flush()
