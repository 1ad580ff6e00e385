from __future__ import annotations
import argparse, json, logging, sys
from typing import Optional

from boyer_moore import config as CFG
from boyer_moore.engine import Matcher
from boyer_moore.errors import InvalidPatternError
from .terminal import (
    colorize, play_step, render_shift, render_summary, render_tables,
    supports_color, wait_for_enter,
)

log = logging.getLogger(__name__)


def _prompt(label: str) -> Optional[str]:
    try:
        return input(label).strip()
    except EOFError:
        print()
        return None


def _prompt_matcher(alphabet: Optional[str], color: bool) -> Optional[Matcher]:
    """Ask for a pattern until one compiles (empty input is re-prompted)."""
    while True:
        pattern = _prompt("Enter pattern : ")
        if pattern is None:
            return None
        try:
            return Matcher(pattern, alphabet=alphabet)
        except InvalidPatternError as exc:
            print(colorize(f"error: {exc}", CFG.COLOR_MISMATCH, color))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Boyer-Moore step-by-step visualizer")
    parser.add_argument("--text", default=None, help="Text to search (prompted when omitted)")
    parser.add_argument("--pattern", default=None, help="Pattern to find (prompted when omitted)")
    parser.add_argument("--alphabet", default=CFG.DEFAULT_ALPHABET,
                        help="Only accept pattern characters from this set")
    parser.add_argument("--delay", type=float, default=CFG.DEFAULT_DELAY,
                        help="Seconds between character comparisons")
    parser.add_argument("--no-pause", action="store_true", help="Do not wait for Enter between alignments")
    parser.add_argument("--tables", action="store_true", help="Print the skip tables before scanning")
    parser.add_argument("--json", action="store_true", help="Emit the full trace as JSON (no animation)")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.verbose or CFG.VERBOSE:
        logging.basicConfig(level=logging.INFO)

    color = supports_color() and not args.json

    text = args.text if args.text is not None else _prompt("Enter text    : ")
    if text is None:
        return 1

    if args.pattern is not None:
        try:
            matcher = Matcher(args.pattern, alphabet=args.alphabet)
        except InvalidPatternError as exc:
            parser.error(str(exc))
    else:
        matcher = _prompt_matcher(args.alphabet, color)
        if matcher is None:
            return 1

    if args.json:
        result = matcher.search(text, trace=True)
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return 0

    if args.tables:
        print("\n".join(render_tables(matcher, color)))
    print()

    pattern = matcher.pattern
    sc = matcher.scanner(text)
    for step in sc:
        play_step(step, text, pattern, out=sys.stdout, delay=args.delay, color=color)
        lines = render_shift(step, total=sc.comparisons)
        # the final alignment has nowhere left to shift
        print("\n".join(lines if not sc.done else lines[:2]))
        if not sc.done and not args.no_pause:
            wait_for_enter()
        print()

    log.info("Visualization finished after %d alignments", sc.alignments)
    print("\n".join(render_summary(sc.to_result())))
    return 0


if __name__ == "__main__":
    sys.exit(main())
