from __future__ import annotations
import os
from typing import Optional

# Progress logging (set BMSEARCH_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("BMSEARCH_VERBOSE") == "1"

# Sentinel stored for characters that never occur in the pattern
NOT_PRESENT: int = -1

# Restrict patterns to these characters; None accepts any character
DEFAULT_ALPHABET: Optional[str] = None

# Seconds to sleep between character comparisons during visualization
DEFAULT_DELAY: float = 0.25

# /* ~~~ glyphs for the comparison arrow drawn under the pattern ~~~ */
ARROW_HEAD: str = "◀"
ARROW_BODY: str = "\U0001f89c"

# SGR codes used by the terminal renderer
COLOR_MATCH: str = "1;32"
COLOR_MISMATCH: str = "1;31"
COLOR_ARROW: str = "1;38;2;127;127;127"
COLOR_DIM: str = "2;37"
COLOR_HEAD: str = "1;37"

# Web API safety cap (characters of text accepted per request)
MAX_TEXT_LENGTH: int = 100_000
