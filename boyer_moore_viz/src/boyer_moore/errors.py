from __future__ import annotations


class InvalidPatternError(ValueError):
    """Raised when a pattern cannot be preprocessed (empty, or outside the alphabet)."""
