"""Case-insensitive collation shared by the store, sorters and locator.

Folding is ASCII-only: ``A``-``Z`` map to ``a``-``z`` and every other code
point is left untouched.  Folded strings are ordered by code point, which for
ASCII input matches a byte-wise ``strcmp``.
"""

from __future__ import annotations

import string

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def fold(text: str) -> str:
    """Return *text* with ASCII upper-case letters lowered."""
    return text.translate(_ASCII_LOWER)


def same(left: str, right: str) -> bool:
    """Return True when *left* and *right* are equal after folding."""
    return fold(left) == fold(right)
