"""Name collation functions.

``c_locale_compare`` reproduces ``LC_COLLATE=C`` ordering::

    . -> 0-9 -> A-Z -> _ -> a-z

``locale_compare`` is the human-friendly alternative: case and accents are
ignored and digit runs compare as numbers, so ``file2`` sorts before
``file10``.
"""

from __future__ import annotations

import re
import unicodedata
from functools import lru_cache

_DIGITS_RE = re.compile(r"(\d+)")


def c_locale_compare(a: str, b: str) -> int:
    """Compare by code point; a string sorts before any longer string it prefixes."""
    for char_a, char_b in zip(a, b):
        if char_a != char_b:
            return ord(char_a) - ord(char_b)
    return len(a) - len(b)


def _fold(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return stripped.casefold()


def _numeric_key(digits: str) -> tuple[int, str]:
    """Order digit runs by value without converting them to ``int``.

    With leading zeros stripped, a shorter run is the smaller number and runs
    of equal length compare lexically.
    """
    significant = digits.lstrip("0")
    return (len(significant), significant)


@lru_cache(maxsize=4096)
def locale_sort_key(text: str) -> tuple[str | tuple[int, str], ...]:
    """Return a natural-sort key for ``text``.

    ``re.split`` with a capture group alternates text and digit runs, so every
    even slot holds a ``str`` and every odd slot a numeric key. Keys built here
    are therefore always comparable with each other.
    """
    parts = _DIGITS_RE.split(_fold(text))
    return tuple(_numeric_key(part) if idx % 2 else part for idx, part in enumerate(parts))


def locale_compare(a: str, b: str) -> int:
    """Case-insensitive, numeric-aware comparison returning -1, 0 or 1."""
    key_a = locale_sort_key(a)
    key_b = locale_sort_key(b)
    return (key_a > key_b) - (key_a < key_b)


__all__ = ["c_locale_compare", "locale_compare", "locale_sort_key"]
