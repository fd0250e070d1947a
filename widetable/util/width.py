"""Display width of text in a monospace terminal.

East-Asian wide and fullwidth code points occupy two columns, everything
else occupies one.
"""

import unicodedata

WIDE = 2
NARROW = 1
WIDTH_MAPPING = {'F': WIDE, 'W': WIDE, 'H': NARROW, 'Na': NARROW, 'N': NARROW, 'A': NARROW}


def char_width(c: str) -> int:
    return WIDTH_MAPPING[unicodedata.east_asian_width(c)]


def width(s: str) -> int:
    """Returns the number of terminal columns ``s`` occupies."""
    return sum(char_width(c) for c in s)


def truncate(s: str, limit: int) -> str:
    """Returns the longest prefix of ``s`` whose width does not exceed ``limit``.

    A code point that does not fit in the remaining budget is dropped whole,
    so a wide glyph straddling the limit leaves the result one column short.
    """
    if width(s) <= limit:
        return s
    total = 0
    for i, c in enumerate(s):
        w = char_width(c)
        if total + w > limit:
            return s[:i]
        total += w
    return s
