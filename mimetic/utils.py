"""General helpers: numbers as text, file names and substring search."""

from __future__ import annotations

import os
import re
from typing import Union

__all__ = [
    "PATH_SEPARATOR",
    "extract_filename",
    "int2str",
    "str2int",
    "int2hex",
    "string_is_blank",
    "find_bm",
]

PATH_SEPARATOR = os.sep

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def extract_filename(fqn: str) -> str:
    """Return the last path component of ``fqn``."""
    _, sep, tail = fqn.rpartition(PATH_SEPARATOR)
    return tail if sep else fqn


def int2str(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def str2int(s: str) -> int:
    """Parse the leading integer of ``s``; return 0 when there is none."""
    match = _LEADING_INT.match(s)
    return int(match.group(1)) if match else 0


def int2hex(n: int) -> str:
    """Return the lowercase hexadecimal form of ``n`` as a 32-bit unsigned value."""
    return format(n & 0xFFFFFFFF, "x")


def string_is_blank(s: str) -> bool:
    """Return True if ``s`` holds only spaces and tabs."""
    return all(c in " \t" for c in s)


Sequence = Union[str, bytes]


def find_bm(data: Sequence, word: Sequence) -> int:
    """Find ``word`` in ``data`` with a Boyer-Moore scan.

    Returns the index of the first character of the match, or -1.
    """
    n = len(data)
    b_len = len(word)
    shift = {c: b_len - i - 1 for i, c in enumerate(word)}

    i = t = b_len - 1
    while t >= 0:
        if i >= n:
            return -1
        while data[i] != word[t]:
            i += max(b_len - t, shift.get(data[i], b_len))
            if i >= n:
                return -1
            t = b_len - 1
        i -= 1
        t -= 1
    return i + 1