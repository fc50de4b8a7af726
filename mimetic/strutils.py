"""String helpers for RFC 822 text: case-insensitive strings and canonical forms."""

from __future__ import annotations

__all__ = [
    "NULL_STRING",
    "IString",
    "canonical",
    "dquoted",
    "parenthed",
    "remove_dquote",
    "remove_external_blanks",
]

NULL_STRING = ""


class IString(str):
    """A string whose equality comparisons ignore letter case."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, str):
            return NotImplemented
        return len(self) == len(other) and self.upper() == other.upper()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(self.upper())


def dquoted(s: str) -> str:
    """Return ``s`` enclosed in double quotes."""
    return f'"{s}"'


def parenthed(s: str) -> str:
    """Return ``s`` enclosed in parentheses."""
    return f"({s})"


def remove_dquote(s: str) -> str:
    """Strip one pair of surrounding double quotes, if present."""
    if len(s) < 2:
        return s
    if s[0] == '"' and s[-1] == '"':
        return s[1:-1]
    return s


def remove_external_blanks(s: str) -> str:
    """Remove leading and trailing spaces and tabs."""
    return s.strip(" \t")


def canonical(s: str, no_ws: bool = False) -> str:
    """Return the canonical form of ``s``: comments removed.

    Comments are replaced by a single space unless ``no_ws`` is true, in
    which case every blank outside quotes, comments and angle brackets is
    removed as well.
    """
    text = s.strip(" ")
    if not text:
        return text

    chars = list(text)
    in_dquote = False
    has_brack = False
    in_par = 0
    par_last = 0
    for t in range(len(chars) - 1, -1, -1):
        c = chars[t]
        if c == '"':
            in_dquote = not in_dquote
        elif in_dquote:
            continue
        elif c == "<":
            pass
        elif c == ">":
            has_brack = True
        elif c == ")":
            in_par += 1
            if in_par == 1:
                par_last = t
        elif c == "(":
            in_par -= 1
            if in_par == 0:
                replacement = [] if no_ws else [" "]
                chars[t : par_last + 1] = replacement
        elif no_ws and c == " " and not in_par and not has_brack:
            del chars[t]
    return "".join(chars)