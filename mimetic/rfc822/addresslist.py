"""Comma-separated lists of RFC 822 addresses."""

from __future__ import annotations

from mimetic.fieldvalue import FieldValue
from mimetic.rfc822.address import Address

__all__ = ["AddressList"]


class AddressList(FieldValue, list):
    """A list of ``Address`` objects parsed from a comma-separated field."""

    def __init__(self, text: str = "") -> None:
        list.__init__(self)
        self.set(text)

    def set(self, text: str) -> None:
        """Parse ``text`` and replace the list contents.

        Commas inside double quotes or inside a group (between ':' and ';')
        do not separate addresses; ``\\"`` does not end a quoted string.
        """
        self.clear()
        in_group = False
        in_dquote = False
        blanks = 0
        beg = 0
        chars = iter(enumerate(text))
        for p, ch in chars:
            if ch == '"':
                in_dquote = not in_dquote
            elif ch == ":" and not in_dquote:
                in_group = True
            elif ch == ";" and not in_dquote:
                in_group = False
            elif ch == "," and not in_dquote:
                if in_group:
                    continue
                self.append(Address(text[beg:p]))
                beg = p + 1
                blanks = 0
            elif ch == " ":
                blanks += 1
            elif ch == "\\" and text[p + 1 : p + 2] == '"':
                next(chars, None)
        if len(text) - beg != blanks:
            self.append(Address(text[beg:]))

    def __str__(self) -> str:
        return ", ".join(str(address) for address in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"