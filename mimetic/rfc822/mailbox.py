"""The RFC 822 mailbox: an e-mail address with optional label and route."""

from __future__ import annotations

from mimetic.fieldvalue import FieldValue
from mimetic.strutils import IString, canonical

__all__ = ["Mailbox"]


class Mailbox(FieldValue):
    """An address such as ``Label <@route:local@domain>``.

    The attributes hold the raw text; the ``canonical_*`` methods return
    the forms with comments (and, except for the label, blanks) removed.
    """

    def __init__(self, text: str = "") -> None:
        self.mailbox = ""
        self.domain = ""
        self.label = ""
        self.sourceroute = ""
        self.set(text)

    def set(self, text: str) -> None:
        """Parse ``text`` and replace every part of the mailbox."""
        self.mailbox = ""
        self.domain = ""
        self.label = ""
        self.sourceroute = ""
        if not text:
            return
        last = len(text.rstrip(" ")) - 1
        if last > 0 and text[last] == ">":
            self._parse_angle_form(text, last)
        else:
            self._parse_plain_form(text)

    def _parse_angle_form(self, text: str, last: int) -> None:
        end = last - 1
        in_comment = False
        for x in range(len(text) - 1, -1, -1):
            ch = text[x]
            if in_comment and ch == "(":
                in_comment = False
            elif ch == ")":
                in_comment = True
            elif ch == "@" and not self.domain:
                self.domain = text[x + 1 : end + 1]
                end = x - 1
            elif ch == ":":
                self.mailbox = text[x + 1 : end + 1]
                end = x - 1
            elif ch == "<":
                if text[end + 1] == ":":
                    self.sourceroute = text[x + 1 : end + 1]
                else:
                    self.mailbox = text[x + 1 : end + 1]
                label = text[:x]
                self.label = label.rstrip(" ") or label[:1]
                return

    def _parse_plain_form(self, text: str) -> None:
        in_dquote = False
        in_comment = False
        for x in range(len(text) - 1, -1, -1):
            ch = text[x]
            if in_comment and ch == "(":
                in_comment = False
            elif ch == ")":
                in_comment = True
            elif ch == "@" and not in_dquote and not in_comment:
                self.domain = text[x + 1 :]
                self.mailbox = text[:x]
                return
            elif ch == '"':
                in_dquote = not in_dquote

    def canonical_mailbox(self) -> str:
        """Local part without comments and blanks."""
        return canonical(self.mailbox, True)

    def canonical_domain(self) -> str:
        """Domain without comments and blanks."""
        return canonical(self.domain, True)

    def canonical_label(self) -> str:
        """Label with comments replaced by blanks."""
        return canonical(self.label)

    def canonical_sourceroute(self) -> str:
        """Source route without comments and blanks."""
        return canonical(self.sourceroute, True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mailbox):
            return NotImplemented
        return (
            self.canonical_mailbox() == other.canonical_mailbox()
            and IString(self.canonical_domain()) == other.canonical_domain()
            and IString(self.canonical_sourceroute())
            == other.canonical_sourceroute()
        )

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        address = f"{self.mailbox}@{self.domain}"
        if not self.label:
            return address
        route = f"{self.sourceroute}:" if self.sourceroute else ""
        return f"{self.label} <{route}{address}>"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"