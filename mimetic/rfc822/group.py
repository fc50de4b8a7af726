"""The RFC 822 group: a named list of mailboxes."""

from __future__ import annotations

from mimetic.fieldvalue import FieldValue
from mimetic.rfc822.mailbox import Mailbox
from mimetic.strutils import canonical, remove_external_blanks

__all__ = ["Group"]


def _find_outside_quotes(text: str, target: str) -> int:
    in_dquote = False
    for i, ch in enumerate(text):
        if ch == '"':
            in_dquote = not in_dquote
        elif ch == target and not in_dquote:
            return i
    return -1


class Group(FieldValue, list):
    """A group such as ``friends: a@example.com, b@example.com;``."""

    def __init__(self, text: str = "") -> None:
        list.__init__(self)
        self.name = ""
        self.text = ""
        self.set(text)

    def set(self, text: str) -> None:
        """Parse ``text`` and replace the name and the member list."""
        self.clear()
        self.name = ""
        self.text = text
        colon = _find_outside_quotes(text, ":")
        if colon < 0:
            return
        self.name = remove_external_blanks(text[:colon])

        in_dquote = False
        in_par = 0
        in_angle = 0
        start = colon + 1
        for p in range(colon + 1, len(text)):
            ch = text[p]
            if ch in ";,":
                if in_dquote or in_par or in_angle:
                    continue
                self.append(Mailbox(remove_external_blanks(text[start:p])))
                if ch == ";":
                    return
                start = p + 1
            elif ch == '"':
                in_dquote = not in_dquote
            elif ch == "<":
                in_angle += 1
            elif ch == ">":
                in_angle -= 1
            elif ch == "(":
                in_par += 1
            elif ch == ")":
                in_par -= 1
        # the closing ';' is missing: take the rest as the last member
        if start < len(text):
            self.append(Mailbox(remove_external_blanks(text[start:])))

    def canonical_name(self) -> str:
        """Group name with comments replaced by blanks."""
        return canonical(self.name)

    def __str__(self) -> str:
        members = ",".join(str(mbx) for mbx in self)
        return f"{self.name}:{members};"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"