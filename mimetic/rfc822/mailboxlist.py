"""Comma-separated lists of RFC 822 mailboxes."""

from __future__ import annotations

from mimetic.fieldvalue import FieldValue
from mimetic.rfc822.mailbox import Mailbox

__all__ = ["MailboxList"]


class MailboxList(FieldValue, list):
    """A list of ``Mailbox`` objects parsed from a comma-separated field."""

    def __init__(self, text: str = "") -> None:
        list.__init__(self)
        self.set(text)

    def set(self, text: str) -> None:
        """Parse ``text`` and replace the list contents.

        Commas inside double quotes do not separate mailboxes.
        """
        self.clear()
        in_dquote = False
        blanks = 0
        beg = 0
        for p, ch in enumerate(text):
            if ch == '"':
                in_dquote = not in_dquote
            elif ch == "," and not in_dquote:
                self.append(Mailbox(text[beg:p]))
                beg = p + 1
                blanks = 0
            elif ch == " ":
                blanks += 1
        if len(text) - beg != blanks:
            self.append(Mailbox(text[beg:]))

    def __str__(self) -> str:
        return ", ".join(str(mailbox) for mailbox in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"