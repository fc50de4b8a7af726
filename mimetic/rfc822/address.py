"""The RFC 822 address: either a mailbox or a group."""

from __future__ import annotations

from mimetic.fieldvalue import FieldValue
from mimetic.rfc822.group import Group
from mimetic.rfc822.mailbox import Mailbox

__all__ = ["Address"]


class Address(FieldValue):
    """An address that holds a ``Mailbox`` or, for group syntax, a ``Group``."""

    def __init__(self, text: str = "") -> None:
        self.mailbox = Mailbox()
        self.group = Group()
        self._is_group = False
        self.set(text)

    def set(self, text: str) -> None:
        """Parse ``text`` as a group if it has an unquoted ':' before any '<'."""
        self._is_group = False
        in_dquote = False
        for ch in text:
            if ch == '"':
                in_dquote = not in_dquote
            elif ch == ":" and not in_dquote:
                self._is_group = True
                self.group = Group(text)
                return
            elif ch == "<" and not in_dquote:
                break
        self.mailbox = Mailbox(text)

    def is_group(self) -> bool:
        """Return True if this address is a group."""
        return self._is_group

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Address):
            return NotImplemented
        if self._is_group:
            return list(self.group) == list(other.group)
        return self.mailbox == other.mailbox

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return str(self.group) if self._is_group else str(self.mailbox)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"