"""A simple RFC 822 message: a header followed by a text body."""

from __future__ import annotations

from mimetic.rfc822.header import Rfc822Header

__all__ = ["Message", "Rfc822Body"]

CRLF = "\r\n"

Rfc822Body = str


class Message:
    """An RFC 822 message made of an ``Rfc822Header`` and a string body."""

    def __init__(self, body: Rfc822Body = "") -> None:
        self.header = Rfc822Header()
        self.body: Rfc822Body = body

    def __str__(self) -> str:
        # Fields are written one after the other as "name: value", then
        # the empty separator line and the body.
        fields = "".join(str(field) for field in self.header)
        return f"{fields}{CRLF}{self.body}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(fields={len(self.header)}, body={self.body!r})"