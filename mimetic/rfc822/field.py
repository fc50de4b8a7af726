"""RFC 822 header fields: a case-insensitive name and a value."""

from __future__ import annotations

import copy
from typing import Optional, Union

from mimetic.fieldvalue import FieldValue, StringFieldValue
from mimetic.strutils import IString
from mimetic.utils import string_is_blank

__all__ = ["Field"]

CRLF = "\r\n"


class Field:
    """A header field such as ``Subject: hello``.

    ``field_value`` holds the underlying ``FieldValue`` object (or None);
    the ``value`` property gives and takes its text form.
    """

    def __init__(
        self, name: str = "", value: Union[str, FieldValue, None] = None
    ) -> None:
        self._name = IString(name)
        if isinstance(value, str):
            value = StringFieldValue(value)
        self.field_value: Optional[FieldValue] = value

    @classmethod
    def from_line(cls, line: str) -> "Field":
        """Parse ``name: text``; a line without a colon gives an empty field."""
        name, colon, _ = line.partition(":")
        if not colon:
            return cls()
        start = len(name) + 1
        while start < len(line) - 1 and line[start] == " ":
            start += 1
        field = cls(name)
        field.value = line[start:]
        return field

    @property
    def name(self) -> IString:
        """The field name; comparisons with it ignore case."""
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        self._name = IString(name)
        self.field_value = None

    @property
    def value(self) -> str:
        """The field value as text."""
        if self.field_value is None:
            return ""
        return str(self.field_value)

    @value.setter
    def value(self, text: str) -> None:
        if self.field_value is None:
            self.field_value = StringFieldValue(text)
        else:
            self.field_value.set(text)

    def format(self, fold: int = 0) -> str:
        """Return ``name: value``, folded at blanks to about ``fold`` columns.

        With ``fold`` of 0 no folding is done. Blanks inside double quotes
        are never used as fold points.
        """
        text = f"{self.name}: {self.value}"
        if not fold:
            return text
        out = []
        skip = len(self.name) + 2
        while len(text) > fold:
            prev = ""
            in_quote = False
            sp = 0
            for i in range(skip, len(text)):
                ch = text[i]
                if ch == '"' and prev != "\\":
                    in_quote = not in_quote
                if not in_quote and ch in " \t":
                    sp = i
                if i >= fold and sp:
                    out.append(text[:sp])
                    text = text[sp + 1 :]
                    if text and not string_is_blank(text):
                        out.append(CRLF + "\t")
                    break
                prev = ch
            if sp == 0:
                break
            skip = 0
        out.append(text)
        return "".join(out)

    def __str__(self) -> str:
        return self.format(0)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._name)!r}, {self.value!r})"

    def __copy__(self) -> "Field":
        value = self.field_value.clone() if self.field_value is not None else None
        return Field(str(self._name), value)

    def __deepcopy__(self, memo: dict) -> "Field":
        return copy.copy(self)