"""Header field values: the abstract base and the unstructured string value."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod

__all__ = ["FieldValue", "StringFieldValue"]


class FieldValue(ABC):
    """Base of every header field value.

    ``type_checked`` is False for values that hold raw text and must be
    reparsed into a structured type before use.
    """

    type_checked = True

    @abstractmethod
    def set(self, text: str) -> None:
        """Replace the value by parsing ``text``."""

    @abstractmethod
    def __str__(self) -> str:
        """Return the value as header text."""

    def clone(self) -> "FieldValue":
        """Return an independent copy of this value."""
        return copy.deepcopy(self)


class StringFieldValue(FieldValue):
    """An unstructured field value holding plain text."""

    type_checked = False

    def __init__(self, value: str = "") -> None:
        self.value = value

    def set(self, text: str) -> None:
        self.value = text

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"