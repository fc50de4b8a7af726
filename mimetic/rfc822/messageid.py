"""The Message-ID header field value."""

from __future__ import annotations

import itertools
import time
from typing import Optional

from mimetic import host
from mimetic.fieldvalue import FieldValue

__all__ = ["MessageId"]

_sequence = itertools.count(1)


class MessageId(FieldValue):
    """A message identifier; a new unique one is generated when none is given."""

    def __init__(self, value: Optional[str] = None, thread_id: int = 0) -> None:
        if value is None:
            value = self._generate(thread_id)
        self.value = value

    @staticmethod
    def _generate(thread_id: int) -> str:
        hostname = host.gethostname() or "unknown"
        return (
            f"m{int(time.time())}.{host.getpid()}."
            f"{thread_id}{next(_sequence)}@{hostname}"
        )

    def set(self, text: str) -> None:
        self.value = text

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"