"""The Mime-Version header field value."""

from __future__ import annotations

from typing import Optional, Union

from mimetic.fieldvalue import FieldValue
from mimetic.version import Version

__all__ = ["MimeVersion"]


class MimeVersion(Version, FieldValue):
    """Value of the ``Mime-Version`` field, such as ``1.0``."""

    LABEL = "Mime-Version"

    def __init__(
        self, value: Union[str, int, None] = None, min: Optional[int] = None
    ) -> None:
        if isinstance(value, str):
            super().__init__()
            self.set(value)
        elif value is None:
            super().__init__(0, 0 if min is None else min)
        else:
            super().__init__(value, 0 if min is None else min)

    def set(self, text: str) -> None:
        Version.set(self, text)

    def __str__(self) -> str:
        return Version.__str__(self)