"""Three-level version numbers of the form maj.min[.build]."""

from __future__ import annotations

from mimetic.utils import str2int

__all__ = ["Version", "LIBRARY_VERSION_STRING", "LIBRARY_VERSION"]

LIBRARY_VERSION_STRING = "0.9.7"


class Version:
    """A version made of major, minor and build numbers."""

    def __init__(self, maj: int = 0, min: int = 0, build: int = 0) -> None:
        self.maj = maj
        self.min = min
        self.build = build

    @classmethod
    def parse(cls, text: str) -> "Version":
        """Build a version from text such as ``"1.2"`` or ``"1.2.3"``."""
        version = cls()
        version.set(text)
        return version

    def set(self, text: str) -> None:
        """Update the fields present in ``text``; missing ones are kept."""
        parts = text.split(".")
        fields = ("maj", "min", "build")
        for field, part in zip(fields, parts):
            setattr(self, field, str2int(part))

    def __str__(self) -> str:
        base = f"{self.maj}.{self.min}"
        return f"{base}.{self.build}" if self.build > 0 else base

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.maj}, {self.min}, {self.build})"

    def _key(self) -> tuple[int, int, int]:
        return (self.maj, self.min, self.build)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() != other._key()

    # Ordering tests each component on its own: the result is true as soon
    # as any single component satisfies the relation.
    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return any(a < b for a, b in zip(self._key(), other._key()))

    def __gt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return any(a > b for a, b in zip(self._key(), other._key()))

    def __le__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return any(a <= b for a, b in zip(self._key(), other._key()))

    def __ge__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return any(a >= b for a, b in zip(self._key(), other._key()))

    __hash__ = None  # type: ignore[assignment]


LIBRARY_VERSION = Version.parse(LIBRARY_VERSION_STRING)