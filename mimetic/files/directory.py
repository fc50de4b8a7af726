"""Directory listing and creation helpers."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Iterator

__all__ = ["EntryType", "DirEntry", "Directory"]


class EntryType(enum.Enum):
    """Kind of a directory entry."""

    UNKNOWN = 0
    REGULAR_FILE = 1
    DIRECTORY = 2
    LINK = 3


@dataclass(frozen=True)
class DirEntry:
    """A name found in a directory and its kind."""

    name: str
    type: EntryType = EntryType.UNKNOWN


def _entry_type(entry: os.DirEntry) -> EntryType:
    try:
        if entry.is_symlink():
            return EntryType.LINK
        if entry.is_dir(follow_symlinks=False):
            return EntryType.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return EntryType.REGULAR_FILE
    except OSError:
        pass
    return EntryType.UNKNOWN


class Directory:
    """A directory whose entries, including ``.`` and ``..``, can be iterated."""

    def __init__(self, path: str) -> None:
        self.path = path

    def __iter__(self) -> Iterator[DirEntry]:
        try:
            scanner = os.scandir(self.path)
        except OSError:
            return
        with scanner:
            yield DirEntry(".", EntryType.DIRECTORY)
            yield DirEntry("..", EntryType.DIRECTORY)
            for entry in scanner:
                yield DirEntry(entry.name, _entry_type(entry))

    def exists(self) -> bool:
        """Return True if the path is an existing directory."""
        return os.path.isdir(self.path)

    @staticmethod
    def create(path: str) -> bool:
        """Create directory ``path``; False if it exists or creation fails."""
        if os.path.isdir(path):
            return False
        try:
            os.mkdir(path, 0o755)
        except OSError:
            return False
        return True

    @staticmethod
    def remove(path: str) -> bool:
        """Remove the empty directory ``path``; False if missing or not removable."""
        if not os.path.isdir(path):
            return False
        try:
            os.rmdir(path)
        except OSError:
            return False
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r})"