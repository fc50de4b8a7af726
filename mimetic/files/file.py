"""Read-only files: a plain descriptor-backed file and a memory-mapped one."""

from __future__ import annotations

import mmap
import os
import stat
from typing import Iterator, Optional, Union

__all__ = ["File", "MappedFile"]

_READ_FLAGS = os.O_RDONLY | getattr(os, "O_BINARY", 0)
_BUFSIZE = mmap.PAGESIZE


def _stat(fqn: str) -> Optional[os.stat_result]:
    try:
        return os.stat(fqn)
    except OSError:
        return None


class File:
    """A read-only file; iterating yields its bytes as integers."""

    def __init__(self, fqn: Optional[str] = None) -> None:
        self._fd = -1
        self.fqn = fqn or ""
        if fqn is not None and _stat(fqn) is not None:
            self.open(fqn)

    def open(self, fqn: str) -> None:
        """Open ``fqn`` for reading; check the result with ``bool()``."""
        self.close()
        self.fqn = fqn
        try:
            self._fd = os.open(fqn, _READ_FLAGS)
        except OSError:
            self._fd = -1

    def close(self) -> None:
        """Close the file; closing a closed file does nothing."""
        if self._fd >= 0:
            try:
                os.close(self._fd)
            finally:
                self._fd = -1

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes; an empty result means end of file."""
        if self._fd < 0:
            raise ValueError("file is not open")
        return os.read(self._fd, size)

    def __iter__(self) -> Iterator[int]:
        if self._fd < 0:
            return
        while chunk := self.read(_BUFSIZE):
            yield from chunk

    def __bool__(self) -> bool:
        return self._fd >= 0

    def __enter__(self) -> "File":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __del__(self) -> None:
        try:
            self.close()
        except OSError:
            pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.fqn!r}, open={bool(self)})"


class MappedFile:
    """A read-only regular file mapped into memory."""

    def __init__(self, fqn: Optional[str] = None) -> None:
        self._fd = -1
        self._map: Optional[mmap.mmap] = None
        self.fqn = fqn or ""
        if fqn is not None and _stat(fqn) is not None:
            self.open(fqn)

    def open(self, fqn: str) -> bool:
        """Open and map ``fqn``; return True if the mapping succeeded."""
        self.close()
        self.fqn = fqn
        st = _stat(fqn)
        if st is None or not stat.S_ISREG(st.st_mode):
            return False
        try:
            self._fd = os.open(fqn, _READ_FLAGS)
        except OSError:
            self._fd = -1
            return False
        try:
            self._map = mmap.mmap(self._fd, st.st_size, access=mmap.ACCESS_READ)
        except (OSError, ValueError):
            self._map = None
            return False
        return True

    def close(self) -> None:
        """Unmap and close the file."""
        if self._map is not None:
            self._map.close()
            self._map = None
        if self._fd >= 0:
            try:
                os.close(self._fd)
            finally:
                self._fd = -1

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes through the file descriptor."""
        if self._fd < 0:
            raise ValueError("file is not open")
        return os.read(self._fd, size)

    def data(self) -> Union[mmap.mmap, bytes]:
        """Return the mapped contents, or empty bytes if nothing is mapped."""
        return self._map if self._map is not None else b""

    def __iter__(self) -> Iterator[int]:
        mapped = self._map
        if mapped is None:
            return
        for index in range(len(mapped)):
            yield mapped[index]

    def __bool__(self) -> bool:
        return self._fd >= 0

    def __enter__(self) -> "MappedFile":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def __del__(self) -> None:
        try:
            self.close()
        except (OSError, BufferError):
            pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.fqn!r}, open={bool(self)})"