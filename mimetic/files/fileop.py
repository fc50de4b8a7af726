"""File utility functions: removal, moving and stat queries."""

from __future__ import annotations

import os

__all__ = ["remove", "move", "exists", "size", "ctime", "atime", "mtime"]


def remove(fqn: str) -> bool:
    """Delete the file ``fqn``; return True on success."""
    try:
        os.unlink(fqn)
    except OSError:
        return False
    return True


def move(old: str, new: str) -> bool:
    """Move ``old`` to ``new``; fails if ``new`` already exists."""
    try:
        if os.name == "nt":
            os.rename(old, new)
        else:
            os.link(old, new)
            os.unlink(old)
    except OSError:
        return False
    return True


def _stat(fqn: str):
    try:
        return os.stat(fqn)
    except OSError:
        return None


def exists(fqn: str) -> bool:
    """Return True if ``fqn`` can be stat'ed."""
    return _stat(fqn) is not None


def size(fqn: str) -> int:
    """Return the size of ``fqn`` in bytes, or 0 if it cannot be stat'ed."""
    st = _stat(fqn)
    return st.st_size if st else 0


def ctime(fqn: str) -> int:
    """Return the status-change time of ``fqn`` in seconds, or 0."""
    st = _stat(fqn)
    return int(st.st_ctime) if st else 0


def atime(fqn: str) -> int:
    """Return the last access time of ``fqn`` in seconds, or 0."""
    st = _stat(fqn)
    return int(st.st_atime) if st else 0


def mtime(fqn: str) -> int:
    """Return the last modification time of ``fqn`` in seconds, or 0."""
    st = _stat(fqn)
    return int(st.st_mtime) if st else 0