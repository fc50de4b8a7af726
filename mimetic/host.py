"""Information about the running host and process."""

from __future__ import annotations

import os
import socket

__all__ = ["gethostname", "getpid"]


def gethostname() -> str:
    """Return the host name, or an empty string if it cannot be read."""
    try:
        return socket.gethostname()
    except OSError:
        return ""


def getpid() -> int:
    """Return the ID of the calling process."""
    return os.getpid()