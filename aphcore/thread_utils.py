"""Naming of the current thread."""

from __future__ import annotations

import threading

MAX_NAME_LENGTH = 15
"""Longest thread name accepted, in bytes, as for POSIX thread names."""


def set_name(name: str) -> None:
    """Name the calling thread.

    Raises ValueError if the encoded name is longer than MAX_NAME_LENGTH bytes.
    """
    name = str(name)
    if len(name.encode("utf-8")) > MAX_NAME_LENGTH:
        raise ValueError(f"thread name too long (max {MAX_NAME_LENGTH} bytes): {name!r}")
    threading.current_thread().name = name


def get_name() -> str:
    """Return the name of the calling thread."""
    return threading.current_thread().name