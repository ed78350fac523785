"""Interpreter recursion limit management for deeply nested documents."""

from __future__ import annotations

import sys
import threading
from collections.abc import Iterator
from contextlib import contextmanager

# The recursion limit is process-wide; every concurrent user shares one
# raised limit, and the last one out restores the original.
_lock = threading.Lock()
_users = 0
_previous = 0
_raised = 0


@contextmanager
def recursion_headroom(frames: int) -> Iterator[None]:
    """Raises the recursion limit so that ``frames`` more calls fit."""
    global _users, _previous, _raised
    with _lock:
        if _users == 0:
            _previous = _raised = sys.getrecursionlimit()
        if _raised < _previous + frames:
            _raised = _previous + frames
            sys.setrecursionlimit(_raised)
        _users += 1
    try:
        yield
    finally:
        with _lock:
            _users -= 1
            # Someone else may have changed the limit meanwhile; leave theirs.
            if _users == 0 and sys.getrecursionlimit() == _raised:
                sys.setrecursionlimit(_previous)
