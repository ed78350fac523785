"""
Opt-in hot path profiling.

Enabled by setting ``JSONMODEL_PROFILE`` in the environment before import
(ignored under ``python -O``). When disabled, ``ProfileContext`` does
nothing.
"""

from __future__ import annotations

import os
import time
from dataclasses import dataclass
from typing import Any

PROFILE_HOT_PATHS = __debug__ and "JSONMODEL_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Statistics for profiling hot paths during parsing."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        """Records a function call with timing and character processing info."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars


_hot_path_stats: dict[str, HotPathStats] = {}


class _RecordingProfileContext:
    """Times the enclosed block and records it under ``func_name``."""

    __slots__ = ("func_name", "chars", "start_time")

    def __init__(self, func_name: str, chars: int = 0) -> None:
        self.func_name = func_name
        self.chars = chars
        self.start_time = 0

    def __enter__(self) -> _RecordingProfileContext:
        self.start_time = time.perf_counter_ns()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        duration = time.perf_counter_ns() - self.start_time
        stats = _hot_path_stats.get(self.func_name)
        if stats is None:
            stats = _hot_path_stats[self.func_name] = HotPathStats(
                self.func_name
            )
        stats.record_call(duration, self.chars)


class _NullProfileContext:
    __slots__ = ("chars",)

    def __init__(self, func_name: str, chars: int = 0) -> None:
        self.chars = chars

    def __enter__(self) -> _NullProfileContext:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        pass


ProfileContext: type[_RecordingProfileContext] | type[_NullProfileContext]
ProfileContext = (
    _RecordingProfileContext if PROFILE_HOT_PATHS else _NullProfileContext
)


def get_hot_path_stats() -> dict[str, HotPathStats]:
    """Returns current profiling statistics."""
    return _hot_path_stats.copy()


def clear_hot_path_stats() -> None:
    """Clears profiling statistics."""
    _hot_path_stats.clear()
