"""
Hot path profiling for the parser, writers and comment stripper.

Set ``LINTJSON_PROFILE`` in the environment before importing ``lintjson``
to time every instrumented block. Otherwise ``ProfileContext`` is bound to
a context manager that does nothing, and the statistics stay empty.
"""

import os
import time
from dataclasses import dataclass
from typing import Any

PROFILE_HOT_PATHS = __debug__ and "LINTJSON_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Accumulated timings of one instrumented block."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars

    @property
    def mean_time_ns(self) -> float:
        if not self.call_count:
            return 0.0
        return self.total_time_ns / self.call_count


_hot_path_stats: dict[str, HotPathStats] = {}


class TimingProfileContext:
    """Times the enclosed block and adds it to the named statistics."""

    __slots__ = ("func_name", "chars", "start_time")

    def __init__(self, func_name: str, chars: int = 0) -> None:
        self.func_name = func_name
        self.chars = chars
        self.start_time = 0

    def __enter__(self) -> "TimingProfileContext":
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


class NullProfileContext:
    __slots__ = ()

    def __init__(self, func_name: str, chars: int = 0) -> None:
        pass

    def __enter__(self) -> "NullProfileContext":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        pass


ProfileContext: type[TimingProfileContext] | type[NullProfileContext] = (
    TimingProfileContext if PROFILE_HOT_PATHS else NullProfileContext
)


def get_hot_path_stats() -> dict[str, HotPathStats]:
    """Returns a copy of the statistics collected so far."""
    return _hot_path_stats.copy()


def clear_hot_path_stats() -> None:
    _hot_path_stats.clear()
