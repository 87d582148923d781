"""Wall-clock timing and peak memory queries for the running process."""

from __future__ import annotations

import sys
import time
from enum import Enum
from typing import TextIO


class MemoryUnit(Enum):
    """Unit for memory figures, valued by its size in bytes."""

    KB = 1024
    MB = 1024 ** 2
    GB = 1024 ** 3


def _peak_rss_bytes() -> int:
    try:
        import resource
    except ImportError as exc:
        raise RuntimeError("getrusage failed") from exc
    usage = resource.getrusage(resource.RUSAGE_SELF)
    peak = int(usage.ru_maxrss)
    # macOS reports bytes; other systems report kilobytes.
    return peak if sys.platform == "darwin" else peak * 1024


class Profiler:
    """Measures the time between ``start`` and ``finish`` on a monotonic clock."""

    def __init__(self) -> None:
        self._start: float | None = None
        self._duration = 0.0

    def start(self) -> None:
        """Begin timing."""
        self._start = time.perf_counter()

    def finish(self) -> None:
        """Stop timing and record the elapsed time."""
        if self._start is None:
            raise RuntimeError("finish called before start")
        self._duration = time.perf_counter() - self._start

    def dump_duration(self, file: TextIO | None = None) -> None:
        """Write the last measured duration in milliseconds."""
        out = sys.stdout if file is None else file
        out.write(f"total {self.millisecond():g} milliseconds\n")

    def second(self) -> float:
        """Last measured duration in seconds."""
        return self._duration

    def millisecond(self) -> float:
        """Last measured duration in milliseconds."""
        return self._duration * 1000

    def memory(self, unit: MemoryUnit = MemoryUnit.KB) -> int:
        """Peak resident memory of this process in ``unit``."""
        return _peak_rss_bytes() // unit.value