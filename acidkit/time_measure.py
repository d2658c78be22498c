"""Wall-clock stopwatch that reports elapsed time on exit."""

from __future__ import annotations

import time


def group_thousands(number: int) -> str:
    """Format an integer with commas between groups of three digits."""
    return f"{number:,}"


class TimeMeasure:
    """Stopwatch started on creation; prints its report when used as a context."""

    def __init__(self) -> None:
        self._begin = time.perf_counter_ns()

    def reset(self) -> None:
        """Restart the stopwatch."""
        self._begin = time.perf_counter_ns()

    def elapsed_nano(self) -> int:
        return time.perf_counter_ns() - self._begin

    def elapsed_micro(self) -> int:
        return self.elapsed_nano() // 1_000

    def elapsed(self) -> int:
        """Elapsed milliseconds."""
        return self.elapsed_nano() // 1_000_000

    def elapsed_seconds(self) -> int:
        return self.elapsed_nano() // 1_000_000_000

    def elapsed_minutes(self) -> int:
        return self.elapsed_seconds() // 60

    def elapsed_hours(self) -> int:
        return self.elapsed_seconds() // 3600

    def report(self) -> str:
        """Describe the elapsed time in milliseconds, microseconds and nanoseconds."""
        nano = self.elapsed_nano()
        return (
            f"\n cost: {group_thousands(nano // 1_000_000)} ms"
            f" micro: {group_thousands(nano // 1_000)} us"
            f" nano: {group_thousands(nano)} ns"
        )

    def __enter__(self) -> TimeMeasure:
        self.reset()
        return self

    def __exit__(self, *args) -> None:
        print(self.report())