"""A minimal performance counter for timing named events."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from enum import Enum

NO_EVENT = -2.0
NOT_FINISHED = -1.0


class PerfEvent(Enum):
    """The kinds of event that are timed."""

    PAINT = "paint"
    AV = "av"
    SIM = "sim"


class PerfCounter:
    """Records the start and end ticks of the last occurrence of each event."""

    def __init__(
        self,
        freq_hz: int | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        self.clock = clock if clock is not None else time.perf_counter_ns
        self.freq_hz = freq_hz if freq_hz is not None else 1_000_000_000
        self.starts: dict[PerfEvent, int] = {}
        self.ends: dict[PerfEvent, int] = {}

    def start(self, event: PerfEvent) -> None:
        """Mark the start of ``event``, forgetting its previous end."""
        self.starts[event] = self.clock()
        self.ends.pop(event, None)

    def end(self, event: PerfEvent) -> None:
        """Mark the end of ``event``."""
        self.ends[event] = self.clock()

    def last_ms(self, event: PerfEvent) -> float:
        """Duration in ms of the last ``event``.

        Returns ``NO_EVENT`` if it never started and ``NOT_FINISHED`` if it
        started but has not ended.
        """
        start = self.starts.get(event)
        if start is None:
            return NO_EVENT
        end = self.ends.get(event)
        if end is None:
            return NOT_FINISHED
        return (end - start) * 1000.0 / self.freq_hz

    @contextmanager
    def measure(self, event: PerfEvent) -> Iterator[None]:
        """Time the enclosed block as ``event``."""
        self.start(event)
        try:
            yield
        finally:
            self.end(event)