"""Game memory: one anonymous mapping split into persistent and transient parts."""

from __future__ import annotations

import mmap
from types import TracebackType


class GameMemory:
    """Persistent and transient byte regions backed by a single mapping."""

    def __init__(self, persistent_bytes: int, transient_bytes: int) -> None:
        if persistent_bytes < 0 or transient_bytes < 0:
            raise ValueError("memory sizes must not be negative")
        total = persistent_bytes + transient_bytes
        if total == 0:
            raise ValueError("memory size must be greater than 0")
        self.persistent_bytes = persistent_bytes
        self.transient_bytes = transient_bytes
        self._block = mmap.mmap(-1, total)
        self._view = memoryview(self._block)
        self.persistent = self._view[:persistent_bytes]
        self.transient = self._view[persistent_bytes:]

    @property
    def closed(self) -> bool:
        """Whether the mapping has been released."""
        return self._block.closed

    def close(self) -> None:
        """Release the views and unmap the memory."""
        if self._block.closed:
            return
        self.persistent.release()
        self.transient.release()
        self._view.release()
        self._block.close()

    def __enter__(self) -> GameMemory:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def init_memory(persistent_bytes: int, transient_bytes: int) -> GameMemory:
    """Map ``persistent_bytes + transient_bytes`` of zeroed memory."""
    return GameMemory(persistent_bytes, transient_bytes)