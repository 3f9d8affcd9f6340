"""Thread-safe access to a generator by composition.

The stepping core is single-writer. ``SynchronizedSource`` serializes every
call into it behind one lock, so any number of threads may share it.
"""

from __future__ import annotations

import threading
from typing import Protocol

from xorshift_mwc.config import DEFAULT_PARAMS, XorshiftParams
from xorshift_mwc.core.engine import Xorshift


class SampleSource(Protocol):
    """Anything that hands out stream values one at a time."""

    thread_safe: bool

    def next_sample(self) -> float: ...

    def next_uint32(self) -> int: ...

    def samples(self, count: int) -> list[float]: ...


class SynchronizedSource:
    """Lock-guarded adapter around an unsynchronized source."""

    __slots__ = ("_source", "_lock", "_drawn")

    thread_safe = True

    def __init__(self, source: SampleSource) -> None:
        self._source = source
        self._lock = threading.Lock()
        self._drawn = 0

    @property
    def source(self) -> SampleSource:
        return self._source

    @property
    def drawn(self) -> int:
        """Number of values handed out so far."""
        with self._lock:
            return self._drawn

    def next_sample(self) -> float:
        with self._lock:
            value = self._source.next_sample()
            self._drawn += 1
            return value

    def next_uint32(self) -> int:
        with self._lock:
            value = self._source.next_uint32()
            self._drawn += 1
            return value

    def samples(self, count: int) -> list[float]:
        """Draw *count* consecutive values while holding the lock."""
        with self._lock:
            values = self._source.samples(count)
            self._drawn += count
            return values

    def draw(self, count: int) -> tuple[int, list[float]]:
        """Like :meth:`samples`, also returning the stream position of the first value."""
        with self._lock:
            start = self._drawn
            values = self._source.samples(count)
            self._drawn += count
            return start, values


def create_source(
    seed: int,
    thread_safe: bool = True,
    params: XorshiftParams | None = None,
) -> Xorshift | SynchronizedSource:
    """Build a generator for *seed*, optionally wrapped for shared use."""
    engine = Xorshift.from_params(seed, params if params is not None else DEFAULT_PARAMS)
    if thread_safe:
        return SynchronizedSource(engine)
    return engine
