"""Stepping interface: a generator instance that owns one XorshiftState."""

from __future__ import annotations

import logging
from typing import Iterator

from xorshift_mwc.config import (
    DEFAULT_A,
    DEFAULT_C,
    DEFAULT_X1,
    DEFAULT_X2,
    XorshiftParams,
)
from xorshift_mwc.core.state import XorshiftState
from xorshift_mwc.errors import InvalidArgument

logger = logging.getLogger(__name__)


class Xorshift:
    """Multiply-with-carry Xorshift generator (Marsaglia 2003).

    Each call to :meth:`next_sample` advances the state exactly once. The
    instance is not synchronized; wrap it in
    :class:`~xorshift_mwc.systems.synchronized.SynchronizedSource` to share
    it across threads.
    """

    __slots__ = ("_seed", "_state")

    thread_safe = False

    def __init__(
        self,
        seed: int,
        a: int = DEFAULT_A,
        c: int = DEFAULT_C,
        x1: int = DEFAULT_X1,
        x2: int = DEFAULT_X2,
    ) -> None:
        self._state = XorshiftState.seeded(seed, a, c, x1, x2)
        self._seed = seed
        logger.debug("Xorshift seeded (seed=%d, a=%d, c=%d)", seed, a, c)

    @classmethod
    def from_params(cls, seed: int, params: XorshiftParams) -> Xorshift:
        return cls(seed, params.a, params.c, params.x1, params.x2)

    # -- public properties --

    @property
    def seed(self) -> int:
        """The seed as supplied by the caller (before zero substitution)."""
        return self._seed

    @property
    def a(self) -> int:
        return self._state.a

    @property
    def state(self) -> tuple[int, int, int, int]:
        """Current ``(x, y, z, c)`` words."""
        return self._state.as_tuple()

    # -- sampling --

    def next_sample(self) -> float:
        """Return a float greater than or equal to 0.0 and less than 1.0."""
        return self._state.step()

    def next_uint32(self) -> int:
        """Return the next raw 32-bit word of the stream."""
        return self._state.next_uint32()

    def samples(self, count: int) -> list[float]:
        """Step *count* times and return the outputs in order."""
        if count < 0:
            raise InvalidArgument(f"count must be non-negative (got {count})", param_name="count")
        step = self._state.step
        return [step() for _ in range(count)]

    def __iter__(self) -> Iterator[float]:
        while True:
            yield self._state.step()

    def __repr__(self) -> str:
        return f"Xorshift(seed={self._seed}, state={self._state!r})"
