"""Lazy interface: an unbounded pull-based iterator over the stream."""

from __future__ import annotations

from xorshift_mwc.config import DEFAULT_A, DEFAULT_C, DEFAULT_X1, DEFAULT_X2
from xorshift_mwc.core.state import XorshiftState
from xorshift_mwc.errors import InvalidArgument


class SampleSequence:
    """Infinite iterator of floats in [0.0, 1.0).

    Owns a private state; one step is computed per ``next()``. It cannot be
    rewound: build a new one with the same arguments to replay the stream.
    """

    __slots__ = ("_state",)

    def __init__(self, state: XorshiftState) -> None:
        self._state = state

    def __iter__(self) -> SampleSequence:
        return self

    def __next__(self) -> float:
        return self._state.step()

    def take(self, n: int) -> list[float]:
        """Pull the next *n* values."""
        if n < 0:
            raise InvalidArgument(f"n must be non-negative (got {n})", param_name="n")
        step = self._state.step
        return [step() for _ in range(n)]


def sample_sequence(
    seed: int,
    a: int = DEFAULT_A,
    c: int = DEFAULT_C,
    x1: int = DEFAULT_X1,
    x2: int = DEFAULT_X2,
) -> SampleSequence:
    """Return a lazy infinite sequence for the given seed and parameters.

    Parameters are validated here, before the first value is pulled.
    """
    return SampleSequence(XorshiftState.seeded(seed, a, c, x1, x2))
