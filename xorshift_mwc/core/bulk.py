"""Bulk interface: fill a fresh list from freshly seeded state."""

from __future__ import annotations

from xorshift_mwc.config import DEFAULT_A, DEFAULT_C, DEFAULT_X1, DEFAULT_X2
from xorshift_mwc.core.state import XorshiftState
from xorshift_mwc.errors import InvalidArgument


def _check_length(length: int) -> None:
    if length < 0:
        raise InvalidArgument(f"length must be non-negative (got {length})", param_name="length")


def generate_samples(
    length: int,
    seed: int,
    a: int = DEFAULT_A,
    c: int = DEFAULT_C,
    x1: int = DEFAULT_X1,
    x2: int = DEFAULT_X2,
) -> list[float]:
    """Return *length* floats in [0.0, 1.0) for the given seed and parameters.

    Independent of any :class:`~xorshift_mwc.core.engine.Xorshift` instance;
    the output equals the first *length* samples of ``Xorshift(seed, ...)``.
    Raises :class:`InvalidArgument` for a negative length and
    :class:`InvalidParameter` when ``a <= c``.
    """
    _check_length(length)
    state = XorshiftState.seeded(seed, a, c, x1, x2)
    step = state.step
    return [step() for _ in range(length)]


def generate_uint32(
    length: int,
    seed: int,
    a: int = DEFAULT_A,
    c: int = DEFAULT_C,
    x1: int = DEFAULT_X1,
    x2: int = DEFAULT_X2,
) -> list[int]:
    """Like :func:`generate_samples` but returns the raw 32-bit words."""
    _check_length(length)
    state = XorshiftState.seeded(seed, a, c, x1, x2)
    step = state.next_uint32
    return [step() for _ in range(length)]
