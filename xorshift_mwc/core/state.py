"""Multiply-with-carry Xorshift state and its single-step recurrence.

Marsaglia, G. (2003). Xorshift RNGs. Journal of Statistical Software 8(14).

    Xn = a * Xn-3 + c  mod 2^32

The state is four words held to 64-bit capacity: the last three outputs
(``x`` oldest, ``z`` newest) and the running carry ``c``. Python integers
are unbounded, so every fixed-width operation is masked explicitly.
"""

from __future__ import annotations

from xorshift_mwc.config import check_multiplier

MASK32 = 0xFFFFFFFF
MASK64 = 0xFFFFFFFFFFFFFFFF

UINT32_TO_DOUBLE = 1.0 / (MASK32 + 1.0)


def widen_seed(seed: int) -> int:
    """Return the unsigned 32-bit seed word, never zero.

    The all-zero ``x`` word is substituted by one; ``y`` and ``z`` are not
    guarded here.
    """
    x = seed & MASK32
    return x if x != 0 else 1


class XorshiftState:
    """Mutable four-word generator state plus the fixed multiplier.

    Not synchronized: one owner steps it at a time.
    """

    __slots__ = ("x", "y", "z", "c", "a")

    def __init__(self, x: int, y: int, z: int, c: int, a: int) -> None:
        self.x = x & MASK64
        self.y = y & MASK64
        self.z = z & MASK64
        self.c = c & MASK64
        self.a = a & MASK64

    @classmethod
    def seeded(cls, seed: int, a: int, c: int, x1: int, x2: int) -> XorshiftState:
        """Validate ``a > c`` and build the initial state for *seed*."""
        check_multiplier(a, c)
        return cls(widen_seed(seed), x1, x2, c, a)

    def next_uint32(self) -> int:
        """Advance one iteration and return the new 32-bit word."""
        t = (self.a * self.x + self.c) & MASK64
        self.x = self.y
        self.y = self.z
        self.c = t >> 32
        self.z = t & MASK32
        return self.z

    def step(self) -> float:
        """Advance one iteration and return a float in [0.0, 1.0)."""
        return self.next_uint32() * UINT32_TO_DOUBLE

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.z, self.c)

    def __repr__(self) -> str:
        return f"XorshiftState(x={self.x}, y={self.y}, z={self.z}, c={self.c}, a={self.a})"
