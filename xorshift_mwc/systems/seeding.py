"""Domain-separated deterministic seed derivation using xxhash.

Formula: Seed = Fold32(Hash(MasterSeed, Domain, Index))

Lets one master seed fan out into many independent, reproducible generator
seeds without the streams sharing a starting point.
"""

from __future__ import annotations

import struct
from enum import IntEnum, unique

import xxhash

_MASK32 = 0xFFFFFFFF
_SIGN32 = 0x80000000


@unique
class Domain(IntEnum):
    """Consumers of derived seeds."""

    ENGINE = 0
    BULK = 1
    SEQUENCE = 2


def derive_seed(master_seed: int, domain: Domain, index: int) -> int:
    """Return a signed 32-bit seed that is a pure function of the inputs."""
    payload = struct.pack("<qiq", master_seed, domain.value, index)
    low = xxhash.xxh64(payload).intdigest() & _MASK32
    return low - (1 << 32) if low & _SIGN32 else low
