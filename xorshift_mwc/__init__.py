"""Multiply-with-carry Xorshift pseudo-random number generator (Marsaglia 2003).

    Xn = a * Xn-3 + c  mod 2^32

Three interchangeable ways to consume the same stream:

  - ``Xorshift(seed).next_sample()``   one step at a time
  - ``generate_samples(length, seed)`` a filled list
  - ``sample_sequence(seed)``          a lazy infinite iterator

Not suitable for cryptographic use.
"""

from xorshift_mwc.config import DEFAULT_PARAMS, XorshiftParams
from xorshift_mwc.core import (
    SampleSequence,
    Xorshift,
    generate_samples,
    generate_uint32,
    sample_sequence,
)
from xorshift_mwc.errors import InvalidArgument, InvalidParameter, XorshiftError
from xorshift_mwc.systems import Domain, SynchronizedSource, create_source, derive_seed

__all__ = [
    "DEFAULT_PARAMS",
    "Domain",
    "InvalidArgument",
    "InvalidParameter",
    "SampleSequence",
    "SynchronizedSource",
    "Xorshift",
    "XorshiftError",
    "XorshiftParams",
    "create_source",
    "derive_seed",
    "generate_samples",
    "generate_uint32",
    "sample_sequence",
]

__version__ = "0.1.0"
