"""Generator core: state recurrence and its three access patterns."""

from xorshift_mwc.core.bulk import generate_samples, generate_uint32
from xorshift_mwc.core.engine import Xorshift
from xorshift_mwc.core.sequence import SampleSequence, sample_sequence
from xorshift_mwc.core.state import XorshiftState

__all__ = [
    "SampleSequence",
    "Xorshift",
    "XorshiftState",
    "generate_samples",
    "generate_uint32",
    "sample_sequence",
]
