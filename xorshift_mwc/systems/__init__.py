"""Generator systems: synchronized access and seed derivation."""

from xorshift_mwc.systems.seeding import Domain, derive_seed
from xorshift_mwc.systems.synchronized import SampleSource, SynchronizedSource, create_source

__all__ = ["Domain", "SampleSource", "SynchronizedSource", "create_source", "derive_seed"]
