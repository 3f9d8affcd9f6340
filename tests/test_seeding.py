"""Tests for domain-separated seed derivation."""

import struct

import xxhash

from xorshift_mwc.core.engine import Xorshift
from xorshift_mwc.systems.seeding import Domain, derive_seed


def test_deterministic():
    assert derive_seed(42, Domain.ENGINE, 1) == derive_seed(42, Domain.ENGINE, 1)


def test_signed_32_bit_range():
    for index in range(500):
        seed = derive_seed(42, Domain.BULK, index)
        assert -(1 << 31) <= seed < (1 << 31)


def test_folds_low_32_bits_of_xxh64():
    digest = xxhash.xxh64(struct.pack("<qiq", 7, Domain.SEQUENCE.value, 3)).intdigest()
    low = digest & 0xFFFFFFFF
    expected = low - (1 << 32) if low >= (1 << 31) else low
    assert derive_seed(7, Domain.SEQUENCE, 3) == expected


def test_domains_are_separated():
    seeds = {derive_seed(42, domain, 1) for domain in Domain}
    assert len(seeds) == len(Domain)


def test_indices_give_distinct_seeds():
    seeds = {derive_seed(42, Domain.ENGINE, i) for i in range(100)}
    assert len(seeds) == 100


def test_master_seed_changes_output():
    assert derive_seed(1, Domain.ENGINE, 1) != derive_seed(2, Domain.ENGINE, 1)


def test_derived_seed_drives_engine():
    seed = derive_seed(42, Domain.ENGINE, 5)
    assert Xorshift(seed).samples(20) == Xorshift(seed).samples(20)
