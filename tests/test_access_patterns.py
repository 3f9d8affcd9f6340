"""Tests for bulk generation and the lazy sequence.

Covers:
- Cross-interface equivalence (bulk == sequence == stepping)
- Bulk length edge cases and validation
- Sequence validation, take(), and replay by reconstruction
- Independence from existing engine instances
"""

from itertools import islice

import pytest

from xorshift_mwc import (
    InvalidArgument,
    InvalidParameter,
    SampleSequence,
    Xorshift,
    generate_samples,
    generate_uint32,
    sample_sequence,
)


def _stepped(n: int, seed: int, **params) -> list[float]:
    engine = Xorshift(seed, **params)
    return [engine.next_sample() for _ in range(n)]


class TestCrossInterfaceEquivalence:

    def test_seed_42_default_parameters(self):
        bulk = generate_samples(1000, seed=42)
        lazy = list(islice(sample_sequence(seed=42), 1000))
        stepped = _stepped(1000, 42)
        assert bulk == lazy
        assert bulk == stepped

    @pytest.mark.parametrize("seed", [0, 1, -7, 2147483647, -2147483648])
    def test_various_seeds(self, seed):
        assert generate_samples(200, seed) == sample_sequence(seed).take(200) == _stepped(200, seed)

    def test_custom_parameters(self):
        params = dict(a=698769069, c=5, x1=123, x2=456)
        bulk = generate_samples(500, 9, **params)
        assert bulk == sample_sequence(9, **params).take(500)
        assert bulk == _stepped(500, 9, **params)

    def test_uint32_matches_engine_words(self):
        engine = Xorshift(42)
        assert generate_uint32(100, 42) == [engine.next_uint32() for _ in range(100)]

    def test_uint32_scaled_equals_samples(self):
        words = generate_uint32(100, 3)
        assert [w / 2**32 for w in words] == generate_samples(100, 3)


class TestBulk:

    def test_zero_length(self):
        assert generate_samples(0, 1) == []

    def test_exact_length(self):
        assert len(generate_samples(37, 1)) == 37

    def test_negative_length(self):
        with pytest.raises(InvalidArgument):
            generate_samples(-1, seed=1)

    def test_negative_length_uint32(self):
        with pytest.raises(InvalidArgument):
            generate_uint32(-5, seed=1)

    def test_invalid_parameters(self):
        with pytest.raises(InvalidParameter):
            generate_samples(10, 1, a=100, c=100)

    def test_length_checked_before_parameters(self):
        with pytest.raises(InvalidArgument):
            generate_samples(-1, 1, a=1, c=2)

    def test_zero_seed_substitution(self):
        assert generate_samples(100, 0) == generate_samples(100, 1)

    def test_does_not_touch_engine_state(self):
        engine = Xorshift(42)
        engine.next_sample()
        before = engine.state
        generate_samples(100, 42)
        assert engine.state == before

    def test_fresh_list_each_call(self):
        first = generate_samples(5, 1)
        second = generate_samples(5, 1)
        assert first == second
        assert first is not second


class TestSequence:

    def test_is_iterator(self):
        seq = sample_sequence(1)
        assert isinstance(seq, SampleSequence)
        assert iter(seq) is seq

    def test_validation_is_eager(self):
        with pytest.raises(InvalidParameter):
            sample_sequence(1, a=1, c=1)

    def test_take_continues_stream(self):
        seq = sample_sequence(11)
        head = seq.take(10)
        tail = seq.take(10)
        assert head + tail == generate_samples(20, 11)

    def test_take_zero(self):
        seq = sample_sequence(11)
        assert seq.take(0) == []
        assert next(seq) == generate_samples(1, 11)[0]

    def test_take_negative(self):
        with pytest.raises(InvalidArgument):
            sample_sequence(1).take(-1)

    def test_reconstruction_replays(self):
        first = sample_sequence(77)
        list(islice(first, 500))
        replay = sample_sequence(77)
        assert replay.take(10) == generate_samples(10, 77)

    def test_independent_sequences(self):
        a = sample_sequence(5)
        b = sample_sequence(5)
        next(a)
        next(a)
        assert next(b) == generate_samples(1, 5)[0]

    def test_never_exhausts(self):
        seq = sample_sequence(3)
        count = sum(1 for _ in islice(seq, 50_000))
        assert count == 50_000
        assert 0.0 <= next(seq) < 1.0
