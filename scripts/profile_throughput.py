#!/usr/bin/env python3
"""Generator throughput profiler.

Usage:
    python scripts/profile_throughput.py --samples 1000000 --seed 42
    python scripts/profile_throughput.py --samples 200000 --rounds 10 --cprofile gen.prof

Reports:
    - Per-round timing statistics (min, mean, p50, p95, max) per access pattern
    - Throughput (samples/sec) for stepping, bulk, lazy sequence and the
      synchronized adapter
    - Cross-pattern check: every pattern produced the same stream
    - Optional: cProfile dump
"""

from __future__ import annotations

import argparse
import cProfile
import io
import os
import pstats
import statistics
import sys
import time
from itertools import islice
from typing import Callable

# Ensure project root is on path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from xorshift_mwc.core.bulk import generate_samples
from xorshift_mwc.core.engine import Xorshift
from xorshift_mwc.core.sequence import sample_sequence
from xorshift_mwc.systems.synchronized import SynchronizedSource


def _stepping(n: int, seed: int) -> list[float]:
    engine = Xorshift(seed)
    return [engine.next_sample() for _ in range(n)]


def _bulk(n: int, seed: int) -> list[float]:
    return generate_samples(n, seed)


def _sequence(n: int, seed: int) -> list[float]:
    return list(islice(sample_sequence(seed), n))


def _synchronized(n: int, seed: int) -> list[float]:
    source = SynchronizedSource(Xorshift(seed))
    return [source.next_sample() for _ in range(n)]


PATTERNS: dict[str, Callable[[int, int], list[float]]] = {
    "step": _stepping,
    "bulk": _bulk,
    "sequence": _sequence,
    "synchronized": _synchronized,
}


def _percentile(data: list[float], p: float) -> float:
    """Simple percentile calculation."""
    if not data:
        return 0.0
    sorted_data = sorted(data)
    k = (len(sorted_data) - 1) * (p / 100.0)
    f = int(k)
    c = f + 1
    if c >= len(sorted_data):
        return sorted_data[f]
    return sorted_data[f] + (k - f) * (sorted_data[c] - sorted_data[f])


def _profile(n: int, seed: int, rounds: int) -> tuple[dict[str, list[float]], bool]:
    """Time each pattern *rounds* times; also check they agree."""
    timings: dict[str, list[float]] = {name: [] for name in PATTERNS}
    outputs: dict[str, list[float]] = {}
    for _ in range(rounds):
        for name, fn in PATTERNS.items():
            t_start = time.perf_counter()
            outputs[name] = fn(n, seed)
            timings[name].append(time.perf_counter() - t_start)
    reference = outputs["bulk"]
    consistent = all(out == reference for out in outputs.values())
    return timings, consistent


def _print_report(timings: dict[str, list[float]], n: int, consistent: bool) -> None:
    print("\n" + "=" * 70)
    print("  GENERATOR THROUGHPUT REPORT")
    print("=" * 70)
    print(f"\n  Samples per round: {n:,}")
    print(f"  Rounds:            {len(next(iter(timings.values())))}")
    print(f"  Streams agree:     {'yes' if consistent else 'NO'}")

    print(f"\n  {'Pattern':<14} {'Min (ms)':>10} {'Mean (ms)':>10} {'P95 (ms)':>10} {'Max (ms)':>10} {'Msamples/s':>11}")
    print(f"  {'-' * 14} {'-' * 10} {'-' * 10} {'-' * 10} {'-' * 10} {'-' * 11}")
    for name, times in timings.items():
        mean = statistics.mean(times)
        rate = n / mean / 1e6 if mean > 0 else 0.0
        print(
            f"  {name:<14} {min(times) * 1000:>10.2f} {mean * 1000:>10.2f} "
            f"{_percentile(times, 95) * 1000:>10.2f} {max(times) * 1000:>10.2f} {rate:>11.2f}"
        )
    print("\n" + "=" * 70)


def main() -> None:
    parser = argparse.ArgumentParser(description="Profile the Xorshift access patterns")
    parser.add_argument("--samples", type=int, default=1_000_000, help="Samples per round")
    parser.add_argument("--seed", type=int, default=42, help="Generator seed")
    parser.add_argument("--rounds", type=int, default=5, help="Timed rounds per pattern")
    parser.add_argument("--cprofile", type=str, default=None, help="Save cProfile output to file")
    args = parser.parse_args()

    profiler = cProfile.Profile() if args.cprofile else None
    if profiler:
        profiler.enable()

    timings, consistent = _profile(args.samples, args.seed, args.rounds)

    if profiler:
        profiler.disable()
        profiler.dump_stats(args.cprofile)
        buf = io.StringIO()
        pstats.Stats(profiler, stream=buf).sort_stats("cumulative").print_stats(15)
        print(buf.getvalue())
        print(f"  cProfile written to {args.cprofile}")

    _print_report(timings, args.samples, consistent)
    if not consistent:
        sys.exit(1)


if __name__ == "__main__":
    main()
