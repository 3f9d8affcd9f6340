"""Generator parameters and service configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass

from xorshift_mwc.errors import InvalidArgument, InvalidParameter

# Marsaglia (2003) reference constants
DEFAULT_A = 916905990
DEFAULT_C = 13579
DEFAULT_X1 = 362436069
DEFAULT_X2 = 77465321


def check_multiplier(a: int, c: int) -> None:
    """Raise :class:`InvalidParameter` unless ``a > c``."""
    if a <= c:
        raise InvalidParameter(
            f"a must be greater than c (got a={a}, c={c})", param_name="a",
        )


@dataclass(frozen=True)
class XorshiftParams:
    """Immutable parameter set of the multiply-with-carry recurrence."""

    a: int = DEFAULT_A      # multiplier
    c: int = DEFAULT_C      # initial carry
    x1: int = DEFAULT_X1    # initial last-but-two word
    x2: int = DEFAULT_X2    # initial last-but-one word

    def __post_init__(self) -> None:
        check_multiplier(self.a, self.c)

    def as_dict(self) -> dict[str, int]:
        return {"a": self.a, "c": self.c, "x1": self.x1, "x2": self.x2}


DEFAULT_PARAMS = XorshiftParams()


@dataclass(frozen=True)
class ServiceConfig:
    """Immutable configuration for the HTTP service and CLI."""

    # Seeding
    master_seed: int = 42                  # root of derived per-engine seeds

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Limits
    max_samples: int = 100_000             # per request, bulk and sequence windows
    max_offset: int = 1_000_000            # values a sequence window may skip
    max_engines: int = 256                 # server-held engines

    # Logging
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        # seeds are hashed as a signed 64-bit field
        if not -(1 << 63) <= self.master_seed < (1 << 63):
            raise InvalidArgument(
                f"master_seed must fit in a signed 64-bit integer (got {self.master_seed})",
                param_name="master_seed",
            )
