"""EngineManager: registry of server-held generators shared across requests.

Every registered engine is a SynchronizedSource, so concurrent requests
drawing from the same id receive disjoint, in-order slices of its stream.
The registry itself is guarded by a separate lock.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

from xorshift_mwc.config import DEFAULT_PARAMS, XorshiftParams
from xorshift_mwc.core.engine import Xorshift
from xorshift_mwc.errors import InvalidArgument
from xorshift_mwc.systems.seeding import Domain, derive_seed
from xorshift_mwc.systems.synchronized import SynchronizedSource

if TYPE_CHECKING:
    from xorshift_mwc.config import ServiceConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EngineEntry:
    """One registered engine and the arguments it was built from."""

    engine_id: int
    seed: int
    params: XorshiftParams
    source: SynchronizedSource


class EngineManager:
    """Creates, looks up and drops named engines.

    Seeds not supplied by the caller are derived from the configured master
    seed and a monotonically increasing engine index, so a fresh server
    replays the same engines in the same order.
    """

    def __init__(self, config: ServiceConfig) -> None:
        self.config = config
        self._lock = threading.Lock()
        self._engines: dict[int, EngineEntry] = {}
        self._next_id: int = 1

    # -- registry --

    def create(self, seed: int | None = None, params: XorshiftParams | None = None) -> EngineEntry:
        if params is None:
            params = DEFAULT_PARAMS
        with self._lock:
            if len(self._engines) >= self.config.max_engines:
                raise InvalidArgument(
                    f"engine limit reached ({self.config.max_engines})", param_name="engine",
                )
            engine_id = self._next_id
            if seed is None:
                seed = derive_seed(self.config.master_seed, Domain.ENGINE, engine_id)
            source = SynchronizedSource(Xorshift.from_params(seed, params))
            entry = EngineEntry(engine_id=engine_id, seed=seed, params=params, source=source)
            self._engines[engine_id] = entry
            self._next_id += 1
        logger.info("Engine %d created (seed=%d)", engine_id, seed)
        return entry

    def get(self, engine_id: int) -> EngineEntry | None:
        with self._lock:
            return self._engines.get(engine_id)

    def entries(self) -> list[EngineEntry]:
        with self._lock:
            return [self._engines[eid] for eid in sorted(self._engines)]

    def remove(self, engine_id: int) -> bool:
        with self._lock:
            removed = self._engines.pop(engine_id, None)
        if removed is not None:
            logger.info("Engine %d dropped after %d samples", engine_id, removed.source.drawn)
        return removed is not None

    def clear(self) -> None:
        with self._lock:
            count = len(self._engines)
            self._engines.clear()
        logger.info("EngineManager cleared (%d engines)", count)

    def __len__(self) -> int:
        with self._lock:
            return len(self._engines)
