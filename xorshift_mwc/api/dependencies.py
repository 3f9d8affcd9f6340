"""Process-wide engine registry handed to routes through ``Depends``.

The app lifespan installs a fresh EngineManager on startup and clears it on
shutdown; routes never construct one themselves.
"""

from __future__ import annotations

from xorshift_mwc.api.engine_manager import EngineManager

_engine_manager: EngineManager | None = None


def set_engine_manager(manager: EngineManager | None) -> None:
    global _engine_manager
    _engine_manager = manager


def get_engine_manager() -> EngineManager:
    """Return the registry installed by the running app."""
    if _engine_manager is None:
        raise RuntimeError("No engine registry installed; is the app lifespan running?")
    return _engine_manager
