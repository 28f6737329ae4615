"""wordfall-session - Serialized game driver, event bus, and baseline store."""
from __future__ import annotations

from wordfall_session.baseline import BaselineStore, MemoryBaselineStore
from wordfall_session.bus import ALL, SignalBus
from wordfall_session.queue import ActionQueue, DrainResult
from wordfall_session.session import GameSession

__all__ = [
    "ALL",
    "ActionQueue",
    "BaselineStore",
    "DrainResult",
    "GameSession",
    "MemoryBaselineStore",
    "SignalBus",
]
