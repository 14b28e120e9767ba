"""
Session Module - Host-side driving of game sessions.

- GameLoop wraps a core Session, publishes events to observers and
  debounces typed input
- SessionManager keeps many sessions in memory for servers
- messages renders outcomes as feedback text

Sessions are EPHEMERAL: no persistence, ended sessions are simply dropped.
"""

from .debounce import Debouncer
from .game_loop import GameLoop, GameEvent, EventKind
from .manager import SessionManager, HostedSession
from .messages import describe, hint, range_hint

__all__ = [
    "Debouncer",
    "GameLoop",
    "GameEvent",
    "EventKind",
    "SessionManager",
    "HostedSession",
    "describe",
    "hint",
    "range_hint",
]
