"""
Session Manager - Creates and tracks game sessions for multi-player hosts.

LIFECYCLE:
1. Host creates a session -> new Session + GameLoop, first game started
2. Player guesses / restarts through the loop
3. Host ends the session -> removed from memory

Sessions are in-memory only. Nothing is persisted.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any
import logging
import random
import time
import uuid

from ..engine_core.session import Session
from ..engine_core.state import GameConfig
from .game_loop import GameLoop


logger = logging.getLogger(__name__)


@dataclass
class HostedSession:
    """
    A session registered with the manager.

    Holds the game loop (which owns the core Session) plus metadata.
    """
    session_id: str
    loop: GameLoop
    created_at: float
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def session(self) -> Session:
        return self.loop.session

    @property
    def config(self) -> GameConfig:
        return self.loop.session.config


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions from a GameConfig
    - Look up sessions by id
    - Clean up ended or stale sessions
    """

    def __init__(self, default_config: GameConfig | None = None):
        self.default_config = default_config or GameConfig()
        self._sessions: dict[str, HostedSession] = {}

    def create_session(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
        debounce_seconds: float = 0.8,
    ) -> HostedSession:
        """
        Create a session and start its first game.

        Args:
            config: Game configuration (defaults to the manager's)
            seed: Optional seed for reproducible secrets
            debounce_seconds: Quiet window for auto-submitted input
        """
        session_id = str(uuid.uuid4())
        rng = random.Random(seed) if seed is not None else None
        session = Session(config or self.default_config, rng=rng)
        loop = GameLoop(session, debounce_seconds=debounce_seconds)
        loop.start()

        hosted = HostedSession(
            session_id=session_id,
            loop=loop,
            created_at=time.time(),
        )
        self._sessions[session_id] = hosted
        logger.info("Session %s created", session_id)
        return hosted

    def get_session(self, session_id: str) -> HostedSession | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str) -> bool:
        """Remove a session. Returns False if it did not exist."""
        hosted = self._sessions.pop(session_id, None)
        if hosted is None:
            return False
        hosted.loop.clear_input()
        logger.info("Session %s ended", session_id)
        return True

    def list_sessions(self) -> list[str]:
        """List IDs of all sessions."""
        return list(self._sessions)

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> list[str]:
        """
        End sessions older than max_age_seconds.

        Returns the ids that were removed.
        """
        current_time = time.time()
        stale = [
            session_id for session_id, hosted in self._sessions.items()
            if current_time - hosted.created_at > max_age_seconds
        ]
        for session_id in stale:
            self.end_session(session_id)
        return stale
