"""
API Service - Business logic layer between the API and the engine.

The service:
1. Translates API requests into session calls
2. Manages sessions
3. Formats outcomes for clients

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .schemas import (
    # Requests
    CreateSessionRequest,
    GuessRequest,
    # Responses
    SessionResponse,
    GuessResponse,
    ErrorResponse,
    # Enums
    SessionStatus,
    OutcomeType,
    InvalidReasonCode,
    ErrorCode,
)
from ..engine_core.outcome import Outcome
from ..engine_core.state import GameConfig
from ..session import SessionManager, HostedSession
from ..session.messages import describe, hint, range_hint, prompt_message


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        session = service.create_session(CreateSessionRequest())
        result = service.guess(session.session_id, GuessRequest(value="5"))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def create_session(self, request: CreateSessionRequest) -> SessionResponse:
        """
        Create a new game session and start its first game.

        Raises ValueError if the requested configuration is unusable.
        """
        defaults = self.session_manager.default_config
        config = GameConfig(
            min_number=request.min_number if request.min_number is not None else defaults.min_number,
            max_number=request.max_number if request.max_number is not None else defaults.max_number,
            max_attempts=(
                request.max_attempts if request.max_attempts is not None
                else defaults.max_attempts
            ),
        )
        hosted = self.session_manager.create_session(config, seed=request.seed)
        return self._session_to_response(hosted, message=prompt_message())

    def get_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        hosted = self.session_manager.get_session(session_id)
        if not hosted:
            return self._not_found(session_id)
        return self._session_to_response(hosted)

    def guess(self, session_id: str, request: GuessRequest) -> GuessResponse | ErrorResponse:
        """Submit a guess. Invalid guesses are reported in the response, not as errors."""
        hosted = self.session_manager.get_session(session_id)
        if not hosted:
            return self._not_found(session_id)
        outcome = hosted.loop.submit(request.value)
        return self._outcome_to_response(hosted, outcome)

    def restart(self, session_id: str) -> SessionResponse | ErrorResponse:
        hosted = self.session_manager.get_session(session_id)
        if not hosted:
            return self._not_found(session_id)
        hosted.loop.restart()
        return self._session_to_response(hosted, message=prompt_message())

    def end_session(self, session_id: str) -> bool:
        return self.session_manager.end_session(session_id)

    def list_sessions(self) -> list[str]:
        return self.session_manager.list_sessions()

    # =========================================================================
    # Conversion helpers
    # =========================================================================

    def _session_to_response(
        self,
        hosted: HostedSession,
        message: str | None = None,
    ) -> SessionResponse:
        session = hosted.session
        return SessionResponse(
            session_id=hosted.session_id,
            status=SessionStatus(session.status.value),
            status_text=session.status_text(),
            attempts=session.attempts,
            min_number=session.min_number,
            max_number=session.max_number,
            max_attempts=session.config.max_attempts,
            message=message,
            hint=range_hint(session.config),
            created_at=hosted.created_at,
        )

    def _outcome_to_response(self, hosted: HostedSession, outcome: Outcome) -> GuessResponse:
        session = hosted.session
        return GuessResponse(
            session_id=hosted.session_id,
            outcome=OutcomeType(outcome.kind.value),
            reason=InvalidReasonCode(outcome.reason.value) if outcome.reason else None,
            attempts=outcome.attempts,
            secret=outcome.secret,
            status=SessionStatus(session.status.value),
            status_text=session.status_text(),
            next_attempt=session.attempts,
            game_over=session.status.is_terminal,
            message=describe(outcome, session.config),
            hint=hint(outcome),
        )

    def _not_found(self, session_id: str) -> ErrorResponse:
        return ErrorResponse(
            error=f"Session {session_id} not found",
            error_code=ErrorCode.SESSION_NOT_FOUND,
        )
