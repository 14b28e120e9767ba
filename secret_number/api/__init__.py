"""
API Module - Web interface.

Exposes the engine via REST API. Clients:
1. Create a game session
2. Submit guesses and render the outcomes
3. Restart for another round
4. Optionally listen on a WebSocket for pushed updates

All state is session-scoped and in-memory.
"""

from .schemas import (
    # Requests
    CreateSessionRequest,
    GuessRequest,
    # Responses
    SessionResponse,
    GuessResponse,
    ErrorResponse,
    SessionListResponse,
    EndSessionResponse,
    HealthResponse,
    # Enums
    SessionStatus,
    OutcomeType,
    InvalidReasonCode,
    ErrorCode,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateSessionRequest",
    "GuessRequest",
    # Responses
    "SessionResponse",
    "GuessResponse",
    "ErrorResponse",
    "SessionListResponse",
    "EndSessionResponse",
    "HealthResponse",
    # Enums
    "SessionStatus",
    "OutcomeType",
    "InvalidReasonCode",
    "ErrorCode",
    # Service
    "APIService",
    "create_app",
]
