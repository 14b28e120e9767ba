"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the contract between web/mobile clients and the engine.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has ended
- INVALID_CONFIG: Requested range or attempt limit is not usable
- INTERNAL_ERROR: Unexpected server failure
"""

from enum import Enum
from typing import Optional, Union
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    """Game status values."""
    INITIAL = "initial"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class OutcomeType(str, Enum):
    """Result of a guess."""
    INVALID = "invalid"
    TOO_HIGH = "too_high"
    TOO_LOW = "too_low"
    CORRECT = "correct"
    LOST = "lost"
    ALREADY_WON = "already_won"
    ALREADY_LOST = "already_lost"


class InvalidReasonCode(str, Enum):
    """Why a guess was rejected."""
    NOT_A_NUMBER = "not_a_number"
    OUT_OF_RANGE = "out_of_range"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    INVALID_CONFIG = "INVALID_CONFIG"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Request Models
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Request to create a new game session. Omitted fields use server defaults."""
    min_number: Optional[int] = Field(None, description="Lowest possible secret")
    max_number: Optional[int] = Field(None, description="Highest possible secret")
    max_attempts: Optional[int] = Field(
        None, ge=1, description="Attempt limit; omit for unlimited guesses"
    )
    seed: Optional[int] = Field(None, description="Seed for reproducible secrets")


class GuessRequest(BaseModel):
    """A guess exactly as the player entered it."""
    value: Union[int, str] = Field(..., description="The guess, number or raw text")


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class SessionResponse(BaseModel):
    """Current state of a session. The secret is never included."""
    session_id: str
    status: SessionStatus
    status_text: str = Field(description="Display key: ready, in progress, won, try again")
    attempts: int = Field(description="Number of the attempt the player is on")
    min_number: int
    max_number: int
    max_attempts: Optional[int] = None
    message: Optional[str] = None
    hint: Optional[str] = None
    created_at: float = 0.0
    api_version: str = "v1"


class GuessResponse(BaseModel):
    """Outcome of a guess."""
    session_id: str
    outcome: OutcomeType
    reason: Optional[InvalidReasonCode] = None
    attempts: Optional[int] = Field(
        None, description="Attempt number the guess counted as (not set for invalid guesses)"
    )
    secret: Optional[int] = Field(None, description="Revealed only when the game ends")
    status: SessionStatus
    status_text: str
    next_attempt: int = Field(description="Attempt counter after this guess")
    game_over: bool = False
    message: str
    hint: Optional[str] = None
    api_version: str = "v1"


class SessionListResponse(BaseModel):
    """List of session ids."""
    sessions: list[str] = Field(default_factory=list)
    count: int = 0


class EndSessionResponse(BaseModel):
    """Result of ending a session."""
    success: bool
    session_id: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    service: str = "secret-number"
    version: str = "0.1.0"
