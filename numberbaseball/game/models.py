from datetime import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

class GuessErrorReason(str, Enum):
    EMPTY_INPUT = "empty_input"
    WRONG_LENGTH = "wrong_length"
    NON_DIGIT_CHARACTER = "non_digit_character"
    LEADING_ZERO = "leading_zero"
    DUPLICATE_DIGIT = "duplicate_digit"

class GameConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    digit_count: int = Field(default=3, ge=1, le=10)  # Length of the secret
    allow_leading_zero: bool = False                  # May the first digit be '0'?

class Judgment(BaseModel):
    model_config = ConfigDict(frozen=True)

    strike: int                  # Right digit, right position
    ball: int                    # Right digit, wrong position
    is_correct: bool             # strike == digit_count

class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    reason: GuessErrorReason | None = None
    error: str | None = None     # Message suitable for re-prompting the player

class Attempt(BaseModel):
    model_config = ConfigDict(frozen=True)

    guess: str
    result: Judgment
    attempt_number: int          # 1-based
    timestamp: datetime = Field(default_factory=datetime.now)

class GameState(BaseModel):
    model_config = ConfigDict(frozen=True)

    secret: str
    attempts: tuple[Attempt, ...] = ()   # Chronological, append-only
    is_finished: bool = False
    is_won: bool = False
    config: GameConfig
    started_at: datetime = Field(default_factory=datetime.now)

class GameStatistics(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_attempts: int = 0
    best_result: Judgment | None = None
    average_strike: float = 0.0
    average_ball: float = 0.0

class GameWon(BaseModel):
    """
    Payload handed to the on_game_won callback. The engine never stores it.
    """
    model_config = ConfigDict(frozen=True)

    player_name: str | None = None
    secret_length: int
    attempt_count: int
    elapsed_seconds: int
