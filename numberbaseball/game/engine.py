import logging
import random
from datetime import datetime
from typing import Callable, Optional
from numberbaseball.game.errors import GameAlreadyFinished, guess_error_for
from numberbaseball.game.models import (
    Attempt,
    GameConfig,
    GameState,
    GameWon
)
from numberbaseball.game.rules import check_digit_count, generate_secret, judge, validate_guess
from numberbaseball.game.stats import compute_statistics  # noqa: F401

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 31

Clock = Callable[[], datetime]

def create_configuration(digit_count: int = 3, allow_leading_zero: bool = False) -> GameConfig:
    """
    Builds a GameConfig, raising InvalidConfiguration for a digit count outside 1-10.
    """
    check_digit_count(digit_count)
    return GameConfig(digit_count=digit_count, allow_leading_zero=allow_leading_zero)

def max_attempts(config: GameConfig) -> int:
    # Same budget for every digit count
    return MAX_ATTEMPTS

def initialize_game(
    config: GameConfig,
    rng: random.Random | None = None,
    now: Optional[Clock] = None
) -> GameState:
    secret = generate_secret(config, rng)
    logger.debug(f"New game: {config.digit_count} digits, leading zero allowed={config.allow_leading_zero}")
    return GameState(
        secret=secret,
        config=config,
        started_at=(now or datetime.now)()
    )

def reset_game(
    config: GameConfig,
    rng: random.Random | None = None,
    now: Optional[Clock] = None
) -> GameState:
    """
    Starts over with a fresh secret. Nothing from the previous game is reused.
    """
    return initialize_game(config, rng, now)

def submit_guess(state: GameState, guess: str, now: Optional[Clock] = None) -> GameState:
    """
    Validates and judges one guess, returning a new GameState.
    The input state is never modified; on any error no state is produced.
    """
    if state.is_finished:
        raise GameAlreadyFinished()

    validation = validate_guess(guess, state.config)
    if not validation.is_valid:
        raise guess_error_for(validation.reason, validation.error)

    guess = str(guess).strip()
    result = judge(state.secret, guess)

    attempt = Attempt(
        guess=guess,
        result=result,
        attempt_number=len(state.attempts) + 1,
        timestamp=(now or datetime.now)()
    )
    attempts = state.attempts + (attempt,)
    out_of_attempts = len(attempts) >= max_attempts(state.config)

    logger.debug(f"Attempt {attempt.attempt_number}: {guess} -> {result.strike}S {result.ball}B")
    if result.is_correct or out_of_attempts:
        logger.debug(f"Game finished after {len(attempts)} attempts, won={result.is_correct}")

    return state.model_copy(update={
        "attempts": attempts,
        "is_finished": result.is_correct or out_of_attempts,
        "is_won": result.is_correct
    })

def elapsed_seconds(state: GameState, now: Optional[Clock] = None) -> int:
    """
    Whole seconds of play: up to the last attempt once the game is over,
    up to `now` while it is still running.
    """
    if state.is_finished and state.attempts:
        end = state.attempts[-1].timestamp
    else:
        end = (now or datetime.now)()
    return max(0, int((end - state.started_at).total_seconds()))

class GameEngine:
    """
    Session helper around the pure game functions.
    Holds the injected randomness and clock, and notifies `on_game_won`
    once when a guess wins the game. Callback failures are logged, not raised.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Optional[Clock] = None,
        on_game_won: Optional[Callable[[GameWon], None]] = None,
        player_name: str | None = None
    ):
        self.rng = rng
        self.clock = clock or datetime.now
        self.on_game_won = on_game_won
        self.player_name = player_name

    def new_game(self, config: GameConfig) -> GameState:
        return initialize_game(config, self.rng, self.clock)

    def submit_guess(self, state: GameState, guess: str) -> GameState:
        new_state = submit_guess(state, guess, self.clock)

        if new_state.is_won and self.on_game_won:
            event = GameWon(
                player_name=self.player_name,
                secret_length=new_state.config.digit_count,
                attempt_count=len(new_state.attempts),
                elapsed_seconds=elapsed_seconds(new_state, self.clock)
            )
            # The won state is returned even if the listener fails
            try:
                self.on_game_won(event)
            except Exception as e:
                logger.exception(f"on_game_won callback failed: {e}")

        return new_state
