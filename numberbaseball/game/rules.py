import random
from numberbaseball.game.errors import InvalidConfiguration, LengthMismatch
from numberbaseball.game.models import GameConfig, GuessErrorReason, Judgment, ValidationResult

DIGITS = "0123456789"
MIN_DIGITS = 1
MAX_DIGITS = len(DIGITS)

def check_digit_count(digit_count: int):
    if not MIN_DIGITS <= digit_count <= MAX_DIGITS:
        raise InvalidConfiguration(
            f"Digit count must be between {MIN_DIGITS} and {MAX_DIGITS}, got {digit_count}."
        )

def generate_secret(config: GameConfig, rng: random.Random | None = None) -> str:
    """
    Draws `digit_count` distinct digits without replacement.
    When leading zero is disallowed the first digit comes from 1-9 only;
    '0' stays in the pool for the remaining positions.
    """
    check_digit_count(config.digit_count)
    rng = rng or random

    pool = list(DIGITS)
    result = []

    if not config.allow_leading_zero:
        first = rng.choice(pool[1:])
        pool.remove(first)
        result.append(first)

    while len(result) < config.digit_count:
        result.append(pool.pop(rng.randrange(len(pool))))

    return "".join(result)

def validate_guess(guess: str | None, config: GameConfig) -> ValidationResult:
    """
    Checks a raw guess against the configuration without looking at the secret.
    Rules run in a fixed order and the first violation is reported.
    """
    if guess is None or not str(guess).strip():
        return ValidationResult(
            is_valid=False,
            reason=GuessErrorReason.EMPTY_INPUT,
            error="Please enter a number."
        )

    guess = str(guess).strip()

    if len(guess) != config.digit_count:
        return ValidationResult(
            is_valid=False,
            reason=GuessErrorReason.WRONG_LENGTH,
            error=f"Enter exactly {config.digit_count} digits."
        )

    # str.isdigit() also accepts non-ASCII digits such as '²'
    if any(ch not in DIGITS for ch in guess):
        return ValidationResult(
            is_valid=False,
            reason=GuessErrorReason.NON_DIGIT_CHARACTER,
            error="Only the digits 0-9 are allowed."
        )

    if not config.allow_leading_zero and guess[0] == "0":
        return ValidationResult(
            is_valid=False,
            reason=GuessErrorReason.LEADING_ZERO,
            error="The number cannot start with 0."
        )

    if len(set(guess)) != len(guess):
        return ValidationResult(
            is_valid=False,
            reason=GuessErrorReason.DUPLICATE_DIGIT,
            error="Digits must not repeat."
        )

    return ValidationResult(is_valid=True)

def judge(secret: str, guess: str) -> Judgment:
    """
    Counts strikes (digit and position match) and balls (digit present
    elsewhere). Assumes the guess was validated; only lengths are checked.
    """
    if not secret or not guess:
        raise LengthMismatch("Both secret and guess are required.")
    if len(secret) != len(guess):
        raise LengthMismatch(
            f"Secret and guess must have the same length ({len(secret)} != {len(guess)})."
        )

    strike = 0
    ball = 0
    for s, g in zip(secret, guess):
        if s == g:
            strike += 1
        elif g in secret:
            ball += 1

    return Judgment(strike=strike, ball=ball, is_correct=strike == len(secret))
