import random
import pytest
from numberbaseball.game.errors import InvalidConfiguration, LengthMismatch
from numberbaseball.game.models import GameConfig, GuessErrorReason
from numberbaseball.game.rules import generate_secret, judge, validate_guess

NO_ZERO = GameConfig(digit_count=3, allow_leading_zero=False)

@pytest.mark.parametrize("digit_count", range(1, 11))
@pytest.mark.parametrize("allow_leading_zero", [True, False])
def test_secret_shape(digit_count, allow_leading_zero):
    config = GameConfig(digit_count=digit_count, allow_leading_zero=allow_leading_zero)
    rng = random.Random(digit_count)
    for _ in range(50):
        secret = generate_secret(config, rng)
        assert len(secret) == digit_count
        assert len(set(secret)) == digit_count
        assert secret.isdigit()
        if not allow_leading_zero:
            assert secret[0] != "0"

def test_ten_digits_without_leading_zero_uses_every_digit():
    secret = generate_secret(GameConfig(digit_count=10), random.Random(3))
    assert sorted(secret) == list("0123456789")
    assert secret[0] != "0"

def test_seeded_secret_is_reproducible():
    config = GameConfig(digit_count=5, allow_leading_zero=True)
    assert generate_secret(config, random.Random(42)) == generate_secret(config, random.Random(42))

def test_leading_zero_can_appear_when_allowed():
    config = GameConfig(digit_count=10, allow_leading_zero=True)
    rng = random.Random(0)
    firsts = {generate_secret(config, rng)[0] for _ in range(300)}
    assert "0" in firsts

def test_secret_rejects_bad_digit_count():
    with pytest.raises(InvalidConfiguration):
        generate_secret(GameConfig.model_construct(digit_count=11, allow_leading_zero=False))
    with pytest.raises(InvalidConfiguration):
        generate_secret(GameConfig.model_construct(digit_count=0, allow_leading_zero=True))

def test_valid_guess():
    result = validate_guess("123", NO_ZERO)
    assert result.is_valid is True
    assert result.reason is None

@pytest.mark.parametrize("guess, reason", [
    (None, GuessErrorReason.EMPTY_INPUT),
    ("", GuessErrorReason.EMPTY_INPUT),
    ("   ", GuessErrorReason.EMPTY_INPUT),
    ("12", GuessErrorReason.WRONG_LENGTH),
    ("1234", GuessErrorReason.WRONG_LENGTH),
    ("12a", GuessErrorReason.NON_DIGIT_CHARACTER),
    ("1²3", GuessErrorReason.NON_DIGIT_CHARACTER),
    ("012", GuessErrorReason.LEADING_ZERO),
    ("112", GuessErrorReason.DUPLICATE_DIGIT),
])
def test_invalid_guess_reasons(guess, reason):
    result = validate_guess(guess, NO_ZERO)
    assert result.is_valid is False
    assert result.reason == reason
    assert result.error

def test_check_order_reports_first_violation():
    # Wrong length wins over duplicates
    assert validate_guess("1122", NO_ZERO).reason == GuessErrorReason.WRONG_LENGTH
    # Non-digit wins over leading zero
    assert validate_guess("0a1", NO_ZERO).reason == GuessErrorReason.NON_DIGIT_CHARACTER
    # Leading zero wins over duplicates
    assert validate_guess("001", NO_ZERO).reason == GuessErrorReason.LEADING_ZERO

def test_leading_zero_allowed():
    config = GameConfig(digit_count=3, allow_leading_zero=True)
    assert validate_guess("012", config).is_valid is True
    assert validate_guess("001", config).reason == GuessErrorReason.DUPLICATE_DIGIT

def test_surrounding_whitespace_is_ignored():
    assert validate_guess(" 123 ", NO_ZERO).is_valid is True

def test_validation_is_idempotent():
    for guess in ["123", "012", "112", "1a3", ""]:
        assert validate_guess(guess, NO_ZERO) == validate_guess(guess, NO_ZERO)

@pytest.mark.parametrize("secret, guess, strike, ball, correct", [
    ("123", "123", 3, 0, True),
    ("123", "132", 1, 2, False),
    ("123", "456", 0, 0, False),
    ("123", "312", 0, 3, False),
    ("4071", "4170", 2, 2, False),
    ("9", "9", 1, 0, True),
])
def test_judge(secret, guess, strike, ball, correct):
    result = judge(secret, guess)
    assert (result.strike, result.ball, result.is_correct) == (strike, ball, correct)

def test_judge_bounds_for_random_pairs():
    rng = random.Random(1)
    config = GameConfig(digit_count=4, allow_leading_zero=True)
    for _ in range(200):
        secret = generate_secret(config, rng)
        guess = generate_secret(config, rng)
        result = judge(secret, guess)
        assert result.strike + result.ball <= 4
        assert result.is_correct == (secret == guess)

def test_judge_length_mismatch():
    with pytest.raises(LengthMismatch):
        judge("123", "12")
    with pytest.raises(LengthMismatch):
        judge("", "")
