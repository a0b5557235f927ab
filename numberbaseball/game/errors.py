from numberbaseball.game.models import GuessErrorReason

class GameError(Exception):
    """
    Base class for every failure raised by the game engine.
    """

class InvalidConfiguration(GameError, ValueError):
    pass

class GameAlreadyFinished(GameError):
    def __init__(self, message: str = "The game is already finished."):
        super().__init__(message)

class LengthMismatch(GameError, ValueError):
    """
    Raised by the judge when secret and guess are empty or differ in length.
    Callers are expected to validate first, so this signals a programming error.
    """

class GuessError(GameError):
    """
    A guess was rejected by validation. The state is left unchanged and the
    caller should re-prompt with `str(error)`.
    """
    reason: GuessErrorReason

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

class EmptyInput(GuessError):
    reason = GuessErrorReason.EMPTY_INPUT

class WrongLength(GuessError):
    reason = GuessErrorReason.WRONG_LENGTH

class NonDigitCharacter(GuessError):
    reason = GuessErrorReason.NON_DIGIT_CHARACTER

class LeadingZero(GuessError):
    reason = GuessErrorReason.LEADING_ZERO

class DuplicateDigit(GuessError):
    reason = GuessErrorReason.DUPLICATE_DIGIT

GUESS_ERRORS: dict[GuessErrorReason, type[GuessError]] = {
    cls.reason: cls
    for cls in (EmptyInput, WrongLength, NonDigitCharacter, LeadingZero, DuplicateDigit)
}

def guess_error_for(reason: GuessErrorReason, message: str) -> GuessError:
    return GUESS_ERRORS[reason](message)
