from enum import Enum
from pydantic import BaseModel, ConfigDict
from numberbaseball.game.rules import DIGITS

class DigitStatus(str, Enum):
    UNKNOWN = "unknown"
    EXCLUDED = "excluded"
    POSSIBLE = "possible"
    CONFIRMED = "confirmed"

NEXT_STATUS = {
    DigitStatus.UNKNOWN: DigitStatus.EXCLUDED,
    DigitStatus.EXCLUDED: DigitStatus.POSSIBLE,
    DigitStatus.POSSIBLE: DigitStatus.CONFIRMED,
    DigitStatus.CONFIRMED: DigitStatus.UNKNOWN,
}

class DigitNote(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: DigitStatus = DigitStatus.UNKNOWN
    positions: tuple[int, ...] = ()   # 0-based, sorted

class DigitMemo(BaseModel):
    """
    Player's scratchpad: what they believe about each digit.
    Keyed by digit symbol and independent of any GameState.
    """
    model_config = ConfigDict(frozen=True)

    digit_count: int
    notes: dict[str, DigitNote]

    @classmethod
    def create(cls, digit_count: int) -> "DigitMemo":
        return cls(digit_count=digit_count, notes={d: DigitNote() for d in DIGITS})

    def note(self, digit: str) -> DigitNote:
        self._check_digit(digit)
        return self.notes[digit]

    def cycle(self, digit: str) -> "DigitMemo":
        """
        unknown -> excluded -> possible -> confirmed -> unknown.
        Positions are kept only while the digit stays possible/confirmed.
        """
        current = self.note(digit)
        status = NEXT_STATUS[current.status]
        positions = current.positions
        if status in (DigitStatus.UNKNOWN, DigitStatus.EXCLUDED):
            positions = ()
        return self._with(digit, DigitNote(status=status, positions=positions))

    def toggle_position(self, digit: str, position: int) -> "DigitMemo":
        current = self.note(digit)
        if current.status not in (DigitStatus.POSSIBLE, DigitStatus.CONFIRMED):
            raise ValueError(f"Digit {digit} must be possible or confirmed to mark a position.")
        if not 0 <= position < self.digit_count:
            raise ValueError(f"Position must be between 0 and {self.digit_count - 1}, got {position}.")

        if position in current.positions:
            positions = tuple(p for p in current.positions if p != position)
        elif current.status == DigitStatus.CONFIRMED:
            # A confirmed digit sits in exactly one place
            positions = (position,)
        else:
            positions = tuple(sorted(current.positions + (position,)))
        return self._with(digit, current.model_copy(update={"positions": positions}))

    def reset(self) -> "DigitMemo":
        return DigitMemo.create(self.digit_count)

    def digits_with(self, status: DigitStatus) -> list[str]:
        return [d for d in DIGITS if self.notes[d].status == status]

    def _with(self, digit: str, note: DigitNote) -> "DigitMemo":
        return self.model_copy(update={"notes": {**self.notes, digit: note}})

    @staticmethod
    def _check_digit(digit: str):
        if digit not in DIGITS or len(digit) != 1:
            raise ValueError(f"Not a digit: {digit!r}")
