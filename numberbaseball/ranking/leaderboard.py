from datetime import datetime
from typing import Dict, List
from pydantic import BaseModel, Field
from numberbaseball.game.models import GameWon

MAX_NAME_LENGTH = 20
TOP_N = 10

class GameRecord(BaseModel):
    player_name: str
    digit_count: int
    attempts: int
    duration_seconds: int
    created_at: datetime = Field(default_factory=datetime.now)

def format_play_time(seconds: int) -> str:
    mins, secs = divmod(seconds, 60)
    return f"{mins}m {secs}s" if mins > 0 else f"{secs}s"

class LeaderboardManager:
    """
    Keeps won-game records per digit count and ranks them:
    fewer attempts first, then shorter play time.
    """

    def __init__(self):
        # digit_count -> records
        self.records: Dict[int, List[GameRecord]] = {}

    @staticmethod
    def clean_record(record: GameRecord) -> GameRecord:
        name = record.player_name.strip()
        if not name:
            raise ValueError("Player name is required to save a record.")
        return record.model_copy(update={"player_name": name[:MAX_NAME_LENGTH]})

    def add_record(self, record: GameRecord) -> GameRecord:
        record = self.clean_record(record)
        self.records.setdefault(record.digit_count, []).append(record)
        return record

    def record_from_win(self, event: GameWon) -> GameRecord:
        """
        Builds a cleaned record for a win without adding it to the board.
        """
        return self.clean_record(GameRecord(
            player_name=event.player_name or "",
            digit_count=event.secret_length,
            attempts=event.attempt_count,
            duration_seconds=event.elapsed_seconds
        ))

    def load(self, records: List[GameRecord]):
        for record in records:
            self.records.setdefault(record.digit_count, []).append(record)

    def get_top_records(self, digit_count: int, limit: int = TOP_N) -> List[GameRecord]:
        records = self.records.get(digit_count, [])
        return sorted(records, key=lambda r: (r.attempts, r.duration_seconds))[:limit]

    def format_markdown(self, digit_count: int) -> str:
        records = self.get_top_records(digit_count)
        lines = [
            f"### {digit_count}-digit Top {TOP_N}",
            "",
            "| Rank | Player | Attempts | Time | Date |",
            "|:---|:---|:---|:---|:---|"
        ]

        for i, r in enumerate(records):
            lines.append(
                f"| {i+1} | {r.player_name} | **{r.attempts}** | {format_play_time(r.duration_seconds)} | {r.created_at:%Y-%m-%d} |"
            )

        return "\n".join(lines)
