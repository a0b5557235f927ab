import json
import logging
from pathlib import Path
from typing import List
from numberbaseball.ranking.leaderboard import GameRecord

logger = logging.getLogger(__name__)

class JsonStorage:
    """
    Persists won-game records to one JSON file per digit count.
    """

    def __init__(self, base_path: str = "results"):
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _records_path(self, digit_count: int) -> Path:
        return self.base_path / f"records_{digit_count}digit.json"

    def save_record(self, record: GameRecord):
        records = self.load_records(record.digit_count)
        records.append(record)
        with open(self._records_path(record.digit_count), 'w') as f:
            json.dump([r.model_dump(mode="json") for r in records], f, indent=2)
        logger.info(f"Saved {record.digit_count}-digit record for {record.player_name}: {record.attempts} attempts")

    def load_records(self, digit_count: int) -> List[GameRecord]:
        path = self._records_path(digit_count)
        if not path.exists():
            return []

        with open(path, 'r') as f:
            data = json.load(f)
        return [GameRecord.model_validate(r) for r in data]

    def load_all_records(self) -> List[GameRecord]:
        records = []
        for file in sorted(self.base_path.glob("records_*digit.json")):
            with open(file, 'r') as f:
                records.extend(GameRecord.model_validate(r) for r in json.load(f))
        return records
