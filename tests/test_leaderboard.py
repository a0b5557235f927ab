from datetime import datetime
import pytest
from numberbaseball.game.models import GameWon
from numberbaseball.ranking.leaderboard import GameRecord, LeaderboardManager, format_play_time
from numberbaseball.storage.json_store import JsonStorage

def record(name, attempts, seconds, digits=3):
    return GameRecord(
        player_name=name,
        digit_count=digits,
        attempts=attempts,
        duration_seconds=seconds,
        created_at=datetime(2024, 5, 1)
    )

def test_ranking_by_attempts_then_time():
    manager = LeaderboardManager()
    manager.add_record(record("slow", 5, 300))
    manager.add_record(record("fast", 5, 60))
    manager.add_record(record("lucky", 2, 900))
    manager.add_record(record("other", 1, 1, digits=4))

    top = manager.get_top_records(3)
    assert [r.player_name for r in top] == ["lucky", "fast", "slow"]
    assert [r.player_name for r in manager.get_top_records(4)] == ["other"]
    assert manager.get_top_records(5) == []

def test_top_records_limited_to_ten():
    manager = LeaderboardManager()
    for i in range(15):
        manager.add_record(record(f"p{i}", 20 - i, 10))
    top = manager.get_top_records(3)
    assert len(top) == 10
    assert top[0].player_name == "p14"

def test_player_name_is_cleaned():
    manager = LeaderboardManager()
    saved = manager.add_record(record("  " + "x" * 30 + " ", 3, 10))
    assert saved.player_name == "x" * 20

    with pytest.raises(ValueError):
        manager.add_record(record("   ", 3, 10))

def test_record_from_win():
    manager = LeaderboardManager()
    saved = manager.record_from_win(GameWon(
        player_name="lee", secret_length=4, attempt_count=6, elapsed_seconds=75
    ))
    assert (saved.player_name, saved.digit_count, saved.attempts, saved.duration_seconds) == ("lee", 4, 6, 75)

    with pytest.raises(ValueError):
        manager.record_from_win(GameWon(secret_length=4, attempt_count=6, elapsed_seconds=75))

def test_format_markdown():
    manager = LeaderboardManager()
    manager.add_record(record("park", 4, 125))
    text = manager.format_markdown(3)
    assert "### 3-digit Top 10" in text
    assert "| 1 | park | **4** | 2m 5s | 2024-05-01 |" in text

def test_format_play_time():
    assert format_play_time(45) == "45s"
    assert format_play_time(60) == "1m 0s"

def test_json_storage_roundtrip(tmp_path):
    storage = JsonStorage(str(tmp_path / "results"))
    assert storage.load_records(3) == []

    storage.save_record(record("a", 4, 10))
    storage.save_record(record("b", 3, 20))
    storage.save_record(record("c", 7, 5, digits=5))

    assert [r.player_name for r in storage.load_records(3)] == ["a", "b"]
    assert (tmp_path / "results" / "records_5digit.json").exists()
    assert len(storage.load_all_records()) == 3

    manager = LeaderboardManager()
    manager.load(storage.load_all_records())
    assert manager.get_top_records(3)[0].player_name == "b"
