import logging
import random
from typing import List, Optional
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from numberbaseball.game.engine import (
    GameEngine,
    compute_statistics,
    create_configuration,
    elapsed_seconds,
    max_attempts
)
from numberbaseball.game.errors import GuessError, InvalidConfiguration
from numberbaseball.game.models import GameState, GameWon, Judgment
from numberbaseball.memo.analyzer import DigitMemo, DigitStatus
from numberbaseball.ranking.leaderboard import GameRecord, LeaderboardManager, format_play_time
from numberbaseball.storage.json_store import JsonStorage

logger = logging.getLogger(__name__)

app = typer.Typer(help="Number Baseball: guess the secret number made of unique digits.")
console = Console()

STATUS_STYLE = {
    DigitStatus.UNKNOWN: "white",
    DigitStatus.EXCLUDED: "dim strike",
    DigitStatus.POSSIBLE: "yellow",
    DigitStatus.CONFIRMED: "bold green",
}

def format_judgment(result: Judgment) -> str:
    if result.strike == 0 and result.ball == 0:
        return "OUT"
    parts = []
    if result.strike:
        parts.append(f"{result.strike}S")
    if result.ball:
        parts.append(f"{result.ball}B")
    return " ".join(parts)

@app.command()
def play(
    digits: int = typer.Option(3, help="Number of digits in the secret (1-10)"),
    allow_leading_zero: bool = typer.Option(False, help="Allow the secret and guesses to start with 0"),
    seed: Optional[int] = typer.Option(None, help="Seed for a reproducible secret"),
    player: Optional[str] = typer.Option(None, help="Name to save a record under when you win"),
    results_dir: str = typer.Option("results", help="Directory for records")
):
    """
    Plays one game in the terminal. Type 'memo' for the digit memo, 'quit' to give up.
    """
    try:
        config = create_configuration(digits, allow_leading_zero)
    except InvalidConfiguration as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    storage = JsonStorage(results_dir)
    leaderboard = LeaderboardManager()
    leaderboard.load(storage.load_records(digits))

    def save_win(event: GameWon):
        save_win_record(leaderboard, storage, event)

    engine = GameEngine(
        rng=random.Random(seed) if seed is not None else None,
        on_game_won=save_win if player else None,
        player_name=player
    )
    state = engine.new_game(config)
    memo = DigitMemo.create(digits)

    console.print(f"[bold]⚾ Guess the {digits}-digit number![/bold] "
                  f"You have {max_attempts(config)} attempts.")

    while not state.is_finished:
        try:
            raw = console.input(f"[cyan]Guess {len(state.attempts) + 1}/{max_attempts(config)}:[/cyan] ")
        except EOFError:
            break

        command = raw.strip().lower().split()
        if command and command[0] in ("quit", "exit"):
            break
        if command and command[0] == "memo":
            memo = _handle_memo(memo, command[1:])
            continue

        try:
            state = engine.submit_guess(state, raw)
        except GuessError as e:
            console.print(f"[yellow]{escape(str(e))}[/yellow]")
            continue

        _print_history(state)

    _print_result(state)

@app.command()
def records(
    digits: int = typer.Option(3, help="Show records for this number of digits"),
    results_dir: str = typer.Option("results", help="Directory for records")
):
    """
    Displays the top records for a digit count.
    """
    storage = JsonStorage(results_dir)
    manager = LeaderboardManager()
    manager.load(storage.load_records(digits))
    _print_records(manager, digits)

def save_win_record(leaderboard: LeaderboardManager, storage: JsonStorage, event: GameWon) -> Optional[GameRecord]:
    """
    Saves the record to disk first and only then adds it to the in-memory board,
    so a failed save leaves both unchanged. A failed save must not end the session.
    """
    try:
        record = leaderboard.record_from_win(event)
        storage.save_record(record)
    except (ValueError, OSError) as e:
        logger.error(f"Failed to save record for {event.player_name}: {e}")
        console.print(f"[yellow]Warning: could not save record: {escape(str(e))}[/yellow]")
        return None

    leaderboard.add_record(record)
    console.print(f"[green]Record saved for {escape(record.player_name)}.[/green]")
    return record

def _handle_memo(memo: DigitMemo, args: List[str]) -> DigitMemo:
    try:
        if len(args) == 1 and args[0] == "reset":
            memo = memo.reset()
        elif len(args) == 1:
            memo = memo.cycle(args[0])
        elif len(args) == 2:
            # Positions are 1-based on the command line
            position = int(args[1])
            if not 1 <= position <= memo.digit_count:
                raise ValueError(f"Position must be between 1 and {memo.digit_count}, got {position}.")
            memo = memo.toggle_position(args[0], position - 1)
        elif args:
            raise ValueError("Usage: memo [reset | <digit> | <digit> <position>]")
    except ValueError as e:
        console.print(f"[yellow]{escape(str(e))}[/yellow]")

    _print_memo(memo)
    return memo

def _print_memo(memo: DigitMemo):
    cells = []
    for digit, note in memo.notes.items():
        label = digit
        if note.positions:
            label += "@" + ",".join(str(p + 1) for p in note.positions)
        cells.append(f"[{STATUS_STYLE[note.status]}]{label}[/]")
    console.print("Memo: " + "  ".join(cells))

def _print_history(state: GameState):
    table = Table(title="History")
    table.add_column("#", justify="right")
    table.add_column("Guess", style="cyan")
    table.add_column("Result", style="bold")

    for attempt in state.attempts:
        table.add_row(str(attempt.attempt_number), attempt.guess, format_judgment(attempt.result))
    console.print(table)

def _print_result(state: GameState):
    stats = compute_statistics(state)
    if state.is_won:
        console.print(f"[bold green]Correct! You got it in {stats.total_attempts} attempts "
                      f"({format_play_time(elapsed_seconds(state))}).[/bold green]")
    else:
        console.print("[bold]Game over.[/bold] Try again!")
    console.print(f"The answer was [bold]{state.secret}[/bold].")

    if stats.best_result:
        console.print(
            f"Best result: {format_judgment(stats.best_result)} | "
            f"Average: {stats.average_strike:.2f}S {stats.average_ball:.2f}B"
        )

def _print_records(manager: LeaderboardManager, digits: int):
    top = manager.get_top_records(digits)
    if not top:
        console.print(f"No {digits}-digit records yet.")
        return

    table = Table(title=f"{digits}-digit Top 10")
    table.add_column("Rank", justify="right")
    table.add_column("Player", style="cyan")
    table.add_column("Attempts", style="bold green", justify="right")
    table.add_column("Time", justify="right")
    table.add_column("Date")

    for i, r in enumerate(top):
        table.add_row(
            str(i + 1),
            escape(r.player_name),
            str(r.attempts),
            format_play_time(r.duration_seconds),
            r.created_at.strftime("%Y-%m-%d")
        )
    console.print(table)

if __name__ == "__main__":
    app()
