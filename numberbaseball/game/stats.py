from numberbaseball.game.models import GameState, GameStatistics, Judgment

def is_better(candidate: Judgment, best: Judgment) -> bool:
    # More strikes first, then more balls
    return (candidate.strike, candidate.ball) > (best.strike, best.ball)

def compute_statistics(state: GameState | None) -> GameStatistics:
    """
    Folds the attempt history into totals, the best judgment seen so far,
    and average strike/ball counts.
    """
    if state is None or not state.attempts:
        return GameStatistics()

    best = state.attempts[0].result
    total_strike = 0
    total_ball = 0

    for attempt in state.attempts:
        total_strike += attempt.result.strike
        total_ball += attempt.result.ball
        if is_better(attempt.result, best):
            best = attempt.result

    total = len(state.attempts)
    return GameStatistics(
        total_attempts=total,
        best_result=best,
        average_strike=total_strike / total,
        average_ball=total_ball / total
    )
