"""Service for deriving a player's history across stored games."""

from collections.abc import Sequence
from dataclasses import dataclass

from loguru import logger

from src.models.models import GameLog, PlayerResult, PlayerStats


@dataclass(frozen=True)
class PlayerSummary:
    """Aggregate figures over a player's chronological history."""

    games_played: int = 0
    games_up: int = 0
    games_down: int = 0
    net: float = 0.0
    average_net: float = 0.0
    biggest_win: float = 0.0
    biggest_loss: float = 0.0
    highest_net: float = 0.0
    lowest_net: float = 0.0


def build_player_stats(game_logs: Sequence[GameLog], name: str) -> PlayerStats:
    """Collect every game containing a result named exactly ``name``.

    Matching is by display name only, so two people sharing a name are merged
    and a renamed player starts a separate history. Games keep storage order.
    """
    games: list[GameLog] = []
    results: list[PlayerResult] = []
    for game_log in game_logs:
        result = next((p for p in game_log.players if p.name == name), None)
        if result is None:
            continue
        games.append(game_log)
        results.append(result)

    logger.debug(f"Found {len(games)} of {len(game_logs)} games for '{name}'")
    return PlayerStats(name=name, games=games, player_results=results)


def summarize_history(stats: PlayerStats) -> PlayerSummary:
    """Summarize a player's results in date order.

    This calculates:
    - net: Total cumulative profit/loss
    - games_up / games_down: Games with positive / negative profit (zero is neither)
    - average_net: Average profit/loss per game
    - biggest_win: Largest single-game profit
    - biggest_loss: Largest single-game loss (stored as negative)
    - highest_net / lowest_net: Rolling max / min of the cumulative net
    """
    history = stats.game_history
    if not history:
        return PlayerSummary()

    games_up = 0
    games_down = 0
    biggest_win = 0.0
    biggest_loss = 0.0
    highest_net = 0.0
    lowest_net = 0.0
    cumulative_net = 0.0

    for point in history:
        game_net = point.profit_loss
        cumulative_net += game_net

        highest_net = max(highest_net, cumulative_net)
        lowest_net = min(lowest_net, cumulative_net)

        if game_net > 0:
            games_up += 1
            biggest_win = max(biggest_win, game_net)
        elif game_net < 0:
            games_down += 1
            biggest_loss = min(biggest_loss, game_net)

    return PlayerSummary(
        games_played=len(history),
        games_up=games_up,
        games_down=games_down,
        net=cumulative_net,
        average_net=cumulative_net / len(history),
        biggest_win=biggest_win,
        biggest_loss=biggest_loss,
        highest_net=highest_net,
        lowest_net=lowest_net,
    )
