"""Live game session: the roster in progress plus the stored game history.

``SessionModel`` is the single write path for both. Observers registered with
``subscribe`` are called after every mutation so a presentation layer can
re-render from the model instead of holding its own copy.
"""

from collections.abc import Callable
from functools import wraps
import math
import threading
from uuid import UUID

from loguru import logger

from src.models.models import (
    MAX_AMOUNT,
    GameLog,
    Player,
    PlayerResult,
    PlayerStats,
    default_roster,
)
from src.services.persistence_service import GameLogStore, SaveResult
from src.services.player_stats_service import build_player_stats

type Observer = Callable[["SessionModel"], None]


def parse_amount(text: str | None) -> float | None:
    """Parse a currency entry such as '50', '$12.50' or ' 7 '.

    Returns None for anything that is not a number between 0 and
    ``MAX_AMOUNT``.
    """
    if text is None:
        return None
    cleaned = text.replace("$", "").strip()
    try:
        value = float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(value) or not 0 <= value <= MAX_AMOUNT:
        return None
    return value


def _synchronized(method):
    """Run a SessionModel method while holding the model's lock."""

    @wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper


class SessionModel:
    """State container for the game in progress and the game history.

    Every public method holds one re-entrant lock, so concurrent callers see
    each mutation, including its save, as a single step.
    """

    def __init__(self, store: GameLogStore) -> None:
        self.store = store
        self.buy_in_text = ""
        self._players: list[Player] = default_roster()
        self._game_logs: list[GameLog] = store.load().game_logs
        self._observers: list[Observer] = []
        # Request handlers run on worker threads; mutations must not interleave
        self._lock = threading.RLock()

    # Read side

    @property
    @_synchronized
    def players(self) -> tuple[Player, ...]:
        return tuple(self._players)

    @property
    @_synchronized
    def game_logs(self) -> tuple[GameLog, ...]:
        return tuple(self._game_logs)

    @property
    @_synchronized
    def sorted_game_logs(self) -> list[GameLog]:
        """Game logs newest first, as the history view lists them."""
        return sorted(self._game_logs, key=lambda log: log.end_date, reverse=True)

    @property
    @_synchronized
    def total_in_play(self) -> float:
        return sum(player.amount for player in self._players)

    @property
    @_synchronized
    def total_chip_count(self) -> float:
        return sum(player.chip_count for player in self._players)

    @_synchronized
    def find_player(self, player_id: UUID) -> Player | None:
        return next((p for p in self._players if p.id == player_id), None)

    @_synchronized
    def find_game_log(self, game_log_id: UUID) -> GameLog | None:
        return next((log for log in self._game_logs if log.id == game_log_id), None)

    @_synchronized
    def find_player_result(
        self, game_log_id: UUID, player_result_id: UUID
    ) -> PlayerResult | None:
        game_log = self.find_game_log(game_log_id)
        if game_log is None:
            return None
        return game_log.find_player(player_result_id)

    @_synchronized
    def get_unique_player_names(self) -> list[str]:
        """All names across every stored result, deduplicated and sorted."""
        return sorted({p.name for log in self._game_logs for p in log.players})

    @_synchronized
    def get_player_stats(self, player_result: PlayerResult) -> PlayerStats:
        return build_player_stats(self._game_logs, player_result.name)

    # Observers

    @_synchronized
    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register an observer; returns a callable that unregisters it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer(self)

    # Roster mutations

    @_synchronized
    def set_buy_in_text(self, text: str) -> None:
        self.buy_in_text = text
        self._notify()

    @_synchronized
    def add_player(self) -> Player:
        """Append ``Player {count+1}`` using the pending buy-in, if it parses."""
        player = Player(
            name=f"Player {len(self._players) + 1}",
            amount=parse_amount(self.buy_in_text) or 0.0,
        )
        self._players.append(player)
        logger.debug(f"Added {player.name} with buy-in {player.amount:.2f}")
        self._notify()
        return player

    @_synchronized
    def remove_player(self, player_id: UUID) -> bool:
        """Remove the player with this id. Missing ids are ignored."""
        player = self.find_player(player_id)
        if player is None:
            logger.debug(f"Player {player_id} not on roster, nothing to remove")
            return False
        self._players.remove(player)
        logger.debug(f"Removed {player.name}")
        self._notify()
        return True

    @_synchronized
    def update_player(  # noqa: PLR0913
        self,
        player_id: UUID,
        *,
        name: str | None = None,
        amount_text: str | None = None,
        chip_count_text: str | None = None,
        venmo_status: bool | None = None,
    ) -> Player | None:
        """Apply field edits to one player.

        Amount texts that do not parse leave the field as it was; an empty
        text clears it to zero.
        """
        player = self.find_player(player_id)
        if player is None:
            return None

        if name is not None:
            player.name = name
        if amount_text is not None:
            player.amount = _edited_amount(amount_text, player.amount)
        if chip_count_text is not None:
            player.chip_count = _edited_amount(chip_count_text, player.chip_count)
        if venmo_status is not None:
            player.venmo_status = venmo_status

        self._notify()
        return player

    @_synchronized
    def populate_amounts(self, buy_in_text: str | None = None) -> None:
        """Fill the buy-in into every player whose amount is still zero.

        Uses the pending buy-in text when none is given. A legitimately zero
        amount cannot be told apart from an unset one and is overwritten too.
        """
        text = self.buy_in_text if buy_in_text is None else buy_in_text
        amount = parse_amount(text)
        if amount is None:
            logger.debug(f"Ignoring unparseable buy-in '{text}'")
            return

        filled = 0
        for player in self._players:
            if player.amount == 0:
                player.amount = amount
                filled += 1
        logger.debug(f"Populated buy-in {amount:.2f} for {filled} players")
        self._notify()

    @_synchronized
    def reset_game(self) -> None:
        self.buy_in_text = ""
        self._players = default_roster()
        logger.info("Game reset to default roster")
        self._notify()

    @_synchronized
    def end_and_save_game(
        self, location: str | None = None, duration: int | None = None
    ) -> tuple[GameLog, SaveResult]:
        """Snapshot the roster into a new game log, store it and reset.

        The log is appended and the roster reset even when saving fails; the
        returned ``SaveResult`` tells the caller whether it hit storage.
        """
        game_log = GameLog(
            duration=duration,
            location=location,
            players=[player.to_result() for player in self._players],
            total_buy_in=self.total_in_play,
            total_chip_count=self.total_chip_count,
        )
        self._game_logs.append(game_log)
        result = self.store.save(self._game_logs)
        if result.ok:
            logger.success(
                f"Saved game {game_log.id} with {len(game_log.players)} players"
            )
        else:
            logger.warning(f"Game {game_log.id} kept in memory only: {result.message}")

        self.reset_game()
        return game_log, result

    # History mutations

    @_synchronized
    def update_player_name(
        self, game_log_id: UUID, player_result_id: UUID, new_name: str
    ) -> SaveResult | None:
        """Rename one stored result and re-save. None if either id is unknown."""
        for index, game_log in enumerate(self._game_logs):
            if game_log.id != game_log_id:
                continue
            updated = game_log.with_player_name(player_result_id, new_name)
            if updated is None:
                break
            self._game_logs[index] = updated
            logger.info(f"Renamed player {player_result_id} to '{new_name}'")
            result = self.store.save(self._game_logs)
            self._notify()
            return result

        logger.debug(f"No result {player_result_id} in game {game_log_id} to rename")
        return None

    @_synchronized
    def delete_game_log(self, game_log_id: UUID) -> SaveResult | None:
        """Remove a stored game and re-save. None if the id is unknown."""
        game_log = self.find_game_log(game_log_id)
        if game_log is None:
            return None
        self._game_logs.remove(game_log)
        logger.info(f"Deleted game {game_log_id}")
        result = self.store.save(self._game_logs)
        self._notify()
        return result


def _edited_amount(text: str, current: float) -> float:
    if not text.strip():
        return 0.0
    parsed = parse_amount(text)
    return current if parsed is None else parsed
