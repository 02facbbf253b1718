"""Pydantic data models for the Rebuy poker ledger."""

from datetime import datetime
import math
from typing import NamedTuple
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

# Chips and buy-ins are currency amounts; anything closer than a cent balances
BALANCE_EPSILON = 0.01

DEFAULT_ROSTER_SIZE = 4

# Upper bound on a single entered amount, so roster totals stay finite
MAX_AMOUNT = 1_000_000_000_000.0


def _require_finite(value: float) -> float:
    if not math.isfinite(value):
        raise ValueError(f"Cannot store non-finite amount {value!r}")
    return value


class PlayerResult(BaseModel):
    """One player's outcome in a finished game."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    id: UUID = Field(default_factory=uuid4)
    name: str
    buy_in: float = Field(ge=0, allow_inf_nan=False)
    final_chip_count: float = Field(ge=0, allow_inf_nan=False)
    venmo_status: bool = False

    @field_serializer("buy_in", "final_chip_count", when_used="json")
    def serialize_amount(self, value: float) -> float:
        return _require_finite(value)

    @property
    def profit_loss(self) -> float:
        return self.final_chip_count - self.buy_in

    def with_name(self, new_name: str) -> "PlayerResult":
        """Return a copy of this result with only the name changed."""
        return self.model_copy(update={"name": new_name})


class GameLog(BaseModel):
    """Record of one completed game.

    Totals are captured when the game ends and are never recomputed from
    ``players`` afterwards.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    id: UUID = Field(default_factory=uuid4)
    end_date: datetime = Field(default_factory=datetime.now)
    duration: int | None = None
    location: str | None = None
    players: list[PlayerResult] = Field(default_factory=list)
    total_buy_in: float = Field(allow_inf_nan=False)
    total_chip_count: float = Field(allow_inf_nan=False)

    @field_serializer("total_buy_in", "total_chip_count", when_used="json")
    def serialize_total(self, value: float) -> float:
        # JSON would write inf/nan as null, which the next load cannot read back
        return _require_finite(value)

    @property
    def is_balanced(self) -> bool:
        return abs(self.total_chip_count - self.total_buy_in) < BALANCE_EPSILON

    @property
    def total_profit_loss(self) -> float:
        return sum(player.profit_loss for player in self.players)

    @property
    def biggest_winner(self) -> PlayerResult | None:
        if not self.players:
            return None
        return max(self.players, key=lambda player: player.profit_loss)

    @property
    def biggest_loser(self) -> PlayerResult | None:
        if not self.players:
            return None
        return min(self.players, key=lambda player: player.profit_loss)

    @property
    def formatted_date(self) -> str:
        """Medium date with short time, e.g. 'Oct 7, 2026 at 9:15 PM'."""
        hour = self.end_date.hour % 12 or 12
        return (
            f"{self.end_date:%b} {self.end_date.day}, {self.end_date.year} "
            + f"at {hour}:{self.end_date:%M %p}"
        )

    def find_player(self, player_id: UUID) -> PlayerResult | None:
        return next((p for p in self.players if p.id == player_id), None)

    def with_player_name(self, player_id: UUID, new_name: str) -> "GameLog | None":
        """Return a copy with one player's name rewritten, or None if absent."""
        if self.find_player(player_id) is None:
            return None
        players = [
            p.with_name(new_name) if p.id == player_id else p for p in self.players
        ]
        return self.model_copy(update={"players": players})


class Player(BaseModel):
    """A player on the live roster of the game in progress."""

    model_config = ConfigDict(validate_assignment=True)

    id: UUID = Field(default_factory=uuid4)
    name: str
    amount: float = Field(default=0.0, ge=0, le=MAX_AMOUNT)
    venmo_status: bool = False
    chip_count: float = Field(default=0.0, ge=0, le=MAX_AMOUNT)

    def to_result(self) -> PlayerResult:
        """Snapshot this player into a finished-game result."""
        return PlayerResult(
            name=self.name,
            buy_in=self.amount,
            final_chip_count=self.chip_count,
            venmo_status=self.venmo_status,
        )


def default_roster(size: int = DEFAULT_ROSTER_SIZE) -> list[Player]:
    """Build a fresh roster of ``Player 1`` .. ``Player N`` with zeroed fields."""
    return [Player(name=f"Player {n}") for n in range(1, size + 1)]


class HistoryPoint(NamedTuple):
    date: datetime
    profit_loss: float


class PlayerStats(BaseModel):
    """A single player's results across every stored game, matched by name.

    ``games`` and ``player_results`` are parallel lists in storage order.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    games: list[GameLog] = Field(default_factory=list)
    player_results: list[PlayerResult] = Field(default_factory=list)

    @property
    def total_profit_loss(self) -> float:
        return sum(result.profit_loss for result in self.player_results)

    @property
    def game_history(self) -> list[HistoryPoint]:
        """Chronological (oldest first) date/profit pairs, for charting."""
        points = [
            HistoryPoint(game.end_date, result.profit_loss)
            for game, result in zip(self.games, self.player_results, strict=True)
        ]
        return sorted(points, key=lambda point: point.date)

    @property
    def game_history_desc(self) -> list[HistoryPoint]:
        """Newest first, for the game detail list."""
        return sorted(self.game_history, key=lambda point: point.date, reverse=True)
