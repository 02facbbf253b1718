"""Pydantic request/response schemas for API endpoints."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from src.models.models import GameLog, Player, PlayerResult, PlayerStats
from src.services.persistence_service import SaveResult
from src.services.player_stats_service import PlayerSummary


class PlayerUpdate(BaseModel):
    """Field edits for a roster player. Amounts are raw text as typed."""

    name: str | None = None
    amount: str | None = None
    chip_count: str | None = None
    venmo_status: bool | None = None


class BuyInUpdate(BaseModel):
    text: str


class PopulateRequest(BaseModel):
    buy_in: str | None = None


class EndGameRequest(BaseModel):
    location: str | None = None
    duration: int | None = None


class RenameRequest(BaseModel):
    name: str


class RosterResponse(BaseModel):
    """The game in progress with its running totals."""

    buy_in_text: str
    players: list[Player]
    total_in_play: float
    total_chip_count: float


class SaveStatusResponse(BaseModel):
    saved: bool
    status: str
    message: str

    @classmethod
    def from_result(cls, result: SaveResult) -> "SaveStatusResponse":
        return cls(saved=result.ok, status=result.status.value, message=result.message)


class PlayerResultView(BaseModel):
    id: UUID
    name: str
    buy_in: float
    final_chip_count: float
    venmo_status: bool
    profit_loss: float

    @classmethod
    def from_result(cls, result: PlayerResult) -> "PlayerResultView":
        return cls(
            id=result.id,
            name=result.name,
            buy_in=result.buy_in,
            final_chip_count=result.final_chip_count,
            venmo_status=result.venmo_status,
            profit_loss=result.profit_loss,
        )


class GameLogView(BaseModel):
    """A stored game with its derived figures."""

    id: UUID
    end_date: datetime
    formatted_date: str
    duration: int | None
    location: str | None
    players: list[PlayerResultView]
    total_buy_in: float
    total_chip_count: float
    total_profit_loss: float
    is_balanced: bool
    biggest_winner: str | None
    biggest_loser: str | None

    @classmethod
    def from_log(cls, game_log: GameLog) -> "GameLogView":
        winner = game_log.biggest_winner
        loser = game_log.biggest_loser
        return cls(
            id=game_log.id,
            end_date=game_log.end_date,
            formatted_date=game_log.formatted_date,
            duration=game_log.duration,
            location=game_log.location,
            players=[PlayerResultView.from_result(p) for p in game_log.players],
            total_buy_in=game_log.total_buy_in,
            total_chip_count=game_log.total_chip_count,
            total_profit_loss=game_log.total_profit_loss,
            is_balanced=game_log.is_balanced,
            biggest_winner=winner.name if winner else None,
            biggest_loser=loser.name if loser else None,
        )


class EndGameResponse(BaseModel):
    game_log: GameLogView
    save: SaveStatusResponse


class HistoryPointView(BaseModel):
    date: datetime
    profit_loss: float


class PlayerStatsResponse(BaseModel):
    """One player's history for the chart (ascending) and list (descending)."""

    name: str
    games_played: int
    total_profit_loss: float
    chart: list[HistoryPointView]
    history: list[HistoryPointView]
    games_up: int
    games_down: int
    average_net: float
    biggest_win: float
    biggest_loss: float
    highest_net: float
    lowest_net: float

    @classmethod
    def from_stats(
        cls, stats: PlayerStats, summary: PlayerSummary
    ) -> "PlayerStatsResponse":
        return cls(
            name=stats.name,
            games_played=summary.games_played,
            total_profit_loss=stats.total_profit_loss,
            chart=[
                HistoryPointView(date=p.date, profit_loss=p.profit_loss)
                for p in stats.game_history
            ],
            history=[
                HistoryPointView(date=p.date, profit_loss=p.profit_loss)
                for p in stats.game_history_desc
            ],
            games_up=summary.games_up,
            games_down=summary.games_down,
            average_net=summary.average_net,
            biggest_win=summary.biggest_win,
            biggest_loss=summary.biggest_loss,
            highest_net=summary.highest_net,
            lowest_net=summary.lowest_net,
        )


class PaymentLinkResponse(BaseModel):
    opened: str


class PaymentLinksResponse(BaseModel):
    app_url: str
    fallback_url: str
