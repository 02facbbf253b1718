"""Unit tests for the ledger data models."""

from datetime import datetime
from uuid import uuid4

from pydantic import ValidationError
import pytest

from src.models.models import (
    MAX_AMOUNT,
    GameLog,
    HistoryPoint,
    Player,
    PlayerResult,
    PlayerStats,
    default_roster,
)


def _result(name: str, buy_in: float, chips: float) -> PlayerResult:
    return PlayerResult(
        name=name, buy_in=buy_in, final_chip_count=chips, venmo_status=False
    )


class TestPlayerResult:
    """Tests for the PlayerResult model."""

    def test_profit_loss_is_chips_minus_buy_in(self):
        """Test that profit/loss is final chips minus buy-in."""
        assert _result("A", 20, 55.5).profit_loss == pytest.approx(35.5)
        assert _result("B", 40, 10).profit_loss == pytest.approx(-30.0)

    def test_ids_are_unique(self):
        """Test that every result gets its own id."""
        assert _result("A", 1, 1).id != _result("A", 1, 1).id

    def test_fields_are_frozen(self):
        """Test that a stored result cannot be modified in place."""
        result = _result("A", 20, 20)
        with pytest.raises(ValidationError):
            result.buy_in = 50

    def test_negative_buy_in_rejected(self):
        """Test that a negative buy-in fails validation."""
        with pytest.raises(ValidationError):
            _result("A", -1, 0)

    def test_with_name_keeps_everything_else(self):
        """Test that renaming copies id, amounts and payment flag."""
        result = PlayerResult(
            name="Old", buy_in=20, final_chip_count=35, venmo_status=True
        )
        renamed = result.with_name("New")

        assert renamed.name == "New"
        assert renamed.id == result.id
        assert renamed.buy_in == result.buy_in
        assert renamed.final_chip_count == result.final_chip_count
        assert renamed.venmo_status is True
        assert result.name == "Old"

    def test_dumps_camel_case_keys(self):
        """Test that results dump with camelCase keys."""
        data = _result("A", 20, 30).model_dump(by_alias=True)
        assert set(data) == {"id", "name", "buyIn", "finalChipCount", "venmoStatus"}


class TestGameLog:
    """Tests for GameLog derived values."""

    @pytest.mark.parametrize(
        ("total_chip_count", "balanced"),
        [
            (100.0, True),
            (100.004, True),
            (99.995, True),
            (100.02, False),
            (99.0, False),
        ],
    )
    def test_is_balanced_within_a_cent(self, total_chip_count, balanced):
        """Test that totals within a cent of each other count as balanced."""
        log = GameLog(total_buy_in=100.0, total_chip_count=total_chip_count)
        assert log.is_balanced is balanced

    def test_totals_are_not_recomputed_from_players(self):
        """Test that stored totals are kept as given."""
        log = GameLog(
            players=[_result("A", 20, 20)], total_buy_in=500, total_chip_count=480
        )
        assert log.total_buy_in == pytest.approx(500)
        assert log.total_chip_count == pytest.approx(480)
        assert log.is_balanced is False

    def test_total_profit_loss_sums_players(self):
        """Test that total profit/loss adds up each player's result."""
        log = GameLog(
            players=[_result("A", 20, 50), _result("B", 20, 0), _result("C", 20, 15)],
            total_buy_in=60,
            total_chip_count=65,
        )
        assert log.total_profit_loss == pytest.approx(5.0)

    def test_biggest_winner_and_loser(self):
        """Test the players with the largest and smallest profit."""
        log = GameLog(
            players=[_result("A", 20, 30), _result("B", 20, 5), _result("C", 20, 60)],
            total_buy_in=60,
            total_chip_count=95,
        )
        assert log.biggest_winner.name == "C"
        assert log.biggest_loser.name == "B"

    def test_ties_resolve_to_first_player(self):
        """Test that ties go to the first player in roster order."""
        log = GameLog(
            players=[_result("A", 20, 20), _result("B", 20, 20)],
            total_buy_in=40,
            total_chip_count=40,
        )
        assert log.biggest_winner.name == "A"
        assert log.biggest_loser.name == "A"

    def test_empty_game_has_no_winner_or_loser(self):
        """Test that a game without players has no winner or loser."""
        log = GameLog(total_buy_in=0, total_chip_count=0)
        assert log.biggest_winner is None
        assert log.biggest_loser is None
        assert log.total_profit_loss == 0

    def test_formatted_date(self):
        """Test the medium date with short time format."""
        log = GameLog(
            end_date=datetime(2026, 10, 7, 21, 5), total_buy_in=0, total_chip_count=0
        )
        assert log.formatted_date == "Oct 7, 2026 at 9:05 PM"

    def test_formatted_date_midnight(self):
        """Test that hour zero is shown as 12 AM."""
        log = GameLog(
            end_date=datetime(2026, 1, 15, 0, 30), total_buy_in=0, total_chip_count=0
        )
        assert log.formatted_date == "Jan 15, 2026 at 12:30 AM"

    def test_with_player_name_rewrites_only_that_player(self):
        """Test that a rename returns a copy with one name changed."""
        a, b = _result("A", 20, 30), _result("B", 20, 10)
        log = GameLog(players=[a, b], total_buy_in=40, total_chip_count=40)

        updated = log.with_player_name(b.id, "Bea")

        assert updated is not None
        assert [p.name for p in updated.players] == ["A", "Bea"]
        assert [p.id for p in updated.players] == [a.id, b.id]
        assert updated.id == log.id
        assert updated.end_date == log.end_date
        assert [p.name for p in log.players] == ["A", "B"]

    def test_with_player_name_unknown_player_returns_none(self):
        """Test that renaming an unknown result returns None."""
        a = _result("A", 20, 30)
        log = GameLog(players=[a], total_buy_in=20, total_chip_count=30)
        assert log.with_player_name(uuid4(), "Y") is None

    def test_validates_from_camel_case_json(self):
        """Test that a log validates from its stored JSON form."""
        raw = (
            '{"id": "6f1c8a55-1c55-4d0e-9a57-1f1b8a0c2d11",'
            ' "endDate": "2026-10-07T21:05:00", "duration": 180,'
            ' "location": "Kitchen", "players": [{"id":'
            ' "0b7d0f9e-3a42-4a4e-8f57-51f0e0b7c6a2", "name": "A", "buyIn": 20,'
            ' "finalChipCount": 35, "venmoStatus": true}],'
            ' "totalBuyIn": 20, "totalChipCount": 35}'
        )
        log = GameLog.model_validate_json(raw)

        assert log.duration == 180
        assert log.location == "Kitchen"
        assert log.players[0].buy_in == pytest.approx(20)
        assert log.players[0].venmo_status is True

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_totals_rejected(self, value):
        """Test that infinite or NaN totals fail validation."""
        with pytest.raises(ValidationError):
            GameLog(total_buy_in=value, total_chip_count=0)
        with pytest.raises(ValidationError):
            GameLog(total_buy_in=0, total_chip_count=value)


class TestPlayer:
    """Tests for the live roster Player model."""

    def test_defaults(self):
        """Test that a new roster player starts at zero and unpaid."""
        player = Player(name="Player 1")
        assert player.amount == 0
        assert player.chip_count == 0
        assert player.venmo_status is False

    def test_assignment_is_validated(self):
        """Test that assigning a negative amount fails validation."""
        player = Player(name="Player 1")
        with pytest.raises(ValidationError):
            player.amount = -5

    def test_amounts_are_capped(self):
        """Test that amounts above the cap fail validation."""
        player = Player(name="Player 1", amount=MAX_AMOUNT)
        with pytest.raises(ValidationError):
            player.chip_count = MAX_AMOUNT * 10
        with pytest.raises(ValidationError):
            Player(name="Player 2", amount=float("inf"))

    def test_to_result_snapshots_fields(self):
        """Test that a result copies the player's fields under a new id."""
        player = Player(name="Sam", amount=25, chip_count=60, venmo_status=True)

        result = player.to_result()

        assert result.name == "Sam"
        assert result.buy_in == pytest.approx(25)
        assert result.final_chip_count == pytest.approx(60)
        assert result.venmo_status is True
        assert result.id != player.id

    def test_default_roster(self):
        """Test that the default roster is Player 1 to Player 4."""
        roster = default_roster()
        assert [p.name for p in roster] == [
            "Player 1",
            "Player 2",
            "Player 3",
            "Player 4",
        ]
        assert len({p.id for p in roster}) == 4


class TestPlayerStats:
    """Tests for PlayerStats history orderings."""

    def test_histories_are_sorted_both_ways(self):
        """Test the ascending chart and descending list orderings."""
        dates = [datetime(2026, 9, 12), datetime(2026, 8, 29), datetime(2026, 9, 26)]
        results = [_result("A", 20, 45), _result("A", 50, 80), _result("A", 30, 20)]
        games = [
            GameLog(end_date=d, players=[r], total_buy_in=0, total_chip_count=0)
            for d, r in zip(dates, results, strict=True)
        ]
        stats = PlayerStats(name="A", games=games, player_results=results)

        assert stats.game_history == [
            HistoryPoint(datetime(2026, 8, 29), 30.0),
            HistoryPoint(datetime(2026, 9, 12), 25.0),
            HistoryPoint(datetime(2026, 9, 26), -10.0),
        ]
        assert stats.game_history_desc == list(reversed(stats.game_history))
        assert stats.total_profit_loss == pytest.approx(45.0)

    def test_empty_stats(self):
        """Test that stats with no games are empty and zero."""
        stats = PlayerStats(name="Nobody")
        assert stats.game_history == []
        assert stats.game_history_desc == []
        assert stats.total_profit_loss == 0
