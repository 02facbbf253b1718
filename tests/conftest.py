"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from datetime import datetime

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from src.models.models import GameLog, PlayerResult
from src.models.tables import KeyValueEntry  # noqa: F401  # registers the table
from src.services.persistence_service import GameLogStore
from src.services.session_service import SessionModel


def _memory_engine():
    return create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture
def test_engine():
    """Create an in-memory SQLite database for testing."""
    engine = _memory_engine()
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def store(test_engine) -> GameLogStore:
    """A game log store backed by the in-memory database."""
    return GameLogStore(test_engine)


@pytest.fixture
def broken_store() -> GameLogStore:
    """A store whose database has no tables, so every read and write fails."""
    engine = _memory_engine()
    yield GameLogStore(engine)
    engine.dispose()


@pytest.fixture
def session_model(store) -> SessionModel:
    """A session model with empty history."""
    return SessionModel(store)


@pytest.fixture
def make_game_log() -> Callable[..., GameLog]:
    """Build a game log from (name, buy_in, final_chip_count) tuples."""

    def _make(
        results: list[tuple[str, float, float]],
        end_date: datetime | None = None,
        location: str | None = None,
    ) -> GameLog:
        players = [
            PlayerResult(
                name=name, buy_in=buy_in, final_chip_count=chips, venmo_status=False
            )
            for name, buy_in, chips in results
        ]
        return GameLog(
            end_date=end_date or datetime(2026, 10, 1, 21, 0),
            location=location,
            players=players,
            total_buy_in=sum(p.buy_in for p in players),
            total_chip_count=sum(p.final_chip_count for p in players),
        )

    return _make


@pytest.fixture
def sample_game_logs(make_game_log) -> list[GameLog]:
    """Five games in storage order; Alice plays in three, not chronologically."""
    return [
        make_game_log(
            [("Alice", 20, 45), ("Bob", 20, 0)], end_date=datetime(2026, 9, 12, 23)
        ),
        make_game_log(
            [("Bob", 20, 30), ("Carol", 20, 10)], end_date=datetime(2026, 9, 5, 23)
        ),
        make_game_log(
            [("Carol", 50, 20), ("Alice", 50, 80)], end_date=datetime(2026, 8, 29, 23)
        ),
        make_game_log(
            [("alice", 20, 40), ("Dave", 20, 0)], end_date=datetime(2026, 9, 19, 23)
        ),
        make_game_log(
            [("Dave", 30, 40), ("Alice", 30, 20), ("Bob", 30, 30)],
            end_date=datetime(2026, 9, 26, 23),
        ),
    ]


@pytest.fixture
def seeded_model(store, sample_game_logs) -> SessionModel:
    """A session model hydrated from storage holding the sample games."""
    store.save(sample_game_logs)
    return SessionModel(store)
