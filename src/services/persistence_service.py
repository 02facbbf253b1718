"""Saving and loading the game log collection in local key-value storage.

The whole collection is encoded as one JSON byte value under a fixed key and
overwritten in full on every save. Failures never raise; they are reported
through ``SaveResult`` / ``LoadResult`` so callers can decide whether to care.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from loguru import logger
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from src.dao.key_value_dao import get_value, set_value
from src.models.models import GameLog

GAME_LOGS_KEY = "GameLogs"

_game_logs_adapter = TypeAdapter(list[GameLog])


class SaveStatus(Enum):
    """Outcome of writing the collection."""

    SAVED = "saved"
    ENCODE_FAILED = "encode_failed"
    WRITE_FAILED = "write_failed"


class LoadStatus(Enum):
    """Outcome of reading the collection."""

    LOADED = "loaded"
    MISSING = "missing"
    CORRUPTED = "corrupted"
    READ_FAILED = "read_failed"


@dataclass(frozen=True)
class SaveResult:
    status: SaveStatus
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is SaveStatus.SAVED


@dataclass(frozen=True)
class LoadResult:
    status: LoadStatus
    game_logs: list[GameLog] = field(default_factory=list)
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is LoadStatus.LOADED


def encode_game_logs(game_logs: Sequence[GameLog]) -> bytes:
    """Serialize game logs to the stored JSON representation."""
    return _game_logs_adapter.dump_json(list(game_logs), by_alias=True)


def decode_game_logs(raw: bytes) -> list[GameLog]:
    """Parse the stored JSON representation. Raises ValidationError if malformed."""
    return _game_logs_adapter.validate_json(raw)


class GameLogStore:
    """Persists the full game log collection under a single key."""

    def __init__(self, engine: Engine, key: str = GAME_LOGS_KEY) -> None:
        self.engine = engine
        self.key = key

    def save(self, game_logs: Sequence[GameLog]) -> SaveResult:
        """Overwrite the stored collection with ``game_logs``."""
        try:
            payload = encode_game_logs(game_logs)
        except PydanticSerializationError as e:
            logger.error(f"Failed to encode {len(game_logs)} game logs: {e!s}")
            return SaveResult(SaveStatus.ENCODE_FAILED, f"Failed to encode: {e!s}")

        try:
            with Session(self.engine) as session:
                set_value(session, self.key, payload)
                session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to write game logs under '{self.key}': {e!s}")
            return SaveResult(SaveStatus.WRITE_FAILED, f"Failed to write: {e!s}")

        logger.debug(f"Saved {len(game_logs)} game logs ({len(payload)} bytes)")
        return SaveResult(SaveStatus.SAVED)

    def load(self) -> LoadResult:
        """Read the stored collection; empty unless the status is LOADED."""
        try:
            with Session(self.engine) as session:
                raw = get_value(session, self.key)
        except SQLAlchemyError as e:
            logger.error(f"Failed to read game logs under '{self.key}': {e!s}")
            return LoadResult(LoadStatus.READ_FAILED, message=f"Failed to read: {e!s}")

        if raw is None:
            logger.info("No saved game logs found")
            return LoadResult(LoadStatus.MISSING)

        try:
            game_logs = decode_game_logs(raw)
        except ValidationError as e:
            logger.warning(f"Discarding unreadable game logs: {e.error_count()} errors")
            return LoadResult(LoadStatus.CORRUPTED, message=str(e))

        logger.info(f"Loaded {len(game_logs)} game logs")
        return LoadResult(LoadStatus.LOADED, game_logs)
