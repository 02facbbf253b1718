"""
Game history API endpoints.

This module lists stored games, corrects player names after the fact,
deletes games and serves per-player statistics.
"""

from uuid import UUID

from fastapi import APIRouter
from loguru import logger

from src.api.deps import SessionModelDep
from src.core.exceptions import NotFoundError, ValidationError
from src.schemas.errors import ErrorResponse
from src.schemas.schemas import (
    GameLogView,
    PlayerStatsResponse,
    RenameRequest,
    SaveStatusResponse,
)
from src.services.player_stats_service import summarize_history

router = APIRouter()


def _not_found(game_log_id: UUID, player_id: UUID | None = None) -> NotFoundError:
    details: dict[str, str | None] = {"game_log_id": str(game_log_id)}
    if player_id is None:
        return NotFoundError(message=f"Game {game_log_id} not found", details=details)
    details["player_id"] = str(player_id)
    return NotFoundError(
        message=f"Player {player_id} not found in game {game_log_id}",
        details=details,
    )


@router.get("/", response_model=list[GameLogView])
def read_logs(model: SessionModelDep) -> list[GameLogView]:
    """List stored games, newest first."""
    logs = model.sorted_game_logs
    logger.debug(f"Returning {len(logs)} game logs")
    return [GameLogView.from_log(log) for log in logs]


@router.get("/player-names", response_model=list[str])
def read_player_names(model: SessionModelDep) -> list[str]:
    """Every name used in a stored game, sorted, for name suggestions."""
    return model.get_unique_player_names()


@router.delete(
    "/{game_log_id}",
    response_model=SaveStatusResponse,
    responses={404: {"model": ErrorResponse}},
)
def delete_log(game_log_id: UUID, model: SessionModelDep) -> SaveStatusResponse:
    """Delete a stored game."""
    result = model.delete_game_log(game_log_id)
    if result is None:
        raise _not_found(game_log_id)
    return SaveStatusResponse.from_result(result)


@router.patch(
    "/{game_log_id}/players/{player_id}",
    response_model=SaveStatusResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
def rename_player(
    game_log_id: UUID,
    player_id: UUID,
    request: RenameRequest,
    model: SessionModelDep,
) -> SaveStatusResponse:
    """Correct a player's name in a stored game."""
    new_name = request.name.strip()
    if not new_name:
        raise ValidationError(
            message="Player name cannot be blank",
            details={"name": request.name},
        )
    result = model.update_player_name(game_log_id, player_id, new_name)
    if result is None:
        raise _not_found(game_log_id, player_id)
    return SaveStatusResponse.from_result(result)


@router.get(
    "/{game_log_id}/players/{player_id}/stats",
    response_model=PlayerStatsResponse,
    responses={404: {"model": ErrorResponse}},
)
def read_player_stats(
    game_log_id: UUID, player_id: UUID, model: SessionModelDep
) -> PlayerStatsResponse:
    """History of the player behind a stored result, matched by name."""
    player_result = model.find_player_result(game_log_id, player_id)
    if player_result is None:
        raise _not_found(game_log_id, player_id)
    stats = model.get_player_stats(player_result)
    return PlayerStatsResponse.from_stats(stats, summarize_history(stats))
