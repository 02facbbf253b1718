"""
Roster API endpoints.

This module exposes the game in progress: the live players, the pending
buy-in, and the add/remove/reset/end-game actions.
"""

from uuid import UUID

from fastapi import APIRouter
from loguru import logger

from src.api.deps import SessionModelDep
from src.core.exceptions import NotFoundError
from src.models.models import Player
from src.schemas.errors import ErrorResponse
from src.schemas.schemas import (
    BuyInUpdate,
    EndGameRequest,
    EndGameResponse,
    GameLogView,
    PlayerUpdate,
    PopulateRequest,
    RosterResponse,
    SaveStatusResponse,
)
from src.services.session_service import SessionModel

router = APIRouter()


def _roster(model: SessionModel) -> RosterResponse:
    return RosterResponse(
        buy_in_text=model.buy_in_text,
        players=list(model.players),
        total_in_play=model.total_in_play,
        total_chip_count=model.total_chip_count,
    )


@router.get("/", response_model=RosterResponse)
def read_roster(model: SessionModelDep) -> RosterResponse:
    """Return the live roster and running totals."""
    return _roster(model)


@router.post("/players", response_model=Player, status_code=201)
def add_player(model: SessionModelDep) -> Player:
    """Append a player, using the pending buy-in when it parses."""
    player = model.add_player()
    logger.info(f"Added roster player {player.id}")
    return player


@router.patch(
    "/players/{player_id}",
    response_model=Player,
    responses={404: {"model": ErrorResponse}},
)
def update_player(
    player_id: UUID, update: PlayerUpdate, model: SessionModelDep
) -> Player:
    """Edit a roster player's fields."""
    player = model.update_player(
        player_id,
        name=update.name,
        amount_text=update.amount,
        chip_count_text=update.chip_count,
        venmo_status=update.venmo_status,
    )
    if player is None:
        raise NotFoundError(
            message=f"Player {player_id} is not on the roster",
            details={"player_id": str(player_id)},
        )
    return player


@router.delete(
    "/players/{player_id}",
    response_model=RosterResponse,
    responses={404: {"model": ErrorResponse}},
)
def remove_player(player_id: UUID, model: SessionModelDep) -> RosterResponse:
    """Remove a player by id."""
    if not model.remove_player(player_id):
        raise NotFoundError(
            message=f"Player {player_id} is not on the roster",
            details={"player_id": str(player_id)},
        )
    return _roster(model)


@router.put("/buy-in", response_model=RosterResponse)
def set_buy_in(update: BuyInUpdate, model: SessionModelDep) -> RosterResponse:
    """Set the pending buy-in text."""
    model.set_buy_in_text(update.text)
    return _roster(model)


@router.post("/populate", response_model=RosterResponse)
def populate_amounts(
    request: PopulateRequest, model: SessionModelDep
) -> RosterResponse:
    """Fill the buy-in into every player without an amount."""
    model.populate_amounts(request.buy_in)
    return _roster(model)


@router.post("/reset", response_model=RosterResponse)
def reset_game(model: SessionModelDep) -> RosterResponse:
    """Discard the game in progress."""
    model.reset_game()
    return _roster(model)


@router.post("/end", response_model=EndGameResponse, status_code=201)
def end_game(request: EndGameRequest, model: SessionModelDep) -> EndGameResponse:
    """End the game, store its log and start a fresh roster.

    The log is kept even if it could not be written to storage; ``save``
    reports what happened.
    """
    game_log, result = model.end_and_save_game(
        location=request.location, duration=request.duration
    )
    return EndGameResponse(
        game_log=GameLogView.from_log(game_log),
        save=SaveStatusResponse.from_result(result),
    )
