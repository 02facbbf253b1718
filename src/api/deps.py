from typing import Annotated

from fastapi import Depends, Request
from loguru import logger

from src.services.session_service import SessionModel


def get_session_model(request: Request) -> SessionModel:
    """Provide the application's session model for dependency injection."""
    logger.debug("Resolving session model")
    return request.app.state.session_model


SessionModelDep = Annotated[SessionModel, Depends(get_session_model)]
