"""FastAPI application for the Rebuy poker ledger."""

import asyncio
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
import uvicorn

from src.api.v1.router import api_router
from src.core.db import create_db_and_tables, engine
from src.core.error_handlers import register_exception_handlers
from src.core.logging_config import configure_logging
from src.services.persistence_service import GameLogStore
from src.services.session_service import SessionModel


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events."""
    configure_logging()
    logger.info("Starting Rebuy application...")
    logger.info("Initializing storage...")
    create_db_and_tables(engine)
    logger.success("Storage initialized successfully")
    logger.info("Loading game history...")
    app.state.session_model = SessionModel(GameLogStore(engine))
    logger.success(
        f"Game history loaded: {len(app.state.session_model.game_logs)} games"
    )
    await asyncio.sleep(0)  # Satisfy RUF029 (async function must await)
    logger.success("Application startup complete")
    yield
    logger.info("Shutting down Rebuy application...")


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.include_router(api_router)


@app.get("/")
def read_root() -> dict[str, str]:
    """Return welcome message for the root endpoint."""
    logger.debug("Root endpoint accessed")
    return {"message": "Welcome to Rebuy"}


def run() -> None:
    """Serve the app with uvicorn; ``HOST`` and ``PORT`` come from the env."""
    uvicorn.run(
        app,
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    run()
