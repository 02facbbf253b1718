from fastapi import APIRouter
from loguru import logger

from src.api.v1.endpoints import logs, payments, roster

logger.info("Initializing API v1 router")
api_router = APIRouter(prefix="/api/v1")

logger.debug("Registering roster endpoint")
api_router.include_router(roster.router, prefix="/roster", tags=["roster"])
logger.debug("Registering logs endpoint")
api_router.include_router(logs.router, prefix="/logs", tags=["logs"])
logger.debug("Registering payments endpoint")
api_router.include_router(payments.router, prefix="/payments", tags=["payments"])
logger.success("API v1 router initialized successfully")
