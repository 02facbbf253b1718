import os

from dotenv import load_dotenv
from loguru import logger
from sqlalchemy import Engine
from sqlmodel import SQLModel, create_engine

from src.models import tables  # noqa: F401  # registers table metadata

# Load environment variables from .env file
load_dotenv()

# Local SQLite file by default; any SQLAlchemy URL works
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///rebuy.db")

# FastAPI runs sync endpoints in a threadpool; SQLite must allow that
connect_args = (
    {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
)

logger.info(f"Initializing storage engine with URL: {DATABASE_URL}")
engine = create_engine(DATABASE_URL, connect_args=connect_args)


def create_db_and_tables(target: Engine | None = None) -> None:
    """Create storage tables from SQLModel metadata."""
    logger.info("Creating storage tables from SQLModel metadata...")
    SQLModel.metadata.create_all(target or engine)
    logger.success("Storage tables created successfully")
