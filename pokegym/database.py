"""
Database engine and session management.
"""
import logging
from pathlib import Path

from sqlmodel import Session, SQLModel, create_engine

from pokegym.config import DATABASE_URL

logger = logging.getLogger(__name__)

# Use check_same_thread only for SQLite
connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    connect_args["check_same_thread"] = False

engine = create_engine(DATABASE_URL, echo=False, connect_args=connect_args)


def create_db_and_tables():
    """Create all tables defined in SQLModel metadata."""
    # Register every table on the metadata before creating it
    import pokegym.models  # noqa: F401

    if DATABASE_URL.startswith("sqlite:///./"):
        Path(DATABASE_URL.removeprefix("sqlite:///")).parent.mkdir(parents=True, exist_ok=True)

    SQLModel.metadata.create_all(engine)
    logger.info("Database tables ready")


def get_session():
    """Yield a database session."""
    with Session(engine) as session:
        yield session
