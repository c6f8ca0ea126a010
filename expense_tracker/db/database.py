import logging
from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


def build_engine(database_url: str) -> Engine:
    """Create an engine with connect_args matching the database type"""
    if database_url.startswith("postgresql"):
        return create_engine(database_url)
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        # In-memory SQLite must share one connection across threads
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    # SQLite configuration
    return create_engine(database_url, connect_args={"check_same_thread": False})


class RecordStore:
    """Owns the engine and session factory for every record collection"""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    @classmethod
    def from_url(cls, database_url: str) -> "RecordStore":
        return cls(build_engine(database_url))

    def create_all(self) -> None:
        """Create the collection tables if they do not exist yet"""
        # Importing the model modules registers their tables with Base.metadata
        from expense_tracker.models import users, expenses, groups, roommate  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def drop_all(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def session(self) -> Session:
        return self.session_factory()

    def check_connection(self) -> bool:
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            logger.info(f"Connected to database at {self.engine.url.render_as_string(hide_password=True)}")
            return True
        except Exception as e:
            logger.error(f"Database connection failed: {e}")
            return False

    def dispose(self) -> None:
        self.engine.dispose()


def get_store(request: Request) -> RecordStore:
    store: Optional[RecordStore] = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Record store is not configured on this application")
    return store


def get_db(request: Request) -> Iterator[Session]:
    db = get_store(request).session()
    try:
        yield db
    finally:
        db.close()
