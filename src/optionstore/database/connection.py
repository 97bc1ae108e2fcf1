"""
Database connection management for optionstore.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .models import Base


logger = logging.getLogger(__name__)


class DatabaseManager:
    """Manages the SQLite engine and sessions of the option database."""

    def __init__(self, database_path: str):
        self.database_path = database_path
        self.engine: Optional[Engine] = None
        self.SessionLocal: Optional[sessionmaker] = None

    @property
    def in_memory(self) -> bool:
        return self.database_path == ":memory:"

    def initialize_database(self) -> None:
        """Initialize database connection and create tables."""
        if not self.in_memory:
            # Ensure database directory exists
            Path(self.database_path).parent.mkdir(parents=True, exist_ok=True)

        database_url = f"sqlite:///{self.database_path}"

        self.engine = create_engine(
            database_url,
            poolclass=StaticPool,
            connect_args={
                "check_same_thread": False,
                "timeout": 30,
            },
            echo=False,  # Set to True for SQL debugging
        )

        self._configure_sqlite()

        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

        Base.metadata.create_all(bind=self.engine)

        if not self.test_connection():
            raise RuntimeError("Database connection test failed")

        logger.info(f"Option database ready: {self.database_path}")

    def _configure_sqlite(self) -> None:
        """Configure SQLite pragmas on every new connection."""
        @event.listens_for(self.engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA synchronous=NORMAL")
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    def test_connection(self) -> bool:
        """Run a trivial query against the database."""
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"Database connection test failed: {e}")
            return False

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """Get a session that commits on success and rolls back on error."""
        if not self.SessionLocal:
            raise RuntimeError("Database not initialized. Call initialize_database() first.")

        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def close(self) -> None:
        """Dispose of the engine."""
        if self.engine is not None:
            self.engine.dispose()
            self.engine = None
            self.SessionLocal = None
            logger.debug(f"Closed option database: {self.database_path}")
