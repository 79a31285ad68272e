"""Engine and session handling for direct-store mode."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from taskboard.sources.schema import Base

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy import Engine

logger = logging.getLogger("taskboard.sources.database")

DEFAULT_DATABASE_URL = "sqlite:///board.db"


class Database:
    """Owns one engine for the process lifetime.

    Nothing connects until the first query; ``close()`` disposes the pool and
    a later query reconnects.
    """

    def __init__(self, url: str = DEFAULT_DATABASE_URL) -> None:
        self.url = url
        self._engine: Engine | None = None
        self._sessions: sessionmaker[Session] | None = None

    @property
    def is_memory(self) -> bool:
        parsed = make_url(self.url)
        return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> Engine:
        """The shared engine, created on first access."""
        if self._engine is None:
            backend = make_url(self.url).get_backend_name()
            logger.info("Opening %s database engine", backend)
            if self.is_memory:
                # A single connection, so every session sees the same in-memory DB
                self._engine = create_engine(
                    self.url,
                    poolclass=StaticPool,
                    connect_args={"check_same_thread": False},
                )
            else:
                self._engine = create_engine(self.url, pool_pre_ping=True)
        return self._engine

    def create_tables(self) -> None:
        """Create the mapped tables that are missing."""
        Base.metadata.create_all(self.engine)

    def get_session(self) -> Session:
        """A new session bound to the shared engine. Caller closes it."""
        if self._sessions is None:
            self._sessions = sessionmaker(bind=self.engine, expire_on_commit=False)
        return self._sessions()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Read-only session scope, closed on exit."""
        db_session = self.get_session()
        try:
            yield db_session
        finally:
            db_session.close()

    def close(self) -> None:
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._sessions = None
        logger.info("Database engine disposed")
