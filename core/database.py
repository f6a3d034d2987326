from __future__ import annotations

import logging
import sqlite3
from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import Engine, create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


# SQLite ships with foreign keys off; tasks.employee_id relies on ON DELETE SET NULL.
@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


class Database:
    """Store handle: owns the engine and the session factory between open() and close()."""

    def __init__(self, url: str, *, echo: bool = False):
        self.url = url
        self.echo = echo
        self._engine: Optional[Engine] = None
        self._sessionmaker: Optional[sessionmaker[Session]] = None

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            raise RuntimeError("database is not open")
        return self._engine

    def open(self) -> "Database":
        if self._engine is not None:
            return self
        url = make_url(self.url)
        kwargs: dict = {"echo": self.echo}
        if url.get_backend_name() == "sqlite":
            kwargs["connect_args"] = {"check_same_thread": False}
            if url.database in (None, "", ":memory:"):
                kwargs["poolclass"] = StaticPool
        self._engine = create_engine(self.url, **kwargs)
        self._sessionmaker = sessionmaker(bind=self._engine, autoflush=False)
        logger.info("Connected to database %s", url.render_as_string(hide_password=True))
        return self

    def close(self) -> None:
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        self._sessionmaker = None
        logger.info("Database connection closed")

    def create_schema(self) -> None:
        import models_bootstrap  # noqa: F401  registers every table on Base.metadata

        Base.metadata.create_all(self.engine)
        logger.info("Tables ready: %s", ", ".join(sorted(Base.metadata.tables)))

    def session(self) -> Session:
        if self._sessionmaker is None:
            raise RuntimeError("database is not open")
        return self._sessionmaker()


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
