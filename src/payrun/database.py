"""Database connection and session management."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from payrun.config import get_settings


def get_engine(database_url: str | None = None) -> Engine:
    """Create database engine."""
    url = database_url or get_settings().database_url
    return create_engine(url, echo=False, pool_pre_ping=True)


# Global engine and session factory
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def init_db(create_tables: bool = False) -> tuple[Engine, sessionmaker[Session]]:
    """Initialize database engine and session factory."""
    global _engine, _session_factory
    if _engine is None:
        _engine = get_engine()
        _session_factory = sessionmaker(
            _engine,
            expire_on_commit=False,
            autoflush=False,
        )
    if create_tables:
        from payrun.models import Base

        Base.metadata.create_all(_engine)
    return _engine, _session_factory


@contextmanager
def get_session() -> Generator[Session, None, None]:
    """Get a database session."""
    _, factory = init_db()
    with factory() as session:
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
