from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from catalog_view.infra.db.config import database_url

# Created on first use, so importing this module never needs DATABASE_URL
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """
    Get or create the database engine.

    The database is read once per catalog session (ingestion) and written by
    the seed script, so a small pool is enough:
    - pool_size=2, max_overflow=0: at most two open connections
    - pool_pre_ping: drop connections the server closed while idle
    """
    global _engine
    if _engine is None:
        _engine = create_engine(
            database_url(),
            pool_size=2,
            max_overflow=0,
            pool_pre_ping=True,
        )
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(
            bind=get_engine(),
            class_=Session,
            expire_on_commit=False,
        )
    return _session_factory


@contextmanager
def get_session() -> Iterator[Session]:
    """Open a session; commit on success, roll back on error, always close."""
    session = get_session_factory()()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
