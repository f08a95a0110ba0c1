from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from roomfinder_marketing.infra.db.config import database_url

# Created on first use so importing this module never needs DATABASE_URL
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """
    Get or create the process-wide engine.

    Listing requests are short reads, so the pool favours many cheap
    checkouts: pre-ping drops dead connections and recycle keeps them fresh.
    """
    global _engine
    if _engine is None:
        _engine = create_engine(
            database_url(),
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,
            pool_recycle=1800,
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


def dispose_engine() -> None:
    """Close pooled connections and forget the engine (shutdown and tests)."""
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


@contextmanager
def get_session() -> Iterator[Session]:
    """One unit of work: commit on success, roll back on error, always close."""
    session = get_session_factory()()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
