from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from car_dealer.infra.db.config import database_url, max_overflow, pool_size

# Created on first use so importing the app never needs DATABASE_URL
_engine: Engine | None = None
_session_local: sessionmaker[Session] | None = None
_engine_lock = threading.Lock()
_session_local_lock = threading.Lock()


def get_engine() -> Engine:
    """
    Get or create the process-wide database engine.

    Pool sizing comes from DATABASE_POOL_SIZE / DATABASE_MAX_OVERFLOW
    (defaults 10 + 20). Connections are health-checked on checkout and
    recycled hourly.
    """
    global _engine
    if _engine is None:
        with _engine_lock:
            if _engine is None:
                _engine = create_engine(
                    database_url(),
                    pool_size=pool_size(),
                    max_overflow=max_overflow(),
                    pool_pre_ping=True,
                    pool_recycle=3600,
                )
    return _engine


def get_session_local() -> sessionmaker[Session]:
    """Get or create the session factory."""
    global _session_local
    if _session_local is None:
        with _session_local_lock:
            if _session_local is None:
                _session_local = sessionmaker(
                    bind=get_engine(),
                    class_=Session,
                    expire_on_commit=False,
                )
    return _session_local


@contextmanager
def get_session() -> Iterator[Session]:
    """Yield a session that commits on success and rolls back on error."""
    session = get_session_local()()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
