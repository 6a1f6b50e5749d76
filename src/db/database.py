"""SQLAlchemy engine and session helpers for the sql progress backend."""
from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager

from loguru import logger
from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.db.models import Base


def make_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine and make sure the snapshot table exists."""
    engine = create_engine(database_url, echo=echo, pool_pre_ping=True)
    Base.metadata.create_all(bind=engine)
    logger.debug(f"Database tables initialized at {engine.url!r}")
    return engine


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Session factory bound to engine."""
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@contextmanager
def session_scope(factory: sessionmaker[Session]) -> Generator[Session, None, None]:
    """Provide a transactional scope around a series of operations."""
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:  # Intentionally broad - rollback on any error before re-raising
        session.rollback()
        raise
    finally:
        session.close()
