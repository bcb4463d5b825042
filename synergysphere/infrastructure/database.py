"""Engine, session factory and schema bootstrap for the relational store."""

from __future__ import annotations

from collections.abc import Generator

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from synergysphere.config import Settings, get_settings


class Base(DeclarativeBase):
    """Declarative base shared by every table of the service."""


settings = get_settings()

logger = logging.getLogger(__name__)


def _build_engine(settings: Settings) -> Engine:
    """Create the SQLAlchemy engine for the configured database URL."""

    url = settings.database_url
    connect_args: dict[str, object] = {}
    if url.startswith("sqlite"):
        # FastAPI runs sync handlers on worker threads.
        connect_args["check_same_thread"] = False
    logger.debug("Creating database engine for %s", url.split("://", 1)[0])
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


engine = _build_engine(settings)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database() -> None:
    """Create any missing tables; existing ones are left untouched."""

    from synergysphere.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency yielding one session per request."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
