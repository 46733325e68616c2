# File: silence_splitter/core/database/connection.py

from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy_utils import database_exists, create_database

from .base import Base


def build_engine(database_url: str) -> Engine:
    # check_same_thread=False is needed only for SQLite
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}

    return create_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,
        connect_args=connect_args
    )


def init_database(engine: Engine) -> None:
    """Creates the database (if the backend supports it) and all ledger tables."""
    if not database_exists(engine.url):
        create_database(engine.url)

    # Register models on Base before creating tables
    import silence_splitter.core.jobs.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def build_session_factory(database_url: str) -> sessionmaker:
    engine = build_engine(database_url)
    init_database(engine)
    return sessionmaker(autoflush=False, bind=engine)


def get_db(session_factory: sessionmaker) -> Iterator[Session]:
    """Yields a session and always closes it."""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
