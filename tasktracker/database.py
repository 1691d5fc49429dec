import logging
from collections.abc import Iterator

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()


def _unicode_lower(value: str | None) -> str | None:
    return None if value is None else value.lower()


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    connect_args = {}
    is_sqlite = database_url.startswith("sqlite")
    if is_sqlite:
        # sessions are opened and closed on different threadpool workers
        connect_args["check_same_thread"] = False
    engine = create_engine(database_url, echo=echo, connect_args=connect_args)

    if is_sqlite:
        # SQLite's built-in lower() only folds ASCII
        @event.listens_for(engine, "connect")
        def _register_lower(dbapi_conn, connection_record):
            dbapi_conn.create_function("lower", 1, _unicode_lower)

    logger.info("Database engine ready url=%s", engine.url.render_as_string(hide_password=True))
    return engine


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    # registers the tasks table on Base.metadata
    from tasktracker import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
