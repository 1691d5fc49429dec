from pathlib import Path
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from tasktracker.config import Settings
from tasktracker.database import create_db_engine, create_session_factory, init_db
from tasktracker.main import create_app
from tasktracker.repository import TaskRepository
from tasktracker.service import TaskService


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(database_url=f"sqlite:///{tmp_path / 'tasks.db'}", metrics_enabled=False)


@pytest.fixture()
def db(settings: Settings) -> Iterator[Session]:
    engine = create_db_engine(settings.database_url)
    init_db(engine)
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture()
def repository(db: Session) -> TaskRepository:
    return TaskRepository(db)


@pytest.fixture()
def service(repository: TaskRepository) -> TaskService:
    return TaskService(repository)


@pytest.fixture()
def client(settings: Settings) -> Iterator[TestClient]:
    app = create_app(settings)
    with TestClient(app) as c:
        yield c
    app.state.engine.dispose()
