import os
from collections.abc import Iterator

# Read at import time by airgradient_api.config
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DB_CREATE_TABLES"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from airgradient_api.database import create_tables, get_db
from airgradient_api.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory) -> Iterator[Session]:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def opened_sessions() -> list:
    return []


@pytest.fixture
def closed_sessions() -> list:
    return []


@pytest.fixture
def client(session_factory, opened_sessions, closed_sessions) -> Iterator[TestClient]:
    def override_get_db():
        db = session_factory()
        opened_sessions.append(db)
        try:
            yield db
        finally:
            db.close()
            closed_sessions.append(db)

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
