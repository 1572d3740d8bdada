"""Pytest configuration and shared fixtures."""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from todo_api.app import create_app
from todo_api.config import Settings
from todo_api.entity import Base


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "todos.db"


@pytest.fixture
def sync_engine(db_path):
    """Synchronous engine on the same file, used to prepare and inspect the schema."""
    engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def settings(db_path):
    return Settings(database_url=f"sqlite+aiosqlite:///{db_path}")


@pytest.fixture
def client(settings, sync_engine):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
