import pytest
from fastapi.testclient import TestClient

from application.use_cases import TaskUseCases
from config import Settings
from infrastructure.memory_store import TaskStore
from main import create_app


@pytest.fixture
def store():
    """An empty store."""
    return TaskStore()


@pytest.fixture
def use_cases(store):
    return TaskUseCases(store)


@pytest.fixture
def client(store):
    """Test client over an app backed by the empty ``store`` fixture."""
    app = create_app(Settings(seed_sample_data=False), store=store)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def seeded_client():
    """Test client over an app that booted with the sample tasks."""
    app = create_app(Settings(seed_sample_data=True))
    with TestClient(app) as client:
        yield client
