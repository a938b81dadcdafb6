import pytest
from fastapi.testclient import TestClient

from birdshop.core.config import Settings
from birdshop.main import create_app


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "birds.db"


@pytest.fixture
def settings(db_path):
    return Settings(DB_BACKEND="sqlite", SQLITE_PATH=str(db_path), LOG_LEVEL="DEBUG")


@pytest.fixture
def client(settings):
    """Client for an app seeded at startup."""
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def empty_client(settings):
    """Client for an app that skips seeding."""
    settings.SEED_ON_STARTUP = False
    with TestClient(create_app(settings)) as c:
        yield c
