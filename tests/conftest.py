import pytest
from fastapi.testclient import TestClient

from app.db.repository import reset_repository
from app.db.sample_data import sample_books
from app.main import app


@pytest.fixture
def repository():
    # Fresh process-wide store for every test
    return reset_repository()


@pytest.fixture
def seeded_repository():
    return reset_repository(sample_books())


@pytest.fixture
def client(seeded_repository):
    with TestClient(app) as test_client:
        yield test_client
