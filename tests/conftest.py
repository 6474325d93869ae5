import pytest
from fastapi.testclient import TestClient

from string_analyzer import crud
from string_analyzer.main import create_app
from string_analyzer.store import ContentStore


@pytest.fixture
def store():
    return ContentStore()


@pytest.fixture
def seeded_store(store):
    for value in ("level", "go", "Racecar", "hello world", "A man a plan", "zebra"):
        crud.create_string_analysis(store, value)
    return store


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
