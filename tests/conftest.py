import pytest
from fastapi.testclient import TestClient

from app.database import MemStorage
from app.main import create_app


@pytest.fixture
def storage():
    return MemStorage()


@pytest.fixture
def empty_storage():
    return MemStorage(seed=False)


@pytest.fixture
def client(storage):
    return TestClient(create_app(storage))
