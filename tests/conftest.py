import pytest
from fastapi.testclient import TestClient

from student_registry.app import create_app
from student_registry.store import SEED_STUDENTS, StudentStore


@pytest.fixture
def store():
    s = StudentStore()
    s.seed(SEED_STUDENTS)
    return s


@pytest.fixture
def client(store):
    return TestClient(create_app(store))
