# tests/conftest.py

import pytest
from fastapi.testclient import TestClient
from exercise_tracker.main import create_app


@pytest.fixture
def app():
    return create_app(database_url="sqlite://")


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def user(client):
    res = client.post("/api/users", data={"username": "fcc_test"})
    assert res.status_code == 200
    return res.json()


def add_exercise(client, user_id, description="run", duration=30, date=None):
    data = {"description": description, "duration": duration}
    if date is not None:
        data["date"] = date
    return client.post(f"/api/users/{user_id}/exercises", data=data)
