# tests/test_logs.py

from fastapi.testclient import TestClient
from exercise_tracker.main import create_app
from conftest import add_exercise


def test_example_log_with_limit(client, user):
    add_exercise(client, user["_id"], "test run", 30, "2023-01-15")

    res = client.get(f"/api/users/{user['_id']}/logs", params={"limit": 1})
    assert res.status_code == 200
    assert res.json() == {
        "_id": user["_id"],
        "username": "fcc_test",
        "count": 1,
        "log": [{"description": "test run", "duration": 30, "date": "Sun Jan 15 2023"}],
    }


def test_log_without_filters_returns_everything(client, user):
    for day in ("2023-01-01", "2023-01-02", "2023-01-03"):
        add_exercise(client, user["_id"], date=day)

    body = client.get(f"/api/users/{user['_id']}/logs").json()
    assert body["count"] == 3
    assert len(body["log"]) == 3


def test_log_is_ordered_by_date(client, user):
    add_exercise(client, user["_id"], "c", date="2023-03-01")
    add_exercise(client, user["_id"], "a", date="2023-01-01")
    add_exercise(client, user["_id"], "b", date="2023-02-01")

    log = client.get(f"/api/users/{user['_id']}/logs").json()["log"]
    assert [e["description"] for e in log] == ["a", "b", "c"]


def test_from_and_to_are_inclusive(client, user):
    for day in ("2023-01-09", "2023-01-10", "2023-01-15", "2023-01-20", "2023-01-21"):
        add_exercise(client, user["_id"], day, date=day)

    body = client.get(
        f"/api/users/{user['_id']}/logs",
        params={"from": "2023-01-10", "to": "2023-01-20"},
    ).json()
    assert [e["description"] for e in body["log"]] == ["2023-01-10", "2023-01-15", "2023-01-20"]
    assert body["count"] == 3


def test_bounds_are_independent(client, user):
    for day in ("2023-01-01", "2023-06-01", "2023-12-01"):
        add_exercise(client, user["_id"], day, date=day)

    url = f"/api/users/{user['_id']}/logs"
    after = client.get(url, params={"from": "2023-06-01"}).json()["log"]
    before = client.get(url, params={"to": "2023-06-01"}).json()["log"]
    assert [e["description"] for e in after] == ["2023-06-01", "2023-12-01"]
    assert [e["description"] for e in before] == ["2023-01-01", "2023-06-01"]


def test_limit_clamps_log_and_count(client, user):
    for day in ("2023-01-01", "2023-01-02", "2023-01-03"):
        add_exercise(client, user["_id"], date=day)

    body = client.get(f"/api/users/{user['_id']}/logs", params={"limit": 2}).json()
    assert body["count"] == 2
    assert len(body["log"]) == 2


def test_non_numeric_limit_falls_back_to_default(client, user):
    add_exercise(client, user["_id"], date="2023-01-01")
    add_exercise(client, user["_id"], date="2023-01-02")

    for limit in ("abc", "0", "-3"):
        body = client.get(f"/api/users/{user['_id']}/logs", params={"limit": limit}).json()
        assert body["count"] == 2


def test_default_limit_is_applied():
    with TestClient(create_app(database_url="sqlite://", default_log_limit=2)) as small:
        created = small.post("/api/users", data={"username": "capped"}).json()
        for day in ("2023-01-01", "2023-01-02", "2023-01-03"):
            add_exercise(small, created["_id"], date=day)
        body = small.get(f"/api/users/{created['_id']}/logs").json()
    assert body["count"] == 2


def test_logs_only_include_the_users_exercises(client, user):
    other = client.post("/api/users", data={"username": "other"}).json()
    add_exercise(client, user["_id"], "mine", date="2023-01-01")
    add_exercise(client, other["_id"], "theirs", date="2023-01-01")

    log = client.get(f"/api/users/{user['_id']}/logs").json()["log"]
    assert [e["description"] for e in log] == ["mine"]


def test_unknown_user_log_is_json_not_found(client):
    res = client.get(f"/api/users/{'f' * 32}/logs")
    assert res.status_code == 404
    assert res.headers["content-type"].startswith("application/json")
    assert res.json()["status"] == "error"


def test_invalid_from_is_rejected(client, user):
    res = client.get(f"/api/users/{user['_id']}/logs", params={"from": "yesterday"})
    assert res.status_code == 400
    assert res.json()["status"] == "error"


def test_huge_limit_returns_the_log(client, user):
    add_exercise(client, user["_id"], "test run", 30, "2023-01-15")

    res = client.get(f"/api/users/{user['_id']}/logs", params={"limit": "1" + "0" * 20})
    assert res.status_code == 200
    assert res.json()["count"] == 1
