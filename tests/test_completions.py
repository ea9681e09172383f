# tests/test_completions.py

import pytest


@pytest.fixture()
def daily_id(client, alice, pet_id) -> int:
    resp = client.post(f"/api/pets/{pet_id}/tasks", headers=alice, json={"task_name": "walk"})
    return resp.json()["task"]["id"]


@pytest.fixture()
def preventative_id(client, alice, pet_id) -> int:
    resp = client.post(
        "/api/preventatives",
        headers=alice,
        json={"pet_id": pet_id, "name": "heartworm", "due_day": 31},
    )
    return resp.json()["preventative"]["preventative_id"]


def _complete(client, headers, task_type, task_id, on):
    return client.post(
        f"/api/tasks/{task_type}/{task_id}/complete",
        headers=headers,
        json={"completion_date": on},
    )


def test_complete_is_idempotent_per_day(client, alice, daily_id):
    first = _complete(client, alice, "daily", daily_id, "2024-04-30")
    assert first.status_code == 201
    assert first.json()["created"] is True
    completion = first.json()["completion"]
    assert completion["task_type"] == "daily"
    assert completion["completion_date"] == "2024-04-30"

    again = _complete(client, alice, "daily", daily_id, "2024-04-30T22:10:00.000Z")
    assert again.status_code == 200
    assert again.json()["created"] is False
    assert again.json()["completion"]["completion_id"] == completion["completion_id"]

    other_day = _complete(client, alice, "daily", daily_id, "2024-05-01")
    assert other_day.status_code == 201


def test_daily_and_preventative_ids_do_not_collide(client, alice, daily_id, preventative_id):
    # 두 테이블의 첫 row 라 id 가 같다
    assert daily_id == preventative_id

    assert _complete(client, alice, "daily", daily_id, "2024-04-30").status_code == 201
    assert _complete(client, alice, "preventative", preventative_id, "2024-04-30").status_code == 201

    resp = client.delete(f"/api/tasks/daily/{daily_id}/completions/2024-04-30", headers=alice)
    assert resp.json()["deleted"] is True

    resp = client.get(f"/api/tasks/preventative/{preventative_id}/completions/2024-04-30", headers=alice)
    assert resp.json()["completion"] is not None


def test_lookup_and_uncomplete(client, alice, daily_id):
    url = f"/api/tasks/daily/{daily_id}/completions/2024-04-30"

    assert client.get(url, headers=alice).json()["completion"] is None

    _complete(client, alice, "daily", daily_id, "2024-04-30")
    found = client.get(url, headers=alice).json()["completion"]
    assert found["task_id"] == daily_id

    first = client.delete(url, headers=alice)
    assert first.status_code == 200
    assert first.json()["deleted"] is True

    second = client.delete(url, headers=alice)
    assert second.status_code == 200
    assert second.json()["deleted"] is False

    assert client.get(url, headers=alice).json()["completion"] is None


def test_invalid_requests(client, alice, daily_id):
    resp = _complete(client, alice, "weekly", daily_id, "2024-04-30")
    assert resp.status_code == 400
    assert resp.json()["code"] == "COMMON_400_1"

    resp = _complete(client, alice, "daily", daily_id, "April 30")
    assert resp.status_code == 400
    assert resp.json()["code"] == "TASK_400_2"

    resp = client.post(f"/api/tasks/daily/{daily_id}/complete", headers=alice, json={})
    assert resp.json()["code"] == "COMMON_400_1"

    resp = _complete(client, alice, "daily", 999, "2024-04-30")
    assert resp.status_code == 404
    assert resp.json()["code"] == "TASK_404_3"


def test_other_owner_cannot_complete(client, bob, daily_id):
    resp = _complete(client, bob, "daily", daily_id, "2024-04-30")
    assert resp.status_code == 403
    assert resp.json()["code"] == "TASK_403_1"

    resp = client.get(f"/api/tasks/daily/{daily_id}/completions/2024-04-30", headers=bob)
    assert resp.status_code == 403


def test_list_completions_in_range(client, alice, pet_id, daily_id, preventative_id):
    for on in ("2024-03-31", "2024-04-01", "2024-04-15"):
        _complete(client, alice, "daily", daily_id, on)
    _complete(client, alice, "preventative", preventative_id, "2024-04-30")

    resp = client.get(
        f"/api/pets/{pet_id}/completions",
        headers=alice,
        params={"start": "2024-04-01", "end": "2024-04-30"},
    )
    assert resp.status_code == 200
    rows = resp.json()["completions"]
    assert [(r["task_type"], r["completion_date"]) for r in rows] == [
        ("daily", "2024-04-01"),
        ("daily", "2024-04-15"),
        ("preventative", "2024-04-30"),
    ]

    resp = client.get(f"/api/pets/{pet_id}/completions", headers=alice)
    assert len(resp.json()["completions"]) == 4


def test_list_completions_rejects_reversed_range(client, alice, pet_id):
    resp = client.get(
        f"/api/pets/{pet_id}/completions",
        headers=alice,
        params={"start": "2024-05-01", "end": "2024-04-01"},
    )
    assert resp.status_code == 400
    assert resp.json()["code"] == "TASK_400_3"


def test_completions_of_other_pets_are_excluded(client, alice, pet_id, daily_id):
    other = client.post("/api/pets", headers=alice, data={"name": "Other"}).json()["pet"]["pet_id"]
    other_task = client.post(
        f"/api/pets/{other}/tasks", headers=alice, json={"task_name": "feed"}
    ).json()["task"]["id"]

    _complete(client, alice, "daily", daily_id, "2024-04-30")
    _complete(client, alice, "daily", other_task, "2024-04-30")

    rows = client.get(f"/api/pets/{pet_id}/completions", headers=alice).json()["completions"]
    assert [r["task_id"] for r in rows] == [daily_id]
