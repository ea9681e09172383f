# tests/test_tasks_api.py

import pytest


def _daily(client, headers, pet_id, name):
    resp = client.post(f"/api/pets/{pet_id}/tasks", headers=headers, json={"task_name": name})
    assert resp.status_code == 201
    return resp.json()["task"]["id"]


def _preventative(client, headers, pet_id, name, due_day):
    resp = client.post(
        "/api/preventatives",
        headers=headers,
        json={"pet_id": pet_id, "name": name, "due_day": due_day},
    )
    assert resp.status_code == 201
    return resp.json()["preventative"]["preventative_id"]


@pytest.fixture()
def april_pet(client, alice, pet_id):
    _daily(client, alice, pet_id, "breakfast")
    _daily(client, alice, pet_id, "evening walk")
    _preventative(client, alice, pet_id, "heartworm", 1)
    _preventative(client, alice, pet_id, "flea", 15)
    _preventative(client, alice, pet_id, "month-end check", 31)
    return pet_id


def _tasks(client, headers, pet_id, date=None):
    params = {"date": date} if date else None
    resp = client.get(f"/api/pets/{pet_id}/tasks", headers=headers, params=params)
    assert resp.status_code == 200, resp.json()
    return resp.json()


def test_without_date_returns_daily_tasks_only(client, alice, april_pet):
    body = _tasks(client, alice, april_pet)
    assert body["date"] is None
    assert [t["task_name"] for t in body["tasks"]] == ["evening walk", "breakfast"]
    assert {t["task_type"] for t in body["tasks"]} == {"daily"}
    assert all(t["completed"] is None for t in body["tasks"])


@pytest.mark.parametrize(
    "date, expected",
    [
        ("2024-04-01", ["heartworm"]),
        ("2024-04-15", ["flea"]),
        ("2024-04-30", ["month-end check"]),
        ("2024-04-29", []),
        ("2024-02-29", ["month-end check"]),
        ("2024-03-31", ["month-end check"]),
    ],
)
def test_date_adds_due_preventatives(client, alice, april_pet, date, expected):
    body = _tasks(client, alice, april_pet, date)
    assert body["date"] == date

    daily = [t for t in body["tasks"] if t["task_type"] == "daily"]
    recurring = [t for t in body["tasks"] if t["task_type"] == "preventative"]
    assert len(daily) == 2
    assert [t["task_name"] for t in recurring] == expected
    # 일일 할 일 다음에 예방 관리 항목
    assert body["tasks"][: len(daily)] == daily


def test_preventatives_are_ordered_by_due_day(client, alice, pet_id):
    for day in (31, 29, 30):
        _preventative(client, alice, pet_id, f"d{day}", day)

    body = _tasks(client, alice, pet_id, "2023-02-28")
    assert [t["due_day"] for t in body["tasks"]] == [29, 30, 31]


def test_date_with_time_suffix_uses_calendar_day(client, alice, april_pet):
    body = _tasks(client, alice, april_pet, "2024-04-30T23:30:00.000Z")
    assert body["date"] == "2024-04-30"
    assert "month-end check" in [t["task_name"] for t in body["tasks"]]


def test_empty_date_is_treated_as_absent(client, alice, april_pet):
    resp = client.get(f"/api/pets/{april_pet}/tasks?date=", headers=alice)
    assert resp.status_code == 200
    body = resp.json()
    assert body["date"] is None
    assert {t["task_type"] for t in body["tasks"]} == {"daily"}
    assert all(t["completed"] is None for t in body["tasks"])


def test_invalid_date_is_rejected(client, alice, april_pet):
    resp = client.get(f"/api/pets/{april_pet}/tasks", headers=alice, params={"date": "30-04-2024"})
    assert resp.status_code == 400
    assert resp.json()["code"] == "TASK_400_2"


def test_completed_flag_reflects_selected_date(client, alice, april_pet):
    body = _tasks(client, alice, april_pet, "2024-04-30")
    walk = next(t for t in body["tasks"] if t["task_name"] == "evening walk")
    check = next(t for t in body["tasks"] if t["task_name"] == "month-end check")
    assert walk["completed"] is False

    client.post(f"/api/tasks/daily/{walk['id']}/complete", headers=alice,
                json={"completion_date": "2024-04-30"})
    client.post(f"/api/tasks/preventative/{check['id']}/complete", headers=alice,
                json={"completion_date": "2024-04-30"})

    body = _tasks(client, alice, april_pet, "2024-04-30")
    done = {t["task_name"]: t["completed"] for t in body["tasks"]}
    assert done == {
        "evening walk": True,
        "breakfast": False,
        "month-end check": True,
    }

    # 다음 날에는 다시 미완료
    body = _tasks(client, alice, april_pet, "2024-05-01")
    assert all(t["completed"] is False for t in body["tasks"])


def test_create_daily_task_validation(client, alice, pet_id):
    resp = client.post(f"/api/pets/{pet_id}/tasks", headers=alice, json={"task_name": "   "})
    assert resp.status_code == 400
    assert resp.json()["code"] == "TASK_400_1"

    resp = client.post(f"/api/pets/{pet_id}/tasks", headers=alice, json={})
    assert resp.status_code == 400
    assert resp.json()["code"] == "COMMON_400_1"


def test_tasks_of_other_owner_are_forbidden(client, alice, bob, pet_id):
    task_id = _daily(client, alice, pet_id, "walk")

    resp = client.get(f"/api/pets/{pet_id}/tasks", headers=bob)
    assert resp.status_code == 403
    assert resp.json()["code"] == "TASK_403_1"

    resp = client.post(f"/api/pets/{pet_id}/tasks", headers=bob, json={"task_name": "x"})
    assert resp.json()["code"] == "TASK_403_1"

    resp = client.delete(f"/api/tasks/{task_id}", headers=bob)
    assert resp.status_code == 403


def test_unknown_pet(client, alice):
    resp = client.get("/api/pets/404/tasks", headers=alice)
    assert resp.status_code == 404
    assert resp.json()["code"] == "TASK_404_2"


def test_delete_daily_task_removes_completions(client, alice, pet_id):
    task_id = _daily(client, alice, pet_id, "walk")
    client.post(f"/api/tasks/daily/{task_id}/complete", headers=alice,
                json={"completion_date": "2024-04-30"})

    resp = client.delete(f"/api/tasks/{task_id}", headers=alice)
    assert resp.status_code == 200
    assert resp.json()["task_id"] == task_id

    assert _tasks(client, alice, pet_id)["tasks"] == []
    resp = client.get(f"/api/pets/{pet_id}/completions", headers=alice)
    assert resp.json()["completions"] == []

    resp = client.delete(f"/api/tasks/{task_id}", headers=alice)
    assert resp.status_code == 404
    assert resp.json()["code"] == "TASK_404_3"
