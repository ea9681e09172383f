# tests/test_preventatives_api.py

import pytest


def _create(client, headers, pet_id, name="heartworm", due_day=1, notes=None):
    return client.post(
        "/api/preventatives",
        headers=headers,
        json={"pet_id": pet_id, "name": name, "due_day": due_day, "notes": notes},
    )


def test_create_and_list_by_due_day(client, alice, pet_id):
    for name, day in (("end", 31), ("start", 1), ("mid", 15)):
        assert _create(client, alice, pet_id, name, day).status_code == 201

    resp = client.get(f"/api/preventatives/pet/{pet_id}", headers=alice)
    assert resp.status_code == 200
    assert [p["due_day"] for p in resp.json()["preventatives"]] == [1, 15, 31]


@pytest.mark.parametrize("due_day", [0, 32, -1, 100])
def test_due_day_out_of_range_is_rejected(client, alice, pet_id, due_day):
    resp = _create(client, alice, pet_id, due_day=due_day)
    assert resp.status_code == 400
    assert resp.json()["code"] == "PREVENTATIVE_400_2"


def test_name_is_required(client, alice, pet_id):
    resp = _create(client, alice, pet_id, name="  ")
    assert resp.status_code == 400
    assert resp.json()["code"] == "PREVENTATIVE_400_1"


def test_create_checks_pet_ownership(client, bob, pet_id):
    resp = _create(client, bob, pet_id)
    assert resp.status_code == 403
    assert resp.json()["code"] == "PREVENTATIVE_403_1"

    resp = client.get(f"/api/preventatives/pet/{pet_id}", headers=bob)
    assert resp.status_code == 403


def test_update(client, alice, bob, pet_id):
    pid = _create(client, alice, pet_id, due_day=10).json()["preventative"]["preventative_id"]

    resp = client.put(f"/api/preventatives/{pid}", headers=alice, json={"due_day": 31, "notes": "after meal"})
    assert resp.status_code == 200
    updated = resp.json()["preventative"]
    assert updated["due_day"] == 31
    assert updated["notes"] == "after meal"
    assert updated["name"] == "heartworm"

    resp = client.put(f"/api/preventatives/{pid}", headers=alice, json={"due_day": 32})
    assert resp.json()["code"] == "PREVENTATIVE_400_2"

    resp = client.put(f"/api/preventatives/{pid}", headers=alice, json={})
    assert resp.json()["code"] == "PREVENTATIVE_400_3"

    resp = client.put(f"/api/preventatives/{pid}", headers=bob, json={"name": "x"})
    assert resp.status_code == 403

    resp = client.put("/api/preventatives/999", headers=alice, json={"name": "x"})
    assert resp.status_code == 404
    assert resp.json()["code"] == "PREVENTATIVE_404_3"


def test_delete_removes_completions(client, alice, pet_id):
    pid = _create(client, alice, pet_id, due_day=31).json()["preventative"]["preventative_id"]
    client.post(
        f"/api/tasks/preventative/{pid}/complete",
        headers=alice,
        json={"completion_date": "2024-04-30"},
    )

    resp = client.delete(f"/api/preventatives/{pid}", headers=alice)
    assert resp.status_code == 200
    assert resp.json()["preventative_id"] == pid

    assert client.get(f"/api/preventatives/pet/{pet_id}", headers=alice).json()["preventatives"] == []
    assert client.get(f"/api/pets/{pet_id}/completions", headers=alice).json()["completions"] == []


def test_due_day_check_constraint(session_factory, client, alice, pet_id):
    from sqlalchemy.exc import IntegrityError

    from app.models.preventative import Preventative

    db = session_factory()
    try:
        db.add(Preventative(pet_id=pet_id, name="bad", due_day=40))
        with pytest.raises(IntegrityError):
            db.commit()
        db.rollback()
    finally:
        db.close()
