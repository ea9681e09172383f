# tests/test_service_tasks_api.py


def _base(pet_id):
    return f"/api/service-dog-tasks/pet/{pet_id}/servicetasks"


def test_create_list_get_delete(client, alice, pet_id):
    resp = client.post(_base(pet_id), headers=alice, json={"task_name": "open door", "notes": "left paw"})
    assert resp.status_code == 201
    task = resp.json()["task"]
    assert task["task_name"] == "open door"
    assert task["notes"] == "left paw"

    client.post(_base(pet_id), headers=alice, json={"task_name": "fetch keys"})

    tasks = client.get(_base(pet_id), headers=alice).json()["tasks"]
    assert [t["task_name"] for t in tasks] == ["fetch keys", "open door"]

    detail = client.get(f"{_base(pet_id)}/{task['task_id']}", headers=alice)
    assert detail.status_code == 200
    assert detail.json()["task"]["task_id"] == task["task_id"]

    resp = client.delete(f"{_base(pet_id)}/{task['task_id']}", headers=alice)
    assert resp.status_code == 200

    resp = client.get(f"{_base(pet_id)}/{task['task_id']}", headers=alice)
    assert resp.status_code == 404
    assert resp.json()["code"] == "SERVICE_TASK_404_3"


def test_task_name_required(client, alice, pet_id):
    resp = client.post(_base(pet_id), headers=alice, json={"task_name": ""})
    assert resp.status_code == 400
    assert resp.json()["code"] == "SERVICE_TASK_400_1"


def test_ownership_is_checked_on_every_route(client, alice, bob, pet_id):
    task_id = client.post(_base(pet_id), headers=alice, json={"task_name": "open door"}).json()["task"]["task_id"]

    assert client.get(_base(pet_id), headers=bob).status_code == 403
    assert client.post(_base(pet_id), headers=bob, json={"task_name": "x"}).status_code == 403
    assert client.get(f"{_base(pet_id)}/{task_id}", headers=bob).status_code == 403
    resp = client.delete(f"{_base(pet_id)}/{task_id}", headers=bob)
    assert resp.status_code == 403
    assert resp.json()["code"] == "SERVICE_TASK_403_1"


def test_task_must_belong_to_pet(client, alice, pet_id):
    other = client.post("/api/pets", headers=alice, data={"name": "Other"}).json()["pet"]["pet_id"]
    task_id = client.post(_base(other), headers=alice, json={"task_name": "open door"}).json()["task"]["task_id"]

    resp = client.get(f"{_base(pet_id)}/{task_id}", headers=alice)
    assert resp.status_code == 404
