# tests/test_pets_api.py

from pathlib import Path

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


def _register(client, headers, **fields):
    data = {"name": "Choco", **fields}
    return client.post("/api/pets", headers=headers, data=data)


def test_register_and_get_pet(client, alice):
    resp = _register(
        client, alice,
        species="canine", breed="Poodle", sex="F",
        birthdate="2020-03-01", adoption_date="2020-06-15T00:00:00.000Z",
    )
    assert resp.status_code == 201
    pet = resp.json()["pet"]
    assert pet["name"] == "Choco"
    assert pet["sex"] == "F"
    assert pet["birthdate"] == "2020-03-01"
    assert pet["adoption_date"] == "2020-06-15"
    assert pet["image_url"] is None

    detail = client.get(f"/api/pets/{pet['pet_id']}", headers=alice)
    assert detail.status_code == 200
    assert detail.json()["pet"]["breed"] == "Poodle"


def test_register_defaults_sex_to_unknown(client, alice):
    resp = _register(client, alice, sex="")
    assert resp.json()["pet"]["sex"] == "Unknown"


def test_register_validation_errors(client, alice):
    resp = client.post("/api/pets", headers=alice, data={"name": "  "})
    assert resp.status_code == 400
    assert resp.json()["code"] == "PET_400_1"

    assert _register(client, alice, sex="X").json()["code"] == "PET_400_2"
    assert _register(client, alice, birthdate="03/01/2020").json()["code"] == "PET_400_3"


def test_register_requires_internal_user(client):
    resp = client.post(
        "/api/pets",
        headers={"Authorization": "Bearer bob-token"},
        data={"name": "Max"},
    )
    assert resp.status_code == 404
    assert resp.json()["code"] == "PET_404_1"


def test_register_with_image_is_served(client, alice, photo_storage):
    resp = client.post(
        "/api/pets",
        headers=alice,
        data={"name": "Choco"},
        files={"image": ("choco.png", PNG, "image/png")},
    )
    assert resp.status_code == 201
    url = resp.json()["pet"]["image_url"]
    assert url.startswith("/uploads/pets/")
    assert url.endswith(".png")

    stored = Path(photo_storage.upload_dir) / url.rsplit("/", 1)[1]
    assert stored.read_bytes() == PNG

    served = client.get(url)
    assert served.status_code == 200
    assert served.content == PNG


def test_register_rejects_non_image_and_oversized(client, alice):
    resp = client.post(
        "/api/pets",
        headers=alice,
        data={"name": "Choco"},
        files={"image": ("notes.txt", b"hello", "text/plain")},
    )
    assert resp.status_code == 400
    assert resp.json()["code"] == "PET_400_4"

    # MAX_UPLOAD_BYTES 는 테스트 설정에서 1024
    resp = client.post(
        "/api/pets",
        headers=alice,
        data={"name": "Choco"},
        files={"image": ("big.png", b"\x00" * 2048, "image/png")},
    )
    assert resp.status_code == 400
    assert resp.json()["code"] == "PET_400_5"


def test_list_is_newest_first_and_scoped_to_owner(client, alice, bob):
    first = _register(client, alice, name="First").json()["pet"]["pet_id"]
    second = _register(client, alice, name="Second").json()["pet"]["pet_id"]
    _register(client, bob, name="Bobs")

    pets = client.get("/api/pets", headers=alice).json()["pets"]
    assert [p["pet_id"] for p in pets] == [second, first]


def test_other_owner_cannot_read_update_or_delete(client, bob, pet_id):
    resp = client.get(f"/api/pets/{pet_id}", headers=bob)
    assert resp.status_code == 403
    assert resp.json()["code"] == "PET_GET_403_1"

    resp = client.put(f"/api/pets/{pet_id}", headers=bob, json={"name": "Stolen"})
    assert resp.json()["code"] == "PET_EDIT_403_1"

    resp = client.delete(f"/api/pets/{pet_id}", headers=bob)
    assert resp.json()["code"] == "PET_DELETE_403_1"


def test_missing_pet(client, alice):
    resp = client.get("/api/pets/999", headers=alice)
    assert resp.status_code == 404
    assert resp.json()["code"] == "PET_GET_404_2"


def test_partial_update(client, alice, pet_id):
    resp = client.put(f"/api/pets/{pet_id}", headers=alice, json={"breed": "Maltese", "sex": "M"})
    assert resp.status_code == 200
    pet = resp.json()["pet"]
    assert pet["breed"] == "Maltese"
    assert pet["sex"] == "M"
    assert pet["name"] == "Choco"

    resp = client.put(f"/api/pets/{pet_id}", headers=alice, json={})
    assert resp.status_code == 400
    assert resp.json()["code"] == "PET_EDIT_400_1"

    resp = client.put(f"/api/pets/{pet_id}", headers=alice, json={"sex": "X"})
    assert resp.status_code == 400
    assert resp.json()["code"] == "COMMON_400_1"


def test_replace_image_deletes_previous_file(client, alice, pet_id, photo_storage):
    first = client.put(
        f"/api/pets/{pet_id}/image",
        headers=alice,
        files={"image": ("a.png", PNG, "image/png")},
    )
    assert first.status_code == 200
    old_url = first.json()["image_url"]
    old_file = Path(photo_storage.upload_dir) / old_url.rsplit("/", 1)[1]
    assert old_file.exists()

    second = client.put(
        f"/api/pets/{pet_id}/image",
        headers=alice,
        files={"image": ("b.jpg", PNG, "image/jpeg")},
    )
    assert second.status_code == 200
    new_url = second.json()["image_url"]
    assert new_url != old_url
    assert second.json()["pet"]["image_url"] == new_url
    assert not old_file.exists()


def test_replace_image_requires_file(client, alice, pet_id):
    resp = client.put(f"/api/pets/{pet_id}/image", headers=alice)
    assert resp.status_code == 400
    assert resp.json()["code"] == "PET_IMG_400_1"


def test_delete_pet_cascades(client, alice, pet_id, photo_storage):
    client.put(
        f"/api/pets/{pet_id}/image",
        headers=alice,
        files={"image": ("a.png", PNG, "image/png")},
    )
    task_id = client.post(
        f"/api/pets/{pet_id}/tasks", headers=alice, json={"task_name": "walk"}
    ).json()["task"]["id"]
    client.post(
        f"/api/tasks/daily/{task_id}/complete",
        headers=alice,
        json={"completion_date": "2024-04-30"},
    )
    client.post(
        "/api/preventatives",
        headers=alice,
        json={"pet_id": pet_id, "name": "heartworm", "due_day": 1},
    )

    resp = client.delete(f"/api/pets/{pet_id}", headers=alice)
    assert resp.status_code == 204
    assert resp.content == b""

    assert client.get(f"/api/pets/{pet_id}", headers=alice).status_code == 404
    assert list(Path(photo_storage.upload_dir).iterdir()) == []

    # 할 일과 완료 기록도 사라짐
    resp = client.get(f"/api/tasks/daily/{task_id}/completions/2024-04-30", headers=alice)
    assert resp.status_code == 404
    assert resp.json()["code"] == "TASK_404_3"


class FailingDeleteStorage:
    """save 는 실제 로컬 저장소에 위임하고 delete 는 항상 실패"""

    def __init__(self, inner):
        self.inner = inner
        self.delete_calls = []

    def save(self, content, filename, content_type):
        return self.inner.save(content, filename, content_type)

    def delete(self, url):
        self.delete_calls.append(url)
        raise RuntimeError("storage unavailable")


def test_photo_cleanup_failure_does_not_fail_committed_changes(client, app, alice, pet_id, photo_storage):
    app.state.photo_storage = FailingDeleteStorage(photo_storage)

    first = client.put(
        f"/api/pets/{pet_id}/image",
        headers=alice,
        files={"image": ("a.png", PNG, "image/png")},
    )
    assert first.status_code == 200
    old_url = first.json()["image_url"]

    second = client.put(
        f"/api/pets/{pet_id}/image",
        headers=alice,
        files={"image": ("b.png", PNG, "image/png")},
    )
    assert second.status_code == 200
    new_url = second.json()["image_url"]
    assert app.state.photo_storage.delete_calls == [old_url]

    resp = client.delete(f"/api/pets/{pet_id}", headers=alice)
    assert resp.status_code == 204
    assert app.state.photo_storage.delete_calls == [old_url, new_url]
    assert client.get(f"/api/pets/{pet_id}", headers=alice).status_code == 404
