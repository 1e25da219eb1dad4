from __future__ import annotations

API = "/api/v1/users"
UNSTORABLE_ID = 2**64


def _form(user_id: int, **overrides) -> dict:
    form = {
        "user_id": str(user_id),
        "name": f"User {user_id}",
        "mail": f"user{user_id}@example.com",
        "city": "Arequipa",
        "gender": "1",
        "is_active": "on",
    }
    form.update(overrides)
    return form


def _create(client, user_id: int, **overrides) -> dict:
    response = client.post(f"{API}/create", data=_form(user_id, **overrides), follow_redirects=False)
    assert response.status_code == 303, response.text
    return next(user for user in client.get(API).json()["users"] if user["user_id"] == user_id)


def test_create_view_is_empty_form(client):
    response = client.get(f"{API}/create")

    assert response.status_code == 200
    assert response.json() == {"view": "create", "id": None, "form": {}, "errors": []}


def test_create_redirects_to_index(client):
    response = client.post(f"{API}/create", data=_form(10), follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"].endswith(API)

    index = client.get(API).json()
    assert index["view"] == "index"
    assert [(user["user_id"], user["is_active"]) for user in index["users"]] == [(10, True)]


def test_create_unchecked_checkbox_stores_inactive_user(client):
    form = _form(11)
    del form["is_active"]

    response = client.post(f"{API}/create", data=form, follow_redirects=False)

    assert response.status_code == 303
    assert client.get(API).json()["users"][0]["is_active"] is False


def test_create_redisplays_view_on_invalid_form(client):
    form = _form(12, mail="not-an-email")

    response = client.post(f"{API}/create", data=form, follow_redirects=False)

    assert response.status_code == 400
    body = response.json()
    assert body["view"] == "create"
    assert body["form"] == form
    assert body["errors"][0].startswith("mail:")
    assert client.get(API).json()["users"] == []


def test_create_redisplays_view_on_duplicate_user_id(client):
    _create(client, 13)

    response = client.post(f"{API}/create", data=_form(13, name="Other"), follow_redirects=False)

    assert response.status_code == 400
    assert response.json()["errors"] == ["Failed to create user"]
    assert len(client.get(API).json()["users"]) == 1


def test_edit_view_shows_current_values(client):
    user = _create(client, 20)

    response = client.get(f"{API}/{user['id']}/edit")

    assert response.status_code == 200
    body = response.json()
    assert body["view"] == "edit"
    assert body["id"] == user["id"]
    assert body["form"]["name"] == "User 20"


def test_edit_view_of_unknown_user_is_not_found(client):
    response = client.get(f"{API}/999/edit")

    assert response.status_code == 404
    assert response.json() == {"detail": "User 999 not found"}


def test_edit_updates_user_and_redirects(client):
    user = _create(client, 21)

    response = client.post(
        f"{API}/{user['id']}/edit",
        data=_form(21, name="Renamed", city="Trujillo"),
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert response.headers["location"].endswith(API)
    updated = client.get(f"{API}/by-user-id/21").json()
    assert updated["name"] == "Renamed"
    assert updated["city"] == "Trujillo"


def test_edit_redisplays_view_for_unknown_user(client):
    response = client.post(f"{API}/999/edit", data=_form(22), follow_redirects=False)

    assert response.status_code == 400
    body = response.json()
    assert body["view"] == "edit"
    assert body["id"] == 999
    assert body["errors"] == ["User 999 not found"]


def test_edit_redisplays_view_on_conflicting_user_id(client):
    _create(client, 23)
    user = _create(client, 24)

    response = client.post(f"{API}/{user['id']}/edit", data=_form(23), follow_redirects=False)

    assert response.status_code == 400
    assert response.json()["errors"] == [f"Failed to update user {user['id']}"]
    assert client.get(f"{API}/by-user-id/24").json()["id"] == user["id"]


def test_delete_removes_user_and_redirects(client):
    user = _create(client, 30)

    view = client.get(f"{API}/{user['id']}/delete")
    assert view.status_code == 200
    assert view.json()["view"] == "delete"

    response = client.post(f"{API}/{user['id']}/delete", data={}, follow_redirects=False)

    assert response.status_code == 303
    assert client.get(f"{API}/by-user-id/30").json() is None


def test_delete_redisplays_view_for_unknown_user(client):
    response = client.post(f"{API}/999/delete", data={}, follow_redirects=False)

    assert response.status_code == 400
    assert response.json()["view"] == "delete"
    assert response.json()["errors"] == ["User 999 not found"]


def test_create_redisplays_view_on_unstorable_user_id(client):
    response = client.post(f"{API}/create", data=_form(UNSTORABLE_ID), follow_redirects=False)

    assert response.status_code == 400
    body = response.json()
    assert body["view"] == "create"
    assert body["errors"][0].startswith("user_id:")
    assert client.get(API).json()["users"] == []


def test_edit_and_delete_reject_unstorable_record_id(client):
    assert client.get(f"{API}/{UNSTORABLE_ID}/edit").status_code == 422
    assert client.get(f"{API}/{UNSTORABLE_ID}/delete").status_code == 422

    edit = client.post(f"{API}/{UNSTORABLE_ID}/edit", data=_form(1), follow_redirects=False)
    delete = client.post(f"{API}/{UNSTORABLE_ID}/delete", data={}, follow_redirects=False)

    assert edit.status_code == 422
    assert delete.status_code == 422
    assert "record_id" in edit.json()["detail"]
