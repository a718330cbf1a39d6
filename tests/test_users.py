"""Users admin table: role gates, pagination, field patches and delete guards."""

from datetime import datetime, timedelta


def test_users_list_role_gate(client, auth):
    assert client.get("/api/users").status_code == 401
    assert client.get("/api/users", headers=auth("user")).status_code == 403
    assert client.get("/api/users", headers=auth("instructor")).status_code == 403
    assert client.get("/api/users", headers=auth("hr")).status_code == 200
    assert client.get("/api/users", headers=auth("admin")).status_code == 200


def test_summary_is_staff_only(client, auth, make_user):
    make_user(active=False)
    assert client.get("/api/users?summary=true", headers=auth("hr")).status_code == 403

    response = client.get("/api/users?summary=true", headers=auth("manager"))
    assert response.status_code == 200
    summary = response.json()["data"]
    assert summary["total"] == 3
    assert summary["active"] == 2
    assert "growth" in summary


def test_pagination_second_page(client, make_user):
    _, headers = make_user("hr", created_at=datetime(2020, 1, 1))
    base = datetime(2024, 1, 1)
    for i in range(25):
        make_user(name=f"Member {i:02d}", created_at=base + timedelta(minutes=i))

    response = client.get("/api/users?role=user&page=2&limit=10", headers=headers)
    assert response.status_code == 200
    data = response.json()["data"]

    # Newest first: page 2 holds members 14 down to 5
    assert [u["name"] for u in data["items"]] == [f"Member {i:02d}" for i in range(14, 4, -1)]
    assert data["pagination"] == {
        "current": 2,
        "total_pages": 3,
        "total": 25,
        "has_next": True,
        "has_prev": True,
    }


def test_search_is_literal_and_case_insensitive(client, make_user, auth):
    make_user(name="Grace Hopper", email="grace@example.com")
    make_user(name="Alan Turing", email="alan@example.com")

    response = client.get("/api/users?search=HOPPER", headers=auth("admin"))
    assert [u["name"] for u in response.json()["data"]["items"]] == ["Grace Hopper"]

    response = client.get("/api/users?search=.*", headers=auth("admin"))
    assert response.json()["data"]["items"] == []


def test_list_never_exposes_password(client, make_user, auth):
    make_user(password="secret123")
    items = client.get("/api/users", headers=auth("admin")).json()["data"]["items"]
    assert items
    assert all("password" not in item for item in items)


def test_create_user_with_mismatched_passwords(client, auth):
    response = client.post("/api/users", headers=auth("admin"), json={
        "name": "New Hire",
        "email": "hire@example.com",
        "password": "secret123",
        "confirm_password": "secret999",
    })
    assert response.status_code == 400
    assert "Passwords do not match" in response.json()["message"]


def test_create_user(client, auth):
    response = client.post("/api/users", headers=auth("hr"), json={
        "name": "New Hire",
        "email": "hire@example.com",
        "password": "secret123",
        "confirm_password": "secret123",
        "role": "employee",
    })
    assert response.status_code == 201
    assert response.json()["data"]["role"] == "employee"


def test_create_user_rejects_unknown_role(client, auth):
    response = client.post("/api/users", headers=auth("admin"), json={
        "name": "New Hire",
        "email": "hire@example.com",
        "password": "secret123",
        "confirm_password": "secret123",
        "role": "superuser",
    })
    assert response.status_code == 400


def test_patch_active_flag(client, make_user, auth, db):
    target, _ = make_user()
    response = client.patch(
        f"/api/users/{target['_id']}",
        headers=auth("manager"),
        json={"field": "active", "value": False},
    )
    assert response.status_code == 200
    assert response.json()["data"]["active"] is False
    assert db["users"].find_one({"_id": target["_id"]})["active"] is False


def test_patch_rejects_bad_values(client, make_user, auth):
    target, _ = make_user()
    headers = auth("admin")
    url = f"/api/users/{target['_id']}"
    assert client.patch(url, headers=headers, json={"field": "active", "value": "yes"}).status_code == 400
    assert client.patch(url, headers=headers, json={"field": "role", "value": "root"}).status_code == 400
    assert client.patch(url, headers=headers, json={"field": "name", "value": "   "}).status_code == 400
    assert client.patch(url, headers=headers, json={"field": "password", "value": "x"}).status_code == 400


def test_update_to_taken_email_conflicts(client, make_user, auth):
    make_user(email="taken@example.com")
    target, _ = make_user()
    response = client.put(
        f"/api/users/{target['_id']}",
        headers=auth("admin"),
        json={"email": "Taken@Example.com"},
    )
    assert response.status_code == 409


def test_update_password_is_hashed(client, make_user, auth, db):
    target, _ = make_user()
    client.put(f"/api/users/{target['_id']}", headers=auth("admin"), json={"password": "another123"})
    stored = db["users"].find_one({"_id": target["_id"]})["password"]
    assert stored and stored != "another123"


def test_cannot_delete_self(client, make_user):
    me, headers = make_user("admin")
    response = client.delete(f"/api/users/{me['_id']}", headers=headers)
    assert response.status_code == 400


def test_manager_cannot_delete_admin(client, make_user, auth):
    admin, _ = make_user("admin")
    response = client.delete(f"/api/users/{admin['_id']}", headers=auth("manager"))
    assert response.status_code == 403


def test_hr_cannot_delete(client, make_user, auth):
    target, _ = make_user()
    assert client.delete(f"/api/users/{target['_id']}", headers=auth("hr")).status_code == 403


def test_admin_deletes_user(client, make_user, auth, db):
    target, _ = make_user()
    response = client.delete(f"/api/users/{target['_id']}", headers=auth("admin"))
    assert response.status_code == 200
    assert db["users"].find_one({"_id": target["_id"]}) is None
    assert client.get(f"/api/users/{target['_id']}", headers=auth("admin")).status_code == 404


def test_malformed_id_is_bad_request(client, auth):
    response = client.get("/api/users/not-an-id", headers=auth("admin"))
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Invalid id"}


def _new_admin_payload():
    return {
        "name": "Second Admin",
        "email": "admin2@example.com",
        "password": "secret123",
        "confirm_password": "secret123",
        "role": "admin",
    }


def test_only_admin_creates_admins(client, auth, db):
    response = client.post("/api/users", headers=auth("hr"), json=_new_admin_payload())
    assert response.status_code == 403
    assert db["users"].find_one({"email": "admin2@example.com"}) is None

    response = client.post("/api/users", headers=auth("admin"), json=_new_admin_payload())
    assert response.status_code == 201
    assert response.json()["data"]["role"] == "admin"


def test_manager_cannot_promote_self(client, make_user, db):
    me, headers = make_user("manager")
    url = f"/api/users/{me['_id']}"

    assert client.patch(url, headers=headers, json={"field": "role", "value": "admin"}).status_code == 403
    assert client.put(url, headers=headers, json={"role": "admin"}).status_code == 403
    assert db["users"].find_one({"_id": me["_id"]})["role"] == "manager"


def test_non_admin_cannot_touch_admin_accounts(client, make_user, auth, db):
    admin, _ = make_user("admin")
    url = f"/api/users/{admin['_id']}"
    headers = auth("manager")

    response = client.patch(url, headers=headers, json={"field": "role", "value": "user"})
    assert response.status_code == 403
    assert response.json()["message"] == "Only admins can modify admin accounts"
    assert client.put(url, headers=headers, json={"password": "takeover1"}).status_code == 403

    # The admin is still an admin, so the delete guard still holds
    assert db["users"].find_one({"_id": admin["_id"]})["role"] == "admin"
    assert client.delete(url, headers=headers).status_code == 403


def test_admin_changes_roles(client, make_user, auth, db):
    target, _ = make_user("manager")
    url = f"/api/users/{target['_id']}"
    headers = auth("admin")

    assert client.patch(url, headers=headers, json={"field": "role", "value": "admin"}).status_code == 200
    assert client.patch(url, headers=headers, json={"field": "role", "value": "employee"}).status_code == 200
    assert db["users"].find_one({"_id": target["_id"]})["role"] == "employee"


def test_patch_email_must_be_valid(client, make_user, auth, db):
    target, _ = make_user(email="before@example.com")
    url = f"/api/users/{target['_id']}"
    headers = auth("admin")

    response = client.patch(url, headers=headers, json={"field": "email", "value": "not-an-email"})
    assert response.status_code == 400
    assert response.json()["message"] == "Please provide a valid email address"
    assert db["users"].find_one({"_id": target["_id"]})["email"] == "before@example.com"

    response = client.patch(url, headers=headers, json={"field": "email", "value": "After@Example.com"})
    assert response.status_code == 200
    assert response.json()["data"]["email"] == "after@example.com"
