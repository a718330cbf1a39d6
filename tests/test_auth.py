"""Registration, login and the session gate."""

from datetime import datetime


def test_register_forces_user_role(client, db):
    response = client.post("/api/auth/register", json={
        "name": "Ada Lovelace",
        "email": "Ada@Example.com",
        "password": "secret123",
        "role": "admin",
    })
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["role"] == "user"
    assert body["data"]["email"] == "ada@example.com"
    assert "password" not in body["data"]


def test_register_duplicate_email_is_conflict(client, db):
    payload = {"name": "Ada", "email": "ada@example.com", "password": "secret123"}
    assert client.post("/api/auth/register", json=payload).status_code == 201

    payload["email"] = "ADA@example.com"
    response = client.post("/api/auth/register", json=payload)
    assert response.status_code == 409
    assert response.json()["success"] is False
    assert db["users"].count_documents({}) == 1


def test_register_rejects_short_password(client, db):
    response = client.post("/api/auth/register", json={
        "name": "Ada", "email": "ada@example.com", "password": "123"
    })
    assert response.status_code == 400
    assert response.json()["message"].startswith("password")


def test_login_returns_token_and_sets_cookie(client, make_user):
    make_user("manager", email="boss@example.com", password="secret123")

    response = client.post("/api/auth/login", json={"email": "boss@example.com", "password": "secret123"})
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["token_type"] == "bearer"
    assert data["role"] == "manager"
    assert data["user"]["email"] == "boss@example.com"
    assert "session_token" in response.cookies

    # The cookie alone is enough for the next request
    me = client.get("/api/auth/me")
    assert me.status_code == 200
    assert me.json()["data"]["email"] == "boss@example.com"

    client.post("/api/auth/logout")
    client.cookies.clear()
    assert client.get("/api/auth/me").status_code == 401


def test_login_records_last_login(client, make_user, db):
    user, _ = make_user(email="ada@example.com", password="secret123")
    client.post("/api/auth/login", json={"email": "ada@example.com", "password": "secret123"})
    client.cookies.clear()
    assert isinstance(db["users"].find_one({"_id": user["_id"]})["last_login"], datetime)


def test_bearer_token_authenticates(client, make_user):
    user, headers = make_user("instructor")
    response = client.get("/api/auth/me", headers=headers)
    assert response.status_code == 200
    assert response.json()["data"]["_id"] == str(user["_id"])


def test_wrong_password_is_unauthorized(client, make_user):
    make_user(email="ada@example.com", password="secret123")
    response = client.post("/api/auth/login", json={"email": "ada@example.com", "password": "wrong-one"})
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Invalid email or password"}


def test_unknown_email_is_unauthorized(client, db):
    response = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "secret123"})
    assert response.status_code == 401


def test_deactivated_account_cannot_login(client, make_user):
    make_user(email="gone@example.com", password="secret123", active=False)
    response = client.post("/api/auth/login", json={"email": "gone@example.com", "password": "secret123"})
    assert response.status_code == 403


def test_missing_active_flag_counts_as_active(client, make_user, db):
    user, _ = make_user(email="legacy@example.com", password="secret123")
    db["users"].update_one({"_id": user["_id"]}, {"$unset": {"active": ""}})

    response = client.post("/api/auth/login", json={"email": "legacy@example.com", "password": "secret123"})
    client.cookies.clear()
    assert response.status_code == 200


def test_oauth_account_without_password_cannot_use_credentials(client, make_user):
    make_user(email="oauth@example.com", provider="google")
    response = client.post("/api/auth/login", json={"email": "oauth@example.com", "password": "anything"})
    assert response.status_code == 401


def test_anonymous_me_is_unauthorized(client, db):
    response = client.get("/api/auth/me")
    assert response.status_code == 401
    assert response.json()["success"] is False


def test_garbage_token_is_anonymous(client, db):
    response = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401
