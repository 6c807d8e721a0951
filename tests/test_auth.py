# tests/test_auth.py


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "OK"


def test_register_returns_token_and_user(client):
    resp = client.post(
        "/api/auth/register",
        json={"email": "Anna@Example.com", "password": "secret123", "full_name": "Anna", "user_type": "user"},
    )
    assert resp.status_code == 201
    data = resp.json()
    assert data["token"]
    assert data["user"]["email"] == "anna@example.com"
    assert data["user"]["user_type"] == "user"


def test_register_duplicate_email(client, register):
    register("dup@example.com")
    resp = client.post(
        "/api/auth/register",
        json={"email": "dup@example.com", "password": "secret123", "full_name": "Dup", "user_type": "user"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "User already exists"}


def test_register_validation_error_uses_message_shape(client):
    resp = client.post(
        "/api/auth/register",
        json={"email": "short@example.com", "password": "123", "full_name": "Short", "user_type": "user"},
    )
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert "password" in body["message"]


def test_register_artist_creates_profile(client, register):
    bio = "b" * 220
    artist = register("painter@example.com", user_type="artist", artist_name="Painter", bio=bio)

    resp = client.get(f"/api/artist-profiles/{artist['id']}", headers=artist["headers"])
    assert resp.status_code == 200
    assert resp.json()["artist_name"] == "Painter"


def test_login_and_me(client, register):
    register("me@example.com")
    resp = client.post("/api/auth/login", json={"email": "me@example.com", "password": "secret123"})
    assert resp.status_code == 200
    token = resp.json()["token"]

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["email"] == "me@example.com"
    assert "password_hash" not in me.json()


def test_login_wrong_password(client, register):
    register("wrong@example.com")
    resp = client.post("/api/auth/login", json={"email": "wrong@example.com", "password": "nope123"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid credentials"


def test_me_requires_token(client):
    resp = client.get("/api/auth/me")
    assert resp.status_code == 401
    assert resp.json()["message"] == "No token provided"


def test_me_rejects_garbage_token(client):
    resp = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid token"


def test_suspended_user_cannot_login(client, register, admin):
    user = register("bad@example.com")
    resp = client.put(f"/api/profiles/{user['id']}", json={"status": "suspended"}, headers=admin["headers"])
    assert resp.status_code == 200
    assert resp.json()["status"] == "suspended"

    resp = client.post("/api/auth/login", json={"email": "bad@example.com", "password": "secret123"})
    assert resp.status_code == 403

    # stary token tez przestaje dzialac
    assert client.get("/api/auth/me", headers=user["headers"]).status_code == 403


def test_user_cannot_change_own_role(client, register):
    user = register("climber@example.com")
    resp = client.put(f"/api/profiles/{user['id']}", json={"user_type": "admin"}, headers=user["headers"])
    assert resp.status_code == 403


def test_user_can_update_own_profile(client, register):
    user = register("editor@example.com")
    resp = client.put(f"/api/profiles/{user['id']}", json={"phone": "555"}, headers=user["headers"])
    assert resp.status_code == 200
    assert resp.json()["phone"] == "555"
