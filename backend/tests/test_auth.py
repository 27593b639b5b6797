from tests.conftest import auth_headers


def test_login_returns_token_and_user(client, seed_users):
    resp = client.post("/api/auth/login", json={"email": "kari@example.com"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["token_type"] == "bearer"
    assert data["user"]["name"] == "Kari"
    assert data["user"]["role"] == "student"


def test_login_unknown_email(client, seed_users):
    resp = client.post("/api/auth/login", json={"email": "nobody@example.com"})
    assert resp.status_code == 401
    assert "error" in resp.json()


def test_me_requires_valid_token(client, seed_users):
    assert client.get("/api/auth/me").status_code == 401
    bad = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert bad.status_code == 401
    assert bad.json() == {"error": "Invalid or expired token"}


def test_me_returns_current_user(client, seed_users):
    resp = client.get("/api/auth/me", headers=auth_headers(client, "moderator@example.com"))
    assert resp.status_code == 200
    assert resp.json()["role"] == "moderator"
