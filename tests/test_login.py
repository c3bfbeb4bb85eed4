"""
Smoke tests for login and the current-user endpoint.
"""
from jose import jwt

from careerpages.core.config import SECRET_KEY, ALGORITHM, AUTH_RATE_LIMIT_PER_MINUTE


def login(client, email, password):
    return client.post("/api/auth/login", data={"username": email, "password": password})


def test_login_success(client, acme):
    response = login(client, "alice@acme.com", "testpass123")

    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["company_slug"] == "acme"
    assert body["role"] == "ADMIN"

    claims = jwt.decode(body["access_token"], SECRET_KEY, algorithms=[ALGORITHM])
    assert claims["sub"] == "alice@acme.com"
    assert claims["company_slug"] == "acme"
    assert claims["name"] == "Alice Admin"


def test_login_email_is_case_insensitive(client, acme):
    assert login(client, "Alice@Acme.com", "testpass123").status_code == 200


def test_login_wrong_password(client, acme):
    response = login(client, "alice@acme.com", "wrongpass1")
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid credentials"


def test_login_unknown_user(client):
    assert login(client, "nobody@example.com", "testpass123").status_code == 401


def test_me_returns_session_user(client, acme, editor_headers):
    response = client.get("/api/auth/me", headers=editor_headers)
    assert response.status_code == 200
    assert response.json()["email"] == "eddie@acme.com"
    assert response.json()["role"] == "EDITOR"
    assert response.json()["company_slug"] == "acme"


def test_invalid_token_is_401(client):
    response = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401


def test_removed_user_token_stops_working(client, acme, acme_editor, editor_headers, admin_headers):
    client.delete(f"/api/companies/acme/users/{acme_editor.id}", headers=admin_headers)
    assert client.get("/api/auth/me", headers=editor_headers).status_code == 401


def test_login_is_rate_limited(client, acme):
    for _ in range(AUTH_RATE_LIMIT_PER_MINUTE):
        login(client, "alice@acme.com", "wrongpass1")
    response = login(client, "alice@acme.com", "testpass123")
    assert response.status_code == 429
