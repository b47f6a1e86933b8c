import pytest
from fastapi.testclient import TestClient

import smarteam.routers.auth as auth_routes
from smarteam.main import app
from smarteam.security.passwords import DUMMY_HASH


def token_header(token: str) -> dict:
    return {"x-auth-token": token}


def register(client: TestClient, email: str, password: str = "secret") -> dict:
    r = client.post("/api/auth/register", json={"email": email, "password": password})
    assert r.status_code == 200
    return r.json()


def test_register_then_me():
    client = TestClient(app)

    body = register(client, "a@x.com")
    assert body["role"] == "user"
    assert body["token"]

    r = client.get("/api/auth/me", headers=token_header(body["token"]))
    assert r.status_code == 200
    assert r.json() == {"email": "a@x.com", "role": "user"}


@pytest.mark.parametrize("path", ["/api/auth/register", "/api/auth/login"])
@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"email": "a@x.com"},
        {"password": "secret"},
        {"email": "", "password": "secret"},
        {"email": "a@x.com", "password": ""},
    ],
)
def test_missing_fields_are_rejected_with_400(path, payload):
    client = TestClient(app)
    r = client.post(path, json=payload)
    assert r.status_code == 400
    assert "token" not in r.json()


def test_register_without_body_is_400():
    client = TestClient(app)
    assert client.post("/api/auth/register").status_code == 400


def test_duplicate_registration_fails_and_keeps_first_user():
    client = TestClient(app)
    register(client, "dup@x.com", "first-pass")

    r = client.post("/api/auth/register", json={"email": "dup@x.com", "password": "second-pass"})
    assert r.status_code == 400
    assert r.json()["detail"] == "User already exists"

    # Original password still works, the second one does not
    assert client.post("/api/auth/login", json={"email": "dup@x.com", "password": "first-pass"}).status_code == 200
    assert client.post("/api/auth/login", json={"email": "dup@x.com", "password": "second-pass"}).status_code == 400


def test_email_is_case_sensitive():
    client = TestClient(app)
    register(client, "Case@x.com")
    register(client, "case@x.com")


def test_login_returns_token_and_role():
    client = TestClient(app)
    register(client, "b@x.com", "hunter22")

    r = client.post("/api/auth/login", json={"email": "b@x.com", "password": "hunter22"})
    assert r.status_code == 200
    body = r.json()
    assert body["role"] == "user"

    me = client.get("/api/auth/me", headers=token_header(body["token"]))
    assert me.json()["email"] == "b@x.com"


def test_login_wrong_password_issues_no_token():
    client = TestClient(app)
    register(client, "c@x.com", "right")

    r = client.post("/api/auth/login", json={"email": "c@x.com", "password": "wrong"})
    assert r.status_code in (400, 401)
    assert "token" not in r.json()


def test_login_unknown_email():
    client = TestClient(app)
    r = client.post("/api/auth/login", json={"email": "nobody@x.com", "password": "whatever"})
    assert r.status_code == 400
    assert r.json()["detail"] == "Invalid credentials"


def test_unknown_email_still_runs_password_check(monkeypatch):
    calls = []
    real_verify = auth_routes.verify_password

    def spy(plain, hashed):
        calls.append(hashed)
        return real_verify(plain, hashed)

    monkeypatch.setattr(auth_routes, "verify_password", spy)
    client = TestClient(app)

    r = client.post("/api/auth/login", json={"email": "ghost@x.com", "password": "whatever"})
    assert r.status_code == 400
    assert calls == [DUMMY_HASH]


def test_me_requires_token():
    client = TestClient(app)
    assert client.get("/api/auth/me").status_code == 401


def test_me_rejects_garbage_token():
    client = TestClient(app)
    assert client.get("/api/auth/me", headers=token_header("not-a-jwt")).status_code == 401


def test_me_ignores_bearer_authorization_header():
    client = TestClient(app)
    token = register(client, "d@x.com")["token"]
    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401


def test_unknown_route_is_404():
    client = TestClient(app)
    assert client.get("/unknown-route").status_code == 404


def test_health():
    client = TestClient(app)
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}
