from nutrilog.controllers import auth_controller
from nutrilog.models.user import User


def _google_info(**overrides):
    info = {
        "iss": "https://accounts.google.com",
        "sub": "1234567890",
        "email": "Person@Example.com",
        "name": "Person",
        "picture": "https://example.com/p.png",
    }
    info.update(overrides)
    return info


def test_google_login_issues_token_and_creates_user(client, app, monkeypatch):
    monkeypatch.setattr(auth_controller, "verify_google_token", lambda token: _google_info())
    r = client.post("/api/auth/google", json={"token": "google-id-token"})
    assert r.status_code == 200, r.data
    data = r.get_json()
    assert data["user"]["email"] == "person@example.com"

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {data['token']}"})
    assert me.status_code == 200
    assert me.get_json()["id"] == data["user"]["id"]

    # Signing in again resolves to the same row
    client.post("/api/auth/google", json={"token": "google-id-token"})
    with app.app_context():
        assert User.query.filter_by(email="person@example.com").count() == 1


def test_google_login_rejects_bad_tokens(client, monkeypatch):
    assert client.post("/api/auth/google", json={}).status_code == 400

    def _raise(token):
        raise ValueError("Wrong recipient")

    monkeypatch.setattr(auth_controller, "verify_google_token", _raise)
    assert client.post("/api/auth/google", json={"token": "x"}).status_code == 401

    monkeypatch.setattr(auth_controller, "verify_google_token", lambda token: _google_info(iss="evil.example"))
    assert client.post("/api/auth/google", json={"token": "x"}).status_code == 401

    monkeypatch.setattr(auth_controller, "verify_google_token", lambda token: _google_info(email=None))
    assert client.post("/api/auth/google", json={"token": "x"}).status_code == 401


def test_logout_and_health(client):
    assert client.post("/api/auth/logout").get_json()["message"] == "Logged out successfully"
    health = client.get("/health")
    assert health.status_code == 200
    assert health.get_json()["database"] == "healthy"


def test_unknown_route_uses_error_envelope(client):
    r = client.get("/api/nope")
    assert r.status_code == 404
    assert r.get_json()["error"]["code"] == "NOT_FOUND"
