from starlette.testclient import TestClient

import server
from tests.token_helpers import _build_client


def test_health_returns_200() -> None:
    client = _build_client()

    response = client.get("/health")

    assert response.status_code == 200


def test_health_response_format() -> None:
    client = _build_client()

    payload = client.get("/health").json()

    assert payload == {"status": "ok", "version": "0.1.0"}


def test_create_app_from_env(monkeypatch, secret_env) -> None:
    monkeypatch.setattr("eventapi.app.load_env", lambda: None)
    monkeypatch.setattr("eventapi.app.setup_logging", lambda: False)
    monkeypatch.setenv("EVENTAPI_CORS_ORIGINS", "https://a.example, https://b.example")

    client = TestClient(server.create_app())
    encoded = client.post("/token/encode", json={"ok": True}).json()
    response = client.post(
        "/token/decode",
        json=encoded,
        headers={"Origin": "https://b.example"},
    )

    assert response.json() == {"ok": True}
    assert response.headers["access-control-allow-origin"] == "https://b.example"
