from fastapi import status


def test_healthz(client):
    response = client.get("/healthz")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] == "ok"


def test_version(client):
    data = client.get("/version").json()
    assert {"version", "git_sha", "build_time_utc", "env", "debug"} <= data.keys()


def test_request_id_is_echoed(client):
    response = client.get("/healthz", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


def test_request_id_is_generated(client):
    response = client.get("/healthz")
    assert response.headers["X-Request-ID"]


def test_security_headers(client):
    response = client.get("/healthz")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["Referrer-Policy"] == "no-referrer"


def test_unknown_route_is_404(client):
    assert client.get("/nao-existe").status_code == status.HTTP_404_NOT_FOUND
