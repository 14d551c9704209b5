from __future__ import annotations


def test_health_ok(client):
    r = client.get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "OK"
    assert data["success"] is True
    assert data["uptime"] >= 0
    assert "request_id" in data and "timestamp" in data

def test_health_echoes_request_id(client):
    r = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert r.status_code == 200
    assert r.json()["request_id"] == "abc-123"
    assert r.headers["X-Request-ID"] == "abc-123"

def test_version_ok(client):
    r = client.get("/version")
    assert r.status_code == 200
    data = r.json()
    assert "version" in data and "git_sha" in data

def test_index_lists_endpoints(client):
    r = client.get("/")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "Running"
    assert body["endpoints"]["submissions"] == "/api/submissions"
    assert body["endpoints"]["rooms"] == "/api/rooms"

def test_unknown_endpoint_is_enveloped_404(client):
    r = client.get("/api/nope")
    assert r.status_code == 404
    assert r.json() == {"success": False, "error": "Endpoint not found"}

def test_unhandled_error_becomes_generic_500():
    from fastapi.testclient import TestClient
    from app.main import create_app

    app = create_app()

    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    with TestClient(app, raise_server_exceptions=False) as c:
        r = c.get("/boom")
        assert r.status_code == 500
        assert r.json() == {"success": False, "error": "Internal server error"}
        # process keeps serving
        assert c.get("/health").status_code == 200


def test_unhandled_error_keeps_request_id(monkeypatch):
    import structlog
    from fastapi.testclient import TestClient
    import app.main as main_mod

    seen = []

    class _Recorder:
        def info(self, *args, **kw):
            pass

        def exception(self, event, **kw):
            seen.append((event, dict(structlog.contextvars.get_contextvars())))

    app = main_mod.create_app()

    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    monkeypatch.setattr(main_mod, "log", _Recorder())
    with TestClient(app, raise_server_exceptions=False) as c:
        r = c.get("/boom", headers={"X-Request-ID": "rid-500"})
        assert r.status_code == 500
        assert r.headers["X-Request-ID"] == "rid-500"
    assert seen == [("unhandled_error", {"request_id": "rid-500"})]
