def test_root(client):
    resp = client.get("/api/")
    assert resp.status_code == 200
    assert resp.json()["docs"] == "/docs"


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok"}


def test_db_health(client):
    assert client.get("/api/db/health").json() == {"status": "ok", "db": "sqlite"}
