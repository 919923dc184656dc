import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.main import create_app


@pytest.fixture
def failing_client():
    app = create_app()

    @app.get("/boom/store")
    def store_down():
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    @app.get("/boom/bug")
    def bug():
        raise RuntimeError("bug")

    # Exception handlers run in ServerErrorMiddleware, which re-raises after responding
    return TestClient(app, raise_server_exceptions=False)


def test_store_error_is_db_error(failing_client):
    resp = failing_client.get("/boom/store")
    assert resp.status_code == 500
    assert resp.json() == {"error": {"code": "DB_ERROR", "reason": "Store failure"}}


def test_unhandled_exception_is_internal_error(failing_client):
    resp = failing_client.get("/boom/bug")
    assert resp.status_code == 500
    assert resp.json() == {"error": {"code": "INTERNAL_ERROR", "reason": "Internal server error"}}
