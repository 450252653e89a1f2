# backend/tests/test_health.py
from fastapi.testclient import TestClient
from portfolio_contact.main import app

client = TestClient(app)


def test_health():
    """Basic health endpoint returns status ok."""
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
