from __future__ import annotations

from fastapi.testclient import TestClient

from user_service.main import app


def test_healthz():
    # no context manager: the lifespan (and its Postgres pool) is not started
    client = TestClient(app)

    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_metrics_exposes_prometheus_text():
    client = TestClient(app)

    response = client.get("/metrics")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
