"""
Tests for the /api/health endpoint
"""
from unittest.mock import patch

from marks_backend.services.health import HealthService


def test_health_ok(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"success": True, "data": {"status": "ok"}}


def test_health_does_not_touch_database(client, marks_collection):
    with patch.object(marks_collection, "find", side_effect=AssertionError("database probed")):
        response = client.get("/api/health")
    assert response.status_code == 200


def test_health_internal_fault(client):
    with patch.object(HealthService, "check_health", side_effect=RuntimeError("boom")):
        response = client.get("/api/health")
    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "boom"}
