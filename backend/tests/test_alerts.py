"""
Alert API tests

Alerts only come from the seed routine, so rows are created through the
CRUD layer.
"""
from datetime import datetime, timedelta

import pytest

from pulseops import crud, schemas


@pytest.fixture
def active_alert(db):
    return crud.alert.create(db, obj_in=schemas.AlertCreate(
        title="High CPU Usage",
        severity="critical",
        threshold_value=85,
        current_value=92,
    ))


class TestAlertList:
    """GET /api/alerts"""

    def test_newest_first(self, client, db):
        for title in ("old", "new"):
            crud.alert.create(db, obj_in=schemas.AlertCreate(title=title, severity="info"))
        titles = [a["title"] for a in client.get("/api/alerts").json()]
        assert titles == ["new", "old"]

    def test_response_shape(self, client, active_alert):
        data = client.get("/api/alerts").json()[0]
        assert data["status"] == "active"
        assert data["thresholdValue"] == 85
        assert data["currentValue"] == 92
        assert data["resolvedAt"] is None


class TestAlertStatus:
    """PATCH /api/alerts/:id"""

    def test_resolve_stamps_now(self, client, active_alert):
        before = datetime.utcnow() - timedelta(seconds=1)
        response = client.patch(f"/api/alerts/{active_alert.id}", json={"status": "resolved"})
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "resolved"
        assert datetime.fromisoformat(data["resolvedAt"]) >= before.replace(microsecond=0)

    def test_resolve_with_timestamp(self, client, active_alert):
        response = client.patch(
            f"/api/alerts/{active_alert.id}",
            json={"status": "resolved", "resolvedAt": "2026-01-02T03:04:05Z"},
        )
        assert response.status_code == 200
        assert response.json()["resolvedAt"].startswith("2026-01-02T03:04:05")

    def test_resolve_is_persisted(self, client, active_alert):
        client.patch(f"/api/alerts/{active_alert.id}", json={"status": "resolved"})
        data = client.get("/api/alerts").json()[0]
        assert data["status"] == "resolved"
        assert data["resolvedAt"] is not None

    def test_resolve_twice(self, client, active_alert):
        first = client.patch(f"/api/alerts/{active_alert.id}", json={"status": "resolved"})
        second = client.patch(f"/api/alerts/{active_alert.id}", json={"status": "resolved"})
        assert first.status_code == 200
        assert second.status_code == 200
        assert second.json()["status"] == "resolved"

    def test_reopen_rejected(self, client, active_alert):
        client.patch(f"/api/alerts/{active_alert.id}", json={"status": "resolved"})
        response = client.patch(f"/api/alerts/{active_alert.id}", json={"status": "active"})
        assert response.status_code == 409
        assert response.json() == {"message": "Resolved alerts cannot be reopened"}

    def test_active_to_active(self, client, active_alert):
        response = client.patch(f"/api/alerts/{active_alert.id}", json={"status": "active"})
        assert response.status_code == 200
        assert response.json()["resolvedAt"] is None

    def test_unknown_status(self, client, active_alert):
        response = client.patch(f"/api/alerts/{active_alert.id}", json={"status": "snoozed"})
        assert response.status_code == 400
        assert response.json()["field"] == "status"

    def test_missing_alert(self, client):
        response = client.patch("/api/alerts/999", json={"status": "resolved"})
        assert response.status_code == 404
        assert response.json() == {"message": "Alert not found"}

    def test_non_numeric_id(self, client):
        assert client.patch("/api/alerts/abc", json={"status": "resolved"}).status_code == 404
