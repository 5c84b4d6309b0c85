"""
On-call schedules, escalation policies, webhooks, notification channels
and report schedules
"""
import pytest


class TestOnCallSchedules:
    """/api/on-call"""

    body = {
        "name": "Primary",
        "rotationType": "weekly",
        "timezone": "Europe/Berlin",
        "members": ["sam@example.com", "kim@example.com"],
        "currentOnCall": "sam@example.com",
        "startDate": "2026-01-05T09:00:00+01:00",
    }

    def test_create_and_get(self, client):
        response = client.post("/api/on-call", json=self.body)
        assert response.status_code == 201
        data = response.json()
        assert data["members"] == ["sam@example.com", "kim@example.com"]
        assert data["startDate"] == "2026-01-05T08:00:00"

        fetched = client.get(f"/api/on-call/{data['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["timezone"] == "Europe/Berlin"

    def test_defaults(self, client):
        data = client.post("/api/on-call", json={"name": "Secondary"}).json()
        assert data["rotationType"] == "weekly"
        assert data["timezone"] == "UTC"
        assert data["members"] == []

    def test_hand_over(self, client):
        created = client.post("/api/on-call", json=self.body).json()
        response = client.put(f"/api/on-call/{created['id']}", json={"currentOnCall": "kim@example.com"})
        assert response.status_code == 200
        assert response.json()["currentOnCall"] == "kim@example.com"

    def test_invalid_rotation(self, client):
        response = client.post("/api/on-call", json={**self.body, "rotationType": "hourly"})
        assert response.status_code == 400
        assert response.json()["field"] == "rotationType"

    def test_missing(self, client):
        assert client.get("/api/on-call/3").status_code == 404
        assert client.put("/api/on-call/3", json={"name": "x"}).status_code == 404
        assert client.delete("/api/on-call/3").status_code == 404

    def test_delete(self, client):
        created = client.post("/api/on-call", json=self.body).json()
        assert client.delete(f"/api/on-call/{created['id']}").status_code == 204
        assert client.get("/api/on-call").json() == []


class TestEscalationPolicies:
    """/api/escalation-policies"""

    body = {
        "name": "Default",
        "rules": [
            {"level": 1, "escalateAfter": 5, "target": "primary"},
            {"level": 2, "escalateAfter": 15, "target": "secondary"},
        ],
        "isDefault": True,
    }

    def test_create_and_list(self, client):
        response = client.post("/api/escalation-policies", json=self.body)
        assert response.status_code == 201
        assert response.json()["rules"][1]["target"] == "secondary"
        assert len(client.get("/api/escalation-policies").json()) == 1

    def test_update(self, client):
        created = client.post("/api/escalation-policies", json=self.body).json()
        response = client.put(f"/api/escalation-policies/{created['id']}", json={"isDefault": False})
        assert response.status_code == 200
        assert response.json()["isDefault"] is False
        assert len(response.json()["rules"]) == 2

    def test_rules_must_be_list(self, client):
        response = client.post("/api/escalation-policies", json={**self.body, "rules": {"level": 1}})
        assert response.status_code == 400
        assert response.json()["field"] == "rules"

    def test_missing(self, client):
        assert client.put("/api/escalation-policies/4", json={"name": "x"}).status_code == 404
        assert client.delete("/api/escalation-policies/4").status_code == 404


class TestWebhooks:
    """/api/webhooks"""

    body = {
        "name": "Ops channel",
        "url": "https://hooks.slack.com/services/T000/B000/XXXX",
        "type": "slack",
        "events": ["alert.triggered", "alert.resolved"],
    }

    def test_create(self, client):
        response = client.post("/api/webhooks", json=self.body)
        assert response.status_code == 201
        data = response.json()
        assert data["isActive"] is True
        assert data["failureCount"] == 0
        assert data["lastTriggeredAt"] is None

    def test_get_and_update(self, client):
        created = client.post("/api/webhooks", json=self.body).json()
        assert client.get(f"/api/webhooks/{created['id']}").status_code == 200
        response = client.put(f"/api/webhooks/{created['id']}", json={"isActive": False})
        assert response.status_code == 200
        assert response.json()["isActive"] is False

    @pytest.mark.parametrize("url", ["hooks.slack.com/x", "ftp://example.com/hook", "https://"])
    def test_invalid_url(self, client, url):
        response = client.post("/api/webhooks", json={**self.body, "url": url})
        assert response.status_code == 400
        assert response.json()["field"] == "url"

    def test_invalid_type(self, client):
        response = client.post("/api/webhooks", json={**self.body, "type": "email"})
        assert response.status_code == 400
        assert response.json()["field"] == "type"

    def test_send_test_payload(self, client):
        created = client.post("/api/webhooks", json=self.body).json()
        response = client.post(f"/api/webhooks/{created['id']}/test")
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Test payload sent successfully"}
        # Simulated delivery leaves the row untouched
        after = client.get(f"/api/webhooks/{created['id']}").json()
        assert after["lastTriggeredAt"] is None
        assert after["failureCount"] == 0

    def test_send_test_payload_missing(self, client):
        response = client.post("/api/webhooks/8/test")
        assert response.status_code == 404
        assert response.json() == {"message": "Webhook not found"}

    def test_delete(self, client):
        created = client.post("/api/webhooks", json=self.body).json()
        assert client.delete(f"/api/webhooks/{created['id']}").status_code == 204
        assert client.delete(f"/api/webhooks/{created['id']}").status_code == 404


class TestNotificationChannels:
    """/api/notification-channels"""

    body = {"name": "On-call pager", "type": "pagerduty", "config": {"routingKey": "abc"}}

    def test_create_and_get(self, client):
        response = client.post("/api/notification-channels", json=self.body)
        assert response.status_code == 201
        data = response.json()
        assert data["isDefault"] is False
        assert data["isActive"] is True
        fetched = client.get(f"/api/notification-channels/{data['id']}").json()
        assert fetched["config"] == {"routingKey": "abc"}

    def test_update_rejects_null_config(self, client):
        created = client.post("/api/notification-channels", json=self.body).json()
        response = client.put(f"/api/notification-channels/{created['id']}", json={"config": None})
        assert response.status_code == 400
        assert response.json()["field"] == "config"

    def test_unknown_type(self, client):
        response = client.post("/api/notification-channels", json={**self.body, "type": "fax"})
        assert response.status_code == 400

    def test_missing(self, client):
        assert client.get("/api/notification-channels/6").status_code == 404
        assert client.delete("/api/notification-channels/6").status_code == 404


class TestReportSchedules:
    """/api/report-schedules"""

    def test_create_without_dashboard(self, client):
        response = client.post("/api/report-schedules", json={
            "name": "Monthly SLO report",
            "frequency": "monthly",
            "format": "csv",
            "recipients": ["sam@example.com"],
        })
        assert response.status_code == 201
        data = response.json()
        assert data["dashboardId"] is None
        assert data["lastSentAt"] is None
        assert data["isActive"] is True

    def test_create_for_dashboard(self, client, dashboard):
        response = client.post("/api/report-schedules", json={"name": "Weekly", "dashboardId": dashboard["id"]})
        assert response.status_code == 201
        data = response.json()
        assert data["frequency"] == "weekly"
        assert data["format"] == "pdf"

    def test_create_for_missing_dashboard(self, client):
        response = client.post("/api/report-schedules", json={"name": "Weekly", "dashboardId": 404})
        assert response.status_code == 404
        assert response.json() == {"message": "Dashboard not found"}

    def test_move_to_missing_dashboard(self, client, dashboard):
        created = client.post("/api/report-schedules", json={"name": "Weekly", "dashboardId": dashboard["id"]}).json()
        response = client.put(f"/api/report-schedules/{created['id']}", json={"dashboardId": 404})
        assert response.status_code == 400
        assert response.json()["field"] == "dashboardId"

    def test_invalid_format(self, client):
        response = client.post("/api/report-schedules", json={"name": "Weekly", "format": "xlsx"})
        assert response.status_code == 400
        assert response.json()["field"] == "format"

    def test_update_and_delete(self, client):
        created = client.post("/api/report-schedules", json={"name": "Weekly"}).json()
        response = client.put(f"/api/report-schedules/{created['id']}", json={"isActive": False})
        assert response.status_code == 200
        assert response.json()["isActive"] is False
        assert client.get(f"/api/report-schedules/{created['id']}").status_code == 200
        assert client.delete(f"/api/report-schedules/{created['id']}").status_code == 204
        assert client.get(f"/api/report-schedules/{created['id']}").status_code == 404
