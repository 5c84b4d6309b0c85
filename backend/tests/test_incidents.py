"""
Incident timeline and postmortems
"""


class TestIncidentTimeline:
    """/api/incidents/:incidentId/timeline"""

    def test_empty_for_unknown_incident(self, client):
        response = client.get("/api/incidents/inc-404/timeline")
        assert response.status_code == 200
        assert response.json() == []

    def test_add_event(self, client):
        response = client.post("/api/incidents/inc-1/timeline", json={
            "eventType": "acknowledged",
            "eventData": {"alertId": 3},
            "userId": "u-1",
            "userName": "Sam",
        })
        assert response.status_code == 201
        data = response.json()
        assert data["incidentId"] == "inc-1"
        assert data["eventType"] == "acknowledged"
        assert data["eventData"] == {"alertId": 3}
        assert "timestamp" in data

    def test_event_data_defaults_to_empty(self, client):
        data = client.post("/api/incidents/inc-1/timeline", json={"eventType": "note"}).json()
        assert data["eventData"] == {}
        assert data["userName"] is None

    def test_events_in_order_per_incident(self, client):
        for event_type in ("created", "acknowledged", "resolved"):
            client.post("/api/incidents/inc-1/timeline", json={"eventType": event_type})
        client.post("/api/incidents/inc-2/timeline", json={"eventType": "created"})

        events = client.get("/api/incidents/inc-1/timeline").json()
        assert [e["eventType"] for e in events] == ["created", "acknowledged", "resolved"]
        assert len(client.get("/api/incidents/inc-2/timeline").json()) == 1

    def test_event_type_required(self, client):
        response = client.post("/api/incidents/inc-1/timeline", json={"eventData": {}})
        assert response.status_code == 400
        assert response.json()["field"] == "eventType"


class TestPostmortems:
    """/api/postmortems and /api/incidents/:incidentId/postmortem"""

    body = {
        "incidentId": "inc-1",
        "title": "Checkout outage",
        "summary": "Checkout failed for 12 minutes",
        "rootCause": "Connection pool exhausted",
        "lessonsLearned": ["Alert on pool saturation"],
        "actionItems": [{"title": "Raise pool size", "assignee": "Sam", "status": "open"}],
    }

    def test_create(self, client):
        response = client.post("/api/postmortems", json=self.body)
        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "draft"
        assert data["aiGenerated"] is False
        assert data["participants"] == []
        assert data["actionItems"][0]["assignee"] == "Sam"

    def test_get(self, client):
        created = client.post("/api/postmortems", json=self.body).json()
        response = client.get(f"/api/postmortems/{created['id']}")
        assert response.status_code == 200
        assert response.json()["rootCause"] == "Connection pool exhausted"

    def test_get_missing(self, client):
        response = client.get("/api/postmortems/99")
        assert response.status_code == 404
        assert response.json() == {"message": "Postmortem not found"}

    def test_get_by_incident_returns_latest(self, client):
        client.post("/api/postmortems", json=self.body)
        latest = client.post("/api/postmortems", json={**self.body, "title": "Checkout outage v2"}).json()
        client.post("/api/postmortems", json={**self.body, "incidentId": "inc-2"})

        response = client.get("/api/incidents/inc-1/postmortem")
        assert response.status_code == 200
        assert response.json()["id"] == latest["id"]

    def test_get_by_incident_missing(self, client):
        assert client.get("/api/incidents/inc-404/postmortem").status_code == 404

    def test_list(self, client):
        client.post("/api/postmortems", json=self.body)
        client.post("/api/postmortems", json={**self.body, "incidentId": "inc-2"})
        assert len(client.get("/api/postmortems").json()) == 2

    def test_publish(self, client):
        created = client.post("/api/postmortems", json=self.body).json()
        response = client.put(f"/api/postmortems/{created['id']}", json={"status": "published"})
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "published"
        assert data["title"] == "Checkout outage"

    def test_invalid_status(self, client):
        created = client.post("/api/postmortems", json=self.body).json()
        response = client.put(f"/api/postmortems/{created['id']}", json={"status": "final"})
        assert response.status_code == 400
        assert response.json()["field"] == "status"

    def test_update_missing(self, client):
        assert client.put("/api/postmortems/99", json={"title": "x"}).status_code == 404
