"""
Dashboard share link tests
"""
from datetime import datetime, timedelta

from pulseops import crud
from pulseops.crud.crud_dashboard_share import generate_share_token


class TestShareToken:
    """Token generation"""

    def test_default_length(self):
        token = generate_share_token()
        assert len(token) == 32
        assert token.isalnum()

    def test_tokens_differ(self):
        assert generate_share_token() != generate_share_token()


class TestShareLinks:
    """Create, list, resolve and delete share links"""

    def test_create_without_body(self, client, dashboard):
        response = client.post(f"/api/dashboards/{dashboard['id']}/shares")
        assert response.status_code == 201
        data = response.json()
        assert data["dashboardId"] == dashboard["id"]
        assert data["isActive"] is True
        assert data["expiresAt"] is None
        assert len(data["shareToken"]) == 32

    def test_create_with_expiry(self, client, dashboard):
        response = client.post(
            f"/api/dashboards/{dashboard['id']}/shares",
            json={"expiresAt": "2099-01-01T00:00:00Z"},
        )
        assert response.status_code == 201
        assert response.json()["expiresAt"].startswith("2099-01-01T00:00:00")

    def test_create_for_missing_dashboard(self, client):
        response = client.post("/api/dashboards/999/shares")
        assert response.status_code == 404
        assert response.json() == {"message": "Dashboard not found"}

    def test_list(self, client, dashboard):
        client.post(f"/api/dashboards/{dashboard['id']}/shares")
        client.post(f"/api/dashboards/{dashboard['id']}/shares")
        response = client.get(f"/api/dashboards/{dashboard['id']}/shares")
        assert response.status_code == 200
        assert len(response.json()) == 2

    def test_list_for_missing_dashboard(self, client):
        assert client.get("/api/dashboards/999/shares").status_code == 404

    def test_resolve(self, client, dashboard):
        client.post("/api/panels", json={
            "dashboardId": dashboard["id"],
            "title": "Errors",
            "type": "bar",
            "dataConfig": {"mock": []},
        })
        token = client.post(f"/api/dashboards/{dashboard['id']}/shares").json()["shareToken"]

        response = client.get(f"/api/share/{token}")
        assert response.status_code == 200
        data = response.json()
        assert data["dashboard"]["title"] == "Checkout"
        assert [p["title"] for p in data["panels"]] == ["Errors"]
        assert data["panels"][0]["dataConfig"] == {"mock": []}

    def test_resolve_unknown(self, client):
        response = client.get("/api/share/doesnotexist")
        assert response.status_code == 404
        assert response.json() == {"message": "Share link not found or expired"}

    def test_resolve_inactive(self, client, dashboard, db):
        share = client.post(f"/api/dashboards/{dashboard['id']}/shares").json()
        crud.dashboard_share.update_by_id(db, id=share["id"], obj_in={"is_active": False})
        assert client.get(f"/api/share/{share['shareToken']}").status_code == 404

    def test_resolve_expired(self, client, dashboard, db):
        share = crud.dashboard_share.create_for_dashboard(
            db,
            dashboard_id=dashboard["id"],
            expires_at=datetime.utcnow() - timedelta(hours=1),
        )
        response = client.get(f"/api/share/{share.share_token}")
        assert response.status_code == 410
        assert response.json() == {"message": "Share link has expired"}

    def test_delete(self, client, dashboard):
        share = client.post(f"/api/dashboards/{dashboard['id']}/shares").json()
        assert client.delete(f"/api/shares/{share['id']}").status_code == 204
        assert client.get(f"/api/share/{share['shareToken']}").status_code == 404
        assert client.delete(f"/api/shares/{share['id']}").status_code == 404
