"""
Panel API tests
"""


def make_panel(client, dashboard_id, **overrides):
    body = {
        "dashboardId": dashboard_id,
        "title": "CPU",
        "type": "line",
        "dataConfig": {"mock": [{"time": "10:00", "value": 30}], "xKey": "time", "yKey": "value"},
        "layoutConfig": {"x": 0, "y": 0, "w": 6, "h": 8},
    }
    body.update(overrides)
    return client.post("/api/panels", json=body)


class TestPanelCreate:
    """POST /api/panels"""

    def test_create(self, client, dashboard):
        response = make_panel(client, dashboard["id"])
        assert response.status_code == 201
        data = response.json()
        assert data["dashboardId"] == dashboard["id"]
        assert data["type"] == "line"
        assert data["dataConfig"]["xKey"] == "time"
        assert data["layoutConfig"] == {"x": 0, "y": 0, "w": 6, "h": 8}

    def test_layout_defaults_to_empty(self, client, dashboard):
        body = {
            "dashboardId": dashboard["id"],
            "title": "Users",
            "type": "stat",
            "dataConfig": {"value": 10},
        }
        response = client.post("/api/panels", json=body)
        assert response.status_code == 201
        assert response.json()["layoutConfig"] == {}

    def test_list_data_config(self, client, dashboard):
        response = make_panel(client, dashboard["id"], dataConfig=[1, 2, 3])
        assert response.status_code == 201
        assert response.json()["dataConfig"] == [1, 2, 3]

    def test_unknown_dashboard(self, client):
        response = make_panel(client, 999)
        assert response.status_code == 404
        assert response.json() == {"message": "Dashboard not found"}

    def test_invalid_type(self, client, dashboard):
        response = make_panel(client, dashboard["id"], type="heatmap")
        assert response.status_code == 400
        assert response.json()["field"] == "type"

    def test_missing_data_config(self, client, dashboard):
        body = {"dashboardId": dashboard["id"], "title": "CPU", "type": "bar"}
        response = client.post("/api/panels", json=body)
        assert response.status_code == 400
        assert response.json()["field"] == "dataConfig"

    def test_scalar_data_config_rejected(self, client, dashboard):
        response = make_panel(client, dashboard["id"], dataConfig="cpu")
        assert response.status_code == 400
        assert response.json()["field"] == "dataConfig"

    def test_oversized_dashboard_id(self, client):
        response = make_panel(client, 99999999999999999999)
        assert response.status_code == 400
        assert response.json()["field"] == "dashboardId"

    def test_zero_dashboard_id(self, client):
        response = make_panel(client, 0)
        assert response.status_code == 400
        assert response.json()["field"] == "dashboardId"


class TestPanelList:
    """GET /api/dashboards/:dashboardId/panels"""

    def test_only_own_panels(self, client, dashboard):
        other = client.post("/api/dashboards", json={"title": "Other"}).json()
        make_panel(client, dashboard["id"], title="A")
        make_panel(client, dashboard["id"], title="B")
        make_panel(client, other["id"], title="C")

        titles = [p["title"] for p in client.get(f"/api/dashboards/{dashboard['id']}/panels").json()]
        assert titles == ["A", "B"]

    def test_unknown_dashboard_is_empty(self, client):
        response = client.get("/api/dashboards/999/panels")
        assert response.status_code == 200
        assert response.json() == []

    def test_non_numeric_dashboard_is_empty(self, client):
        response = client.get("/api/dashboards/abc/panels")
        assert response.status_code == 200
        assert response.json() == []


class TestPanelUpdate:
    """PUT /api/panels/:id"""

    def test_partial_update(self, client, dashboard):
        panel = make_panel(client, dashboard["id"]).json()
        response = client.put(f"/api/panels/{panel['id']}", json={"title": "CPU (5m)"})
        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "CPU (5m)"
        assert data["type"] == "line"
        assert data["dataConfig"] == panel["dataConfig"]

    def test_move_layout(self, client, dashboard):
        panel = make_panel(client, dashboard["id"]).json()
        layout = {"x": 6, "y": 0, "w": 6, "h": 4}
        response = client.put(f"/api/panels/{panel['id']}", json={"layoutConfig": layout})
        assert response.json()["layoutConfig"] == layout

    def test_move_to_missing_dashboard(self, client, dashboard):
        panel = make_panel(client, dashboard["id"]).json()
        response = client.put(f"/api/panels/{panel['id']}", json={"dashboardId": 999})
        assert response.status_code == 400
        assert response.json()["field"] == "dashboardId"

    def test_move_to_oversized_dashboard_id(self, client, dashboard):
        panel = make_panel(client, dashboard["id"]).json()
        response = client.put(f"/api/panels/{panel['id']}", json={"dashboardId": 2 ** 64})
        assert response.status_code == 400
        assert response.json()["field"] == "dashboardId"

    def test_null_type_rejected(self, client, dashboard):
        panel = make_panel(client, dashboard["id"]).json()
        response = client.put(f"/api/panels/{panel['id']}", json={"type": None})
        assert response.status_code == 400
        assert response.json()["field"] == "type"

    def test_update_missing(self, client):
        response = client.put("/api/panels/999", json={"title": "x"})
        assert response.status_code == 404
        assert response.json() == {"message": "Panel not found"}


class TestPanelDelete:
    """DELETE /api/panels/:id"""

    def test_delete(self, client, dashboard):
        panel = make_panel(client, dashboard["id"]).json()
        assert client.delete(f"/api/panels/{panel['id']}").status_code == 204
        assert client.get(f"/api/dashboards/{dashboard['id']}/panels").json() == []

    def test_delete_missing(self, client):
        assert client.delete("/api/panels/999").status_code == 404
        assert client.delete("/api/panels/abc").status_code == 404
        assert client.delete("/api/panels/99999999999999999999").status_code == 404
