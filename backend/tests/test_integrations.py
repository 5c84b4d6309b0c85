"""
Integration tests

- API key shape check
- connect/disconnect over HTTP
- the key is never persisted or echoed back
"""
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
from sqlalchemy.orm import sessionmaker

from pulseops.models import Integration
from pulseops.db.base import Base
from pulseops.db.session import create_db_engine
from pulseops.schemas import IntegrationConnectRequest
from pulseops.services.integration_service import integration_service, validate_api_key

VALID_API_KEY = "sk_live_abcdefghijklmnop1234"


def connect(client, service_id="datadog", api_key=VALID_API_KEY, **overrides):
    body = {
        "serviceId": service_id,
        "serviceName": "Datadog",
        "category": "monitoring",
        "apiKey": api_key,
    }
    body.update(overrides)
    return client.post("/api/integrations/connect", json=body)


class TestValidateApiKey:
    """Shape check on submitted keys"""

    @pytest.mark.parametrize("key", [
        VALID_API_KEY,
        "ABCDEFGHIJKLMNOPQRST",
        "dGhpcyBpcyBhIGJhc2U2NCBrZXk=",
        "  abcdefghij-klmnopqrst  ",
    ])
    def test_accepted(self, key):
        assert validate_api_key(key) is True

    @pytest.mark.parametrize("key", [
        None,
        "",
        12345678901234567890,
        "short_key",
        "   abcdefghijklmnopqrs   ",
        "abcdefghij klmnopqrstu",
        "abcdefghijklmnopqrst!",
    ])
    def test_rejected(self, key):
        assert validate_api_key(key) is False

    def test_custom_min_length(self):
        assert validate_api_key("abcdef", min_length=6) is True
        assert validate_api_key("abcde", min_length=6) is False


class TestConnect:
    """POST /api/integrations/connect"""

    def test_connect(self, client):
        response = connect(client)
        assert response.status_code == 200
        data = response.json()
        assert data["serviceId"] == "datadog"
        assert data["status"] == "connected"
        assert data["lastValidatedAt"] is not None

    def test_key_not_returned(self, client):
        data = connect(client).json()
        assert "apiKey" not in data
        assert VALID_API_KEY not in str(data)

    def test_key_not_stored(self, client, db):
        connect(client)
        assert not hasattr(Integration, "api_key")
        row = db.query(Integration).one()
        for column in Integration.__table__.columns:
            assert getattr(row, column.name) != VALID_API_KEY

    def test_invalid_key(self, client):
        response = connect(client, api_key="too-short")
        assert response.status_code == 401
        assert response.json() == {
            "message": "Invalid API key. Please check your key and try again.",
            "valid": False,
        }
        assert client.get("/api/integrations").json() == []

    def test_missing_key(self, client):
        body = {"serviceId": "datadog", "serviceName": "Datadog", "category": "monitoring"}
        response = client.post("/api/integrations/connect", json=body)
        assert response.status_code == 400
        assert response.json()["field"] == "apiKey"

    def test_reconnect_updates_single_row(self, client, db):
        first = connect(client).json()
        second = connect(client, serviceName="Datadog EU").json()
        assert second["id"] == first["id"]
        assert second["serviceName"] == "Datadog EU"
        assert db.query(Integration).count() == 1

    def test_list(self, client):
        connect(client, service_id="datadog")
        connect(client, service_id="pagerduty", serviceName="PagerDuty", category="alerting")
        ids = [i["serviceId"] for i in client.get("/api/integrations").json()]
        assert ids == ["datadog", "pagerduty"]


class TestDisconnect:
    """DELETE /api/integrations/:serviceId"""

    def test_disconnect(self, client):
        connect(client)
        response = client.delete("/api/integrations/datadog")
        assert response.status_code == 204
        assert client.get("/api/integrations").json() == []

    def test_disconnect_unknown(self, client):
        response = client.delete("/api/integrations/newrelic")
        assert response.status_code == 404
        assert response.json() == {"message": "Integration not found"}


class TestConcurrentConnect:
    """Simultaneous connects for one serviceId"""

    def test_parallel_connects_leave_one_row(self, tmp_path):
        engine = create_db_engine(
            f"sqlite:///{tmp_path / 'integrations.db'}",
            connect_args={"check_same_thread": False, "timeout": 30},
        )
        Base.metadata.create_all(bind=engine)
        SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

        workers = 8
        barrier = threading.Barrier(workers)

        def connect_once(n):
            request = IntegrationConnectRequest(
                service_id="datadog",
                service_name=f"Datadog {n}",
                category="monitoring",
                api_key=VALID_API_KEY,
            )
            session = SessionLocal()
            try:
                barrier.wait()
                return integration_service.connect(session, request=request).id
            finally:
                session.close()

        try:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                ids = list(pool.map(connect_once, range(workers)))

            session = SessionLocal()
            try:
                rows = session.query(Integration).all()
            finally:
                session.close()
        finally:
            engine.dispose()

        assert len(rows) == 1
        assert set(ids) == {rows[0].id}
        assert rows[0].status == "connected"
