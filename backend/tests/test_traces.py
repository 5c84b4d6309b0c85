"""
Traces, spans and signal correlations

- trace detail bundles the spans of the trace
- trace, span and correlation ids are unique (409)
- spans need an existing trace
"""


def make_trace(client, trace_id="trace-100", **overrides):
    body = {
        "traceId": trace_id,
        "rootSpanId": "span-100",
        "serviceName": "api-gateway",
        "operationName": "GET /api/orders",
        "duration": 120,
        "startTime": "2026-03-01T10:00:00Z",
        "metadata": {"region": "eu-west-1"},
    }
    body.update(overrides)
    return client.post("/api/traces", json=body)


def make_span(client, span_id, trace_id="trace-100", **overrides):
    body = {
        "spanId": span_id,
        "traceId": trace_id,
        "serviceName": "order-service",
        "operationName": "loadOrders",
        "duration": 40,
        "startTime": "2026-03-01T10:00:00.010Z",
    }
    body.update(overrides)
    return client.post("/api/spans", json=body)


class TestTraces:
    """/api/traces"""

    def test_create(self, client):
        response = make_trace(client)
        assert response.status_code == 201
        data = response.json()
        assert data["traceId"] == "trace-100"
        assert data["status"] == "ok"
        assert data["metadata"] == {"region": "eu-west-1"}
        assert data["startTime"] == "2026-03-01T10:00:00"
        assert "traceMetadata" not in data

    def test_list_most_recent_first(self, client):
        make_trace(client, "trace-old", startTime="2026-03-01T09:00:00Z")
        make_trace(client, "trace-new", startTime="2026-03-01T11:00:00Z")
        ids = [t["traceId"] for t in client.get("/api/traces").json()]
        assert ids == ["trace-new", "trace-old"]

    def test_get_with_spans(self, client):
        make_trace(client)
        make_span(client, "span-102", parentSpanId="span-101", startTime="2026-03-01T10:00:00.050Z")
        make_span(client, "span-101", parentSpanId="span-100")
        make_trace(client, "trace-other")
        make_span(client, "span-900", trace_id="trace-other")

        response = client.get("/api/traces/trace-100")
        assert response.status_code == 200
        data = response.json()
        assert data["trace"]["traceId"] == "trace-100"
        assert data["trace"]["metadata"]["region"] == "eu-west-1"
        assert [s["spanId"] for s in data["spans"]] == ["span-101", "span-102"]

    def test_get_missing(self, client):
        response = client.get("/api/traces/trace-404")
        assert response.status_code == 404
        assert response.json() == {"message": "Trace not found"}

    def test_duplicate_trace_id(self, client):
        make_trace(client)
        response = make_trace(client)
        assert response.status_code == 409
        assert "trace-100" in response.json()["message"]

    def test_invalid_status(self, client):
        response = make_trace(client, status="slow")
        assert response.status_code == 400
        assert response.json()["field"] == "status"

    def test_negative_duration(self, client):
        response = make_trace(client, duration=-1)
        assert response.status_code == 400
        assert response.json()["field"] == "duration"


class TestSpans:
    """POST /api/spans"""

    def test_create(self, client):
        make_trace(client)
        response = make_span(client, "span-101", tags={"cache.hit": True}, status="error")
        assert response.status_code == 201
        data = response.json()
        assert data["tags"] == {"cache.hit": True}
        assert data["status"] == "error"
        assert data["parentSpanId"] is None

    def test_unknown_trace(self, client):
        response = make_span(client, "span-101", trace_id="trace-missing")
        assert response.status_code == 404
        assert response.json() == {"message": "Trace not found"}

    def test_duplicate_span_id(self, client):
        make_trace(client)
        make_span(client, "span-101")
        assert make_span(client, "span-101").status_code == 409


class TestCorrelations:
    """/api/correlations"""

    body = {
        "correlationId": "corr-100",
        "alertIds": [1, 2],
        "logPatterns": ["OutOfMemoryError"],
        "metricAnomalies": ["memory.usage > 80%"],
        "traceIds": ["trace-100"],
        "serviceIds": ["checkout-service"],
        "severity": "critical",
        "confidence": 90,
    }

    def test_create_and_get(self, client):
        response = client.post("/api/correlations", json=self.body)
        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "active"
        assert data["alertIds"] == [1, 2]

        fetched = client.get("/api/correlations/corr-100")
        assert fetched.status_code == 200
        assert fetched.json()["id"] == data["id"]

    def test_get_missing(self, client):
        response = client.get("/api/correlations/corr-404")
        assert response.status_code == 404
        assert response.json() == {"message": "Correlation not found"}

    def test_update_status(self, client):
        client.post("/api/correlations", json=self.body)
        response = client.put(
            "/api/correlations/corr-100",
            json={"status": "investigating", "aiAnalysis": "GC pressure"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "investigating"
        assert data["aiAnalysis"] == "GC pressure"
        assert data["confidence"] == 90

    def test_update_missing(self, client):
        assert client.put("/api/correlations/corr-404", json={"status": "resolved"}).status_code == 404

    def test_update_rejects_null_severity(self, client):
        client.post("/api/correlations", json=self.body)
        response = client.put("/api/correlations/corr-100", json={"severity": None})
        assert response.status_code == 400
        assert response.json()["field"] == "severity"

    def test_duplicate_correlation_id(self, client):
        client.post("/api/correlations", json=self.body)
        assert client.post("/api/correlations", json=self.body).status_code == 409

    def test_confidence_range(self, client):
        response = client.post("/api/correlations", json={**self.body, "confidence": 101})
        assert response.status_code == 400
        assert response.json()["field"] == "confidence"
