"""
Seed routine tests
"""
from datetime import timedelta

from pulseops import crud
from pulseops.db.seed import (
    BUILT_IN_ALERT_TEMPLATES,
    SAMPLE_CORRELATIONS,
    SAMPLE_SLOS,
    SAMPLE_SPANS,
    SAMPLE_TRACES,
    seed_dashboards,
    seed_database,
)
from pulseops.models import (
    Alert,
    AlertTemplate,
    Dashboard,
    Panel,
    SignalCorrelation,
    Slo,
    Span,
    Trace,
)


class TestSeedDatabase:
    """First-boot demo data"""

    def test_seed_counts(self, db):
        seed_database(db)
        assert db.query(Dashboard).count() == 1
        assert db.query(Panel).count() == 3
        assert db.query(Alert).count() == 4
        assert db.query(AlertTemplate).count() == len(BUILT_IN_ALERT_TEMPLATES)
        assert db.query(Slo).count() == len(SAMPLE_SLOS)
        assert db.query(Trace).count() == len(SAMPLE_TRACES) == 3
        assert db.query(Span).count() == len(SAMPLE_SPANS) == 3
        assert db.query(SignalCorrelation).count() == len(SAMPLE_CORRELATIONS) == 4

    def test_overview_dashboard(self, db):
        seed_database(db)
        dashboard = crud.dashboard.list(db)[0]
        assert dashboard.title == "PulseOps Overview"
        assert dashboard.is_favorite is True
        types = [p.type for p in crud.panel.get_by_dashboard(db, dashboard_id=dashboard.id)]
        assert types == ["line", "area", "stat"]

    def test_alert_mix(self, db):
        seed_database(db)
        statuses = sorted(a.status for a in crud.alert.list(db))
        assert statuses == ["active", "active", "active", "resolved"]

    def test_templates_are_built_in(self, db):
        seed_database(db)
        assert all(t.is_built_in for t in crud.alert_template.list(db))

    def test_idempotent(self, db):
        seed_database(db)
        seed_database(db)
        assert db.query(Dashboard).count() == 1
        assert db.query(Panel).count() == 3
        assert db.query(Alert).count() == 4
        assert db.query(Trace).count() == 3
        assert db.query(SignalCorrelation).count() == 4

    def test_existing_dashboards_untouched(self, db, dashboard):
        assert seed_dashboards(db) is False
        assert [d.title for d in crud.dashboard.list(db)] == ["Checkout"]

    def test_seeded_data_over_http(self, client, db):
        seed_database(db)
        dashboards = client.get("/api/dashboards").json()
        assert dashboards[0]["title"] == "PulseOps Overview"
        panels = client.get(f"/api/dashboards/{dashboards[0]['id']}/panels").json()
        assert [p["title"] for p in panels] == ["Server CPU Usage", "Memory Usage", "Active Users"]
        assert len(client.get("/api/alerts").json()) == 4

    def test_trace_spans_nest_under_first_trace(self, client, db):
        seed_database(db)
        detail = client.get("/api/traces/trace-001-abc123").json()
        spans = detail["spans"]
        assert [s["spanId"] for s in spans] == ["span-001", "span-002", "span-003"]
        assert spans[0]["parentSpanId"] is None
        assert spans[2]["tags"] == {"cache.hit": True}
        assert detail["trace"]["metadata"]["region"] == "us-east-1"

    def test_seeded_trace_windows(self, db):
        seed_database(db)
        for trace in crud.trace.list(db):
            assert trace.end_time - trace.start_time == timedelta(milliseconds=trace.duration)
        statuses = {t.trace_id: t.status for t in crud.trace.list(db)}
        assert statuses["trace-003-ghi789"] == "error"

    def test_correlations(self, client, db):
        seed_database(db)
        correlation = client.get("/api/correlations/corr-001-cpu-memory").json()
        assert correlation["confidence"] == 92
        assert correlation["alertIds"] == [1, 2]
        assert client.get("/api/correlations/corr-003-cache-miss").json()["status"] == "resolved"
