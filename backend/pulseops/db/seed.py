"""Demo data inserted on first boot

Each seeder only runs while its own table is empty, so restarting the
server never duplicates rows and never touches user data.
"""
import logging
from datetime import datetime, timedelta
from typing import Dict

from sqlalchemy.orm import Session

from pulseops import crud, schemas

logger = logging.getLogger(__name__)


OVERVIEW_PANELS = [
    {
        "title": "Server CPU Usage",
        "type": "line",
        "data_config": {
            "mock": [
                {"time": "10:00", "value": 30},
                {"time": "10:05", "value": 45},
                {"time": "10:10", "value": 35},
                {"time": "10:15", "value": 60},
                {"time": "10:20", "value": 55},
                {"time": "10:25", "value": 80},
            ],
            "xKey": "time",
            "yKey": "value",
        },
        "layout_config": {"w": 6, "h": 8},
    },
    {
        "title": "Memory Usage",
        "type": "area",
        "data_config": {
            "mock": [
                {"time": "10:00", "value": 2048},
                {"time": "10:05", "value": 2100},
                {"time": "10:10", "value": 2080},
                {"time": "10:15", "value": 2300},
                {"time": "10:20", "value": 2250},
                {"time": "10:25", "value": 2400},
            ],
            "xKey": "time",
            "yKey": "value",
        },
        "layout_config": {"w": 6, "h": 8},
    },
    {
        "title": "Active Users",
        "type": "stat",
        "data_config": {"value": 1245, "trend": 12},
        "layout_config": {"w": 3, "h": 4},
    },
]

SAMPLE_ALERTS = [
    {
        "title": "High CPU Usage",
        "description": "Server CPU usage exceeded 85% threshold",
        "severity": "critical",
        "status": "active",
        "threshold_value": 85,
        "current_value": 92,
    },
    {
        "title": "Memory Warning",
        "description": "Memory usage approaching limit at 75%",
        "severity": "warning",
        "status": "active",
        "threshold_value": 80,
        "current_value": 75,
    },
    {
        "title": "Database Connection Pool",
        "description": "Connection pool utilization is high",
        "severity": "warning",
        "status": "active",
        "threshold_value": 90,
        "current_value": 78,
    },
    {
        "title": "API Response Time",
        "description": "Average response time increased to 450ms",
        "severity": "info",
        "status": "resolved",
        "threshold_value": 500,
        "current_value": 450,
    },
]

BUILT_IN_ALERT_TEMPLATES = [
    {
        "name": "High CPU Usage",
        "description": "Alert when CPU usage exceeds threshold",
        "category": "infrastructure",
        "severity": "critical",
        "condition": {"metric": "cpu_usage", "operator": ">", "threshold": 85},
    },
    {
        "name": "Memory Pressure",
        "description": "Alert when memory usage is high",
        "category": "infrastructure",
        "severity": "warning",
        "condition": {"metric": "memory_usage", "operator": ">", "threshold": 80},
    },
    {
        "name": "Error Rate Spike",
        "description": "Alert when error rate exceeds normal levels",
        "category": "application",
        "severity": "critical",
        "condition": {"metric": "error_rate", "operator": ">", "threshold": 5},
    },
    {
        "name": "High Latency",
        "description": "Alert when response time is slow",
        "category": "application",
        "severity": "warning",
        "condition": {"metric": "p99_latency", "operator": ">", "threshold": 500},
    },
    {
        "name": "Disk Space Low",
        "description": "Alert when disk space is running low",
        "category": "infrastructure",
        "severity": "warning",
        "condition": {"metric": "disk_usage", "operator": ">", "threshold": 90},
    },
    {
        "name": "Failed Login Attempts",
        "description": "Alert on suspicious login activity",
        "category": "security",
        "severity": "critical",
        "condition": {"metric": "failed_logins", "operator": ">", "threshold": 10},
    },
]

SAMPLE_SLOS = [
    {
        "name": "API Availability",
        "description": "99.9% uptime for core API endpoints",
        "service_id": "api-gateway",
        "sli_type": "availability",
        "target_percentage": 999,
        "window_days": 30,
        "current_value": 998,
        "error_budget_remaining": 72,
        "status": "healthy",
    },
    {
        "name": "Checkout Latency",
        "description": "P99 latency under 200ms for checkout flow",
        "service_id": "checkout-service",
        "sli_type": "latency",
        "target_percentage": 950,
        "window_days": 7,
        "current_value": 920,
        "error_budget_remaining": 15,
        "status": "at_risk",
    },
    {
        "name": "Database Error Rate",
        "description": "Error rate below 0.1% for database operations",
        "service_id": "database-cluster",
        "sli_type": "error_rate",
        "target_percentage": 999,
        "window_days": 30,
        "current_value": 1000,
        "error_budget_remaining": 100,
        "status": "healthy",
    },
    {
        "name": "Payment Processing",
        "description": "99.99% success rate for payment transactions",
        "service_id": "payment-service",
        "sli_type": "availability",
        "target_percentage": 9999,
        "window_days": 30,
        "current_value": 9985,
        "error_budget_remaining": -5,
        "status": "breached",
    },
]

# Offsets are milliseconds before the seeding time
SAMPLE_TRACES = [
    {
        "trace_id": "trace-001-abc123",
        "root_span_id": "span-001",
        "service_name": "api-gateway",
        "operation_name": "GET /api/users",
        "duration": 45,
        "status": "ok",
        "start_offset": 60000,
        "trace_metadata": {"userId": "user-123", "region": "us-east-1"},
    },
    {
        "trace_id": "trace-002-def456",
        "root_span_id": "span-010",
        "service_name": "checkout-service",
        "operation_name": "POST /api/checkout",
        "duration": 2500,
        "status": "ok",
        "start_offset": 120000,
        "trace_metadata": {"orderId": "order-789", "paymentMethod": "card"},
    },
    {
        "trace_id": "trace-003-ghi789",
        "root_span_id": "span-020",
        "service_name": "payment-service",
        "operation_name": "POST /api/charge",
        "duration": 150,
        "status": "error",
        "start_offset": 180000,
        "trace_metadata": {"error": "Payment gateway timeout", "retries": 3},
    },
]

SAMPLE_SPANS = [
    {
        "span_id": "span-001",
        "trace_id": "trace-001-abc123",
        "parent_span_id": None,
        "service_name": "api-gateway",
        "operation_name": "GET /api/users",
        "duration": 45,
        "start_offset": 60000,
        "tags": {"http.method": "GET", "http.status_code": 200},
    },
    {
        "span_id": "span-002",
        "trace_id": "trace-001-abc123",
        "parent_span_id": "span-001",
        "service_name": "user-service",
        "operation_name": "getUserById",
        "duration": 25,
        "start_offset": 59990,
        "tags": {"db.type": "postgres", "db.statement": "SELECT * FROM users"},
    },
    {
        "span_id": "span-003",
        "trace_id": "trace-001-abc123",
        "parent_span_id": "span-002",
        "service_name": "cache",
        "operation_name": "redis.get",
        "duration": 5,
        "start_offset": 59985,
        "tags": {"cache.hit": True},
    },
]

SAMPLE_CORRELATIONS = [
    {
        "correlation_id": "corr-001-cpu-memory",
        "alert_ids": [1, 2],
        "log_patterns": ["OutOfMemoryError", "GC overhead limit exceeded"],
        "metric_anomalies": ["cpu.usage > 85%", "memory.usage > 80%"],
        "trace_ids": ["trace-002-def456", "trace-003-ghi789"],
        "service_ids": ["api-gateway", "checkout-service"],
        "severity": "critical",
        "status": "active",
        "ai_analysis": (
            "High CPU usage is correlating with memory pressure. The garbage collector is "
            "working overtime, causing increased latency and potential service degradation."
        ),
        "suggested_cause": "Memory leak in checkout service or insufficient heap allocation during peak load",
        "confidence": 92,
    },
    {
        "correlation_id": "corr-002-latency-errors",
        "alert_ids": [3],
        "log_patterns": ["timeout", "connection refused"],
        "metric_anomalies": ["p99.latency > 500ms", "error.rate > 5%"],
        "trace_ids": ["trace-001-abc123"],
        "service_ids": ["payment-service", "database-cluster"],
        "severity": "warning",
        "status": "active",
        "ai_analysis": (
            "Payment service is experiencing increased latency which correlates with a spike "
            "in connection errors to the database. This suggests a database performance issue."
        ),
        "suggested_cause": "Database connection pool exhaustion or slow query affecting payment processing",
        "confidence": 87,
    },
    {
        "correlation_id": "corr-003-cache-miss",
        "alert_ids": [],
        "log_patterns": ["cache miss", "slow query"],
        "metric_anomalies": ["redis.hits < 60%"],
        "trace_ids": [],
        "service_ids": ["cache", "user-service"],
        "severity": "info",
        "status": "resolved",
        "ai_analysis": "Cache hit ratio dropped below baseline, causing increased database load.",
        "suggested_cause": "Cache key changes or cache eviction policy triggered",
        "confidence": 72,
    },
    {
        "correlation_id": "corr-004-disk-io",
        "alert_ids": [],
        "log_patterns": ["disk space low", "I/O wait"],
        "metric_anomalies": ["disk.usage > 90%", "disk.io.wait > 20%"],
        "trace_ids": [],
        "service_ids": ["database-cluster"],
        "severity": "warning",
        "status": "active",
        "ai_analysis": (
            "Disk space utilization is critically high with I/O wait times increasing. "
            "This will impact database performance."
        ),
        "suggested_cause": "Large logs or temporary files accumulating on disk",
        "confidence": 85,
    },
]


def seed_dashboards(db: Session) -> bool:
    """Create the overview dashboard and its panels when no dashboard exists"""
    if crud.dashboard.count(db) > 0:
        return False

    dashboard = crud.dashboard.create(
        db,
        obj_in=schemas.DashboardCreate(
            title="PulseOps Overview",
            description="Overview of system metrics",
            is_favorite=True,
        ),
    )
    for panel_data in OVERVIEW_PANELS:
        crud.panel.create(db, obj_in=schemas.PanelCreate(dashboard_id=dashboard.id, **panel_data))

    logger.info(f"Seeded dashboard '{dashboard.title}' with {len(OVERVIEW_PANELS)} panels")
    return True


def seed_alerts(db: Session) -> bool:
    if crud.alert.count(db) > 0:
        return False

    for alert_data in SAMPLE_ALERTS:
        crud.alert.create(db, obj_in=schemas.AlertCreate(**alert_data))

    logger.info(f"Seeded {len(SAMPLE_ALERTS)} alerts")
    return True


def seed_alert_templates(db: Session) -> bool:
    if crud.alert_template.count(db) > 0:
        return False

    for template_data in BUILT_IN_ALERT_TEMPLATES:
        crud.alert_template.create(
            db, obj_in=schemas.AlertTemplateCreate(is_built_in=True, **template_data)
        )

    logger.info(f"Seeded {len(BUILT_IN_ALERT_TEMPLATES)} alert templates")
    return True


def seed_slos(db: Session) -> bool:
    if crud.slo.count(db) > 0:
        return False

    for slo_data in SAMPLE_SLOS:
        crud.slo.create(db, obj_in=schemas.SloCreate(**slo_data))

    logger.info(f"Seeded {len(SAMPLE_SLOS)} SLOs")
    return True


def _window(now: datetime, start_offset: int, duration: int) -> Dict[str, datetime]:
    start = now - timedelta(milliseconds=start_offset)
    return {"start_time": start, "end_time": start + timedelta(milliseconds=duration)}


def seed_traces(db: Session) -> bool:
    """Three sample traces, the first one with its span tree"""
    if crud.trace.count(db) > 0:
        return False

    now = datetime.utcnow()
    for trace_data in SAMPLE_TRACES:
        data = dict(trace_data)
        window = _window(now, data.pop("start_offset"), data["duration"])
        crud.trace.create(db, obj_in=schemas.TraceCreate(**data, **window))
    for span_data in SAMPLE_SPANS:
        data = dict(span_data)
        window = _window(now, data.pop("start_offset"), data["duration"])
        crud.span.create(db, obj_in=schemas.SpanCreate(**data, **window))

    logger.info(f"Seeded {len(SAMPLE_TRACES)} traces with {len(SAMPLE_SPANS)} spans")
    return True


def seed_correlations(db: Session) -> bool:
    if crud.signal_correlation.count(db) > 0:
        return False

    for correlation_data in SAMPLE_CORRELATIONS:
        crud.signal_correlation.create(db, obj_in=schemas.CorrelationCreate(**correlation_data))

    logger.info(f"Seeded {len(SAMPLE_CORRELATIONS)} signal correlations")
    return True


def seed_database(db: Session) -> None:
    """Run every seeder, each guarded by its own empty-table check"""
    seed_dashboards(db)
    seed_alerts(db)
    seed_alert_templates(db)
    seed_slos(db)
    seed_traces(db)
    seed_correlations(db)
