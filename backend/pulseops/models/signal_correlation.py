from sqlalchemy import Column, String, Text, Integer, TIMESTAMP, JSON
from sqlalchemy.sql import func

from pulseops.db.base_class import Base, IdType


class SignalCorrelation(Base):
    """Alerts, log patterns, metric anomalies and traces grouped under one suspected cause"""
    __tablename__ = "signal_correlations"

    id = Column(IdType, primary_key=True, index=True, autoincrement=True)
    correlation_id = Column(String(100), nullable=False, unique=True, index=True)
    alert_ids = Column(JSON, nullable=False, default=list)
    log_patterns = Column(JSON, nullable=False, default=list)
    metric_anomalies = Column(JSON, nullable=False, default=list)
    trace_ids = Column(JSON, nullable=False, default=list)
    service_ids = Column(JSON, nullable=False, default=list)
    severity = Column(String(20), nullable=False)
    status = Column(String(20), nullable=False, default="active")  # active/investigating/resolved
    ai_analysis = Column(Text, nullable=True)
    suggested_cause = Column(Text, nullable=True)
    confidence = Column(Integer, nullable=True)  # 0-100
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())
    updated_at = Column(TIMESTAMP, nullable=False, server_default=func.now(), onupdate=func.now())
